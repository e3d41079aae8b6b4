# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Nearest-category classification.

A sample is converted to a perceptual Lab-type space and compared against
every reference point of the palette; the category of the closest point
wins. There is no distance cutoff, so every 24-bit color resolves to a
category.

Ties on exactly equal distance go to the point listed first in the palette.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from colorsense.schema import Category
from colorsense.measure.colorspace import ColorSpace, nearest_index, srgb_uint8_to_lab
from colorsense.measure.palette import (
    ReferencePalette,
    ReferencePoint,
    default_palette,
    parse_rgb,
)

logger = logging.getLogger(__name__)

ENV_COLOR_SPACE = "COLORSENSE_COLOR_SPACE"

# Samples per distance pass: 4096 x 268 reference points x 3 float64 is about 26 MB
BATCH_CHUNK = 4096


@dataclass(frozen=True)
class ClassifierConfig:
    """Configuration for nearest-category classification."""

    # The curated table was tuned against CIELAB distances.
    # OKLab is more uniform in blue hues but shifts a few borderline samples.
    color_space: ColorSpace = ColorSpace.CIELAB

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> ClassifierConfig:
        """
        Read configuration from the environment.

        COLORSENSE_COLOR_SPACE: "cielab" (default) or "oklab"

        Raises:
            ValueError: If the variable names an unknown color space.
        """
        env = os.environ if environ is None else environ
        raw = env.get(ENV_COLOR_SPACE, "").strip().lower()
        if not raw:
            return cls()
        try:
            space = ColorSpace(raw)
        except ValueError:
            choices = ", ".join(s.value for s in ColorSpace)
            raise ValueError(
                f"{ENV_COLOR_SPACE} must be one of {choices}, got '{raw}'"
            ) from None
        return cls(color_space=space)


class Classifier:
    """
    Maps sRGB samples to color categories.

    The palette is converted to Lab coordinates once at construction; after
    that the classifier is read-only and may be shared between threads.

    Args:
        palette: Reference palette (curated default if None)
        config: Classification settings (defaults if None)
    """

    def __init__(
        self,
        palette: Optional[ReferencePalette] = None,
        config: Optional[ClassifierConfig] = None,
    ) -> None:
        self._palette = palette if palette is not None else default_palette()
        self._config = config or ClassifierConfig()

        self._lab = self._palette.lab_array(self._config.color_space)
        self._categories = np.array(
            [int(p.category) for p in self._palette.points], dtype=np.intp
        )

        logger.debug(
            "Classifier ready: %d reference points in %s",
            len(self._palette), self._config.color_space.value,
        )

    @property
    def palette(self) -> ReferencePalette:
        return self._palette

    @property
    def config(self) -> ClassifierConfig:
        return self._config

    def _nearest_indices(self, pixels: NDArray[np.uint8]) -> tuple[NDArray[np.intp], NDArray[np.float64]]:
        """Index of the nearest reference point per pixel, plus its ΔE."""
        idx = np.empty(len(pixels), dtype=np.intp)
        dist = np.empty(len(pixels), dtype=np.float64)

        # Chunked so the (chunk, M) distance matrix stays bounded
        for start in range(0, len(pixels), BATCH_CHUNK):
            stop = start + BATCH_CHUNK
            lab = srgb_uint8_to_lab(pixels[start:stop], self._config.color_space)
            idx[start:stop], dist[start:stop] = nearest_index(lab, self._lab)
        return idx, dist

    def classify_many(self, pixels) -> tuple[Category, ...]:
        """
        Classify a batch of samples.

        Args:
            pixels: Array-like of shape (N, 3) with integer sRGB values [0, 255]

        Returns:
            Tuple of N categories, in input order
        """
        arr = _as_pixel_array(pixels)
        if len(arr) == 0:
            return ()
        idx, _ = self._nearest_indices(arr)
        return tuple(Category(int(c)) for c in self._categories[idx])

    def classify(self, rgb) -> Category:
        """
        Classify one sample.

        Args:
            rgb: (r, g, b) integers 0-255 or a "#RRGGBB" string

        Returns:
            Category of the nearest reference point
        """
        return self.classify_many([parse_rgb(rgb)])[0]

    def nearest(self, rgb) -> tuple[ReferencePoint, float]:
        """
        The reference point a sample resolves to, with its ΔE distance.

        Useful for explaining a classification; classify() only returns
        the category.
        """
        arr = _as_pixel_array([parse_rgb(rgb)])
        idx, dist = self._nearest_indices(arr)
        return self._palette[int(idx[0])], float(dist[0])


def _as_pixel_array(pixels) -> NDArray[np.uint8]:
    """Validate an (N, 3) integer array of sRGB values."""
    arr = np.asarray(pixels)
    if arr.size == 0:
        return np.empty((0, 3), dtype=np.uint8)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Expected pixel array of shape (N, 3), got {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Pixel values must be integers, got dtype {arr.dtype}")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError("Pixel values must be 0-255")
    return arr.astype(np.uint8)


@lru_cache(maxsize=1)
def default_classifier() -> Classifier:
    """Classifier over the curated palette, configured from the environment."""
    return Classifier(default_palette(), ClassifierConfig.from_env())


def classify(rgb) -> Category:
    """
    Classify one sample with the shared default classifier.

    Example::

        >>> classify((0, 0, 0))
        <Category.BLACK: 0>
    """
    return default_classifier().classify(rgb)
