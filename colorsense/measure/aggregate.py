# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Perception aggregation: from a stream of samples to one classification.

Each sample contributes its category's salience weight to a vote tally.
Salient hues (lime, yellow, magenta: weight 5) therefore outvote more
frequent desaturated ones (grey: weight 1) when choosing the main category.

An aggregator belongs to a single analysis task. It does no locking; to
analyze one image from several threads, give each thread its own
aggregator and merge() them afterwards.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from colorsense.errors import AggregationClosedError
from colorsense.schema import Category, ClassificationResult, DEFAULT_MAIN_CATEGORY
from colorsense.schema.perception import check_byte
from colorsense.measure.classify import Classifier, default_classifier

logger = logging.getLogger(__name__)

# Weight per ordinal, so a tally update is a single indexed add
_WEIGHTS = np.array([c.weight for c in Category], dtype=np.int64)


class PerceptionAggregator:
    """
    Accumulates classified samples for one image.

    Args:
        classifier: Classifier to use (shared default if None)

    Example::

        agg = PerceptionAggregator()
        for rgb, brightness in samples:
            agg.add_sample(rgb, brightness)
        result = agg.finalize(chroma=42)
        result.to_record()
    """

    def __init__(self, classifier: Optional[Classifier] = None) -> None:
        self._classifier = classifier if classifier is not None else default_classifier()
        self._categories: list[Category] = []
        self._luminance: list[int] = []
        self._tally = np.zeros(len(Category), dtype=np.int64)
        self._closed = False

    @property
    def sample_count(self) -> int:
        """Samples added so far. Zero means main_category() is the default."""
        return len(self._categories)

    @property
    def closed(self) -> bool:
        """True once finalize() has been called."""
        return self._closed

    @property
    def tally(self) -> dict[Category, int]:
        """Weighted vote per category (zero entries omitted)."""
        return {Category(i): int(v) for i, v in enumerate(self._tally) if v}

    def _check_open(self) -> None:
        if self._closed:
            raise AggregationClosedError("Aggregator already finalized")

    def add_sample(self, rgb, brightness: int) -> Category:
        """
        Classify one sample and record it.

        Args:
            rgb: (r, g, b) integers 0-255 or a "#RRGGBB" string
            brightness: Luminance byte 0-255

        Returns:
            The category the sample was classified as
        """
        self._check_open()
        level = check_byte(brightness, "Brightness")
        category = self._classifier.classify(rgb)

        self._categories.append(category)
        self._luminance.append(level)
        self._tally[category] += _WEIGHTS[category]
        return category

    def add_samples(self, pixels, brightness) -> tuple[Category, ...]:
        """
        Classify and record a batch of samples in one pass.

        Args:
            pixels: Array-like of shape (N, 3) with sRGB values [0, 255]
            brightness: N luminance bytes, parallel to pixels

        Returns:
            Categories of the batch, in input order
        """
        self._check_open()
        levels = [check_byte(b, "Brightness") for b in brightness]
        categories = self._classifier.classify_many(pixels)
        if len(categories) != len(levels):
            raise ValueError(
                f"Got {len(categories)} pixels but {len(levels)} brightness values"
            )

        self._categories.extend(categories)
        self._luminance.extend(levels)
        if categories:
            ordinals = np.fromiter(categories, dtype=np.intp, count=len(categories))
            np.add.at(self._tally, ordinals, _WEIGHTS[ordinals])
        return categories

    def merge(self, other: PerceptionAggregator) -> None:
        """
        Append another aggregator's samples after this one's.

        The result equals adding the other's samples here directly, in order.
        The other aggregator is left unchanged.
        """
        self._check_open()
        self._categories.extend(other._categories)
        self._luminance.extend(other._luminance)
        self._tally += other._tally

    def main_category(self) -> Category:
        """
        Category with the highest weighted tally.

        Ties go to the lowest ordinal. With no samples, returns
        DEFAULT_MAIN_CATEGORY (BLACK); check sample_count to tell an empty
        aggregation apart from a genuinely dark image.
        """
        if not self._categories:
            return DEFAULT_MAIN_CATEGORY
        # argmax returns the first maximum, i.e. the lowest ordinal
        return Category(int(np.argmax(self._tally)))

    def finalize(self, chroma: int = 0) -> ClassificationResult:
        """
        Freeze the aggregation into a ClassificationResult.

        May be called early on partial data. No further samples are
        accepted afterwards.

        Args:
            chroma: Opaque color intensity byte computed upstream (0-255)
        """
        self._check_open()
        main = self.main_category()
        result = ClassificationResult(
            categories=tuple(self._categories),
            main_category=main,
            luminance=tuple(self._luminance),
            chroma=check_byte(chroma, "Chroma"),
        )
        self._closed = True

        if result.is_empty:
            logger.debug("Finalized empty aggregation, main category defaults to %s", main.slug)
        else:
            logger.debug(
                "Finalized %d samples, main category %s", result.sample_count, main.slug,
            )
        return result
