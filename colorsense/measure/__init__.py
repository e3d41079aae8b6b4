# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Classification core for colorsense.

Deterministic mapping from sRGB samples to color categories.
All operations are pure and safe to share across threads, except that
each PerceptionAggregator has a single owner.
"""

from colorsense.measure.aggregate import PerceptionAggregator
from colorsense.measure.classify import (
    Classifier,
    ClassifierConfig,
    classify,
    default_classifier,
)
from colorsense.measure.colorspace import ColorSpace
from colorsense.measure.palette import (
    DEFAULT_REFERENCE_POINTS,
    ReferencePalette,
    ReferencePoint,
    default_palette,
)

__all__ = [
    "classify",
    "Classifier",
    "ClassifierConfig",
    "ColorSpace",
    "default_classifier",
    "PerceptionAggregator",
    "ReferencePalette",
    "ReferencePoint",
    "DEFAULT_REFERENCE_POINTS",
    "default_palette",
]
