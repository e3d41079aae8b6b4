# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
colorsense -- Perceptual color classification for image indexing.

Sorts sampled pixel colors into 16 human-meaningful categories, picks a
salience-weighted main color, and encodes the result as compact hex
strings for indexed storage.

Quick start::

    from colorsense import PerceptionAggregator

    agg = PerceptionAggregator()
    for rgb, brightness in samples:
        agg.add_sample(rgb, brightness)
    result = agg.finalize(chroma=chroma)

    result.main_category   # Category.TEAL
    result.to_record()     # {"colors": "88E2...", "main_color": "8", ...}
"""

from __future__ import annotations

__version__ = "1.0.0"

from colorsense.errors import AggregationClosedError, ColorSenseError, MalformedEncoding
from colorsense.measure import (
    Classifier,
    ClassifierConfig,
    ColorSpace,
    PerceptionAggregator,
    ReferencePalette,
    ReferencePoint,
    classify,
)
from colorsense.runtime import (
    decode_brightness,
    decode_categories,
    encode_brightness,
    encode_categories,
)
from colorsense.schema import (
    Category,
    ClassificationResult,
    describe,
    list_categories,
)

__all__ = [
    # Core API
    "classify",
    "PerceptionAggregator",
    "ClassificationResult",
    "Category",
    # Configuration
    "Classifier",
    "ClassifierConfig",
    "ColorSpace",
    "ReferencePalette",
    "ReferencePoint",
    # Encoding
    "encode_categories",
    "decode_categories",
    "encode_brightness",
    "decode_brightness",
    # Presentation
    "describe",
    "list_categories",
    # Errors
    "ColorSenseError",
    "MalformedEncoding",
    "AggregationClosedError",
    # Version
    "__version__",
]
