# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Schema definitions for color classification.

Categories are a closed enumeration whose ordinals are persisted.
Classification results are immutable (frozen dataclasses).
"""

from colorsense.schema.category import (
    DISPLAY_ORDER,
    Category,
    describe,
    list_categories,
)
from colorsense.schema.perception import (
    DEFAULT_MAIN_CATEGORY,
    ClassificationResult,
)

__all__ = [
    # Categories
    "Category",
    "DISPLAY_ORDER",
    "describe",
    "list_categories",
    # Results
    "ClassificationResult",
    "DEFAULT_MAIN_CATEGORY",
]
