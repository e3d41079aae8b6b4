# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
ClassificationResult: the frozen outcome of one image-analysis pass.

A result holds:
- categories: one Category per sample, in sample order
- main_category: the salience-weighted winner
- luminance: one brightness byte per sample, parallel to categories
- chroma: an opaque intensity byte computed upstream and passed through

Once built it is a fact and cannot be altered. It is either encoded for
storage or listed directly for presentation.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass

from colorsense.schema.category import Category, describe


# =============================================================================
# Defaults & Validation
# =============================================================================


# Main category reported when no samples were classified.
DEFAULT_MAIN_CATEGORY = Category.BLACK


def check_byte(value: int, what: str) -> int:
    """Validate a 0-255 integer (numpy integers included), returning a plain int."""
    if isinstance(value, bool):
        raise ValueError(f"{what} must be an integer 0-255, got {value!r}")
    try:
        as_int = operator.index(value)
    except TypeError:
        raise ValueError(f"{what} must be an integer 0-255, got {value!r}") from None
    if not 0 <= as_int <= 255:
        raise ValueError(f"{what} must be 0-255, got {as_int}")
    return as_int


# =============================================================================
# Classification Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """
    Color perception of one image.

    Attributes:
        categories: Category per sample, in sample order
        main_category: Category with the highest weighted tally
            (BLACK when there are no samples)
        luminance: Brightness byte per sample, parallel to categories
        chroma: Opaque color intensity byte (0-255)
    """
    categories: tuple[Category, ...]
    main_category: Category
    luminance: tuple[int, ...]
    chroma: int = 0

    def __post_init__(self) -> None:
        """Validate parallel sequences and value ranges."""
        if len(self.categories) != len(self.luminance):
            raise ValueError(
                f"Categories and luminance must be parallel, got "
                f"{len(self.categories)} and {len(self.luminance)} values"
            )
        for c in self.categories:
            if not isinstance(c, Category):
                raise ValueError(f"Not a Category: {c!r}")
        if not isinstance(self.main_category, Category):
            raise ValueError(f"Not a Category: {self.main_category!r}")
        for value in self.luminance:
            check_byte(value, "Luminance")
        check_byte(self.chroma, "Chroma")

    @property
    def sample_count(self) -> int:
        """Number of classified samples."""
        return len(self.categories)

    @property
    def is_empty(self) -> bool:
        """True if no samples were classified (main_category is the default)."""
        return not self.categories

    @property
    def colors_hex(self) -> str:
        """Categories as one hex digit per sample."""
        from colorsense.runtime.encoding import encode_categories
        return encode_categories(self.categories)

    @property
    def luminance_hex(self) -> str:
        """Luminance as two hex digits per sample."""
        from colorsense.runtime.encoding import encode_brightness
        return encode_brightness(self.luminance)

    def distinct_categories(self) -> tuple[Category, ...]:
        """Categories present, in order of first appearance."""
        return tuple(dict.fromkeys(self.categories))

    def listing(self) -> list[dict[str, str]]:
        """Presentation records for the distinct categories present."""
        return describe(self.distinct_categories())

    def to_record(self) -> dict[str, str]:
        """Storage fields as hex strings. See runtime.encoding.to_record."""
        from colorsense.runtime.encoding import to_record
        return to_record(self)

    @classmethod
    def from_record(cls, record: dict) -> ClassificationResult:
        """Rebuild from storage fields. See runtime.encoding.from_record."""
        from colorsense.runtime.encoding import from_record
        return from_record(record)
