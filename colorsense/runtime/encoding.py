# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Compact hex encoding for storage.

Classifications are stored as fixed-width uppercase hex strings so they
fit indexed string columns and can be matched with simple LIKE queries:

    colors      one digit per sample     "E2F0"   (category ordinals)
    main_color  one digit                "E"
    luminance   two digits per sample    "0AFF3C80"
    chroma      two digits               "2A"

Decoding is strict: any length or character problem rejects the whole
string with MalformedEncoding. Lowercase digits are not accepted.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from colorsense.errors import MalformedEncoding
from colorsense.schema import Category, ClassificationResult
from colorsense.schema.perception import check_byte

_HEX_RE = re.compile(r"[0-9A-F]*")

RECORD_FIELDS = ("colors", "main_color", "luminance", "chroma")


def _check_hex(text: str, width: int, what: str) -> None:
    """Reject non-strings, bad lengths and characters outside [0-9A-F]."""
    if not isinstance(text, str):
        raise MalformedEncoding(f"{what} must be a string, got {type(text).__name__}")
    if len(text) % width:
        raise MalformedEncoding(
            f"{what} length must be a multiple of {width}, got {len(text)}"
        )
    if not _HEX_RE.fullmatch(text):
        raise MalformedEncoding(f"{what} contains characters outside [0-9A-F]: '{text}'")


# =============================================================================
# Category Sequences
# =============================================================================


def encode_categories(categories: Iterable[Category]) -> str:
    """One uppercase hex digit per category, in order. Empty in, empty out."""
    return "".join(f"{int(Category(c)):X}" for c in categories)


def decode_categories(text: str) -> tuple[Category, ...]:
    """
    Inverse of encode_categories.

    Raises:
        MalformedEncoding: If text is not made of [0-9A-F] digits.
    """
    _check_hex(text, 1, "Color string")
    return tuple(Category(int(ch, 16)) for ch in text)


def encode_main_category(category: Category) -> str:
    """Single hex digit for the main category."""
    return f"{int(Category(category)):X}"


def decode_main_category(text: str) -> Category:
    """
    Inverse of encode_main_category.

    Raises:
        MalformedEncoding: Unless text is exactly one [0-9A-F] digit.
    """
    _check_hex(text, 1, "Main color")
    if len(text) != 1:
        raise MalformedEncoding(f"Main color must be one hex digit, got '{text}'")
    return Category(int(text, 16))


# =============================================================================
# Brightness Sequences
# =============================================================================


def encode_brightness(levels: Iterable[int]) -> str:
    """Two zero-padded uppercase hex digits per level, high nibble first."""
    return "".join(f"{check_byte(v, 'Brightness'):02X}" for v in levels)


def decode_brightness(text: str) -> tuple[int, ...]:
    """
    Inverse of encode_brightness.

    Raises:
        MalformedEncoding: On odd length or characters outside [0-9A-F].
    """
    _check_hex(text, 2, "Luminance string")
    return tuple(int(text[i:i + 2], 16) for i in range(0, len(text), 2))


def encode_chroma(chroma: int) -> str:
    """Two hex digits for the opaque chroma byte."""
    return f"{check_byte(chroma, 'Chroma'):02X}"


def decode_chroma(text: str) -> int:
    """
    Inverse of encode_chroma.

    Raises:
        MalformedEncoding: Unless text is exactly two [0-9A-F] digits.
    """
    _check_hex(text, 2, "Chroma")
    if len(text) != 2:
        raise MalformedEncoding(f"Chroma must be two hex digits, got '{text}'")
    return int(text, 16)


# =============================================================================
# Storage Records
# =============================================================================


def to_record(result: ClassificationResult) -> dict[str, str]:
    """
    Storage fields for a classification.

    Returns:
        Dict with "colors", "main_color", "luminance" and "chroma" hex strings
    """
    return {
        "colors": encode_categories(result.categories),
        "main_color": encode_main_category(result.main_category),
        "luminance": encode_brightness(result.luminance),
        "chroma": encode_chroma(result.chroma),
    }


def from_record(record: Mapping[str, str]) -> ClassificationResult:
    """
    Rebuild a classification from its storage fields.

    Raises:
        MalformedEncoding: On a missing field, an undecodable field, or
            color and luminance strings covering different sample counts.
    """
    missing = [f for f in RECORD_FIELDS if f not in record]
    if missing:
        raise MalformedEncoding(f"Record is missing fields: {', '.join(missing)}")

    categories = decode_categories(record["colors"])
    luminance = decode_brightness(record["luminance"])
    if len(categories) != len(luminance):
        raise MalformedEncoding(
            f"Color string covers {len(categories)} samples but luminance "
            f"covers {len(luminance)}"
        )

    return ClassificationResult(
        categories=categories,
        main_category=decode_main_category(record["main_color"]),
        luminance=luminance,
        chroma=decode_chroma(record["chroma"]),
    )
