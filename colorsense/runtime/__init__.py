# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Storage delivery for colorsense.

Encodes ClassificationResult data into fixed-width hex strings for
indexed database fields, and decodes them back. The storage layer itself
(tables, transactions) lives outside this package.
"""

from colorsense.runtime.encoding import (
    RECORD_FIELDS,
    decode_brightness,
    decode_categories,
    decode_chroma,
    decode_main_category,
    encode_brightness,
    encode_categories,
    encode_chroma,
    encode_main_category,
    from_record,
    to_record,
)

__all__ = [
    "encode_categories",
    "decode_categories",
    "encode_brightness",
    "decode_brightness",
    "encode_main_category",
    "decode_main_category",
    "encode_chroma",
    "decode_chroma",
    "to_record",
    "from_record",
    "RECORD_FIELDS",
]
