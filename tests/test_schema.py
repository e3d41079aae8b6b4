# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""Tests for schema types: categories, registry data and results."""

import re

import pytest

from colorsense.schema import (
    DEFAULT_MAIN_CATEGORY,
    DISPLAY_ORDER,
    Category,
    ClassificationResult,
    describe,
    list_categories,
)


class TestCategoryOrdinals:
    """Ordinals are persisted; they must never move."""

    def test_stable_ordinals(self):
        expected = [
            "BLACK", "BROWN", "GREY", "WHITE", "PURPLE", "GOLD", "BLUE", "CYAN",
            "TEAL", "GREEN", "LIME", "YELLOW", "MAGENTA", "ORANGE", "RED", "PINK",
        ]
        assert [c.name for c in Category] == expected
        assert [int(c) for c in Category] == list(range(16))

    def test_hex_digit(self):
        assert Category.BLACK.hex == "0"
        assert Category.LIME.hex == "A"
        assert Category.PINK.hex == "F"


class TestRegistry:

    def test_slugs(self):
        assert Category.BLACK.slug == "dark"
        assert Category.WHITE.slug == "bright"
        assert Category.TEAL.slug == "teal"

    def test_labels(self):
        assert Category.BLACK.label == "Dark"
        assert Category.MAGENTA.label == "Magenta"

    def test_weights(self):
        assert Category.GREY.weight == 1
        assert Category.BLUE.weight == 3
        assert {c for c in Category if c.weight == 5} == {
            Category.LIME, Category.YELLOW, Category.MAGENTA,
        }
        assert all(1 <= c.weight <= 5 for c in Category)

    def test_examples_are_swatches(self):
        for c in Category:
            assert re.fullmatch(r"#[0-9A-F]{6}", c.example), c
        assert Category.RED.example == "#E57373"

    def test_slugs_unique(self):
        assert len({c.slug for c in Category}) == 16

    @pytest.mark.parametrize("text,expected", [
        ("dark", Category.BLACK),
        ("black", Category.BLACK),
        ("Bright", Category.WHITE),
        ("WHITE", Category.WHITE),
        (" teal ", Category.TEAL),
    ])
    def test_from_slug(self, text, expected):
        assert Category.from_slug(text) is expected

    def test_from_slug_unknown(self):
        with pytest.raises(KeyError):
            Category.from_slug("beige")


class TestPresentation:

    def test_describe(self):
        assert describe([Category.TEAL, Category.BLACK]) == [
            {"name": "teal", "label": "Teal", "example": "#4DB6AC"},
            {"name": "dark", "label": "Dark", "example": "#333333"},
        ]

    def test_display_order_complete(self):
        assert sorted(DISPLAY_ORDER) == list(Category)
        assert DISPLAY_ORDER[0] is Category.RED
        assert DISPLAY_ORDER[-1] is Category.BLACK

    def test_list_categories(self):
        listing = list_categories()
        assert len(listing) == 16
        assert listing[0]["name"] == "red"


class TestClassificationResult:

    def test_valid(self):
        r = ClassificationResult(
            categories=(Category.RED, Category.RED, Category.GOLD),
            main_category=Category.RED,
            luminance=(1, 2, 3),
            chroma=9,
        )
        assert r.sample_count == 3
        assert not r.is_empty
        assert r.colors_hex == "EE5"
        assert r.luminance_hex == "010203"

    def test_not_parallel(self):
        with pytest.raises(ValueError, match="parallel"):
            ClassificationResult(
                categories=(Category.RED,),
                main_category=Category.RED,
                luminance=(),
            )

    def test_invalid_luminance(self):
        with pytest.raises(ValueError, match="Luminance"):
            ClassificationResult(
                categories=(Category.RED,),
                main_category=Category.RED,
                luminance=(300,),
            )

    def test_invalid_chroma(self):
        with pytest.raises(ValueError, match="Chroma"):
            ClassificationResult(
                categories=(), main_category=Category.BLACK, luminance=(), chroma=-1,
            )

    def test_rejects_plain_int_category(self):
        with pytest.raises(ValueError, match="Category"):
            ClassificationResult(categories=(3,), main_category=Category.RED, luminance=(0,))

    def test_empty_default(self):
        r = ClassificationResult(categories=(), main_category=DEFAULT_MAIN_CATEGORY, luminance=())
        assert r.is_empty
        assert r.main_category is Category.BLACK

    def test_listing_distinct_in_first_seen_order(self):
        r = ClassificationResult(
            categories=(Category.GOLD, Category.RED, Category.GOLD),
            main_category=Category.GOLD,
            luminance=(0, 0, 0),
        )
        assert r.distinct_categories() == (Category.GOLD, Category.RED)
        assert [d["name"] for d in r.listing()] == ["gold", "red"]

    def test_frozen(self):
        r = ClassificationResult(categories=(), main_category=Category.BLACK, luminance=())
        with pytest.raises(AttributeError):
            r.chroma = 5
