# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Color categories: the closed set of 16 human-meaningful color names.

Ordinals are a storage contract: each category is persisted as a single
hex digit (0-F). Reordering or renumbering members is a breaking change
to every stored classification, not a refactor.

Each category carries:
- slug: lowercase identifier used in queries and UI ("dark", "teal")
- label: capitalized display form ("Dark", "Teal")
- weight: salience used when voting for the main category (1-5)
- example: representative "#RRGGBB" swatch for presentation
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable


class Category(IntEnum):
    """
    Color category.

    The integer value is the persisted ordinal (one hex digit).
    """
    BLACK = 0
    BROWN = 1
    GREY = 2
    WHITE = 3
    PURPLE = 4
    GOLD = 5
    BLUE = 6
    CYAN = 7
    TEAL = 8
    GREEN = 9
    LIME = 10
    YELLOW = 11
    MAGENTA = 12
    ORANGE = 13
    RED = 14
    PINK = 15

    @property
    def slug(self) -> str:
        """Lowercase identifier ("dark" for BLACK, "bright" for WHITE)."""
        return _SLUGS[self]

    @property
    def label(self) -> str:
        """Capitalized display form of the slug."""
        return _SLUGS[self].title()

    @property
    def weight(self) -> int:
        """Salience weight counted toward the main category."""
        return _WEIGHTS[self]

    @property
    def example(self) -> str:
        """Representative swatch as "#RRGGBB"."""
        return _EXAMPLES[self]

    @property
    def hex(self) -> str:
        """Single uppercase hex digit of the ordinal."""
        return f"{int(self):X}"

    @classmethod
    def from_slug(cls, text: str) -> Category:
        """
        Resolve a slug or member name, case-insensitively.

        Both "dark" and "black" resolve to BLACK, "bright" and "white"
        to WHITE.

        Raises:
            KeyError: If text names no category.
        """
        key = text.strip().lower()
        for category in cls:
            if key == _SLUGS[category] or key == category.name.lower():
                return category
        raise KeyError(f"Unknown color category '{text}'")


_SLUGS: dict[Category, str] = {
    Category.BLACK: "dark",
    Category.BROWN: "brown",
    Category.GREY: "grey",
    Category.WHITE: "bright",
    Category.PURPLE: "purple",
    Category.GOLD: "gold",
    Category.BLUE: "blue",
    Category.CYAN: "cyan",
    Category.TEAL: "teal",
    Category.GREEN: "green",
    Category.LIME: "lime",
    Category.YELLOW: "yellow",
    Category.MAGENTA: "magenta",
    Category.ORANGE: "orange",
    Category.RED: "red",
    Category.PINK: "pink",
}

# Saturated, rare hues dominate; desaturated ones barely count.
_WEIGHTS: dict[Category, int] = {
    Category.BLACK: 2,
    Category.BROWN: 2,
    Category.GREY: 1,
    Category.WHITE: 2,
    Category.PURPLE: 4,
    Category.GOLD: 4,
    Category.BLUE: 3,
    Category.CYAN: 4,
    Category.TEAL: 4,
    Category.GREEN: 3,
    Category.LIME: 5,
    Category.YELLOW: 5,
    Category.MAGENTA: 5,
    Category.ORANGE: 4,
    Category.RED: 4,
    Category.PINK: 4,
}

_EXAMPLES: dict[Category, str] = {
    Category.RED: "#E57373",
    Category.MAGENTA: "#FF00FF",
    Category.PINK: "#F06292",
    Category.ORANGE: "#FFB74D",
    Category.BROWN: "#A1887F",
    Category.GOLD: "#FFD54F",
    Category.YELLOW: "#FFF176",
    Category.LIME: "#DCE775",
    Category.GREEN: "#81C784",
    Category.TEAL: "#4DB6AC",
    Category.CYAN: "#4DD0E1",
    Category.BLUE: "#64B5F6",
    Category.PURPLE: "#BA68C8",
    Category.WHITE: "#F5F5F5",
    Category.GREY: "#BDBDBD",
    Category.BLACK: "#333333",
}

# Order in which categories are offered to users (warm to cool, then neutrals).
DISPLAY_ORDER: tuple[Category, ...] = (
    Category.RED,
    Category.MAGENTA,
    Category.PINK,
    Category.ORANGE,
    Category.GOLD,
    Category.YELLOW,
    Category.LIME,
    Category.GREEN,
    Category.TEAL,
    Category.CYAN,
    Category.BLUE,
    Category.PURPLE,
    Category.BROWN,
    Category.WHITE,
    Category.GREY,
    Category.BLACK,
)


def describe(categories: Iterable[Category]) -> list[dict[str, str]]:
    """
    Presentation records for UI listings, one per category in order.

    Example::

        >>> describe([Category.TEAL])
        [{'name': 'teal', 'label': 'Teal', 'example': '#4DB6AC'}]
    """
    return [
        {"name": c.slug, "label": c.label, "example": c.example}
        for c in categories
    ]


def list_categories() -> list[dict[str, str]]:
    """Presentation records for all categories in display order."""
    return describe(DISPLAY_ORDER)
