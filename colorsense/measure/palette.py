# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Reference palette: curated RGB anchors mapped to color categories.

The palette is an ordered, read-only table. Order matters: when two
reference points are exactly equally close to a sample, the one listed
first wins. It is built once and shared by reference between any number
of classifiers without locking.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from colorsense.schema import Category
from colorsense.measure.colorspace import ColorSpace, nearest_index, srgb_uint8_to_lab

logger = logging.getLogger(__name__)


RGB = tuple[int, int, int]

_HEX_COLOR_RE = re.compile(r"[0-9A-Fa-f]{6}")


def parse_rgb(value) -> RGB:
    """
    Normalize an sRGB color to an (r, g, b) tuple of ints.

    Accepts a 3-sequence of integers 0-255 (tuple, list, NumPy array)
    or a hex string "#RRGGBB" / "RRGGBB".

    Raises:
        ValueError: If the value is not a valid 24-bit color.
    """
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if not _HEX_COLOR_RE.fullmatch(text):
            raise ValueError(f"Hex color must be six hex digits, got '{value}'")
        packed = int(text, 16)
        return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF

    arr = np.asarray(value)
    if arr.shape != (3,) or not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"RGB must be three integers, got {value!r}")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError(f"RGB channels must be 0-255, got {value!r}")
    r, g, b = (int(x) for x in arr)
    return r, g, b


@dataclass(frozen=True, slots=True)
class ReferencePoint:
    """
    A curated anchor color and the category it stands for.

    Attributes:
        rgb: 8-bit sRGB triple (fully opaque)
        category: Category this anchor resolves to
    """
    rgb: RGB
    category: Category

    def __post_init__(self) -> None:
        """Normalize and validate the RGB triple."""
        object.__setattr__(self, "rgb", parse_rgb(self.rgb))
        if not isinstance(self.category, Category):
            raise ValueError(f"Not a Category: {self.category!r}")

    @property
    def hex(self) -> str:
        """Hex string like "#A1887F"."""
        r, g, b = self.rgb
        return f"#{r:02X}{g:02X}{b:02X}"


class ReferencePalette:
    """
    Ordered, immutable table of reference points.

    Args:
        points: Reference points in priority order. Each RGB triple
            may appear only once.

    Raises:
        ValueError: If points is empty or repeats an RGB triple.
    """

    __slots__ = ("_points", "_index", "_rgb", "_lab")

    def __init__(self, points: Iterable[ReferencePoint]) -> None:
        points = tuple(points)
        if not points:
            raise ValueError("Reference palette cannot be empty")

        index: dict[RGB, Category] = {}
        for point in points:
            if point.rgb in index:
                raise ValueError(f"Duplicate reference color {point.hex}")
            index[point.rgb] = point.category

        rgb = np.array([p.rgb for p in points], dtype=np.uint8)
        rgb.setflags(write=False)

        # Lab coordinates per space, computed once so lookups never write
        lab: dict[ColorSpace, NDArray[np.float64]] = {}
        for space in ColorSpace:
            coords = srgb_uint8_to_lab(rgb, space)
            coords.setflags(write=False)
            lab[space] = coords

        self._points = points
        self._index = index
        self._rgb = rgb
        self._lab = lab

        logger.debug(
            "Built reference palette with %d points over %d categories",
            len(points), len(self.categories()),
        )

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ReferencePoint]:
        return iter(self._points)

    def __getitem__(self, i: int) -> ReferencePoint:
        return self._points[i]

    @property
    def points(self) -> tuple[ReferencePoint, ...]:
        return self._points

    def exact(self, rgb) -> Optional[Category]:
        """Category of rgb if it is itself a reference point, else None."""
        return self._index.get(parse_rgb(rgb))

    def lookup(self, rgb, space: ColorSpace = ColorSpace.CIELAB) -> Category:
        """
        Category for any 24-bit color.

        Reference colors resolve directly; any other color takes the
        category of the nearest point in the given space, earlier points
        winning exact ties.
        """
        key = parse_rgb(rgb)
        hit = self._index.get(key)
        if hit is not None:
            return hit
        lab = srgb_uint8_to_lab(np.array([key], dtype=np.uint8), space)
        idx, _ = nearest_index(lab, self.lab_array(space))
        return self._points[int(idx[0])].category

    def rgb_array(self) -> NDArray[np.uint8]:
        """Read-only (N, 3) uint8 array of reference colors, in palette order."""
        return self._rgb

    def lab_array(self, space: ColorSpace = ColorSpace.CIELAB) -> NDArray[np.float64]:
        """Read-only (N, 3) Lab coordinates of the reference colors, in palette order."""
        return self._lab[space]

    def categories(self) -> tuple[Category, ...]:
        """Categories covered by at least one point, by ordinal."""
        return tuple(sorted(set(self._index.values())))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[object, Category]]) -> ReferencePalette:
        """Build from (rgb-or-hex, category) pairs."""
        return cls(ReferencePoint(rgb=parse_rgb(rgb), category=c) for rgb, c in pairs)


# =============================================================================
# Curated Default Table
# =============================================================================

# Material Design shades plus hand-picked photo samples.
# Order is significant for exact-distance ties.
DEFAULT_REFERENCE_POINTS: tuple[tuple[str, Category], ...] = (
    ("#000000", Category.BLACK),
    ("#A1887F", Category.BROWN),
    ("#8D6E63", Category.BROWN),
    ("#A07F6C", Category.BROWN),
    ("#9B7B5B", Category.BROWN),
    ("#75645B", Category.BROWN),
    ("#795548", Category.BROWN),
    ("#6D4C41", Category.BROWN),
    ("#5D4037", Category.BROWN),
    ("#9B6136", Category.BROWN),
    ("#C1A487", Category.BROWN),
    ("#AA8062", Category.BROWN),
    ("#6B5546", Category.BROWN),
    ("#B4B59C", Category.BROWN),
    ("#B2B49B", Category.GREEN),
    ("#E0E0E0", Category.GREY),
    ("#9E9E9E", Category.GREY),
    ("#757575", Category.GREY),
    ("#616161", Category.GREY),
    ("#424242", Category.GREY),
    ("#847A72", Category.GREY),
    ("#DFE0E1", Category.GREY),
    ("#FFFFFF", Category.WHITE),
    ("#E4E4E4", Category.WHITE),
    ("#E7E7E7", Category.WHITE),
    ("#F3E5F5", Category.PURPLE),
    ("#E1BEE7", Category.PURPLE),
    ("#CE93D8", Category.PURPLE),
    ("#BA68C8", Category.PURPLE),
    ("#AB47BC", Category.PURPLE),
    ("#9C27B0", Category.PURPLE),
    ("#9B318F", Category.PURPLE),
    ("#86007E", Category.PURPLE),
    ("#8E24AA", Category.PURPLE),
    ("#7B1FA2", Category.PURPLE),
    ("#6A1B9A", Category.PURPLE),
    ("#4A148C", Category.PURPLE),
    ("#AA00FF", Category.PURPLE),
    ("#EDE7F6", Category.PURPLE),
    ("#D1C4E9", Category.PURPLE),
    ("#B39DDB", Category.PURPLE),
    ("#9575CD", Category.PURPLE),
    ("#7E57C2", Category.PURPLE),
    ("#5E35B1", Category.PURPLE),
    ("#673AB7", Category.PURPLE),
    ("#512DA8", Category.PURPLE),
    ("#4527A0", Category.PURPLE),
    ("#311B92", Category.PURPLE),
    ("#B388FF", Category.PURPLE),
    ("#7C4DFF", Category.PURPLE),
    ("#8E6493", Category.PURPLE),
    ("#5E3A5E", Category.PURPLE),
    ("#440E79", Category.PURPLE),
    ("#483678", Category.PURPLE),
    ("#4E3880", Category.PURPLE),
    ("#3B0E79", Category.PURPLE),
    ("#3F51B5", Category.BLUE),
    ("#C5CAE9", Category.BLUE),
    ("#5C6BC0", Category.BLUE),
    ("#3949AB", Category.BLUE),
    ("#303F9F", Category.BLUE),
    ("#283593", Category.BLUE),
    ("#1A237E", Category.BLUE),
    ("#536DFE", Category.BLUE),
    ("#3D5AFE", Category.BLUE),
    ("#304FFE", Category.BLUE),
    ("#2196F3", Category.BLUE),
    ("#BBDEFB", Category.BLUE),
    ("#90CAF9", Category.BLUE),
    ("#64B5F6", Category.BLUE),
    ("#42A5F5", Category.BLUE),
    ("#1E88E5", Category.BLUE),
    ("#1976D2", Category.BLUE),
    ("#1565C0", Category.BLUE),
    ("#0D47A1", Category.BLUE),
    ("#82B1FF", Category.BLUE),
    ("#448AFF", Category.BLUE),
    ("#2979FF", Category.BLUE),
    ("#2962FF", Category.BLUE),
    ("#03A9F6", Category.BLUE),
    ("#B3E5FC", Category.BLUE),
    ("#81D4FA", Category.BLUE),
    ("#4FC3F7", Category.BLUE),
    ("#29B6F6", Category.BLUE),
    ("#039BE5", Category.BLUE),
    ("#0288D1", Category.BLUE),
    ("#0277BD", Category.BLUE),
    ("#01579B", Category.BLUE),
    ("#80D8FF", Category.BLUE),
    ("#40C4FF", Category.BLUE),
    ("#00B0FF", Category.BLUE),
    ("#0091EA", Category.BLUE),
    ("#607D8B", Category.BLUE),
    ("#78909C", Category.BLUE),
    ("#546E7A", Category.BLUE),
    ("#37474F", Category.BLUE),
    ("#E4EBFD", Category.BLUE),
    ("#7DD3EA", Category.BLUE),
    ("#076399", Category.BLUE),
    ("#28446B", Category.BLUE),
    ("#4AC8F5", Category.BLUE),
    ("#0800F4", Category.BLUE),
    ("#012D5F", Category.BLUE),
    ("#B2EBF2", Category.CYAN),
    ("#80DEEA", Category.CYAN),
    ("#4DD0E1", Category.CYAN),
    ("#26C6DA", Category.CYAN),
    ("#00B8D4", Category.CYAN),
    ("#00BCD4", Category.CYAN),
    ("#00ACC1", Category.CYAN),
    ("#0097A7", Category.CYAN),
    ("#00838F", Category.CYAN),
    ("#006064", Category.CYAN),
    ("#84FFFF", Category.CYAN),
    ("#18FFFF", Category.CYAN),
    ("#00E5FF", Category.CYAN),
    ("#009688", Category.TEAL),
    ("#00897B", Category.TEAL),
    ("#00796B", Category.TEAL),
    ("#00695C", Category.TEAL),
    ("#045D5C", Category.TEAL),
    ("#245A5F", Category.TEAL),
    ("#03454F", Category.TEAL),
    ("#2C545E", Category.TEAL),
    ("#174741", Category.TEAL),
    ("#E8F5E9", Category.GREEN),
    ("#C8E6C9", Category.GREEN),
    ("#ABC7B0", Category.GREEN),
    ("#A5D6A7", Category.GREEN),
    ("#81C784", Category.GREEN),
    ("#66BB6A", Category.GREEN),
    ("#4CAF50", Category.GREEN),
    ("#43A047", Category.GREEN),
    ("#388E3C", Category.GREEN),
    ("#2E7D32", Category.GREEN),
    ("#1B5E20", Category.GREEN),
    ("#F1F8E9", Category.GREEN),
    ("#DCEDC8", Category.GREEN),
    ("#C5E1A5", Category.GREEN),
    ("#AED581", Category.GREEN),
    ("#8BC34A", Category.GREEN),
    ("#9CCC65", Category.GREEN),
    ("#7CB342", Category.GREEN),
    ("#689F38", Category.GREEN),
    ("#558B2F", Category.GREEN),
    ("#33691E", Category.GREEN),
    ("#B9F6CA", Category.GREEN),
    ("#69F0AE", Category.GREEN),
    ("#00C853", Category.GREEN),
    ("#00E676", Category.GREEN),
    ("#CCFF90", Category.GREEN),
    ("#B2FF59", Category.GREEN),
    ("#76FF03", Category.GREEN),
    ("#64DD17", Category.GREEN),
    ("#DDD579", Category.GREEN),
    ("#EEECA2", Category.GREEN),
    ("#244E3B", Category.GREEN),
    ("#9A9D47", Category.GREEN),
    ("#BEBD76", Category.GREEN),
    ("#5C5A30", Category.GREEN),
    ("#B3C16C", Category.GREEN),
    ("#ACA783", Category.GREEN),
    ("#474C25", Category.GREEN),
    ("#CDD087", Category.GREEN),
    ("#796D41", Category.GREEN),
    ("#F0F4C3", Category.LIME),
    ("#E6EE9C", Category.LIME),
    ("#DCE775", Category.LIME),
    ("#D4E157", Category.LIME),
    ("#CDDC39", Category.LIME),
    ("#C0CA33", Category.LIME),
    ("#AFB42B", Category.LIME),
    ("#EEFF41", Category.LIME),
    ("#C6FF00", Category.LIME),
    ("#AEEA00", Category.LIME),
    ("#FFF9C4", Category.YELLOW),
    ("#FFF59D", Category.YELLOW),
    ("#FFF176", Category.YELLOW),
    ("#FFEE58", Category.YELLOW),
    ("#FFFF8D", Category.YELLOW),
    ("#FFFF00", Category.YELLOW),
    ("#FFD54F", Category.YELLOW),
    ("#FFCA28", Category.YELLOW),
    ("#E3CE81", Category.YELLOW),
    ("#D1AF52", Category.YELLOW),
    ("#EEBB2B", Category.YELLOW),
    ("#D3A83A", Category.YELLOW),
    ("#C5A702", Category.YELLOW),
    ("#9F8201", Category.YELLOW),
    ("#E8CE03", Category.YELLOW),
    ("#F9A825", Category.ORANGE),
    ("#FF9800", Category.ORANGE),
    ("#FFA726", Category.ORANGE),
    ("#FB8C00", Category.ORANGE),
    ("#F57C00", Category.ORANGE),
    ("#EF6C00", Category.ORANGE),
    ("#FF9100", Category.ORANGE),
    ("#FF6D00", Category.ORANGE),
    ("#FD9A31", Category.ORANGE),
    ("#7D2704", Category.ORANGE),
    ("#FD571F", Category.ORANGE),
    ("#F86704", Category.ORANGE),
    ("#FD9A00", Category.ORANGE),
    ("#FE8A00", Category.ORANGE),
    ("#F19652", Category.ORANGE),
    ("#E58347", Category.ORANGE),
    ("#C94C30", Category.ORANGE),
    ("#9F5601", Category.ORANGE),
    ("#FA6801", Category.ORANGE),
    ("#BB723D", Category.ORANGE),
    ("#FF5252", Category.RED),
    ("#F44336", Category.RED),
    ("#EF5350", Category.RED),
    ("#E53935", Category.RED),
    ("#F6292E", Category.RED),
    ("#FC252D", Category.RED),
    ("#D32F2F", Category.RED),
    ("#C62828", Category.RED),
    ("#BA2830", Category.RED),
    ("#B71C1C", Category.RED),
    ("#D50000", Category.RED),
    ("#DB0806", Category.RED),
    ("#CF0904", Category.RED),
    ("#D81A14", Category.RED),
    ("#CC1708", Category.RED),
    ("#D80A07", Category.RED),
    ("#DE2616", Category.RED),
    ("#EE240F", Category.RED),
    ("#A1211F", Category.RED),
    ("#701219", Category.RED),
    ("#511218", Category.RED),
    ("#491114", Category.RED),
    ("#FCE4EC", Category.PINK),
    ("#FDC8EB", Category.PINK),
    ("#E79FA6", Category.PINK),
    ("#F8BBD0", Category.PINK),
    ("#F48FB1", Category.PINK),
    ("#FF80AB", Category.PINK),
    ("#FF4081", Category.PINK),
    ("#F50057", Category.PINK),
    ("#F06292", Category.PINK),
    ("#EC407A", Category.PINK),
    ("#E91E63", Category.PINK),
    ("#D81B60", Category.PINK),
    ("#C2185B", Category.PINK),
    ("#FF00FF", Category.MAGENTA),
    ("#E500E5", Category.MAGENTA),
    ("#F000B5", Category.MAGENTA),
    ("#CE009B", Category.MAGENTA),
    ("#C0055B", Category.MAGENTA),
    ("#B00085", Category.MAGENTA),
    ("#A82863", Category.MAGENTA),
    ("#5B002F", Category.MAGENTA),
    ("#4B0121", Category.MAGENTA),
    ("#860225", Category.MAGENTA),
    ("#CB023D", Category.MAGENTA),
    ("#64071A", Category.MAGENTA),
    ("#9E0047", Category.MAGENTA),
    ("#DC7ACF", Category.MAGENTA),
    ("#EDDEAC", Category.GOLD),
    ("#E8B451", Category.GOLD),
    ("#C08A3E", Category.GOLD),
    ("#A27D4B", Category.GOLD),
    ("#755531", Category.GOLD),
    ("#D19327", Category.GOLD),
    ("#DEA253", Category.GOLD),
    ("#D5AA6F", Category.GOLD),
    ("#F5EAD4", Category.GOLD),
)


@lru_cache(maxsize=1)
def default_palette() -> ReferencePalette:
    """The curated palette, built once per process and shared."""
    return ReferencePalette.from_pairs(DEFAULT_REFERENCE_POINTS)
