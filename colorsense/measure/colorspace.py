# Copyright (c) 2026 Colorsense
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
- sRGB → Linear RGB → XYZ (D65) → CIELAB
- sRGB → Linear RGB → OKLab

Both targets are perceptually uniform enough that Euclidean distance
approximates perceived color difference, which is all classification needs.

References:
- CIELAB: CIE 15:2004, D65 reference white
- OKLab: https://bottosson.github.io/posts/oklab/

All conversions are pure NumPy for determinism.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray


class ColorSpace(Enum):
    """Perceptual space used for nearest-category distance."""

    CIELAB = "cielab"
    OKLAB = "oklab"


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )
    return linear


# =============================================================================
# Linear RGB → CIELAB
# =============================================================================

# Linear sRGB to XYZ, D65
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# D65 reference white, Y normalized to 1
_D65_WHITE = _RGB_TO_XYZ.sum(axis=1)

_LAB_EPSILON = (6.0 / 29.0) ** 3
_LAB_KAPPA = 3.0 * (6.0 / 29.0) ** 2


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (D65).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values, Y of white = 1
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_cielab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ (D65) to CIELAB.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100]
    """
    xyz = np.asarray(xyz, dtype=np.float64) / _D65_WHITE

    # Cube root above the linear toe near black
    f = np.where(
        xyz > _LAB_EPSILON,
        np.cbrt(xyz),
        xyz / _LAB_KAPPA + 4.0 / 29.0,
    )

    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Linear RGB → OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b), L in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.sign(lms) * np.abs(lms) ** (1.0 / 3.0)

    # LMS to OKLab
    lab = np.einsum('...j,ij->...i', lms_cbrt, _M2)

    return lab


# =============================================================================
# Convenience: uint8 sRGB → perceptual space (full chain)
# =============================================================================


def srgb_uint8_to_lab(
    pixels: NDArray[np.uint8],
    space: ColorSpace = ColorSpace.CIELAB,
) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB pixels [0,255] to a perceptual Lab-type space.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]
        space: Target space (CIELAB or OKLAB)

    Returns:
        Array of shape (..., 3) with (L, a, b) coordinates
    """
    srgb_float = np.asarray(pixels).astype(np.float64) / 255.0
    linear = srgb_to_linear(srgb_float)
    if space is ColorSpace.OKLAB:
        return linear_rgb_to_oklab(linear)
    return xyz_to_cielab(linear_rgb_to_xyz(linear))


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def delta_e(lab1: NDArray[np.float64], lab2: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Euclidean distance between Lab coordinates.

    Broadcasts like NumPy arithmetic, so a single color can be compared
    against a whole table at once.

    Scale depends on the space: CIELAB ΔE ≈ 2.3 is a just noticeable
    difference; OKLab uses a 0-1 scale where ≈ 0.02 is barely perceptible.

    Args:
        lab1: Array of shape (..., 3)
        lab2: Array of shape (..., 3)

    Returns:
        Array of shape (...) with ΔE values
    """
    delta = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))


def nearest_index(
    lab: NDArray[np.float64],
    table: NDArray[np.float64],
) -> tuple[NDArray[np.intp], NDArray[np.float64]]:
    """
    Nearest table row for each color.

    Ties on exactly equal ΔE go to the earliest row: argmin returns the
    first minimum.

    Args:
        lab: Array of shape (N, 3) with Lab coordinates
        table: Array of shape (M, 3) with Lab coordinates, M >= 1

    Returns:
        (indices, distances), both of shape (N,)
    """
    # (N, 1, 3) against (1, M, 3) -> (N, M)
    dist = delta_e(lab[:, np.newaxis, :], table[np.newaxis, :, :])
    idx = np.argmin(dist, axis=1)
    return idx, dist[np.arange(len(idx)), idx]
