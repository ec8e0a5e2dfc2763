# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Device-independent color space conversions.

Two separate pivots, never mixed:

    CIE:   sRGB → Linear RGB → XYZ (D65) → Lab → LCH
    OKLab: sRGB → Linear RGB → LMS → OKLab → OKLCH

References:
- sRGB / XYZ matrices: IEC 61966-2-1 (D65)
- CIE Lab: epsilon = 216/24389 ≈ 0.008856, kappa = 24389/27 ≈ 903.3
- OKLab: https://bottosson.github.io/posts/oklab/

Array kernels accept shape (..., 3) so one pixel and a whole image take the
same path. The scalar wrappers at the bottom build schema records.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tinct.schema import LCH, RGB, Lab, Oklab, Oklch
from tinct.spaces.hexcodes import clamp, to_channel


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut values are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(np.nan_to_num(linear), 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ ↔ CIE Lab
# =============================================================================

# D65 reference white
WHITE_D65 = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

# Linear sRGB to XYZ
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# XYZ to linear sRGB
_XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Linear RGB (..., 3) to CIE XYZ (..., 3), D65."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """CIE XYZ (..., 3) to linear RGB (..., 3). May leave the gamut."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    CIE XYZ to CIE Lab.

    Below epsilon the cube root is replaced by its linear tangent, which
    keeps the derivative finite near black.
    """
    ratio = np.asarray(xyz, dtype=np.float64) / WHITE_D65
    f = np.where(
        ratio > LAB_EPSILON,
        np.cbrt(ratio),
        (LAB_KAPPA * ratio + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """CIE Lab to CIE XYZ. Exact inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    x3, y3, z3 = fx ** 3, fy ** 3, fz ** 3
    x = np.where(x3 > LAB_EPSILON, x3, (116.0 * fx - 16.0) / LAB_KAPPA)
    y = np.where(L > LAB_KAPPA * LAB_EPSILON, y3, L / LAB_KAPPA)
    z = np.where(z3 > LAB_EPSILON, z3, (116.0 * fz - 16.0) / LAB_KAPPA)

    return np.stack([x, y, z], axis=-1) * WHITE_D65


# =============================================================================
# Linear RGB ↔ OKLab
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

# OKLab to LMS (cube-rooted)
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (handles negative values for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# Rectangular ↔ Cylindrical (shared by CIE Lab and OKLab)
# =============================================================================


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert (L, a, b) to (L, C, H) with H in degrees [0, 360).

    Works for both CIE Lab and OKLab; the two never share matrices but
    their polar forms are computed identically.
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    # -1e-15 % 360 rounds up to exactly 360.0
    H = np.where(H >= 360.0, 0.0, H)

    return np.stack([L, C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert (L, C, H) with H in degrees to (L, a, b)."""
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Full chains on uint8 pixels
# =============================================================================


def srgb_uint8_to_linear(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert 0-255 sRGB pixels (..., 3) to linear RGB."""
    return srgb_to_linear(np.asarray(pixels, dtype=np.float64) / 255.0)


def linear_to_srgb_uint8(linear: NDArray[np.float64]) -> NDArray[np.uint8]:
    """Convert linear RGB to 0-255 sRGB pixels, rounding half-up."""
    srgb = linear_to_srgb(linear) * 255.0
    return np.clip(np.floor(srgb + 0.5), 0, 255).astype(np.uint8)


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    return xyz_to_lab(linear_rgb_to_xyz(srgb_uint8_to_linear(pixels)))


def srgb_uint8_to_oklab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    return linear_rgb_to_oklab(srgb_uint8_to_linear(pixels))


# =============================================================================
# Scalar API: component triples ↔ schema records
# =============================================================================


def _pixel(r: float, g: float, b: float) -> NDArray[np.float64]:
    return np.array(
        [clamp(r, 0, 255), clamp(g, 0, 255), clamp(b, 0, 255)],
        dtype=np.float64,
    )


def _rgb_record(linear: NDArray[np.float64]) -> RGB:
    srgb = linear_to_srgb(linear) * 255.0
    return RGB(r=to_channel(srgb[0]), g=to_channel(srgb[1]), b=to_channel(srgb[2]))


def _hue(h: float) -> float:
    h = float(h)
    return 0.0 if not 0.0 <= h < 360.0 else h


def rgb_to_xyz(r: float, g: float, b: float) -> NDArray[np.float64]:
    """RGB (0-255) to XYZ. Internal pivot, not part of the public surface."""
    return linear_rgb_to_xyz(srgb_uint8_to_linear(_pixel(r, g, b)))


def xyz_to_rgb(x: float, y: float, z: float) -> RGB:
    return _rgb_record(xyz_to_linear_rgb(np.array([x, y, z], dtype=np.float64)))


def rgb_to_lab(r: float, g: float, b: float) -> Lab:
    """Convert RGB (0-255) to CIE Lab (D65)."""
    L, a, b_ = xyz_to_lab(rgb_to_xyz(r, g, b))
    return Lab(l=float(L), a=float(a), b=float(b_))


def lab_to_rgb(l: float, a: float, b: float) -> RGB:
    """Convert CIE Lab to RGB, clipping out-of-gamut results."""
    lab = np.nan_to_num(np.array([l, a, b], dtype=np.float64))
    return _rgb_record(xyz_to_linear_rgb(lab_to_xyz(lab)))


def rgb_to_lch(r: float, g: float, b: float) -> LCH:
    """Convert RGB (0-255) to CIE LCH."""
    L, C, H = lab_to_lch(xyz_to_lab(rgb_to_xyz(r, g, b)))
    return LCH(l=float(L), c=float(C), h=_hue(H))


def lch_to_rgb(l: float, c: float, h: float) -> RGB:
    """Convert CIE LCH (h in degrees) to RGB."""
    L, a, b = lch_to_lab(np.nan_to_num(np.array([l, c, h], dtype=np.float64)))
    return lab_to_rgb(L, a, b)


def rgb_to_oklab(r: float, g: float, b: float) -> Oklab:
    """Convert RGB (0-255) to OKLab."""
    L, a, b_ = srgb_uint8_to_oklab(_pixel(r, g, b))
    return Oklab(l=float(L), a=float(a), b=float(b_))


def oklab_to_rgb(l: float, a: float, b: float) -> RGB:
    """Convert OKLab to RGB, clipping out-of-gamut results."""
    lab = np.nan_to_num(np.array([l, a, b], dtype=np.float64))
    return _rgb_record(oklab_to_linear_rgb(lab))


def rgb_to_oklch(r: float, g: float, b: float) -> Oklch:
    """
    Convert RGB (0-255) to OKLCH.

    Returns:
        Oklch with L in [0, 1], C >= 0, H in degrees [0, 360)
    """
    L, C, H = lab_to_lch(srgb_uint8_to_oklab(_pixel(r, g, b)))
    return Oklch(l=float(L), c=float(C), h=_hue(H))


def oklch_to_rgb(l: float, c: float, h: float) -> RGB:
    """Convert OKLCH (h in degrees) to RGB."""
    L, a, b = lch_to_lab(np.nan_to_num(np.array([l, c, h], dtype=np.float64)))
    return oklab_to_rgb(L, a, b)
