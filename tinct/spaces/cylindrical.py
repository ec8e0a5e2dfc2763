# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Device-dependent cylindrical and subtractive models.

RGB ↔ HSL / HSV / HWB / CMYK using the classical max/min/delta hue
derivation. Achromatic input (max == min) gets hue 0 and saturation 0.

Outputs are whole numbers (rounded half-up), matching what color pickers
display. Hue is always reduced mod 360.
"""

from __future__ import annotations

from tinct.schema import CMYK, HSL, HSV, HWB, RGB
from tinct.spaces.hexcodes import clamp, round_half_up, to_channel


def _unit_channels(r: float, g: float, b: float) -> tuple[float, float, float]:
    return (
        clamp(r, 0, 255) / 255,
        clamp(g, 0, 255) / 255,
        clamp(b, 0, 255) / 255,
    )


def _hue_fraction(r: float, g: float, b: float, mx: float, d: float) -> float:
    """Hue in turns [0, 1) for a chromatic color (d > 0)."""
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6


def _wrap_degrees(h: float) -> float:
    h = h % 360
    return 0.0 if h != h else h


def _degrees(turns: float) -> int:
    return round_half_up(turns * 360) % 360


# =============================================================================
# HSL
# =============================================================================


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB (0-255) to HSL with whole-number components."""
    r, g, b = _unit_channels(r, g, b)
    mx, mn = max(r, g, b), min(r, g, b)
    h = s = 0.0
    l = (mx + mn) / 2
    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        h = _hue_fraction(r, g, b, mx, d)
    return HSL(h=_degrees(h), s=round_half_up(s * 100), l=round_half_up(l * 100))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _hsl_unit(h: float, s: float, l: float) -> tuple[float, float, float]:
    """HSL to unit RGB without rounding."""
    h = _wrap_degrees(h) / 360
    s = clamp(s, 0, 100) / 100
    l = clamp(l, 0, 100) / 100
    if s == 0:
        return l, l, l
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _hue_to_rgb(p, q, h + 1 / 3),
        _hue_to_rgb(p, q, h),
        _hue_to_rgb(p, q, h - 1 / 3),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (h in degrees, s/l in percent) to RGB."""
    r, g, b = _hsl_unit(h, s, l)
    return RGB(r=to_channel(r * 255), g=to_channel(g * 255), b=to_channel(b * 255))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return hsl_to_rgb(h, s, l).hex


# =============================================================================
# HSV
# =============================================================================


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert RGB (0-255) to HSV with whole-number components."""
    r, g, b = _unit_channels(r, g, b)
    mx, mn = max(r, g, b), min(r, g, b)
    d = mx - mn
    s = 0.0 if mx == 0 else d / mx
    h = _hue_fraction(r, g, b, mx, d) if mx != mn else 0.0
    return HSV(h=_degrees(h), s=round_half_up(s * 100), v=round_half_up(mx * 100))


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (h in degrees, s/v in percent) to RGB."""
    h = _wrap_degrees(h) / 60
    s = clamp(s, 0, 100) / 100
    v = clamp(v, 0, 100) / 100
    c = v * s
    x = c * (1 - abs(h % 2 - 1))
    m = v - c
    sector = int(h) % 6
    r, g, b = (
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    )[sector]
    return RGB(
        r=to_channel((r + m) * 255),
        g=to_channel((g + m) * 255),
        b=to_channel((b + m) * 255),
    )


# =============================================================================
# HWB
# =============================================================================


def rgb_to_hwb(r: float, g: float, b: float) -> HWB:
    """Convert RGB (0-255) to HWB. Hue is shared with HSL."""
    hsl = rgb_to_hsl(r, g, b)
    ur, ug, ub = _unit_channels(r, g, b)
    return HWB(
        h=hsl.h,
        w=round_half_up(min(ur, ug, ub) * 100),
        b=round_half_up((1 - max(ur, ug, ub)) * 100),
    )


def hwb_to_rgb(h: float, w: float, b: float) -> RGB:
    """
    Convert HWB to RGB.

    When whiteness + blackness reaches 100% the result is the gray
    ``w / (w + b)``, independent of hue.
    """
    w = clamp(w, 0, 100) / 100
    b = clamp(b, 0, 100) / 100
    if w + b >= 1:
        gray = to_channel(w / (w + b) * 255)
        return RGB(r=gray, g=gray, b=gray)
    pure = hsl_to_rgb(h, 100, 50)
    factor = 1 - w - b
    return RGB(
        r=to_channel((pure.r / 255 * factor + w) * 255),
        g=to_channel((pure.g / 255 * factor + w) * 255),
        b=to_channel((pure.b / 255 * factor + w) * 255),
    )


# =============================================================================
# CMYK
# =============================================================================


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """
    Convert RGB (0-255) to naive CMYK percentages.

    Pure black short-circuits to ``CMYK(0, 0, 0, 100)``.
    """
    r, g, b = _unit_channels(r, g, b)
    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(c=0, m=0, y=0, k=100)
    return CMYK(
        c=round_half_up((1 - r - k) / (1 - k) * 100),
        m=round_half_up((1 - g - k) / (1 - k) * 100),
        y=round_half_up((1 - b - k) / (1 - k) * 100),
        k=round_half_up(k * 100),
    )


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK percentages to RGB."""
    c, m, y, k = (clamp(v, 0, 100) / 100 for v in (c, m, y, k))
    return RGB(
        r=to_channel(255 * (1 - c) * (1 - k)),
        g=to_channel(255 * (1 - m) * (1 - k)),
        b=to_channel(255 * (1 - y) * (1 - k)),
    )
