# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Hex codes: the canonical wire form.

``#rrggbb`` (lowercase) is the equality key used by every lookup and cache.
Input is case-insensitive and the leading ``#`` is optional.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from tinct.schema import RGB


_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


# =============================================================================
# Numeric helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Python's ``round`` uses banker's rounding, which would make 0.5 steps
    land on even integers and shift hues/channels by one.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``. NaN collapses to ``low``."""
    if value != value:
        return low
    return max(low, min(high, value))


def to_channel(value: float) -> int:
    """Round and clamp a 0-255 float to an 8-bit channel."""
    return int(clamp(round_half_up(clamp(value, -1.0, 256.0)), 0, 255))


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """
    Parse a 6-digit hex string.

    Args:
        hex_color: ``"#3b82f6"``, ``"3B82F6"``...

    Returns:
        RGB record, or None if the text is not a 6-digit hex code
    """
    m = _HEX_RE.match(hex_color.strip()) if hex_color else None
    if not m:
        return None
    return RGB(
        r=int(m.group(1), 16),
        g=int(m.group(2), 16),
        b=int(m.group(3), 16),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Format channels as ``#rrggbb``.

    Channels are rounded half-up and clamped to 0-255, so fractional or
    out-of-range input still yields a valid code.
    """
    return f"#{to_channel(r):02x}{to_channel(g):02x}{to_channel(b):02x}"


def normalize_hex(hex_color: str) -> Optional[str]:
    """Return the canonical lowercase ``#rrggbb`` form, or None."""
    rgb = hex_to_rgb(hex_color)
    return rgb.hex if rgb is not None else None


# =============================================================================
# Hex variants
# =============================================================================


def websafe(hex_color: str) -> str:
    """Snap each channel to the nearest multiple of 51 (the 216-color cube).

    Unparsable input is returned unchanged.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    return rgb_to_hex(*(round_half_up(c / 51) * 51 for c in rgb.as_tuple()))


def hex_shorthand(hex_color: str) -> Optional[str]:
    """``#aabbcc`` -> ``#abc``; None when the code has no 3-digit form.

    Accepts any case with or without ``#``; the result is lowercase.
    """
    normalized = normalize_hex(hex_color)
    if normalized is None:
        return None
    r1, r2, g1, g2, b1, b2 = normalized[1:]
    if r1 == r2 and g1 == g2 and b1 == b2:
        return f"#{r1}{g1}{b1}"
    return None
