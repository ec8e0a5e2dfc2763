# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Hue-rotation color harmonies.

Rotations are done in HSL with saturation and lightness held fixed. The
base color appears unrotated (as lowercase hex); every other member is
rotated by its fixed offset plus a caller-supplied ``angle_offset``.
Locking the base against rotation is the caller's job: this module
applies whatever offset it is given.
"""

from __future__ import annotations

from types import MappingProxyType

from tinct.spaces.cylindrical import hsl_to_hex, rgb_to_hsl
from tinct.spaces.hexcodes import hex_to_rgb


# Harmony name -> member offsets in degrees. ``None`` marks the base color.
HARMONY_OFFSETS = MappingProxyType({
    "complementary": (None, 180),
    "analogous": (-30, None, 30),
    "triadic": (None, 120, 240),
    "split": (None, 150, 210),
    "tetradic": (None, 90, 180, 270),
    "double_split": (None, 60, 180, 240),
})

# Lightness offsets for the monochromatic ladder (clamped to 0-100)
MONOCHROMATIC_STEPS = (-30, -15, None, 15, 30)


def generate_harmonies(hex_color: str, angle_offset: float = 0) -> dict[str, list[str]]:
    """
    Build every harmony for a base color.

    Args:
        hex_color: Base color
        angle_offset: Extra rotation (degrees) applied to all non-base
            members. Any real value; reduced mod 360.

    Returns:
        Mapping of harmony name to hex list, or an empty dict for
        unparsable input. Keys: complementary, analogous, triadic, split,
        tetradic, double_split, monochromatic.

    Example:
        >>> generate_harmonies("#ff0000")["complementary"]
        ['#ff0000', '#00ffff']
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return {}
    base = rgb.hex
    hsl = rgb_to_hsl(*rgb.as_tuple())

    def rotate(offset: float) -> str:
        return hsl_to_hex((hsl.h + offset + angle_offset) % 360, hsl.s, hsl.l)

    harmonies = {
        name: [base if offset is None else rotate(offset) for offset in offsets]
        for name, offsets in HARMONY_OFFSETS.items()
    }
    harmonies["monochromatic"] = [
        base if step is None
        else hsl_to_hex(hsl.h, hsl.s, max(0, min(100, hsl.l + step)))
        for step in MONOCHROMATIC_STEPS
    ]
    return harmonies
