# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tints and shades.

``count`` steps at ``factor = i / (count + 1)`` for i = 1..count, so the
ladder never reaches either the input color or pure white/black.
"""

from __future__ import annotations

from tinct.spaces.hexcodes import hex_to_rgb, rgb_to_hex


def generate_tints(hex_color: str, count: int = 10) -> list[str]:
    """Lighter versions, moving linearly toward white."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return []
    tints = []
    for i in range(1, count + 1):
        factor = i / (count + 1)
        tints.append(rgb_to_hex(
            rgb.r + (255 - rgb.r) * factor,
            rgb.g + (255 - rgb.g) * factor,
            rgb.b + (255 - rgb.b) * factor,
        ))
    return tints


def generate_shades(hex_color: str, count: int = 10) -> list[str]:
    """Darker versions, moving linearly toward black."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return []
    shades = []
    for i in range(1, count + 1):
        factor = 1 - i / (count + 1)
        shades.append(rgb_to_hex(rgb.r * factor, rgb.g * factor, rgb.b * factor))
    return shades
