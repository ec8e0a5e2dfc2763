# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Warm / cool classification.

This is a stylistic heuristic for UI labels. The Kelvin figure is a linear
interpolation over hue inside each bucket, not a correlated color
temperature, and should not be used for anything physical.

Buckets (HSL hue, degrees):
- warm:    0-60 and 300-360   → 2700-4700 K
- cool:    180-270            → 8000-12000 K
- 60-180:  warm below 120, cool above, neutral if s < 30 → 5500-7500 K
- 270-300: neutral            → 6500 K
Saturation below 10% is always neutral at 6500 K.
"""

from __future__ import annotations

from tinct.schema import ColorTemperature, TemperatureKind
from tinct.spaces.cylindrical import rgb_to_hsl
from tinct.spaces.hexcodes import hex_to_rgb, round_half_up


NEUTRAL_KELVIN = 6500


def color_temperature(hex_color: str) -> ColorTemperature:
    """Classify a color as warm, cool or neutral with a nominal Kelvin value."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return ColorTemperature(kind=TemperatureKind.NEUTRAL, kelvin=NEUTRAL_KELVIN)

    hsl = rgb_to_hsl(*rgb.as_tuple())
    h = hsl.h
    kind = TemperatureKind.NEUTRAL
    kelvin: float = NEUTRAL_KELVIN

    if 0 <= h <= 60 or 300 <= h <= 360:
        kind = TemperatureKind.WARM
        kelvin = 2700 + ((60 - min(h, 60)) / 60) * 2000
    elif 180 <= h <= 270:
        kind = TemperatureKind.COOL
        kelvin = 8000 + ((h - 180) / 90) * 4000
    elif 60 < h < 180:
        if hsl.s < 30:
            kind = TemperatureKind.NEUTRAL
        else:
            kind = TemperatureKind.WARM if h < 120 else TemperatureKind.COOL
        kelvin = 5500 + ((h - 60) / 120) * 2000

    if hsl.s < 10:
        kind = TemperatureKind.NEUTRAL
        kelvin = NEUTRAL_KELVIN

    return ColorTemperature(kind=kind, kelvin=round_half_up(kelvin))
