# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Two-color mixing and N-step scales.

Three interchangeable strategies:
1. RGB: component-wise weighted average of gamma-encoded channels
2. Lab: weighted average of CIE L, a, b
3. OKLCH: weighted average of L and C with circular hue interpolation

``ratio`` is the weight of the second color. Ratio 0 returns the first
color and ratio 1 the second, exactly, for every strategy.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from tinct.schema import MixSpace
from tinct.spaces.colorspace import lab_to_rgb, oklch_to_rgb, rgb_to_lab, rgb_to_oklch
from tinct.spaces.hexcodes import clamp, hex_to_rgb, rgb_to_hex

logger = logging.getLogger(__name__)


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t


def interpolate_hue(h1: float, h2: float, t: float) -> float:
    """
    Interpolate two hues (degrees) along the shorter arc.

    When the hues are more than 180° apart, 360° is added to the smaller
    one first. The result is wrapped into [0, 360).
    """
    if abs(h2 - h1) > 180:
        if h2 > h1:
            h1 += 360
        else:
            h2 += 360
    h = _lerp(h1, h2, t) % 360
    return 0.0 if h >= 360 else h


def _endpoints(color1: str, color2: str, ratio: float):
    """Parse both colors; short-circuit the exact endpoints.

    Returns (result, rgb1, rgb2, t) where ``result`` is set when no
    interpolation is needed.
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return color1, None, None, 0.0
    t = clamp(ratio, 0.0, 1.0)
    if t == 0.0:
        return rgb1.hex, rgb1, rgb2, t
    if t == 1.0:
        return rgb2.hex, rgb1, rgb2, t
    return None, rgb1, rgb2, t


def mix_rgb(color1: str, color2: str, ratio: float = 0.5) -> str:
    """Linear mix of gamma-encoded RGB channels."""
    done, rgb1, rgb2, t = _endpoints(color1, color2, ratio)
    if done is not None:
        return done
    return rgb_to_hex(
        _lerp(rgb1.r, rgb2.r, t),
        _lerp(rgb1.g, rgb2.g, t),
        _lerp(rgb1.b, rgb2.b, t),
    )


def mix_lab(color1: str, color2: str, ratio: float = 0.5) -> str:
    """Perceptual mix through CIE Lab."""
    done, rgb1, rgb2, t = _endpoints(color1, color2, ratio)
    if done is not None:
        return done
    lab1 = rgb_to_lab(*rgb1.as_tuple())
    lab2 = rgb_to_lab(*rgb2.as_tuple())
    return lab_to_rgb(
        _lerp(lab1.l, lab2.l, t),
        _lerp(lab1.a, lab2.a, t),
        _lerp(lab1.b, lab2.b, t),
    ).hex


def mix_oklch(color1: str, color2: str, ratio: float = 0.5) -> str:
    """Perceptual mix through OKLCH with shortest-arc hue interpolation."""
    done, rgb1, rgb2, t = _endpoints(color1, color2, ratio)
    if done is not None:
        return done
    lch1 = rgb_to_oklch(*rgb1.as_tuple())
    lch2 = rgb_to_oklch(*rgb2.as_tuple())
    return oklch_to_rgb(
        _lerp(lch1.l, lch2.l, t),
        _lerp(lch1.c, lch2.c, t),
        interpolate_hue(lch1.h, lch2.h, t),
    ).hex


_MIXERS: dict[MixSpace, Callable[[str, str, float], str]] = {
    MixSpace.RGB: mix_rgb,
    MixSpace.LAB: mix_lab,
    MixSpace.OKLCH: mix_oklch,
}


def _as_space(space: Union[MixSpace, str]) -> MixSpace:
    try:
        return MixSpace(space)
    except ValueError:
        logger.warning("Unknown mix space %r, mixing in RGB", space)
        return MixSpace.RGB


def mix_colors(
    color1: str,
    color2: str,
    ratio: float = 0.5,
    space: Union[MixSpace, str] = MixSpace.RGB,
) -> str:
    """
    Mix two hex colors.

    Args:
        color1: First color (weight ``1 - ratio``)
        color2: Second color (weight ``ratio``)
        ratio: 0-1, clamped
        space: rgb, lab or oklch

    Returns:
        Mixed hex color. ``color1`` is returned unchanged if either input
        is unparsable.
    """
    return _MIXERS[_as_space(space)](color1, color2, ratio)


def generate_scale(
    color1: str,
    color2: str,
    steps: int = 5,
    space: Union[MixSpace, str] = MixSpace.RGB,
) -> list[str]:
    """
    Sample the mix at ``i / (steps - 1)`` for i in 0..steps-1.

    The first entry is ``color1`` and the last is ``color2``. A single
    step yields just ``color1``; zero or fewer steps yield an empty list.
    """
    if steps <= 0:
        return []
    mixer = _MIXERS[_as_space(space)]
    if steps == 1:
        return [mixer(color1, color2, 0.0)]
    return [mixer(color1, color2, i / (steps - 1)) for i in range(steps)]
