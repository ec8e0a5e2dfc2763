# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Separable blend modes.

Each mode is a closed-form function of the normalized base ``a`` and blend
``b`` channels in [0, 1], applied independently to R, G and B. Formulas
follow W3C Compositing and Blending Level 1, except soft-light which uses
the common ``sqrt`` approximation for the light half.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Union

import numpy as np
from numpy.typing import NDArray

from tinct.schema import BlendMode
from tinct.spaces.hexcodes import hex_to_rgb, rgb_to_hex

logger = logging.getLogger(__name__)

_Channels = NDArray[np.float64]


def _normal(a: _Channels, b: _Channels) -> _Channels:
    return b


def _multiply(a: _Channels, b: _Channels) -> _Channels:
    return a * b


def _screen(a: _Channels, b: _Channels) -> _Channels:
    return 1 - (1 - a) * (1 - b)


def _overlay(a: _Channels, b: _Channels) -> _Channels:
    return np.where(a < 0.5, 2 * a * b, 1 - 2 * (1 - a) * (1 - b))


def _soft_light(a: _Channels, b: _Channels) -> _Channels:
    d = np.where(a < 0.25, ((16 * a - 12) * a + 4) * a, np.sqrt(a) - a)
    return np.where(
        b < 0.5,
        a - (1 - 2 * b) * a * (1 - a),
        a + (2 * b - 1) * d,
    )


def _hard_light(a: _Channels, b: _Channels) -> _Channels:
    return np.where(b < 0.5, 2 * a * b, 1 - 2 * (1 - a) * (1 - b))


def _difference(a: _Channels, b: _Channels) -> _Channels:
    return np.abs(a - b)


def _exclusion(a: _Channels, b: _Channels) -> _Channels:
    return a + b - 2 * a * b


BLEND_FUNCTIONS: MappingProxyType[BlendMode, Callable[[_Channels, _Channels], _Channels]] = (
    MappingProxyType({
        BlendMode.NORMAL: _normal,
        BlendMode.MULTIPLY: _multiply,
        BlendMode.SCREEN: _screen,
        BlendMode.OVERLAY: _overlay,
        BlendMode.SOFT_LIGHT: _soft_light,
        BlendMode.HARD_LIGHT: _hard_light,
        BlendMode.DIFFERENCE: _difference,
        BlendMode.EXCLUSION: _exclusion,
    })
)


def _as_mode(mode: Union[BlendMode, str]) -> BlendMode:
    try:
        return BlendMode(mode)
    except ValueError:
        logger.warning("Unknown blend mode %r, using normal", mode)
        return BlendMode.NORMAL


def blend_colors(
    base: str,
    blend: str,
    mode: Union[BlendMode, str] = BlendMode.NORMAL,
) -> str:
    """
    Composite ``blend`` over ``base`` with a separable blend mode.

    Args:
        base: Backdrop color
        blend: Source color
        mode: BlendMode or its string value (``"soft-light"``...)

    Returns:
        Result hex. ``normal`` returns ``blend``; unparsable input returns
        ``base`` unchanged.
    """
    base_rgb = hex_to_rgb(base)
    blend_rgb = hex_to_rgb(blend)
    if base_rgb is None or blend_rgb is None:
        return base

    a = np.array(base_rgb.as_tuple(), dtype=np.float64) / 255.0
    b = np.array(blend_rgb.as_tuple(), dtype=np.float64) / 255.0
    result = BLEND_FUNCTIONS[_as_mode(mode)](a, b) * 255.0
    return rgb_to_hex(*(float(c) for c in result))
