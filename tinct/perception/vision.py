# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color vision deficiency simulation.

Each deficiency is a fixed 3x3 row matrix applied directly to gamma-encoded
[R, G, B]. These are the widely circulated approximations used by design
tools, not a physiological cone model. Results are clamped to 0-255 and
rounded.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from tinct.schema import RGB, Deficiency
from tinct.spaces.hexcodes import hex_to_rgb


logger = logging.getLogger(__name__)


def _matrix(rows: list[list[float]]) -> NDArray[np.float64]:
    m = np.array(rows, dtype=np.float64)
    m.setflags(write=False)
    return m


CVD_MATRICES = MappingProxyType({
    # Red-blind
    Deficiency.PROTANOPIA: _matrix([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    # Green-blind
    Deficiency.DEUTERANOPIA: _matrix([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    # Blue-blind
    Deficiency.TRITANOPIA: _matrix([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
    # Monochromacy (Rec. 601 luma weights)
    Deficiency.ACHROMATOPSIA: _matrix([
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ]),
})

# Unknown tags leave the color as it is
_IDENTITY = _matrix([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


def _matrix_for(deficiency: Union[Deficiency, str]) -> NDArray[np.float64]:
    try:
        return CVD_MATRICES[Deficiency(deficiency)]
    except ValueError:
        logger.warning("Unknown deficiency %r, leaving color unchanged", deficiency)
        return _IDENTITY


def simulate_pixels(
    pixels: NDArray,
    deficiency: Union[Deficiency, str],
) -> NDArray[np.uint8]:
    """
    Simulate a deficiency over an array of 0-255 RGB pixels.

    Args:
        pixels: Array of shape (..., 3), any numeric dtype
        deficiency: Deficiency or its string value. Unknown values log a
            warning and pass the pixels through unchanged.

    Returns:
        uint8 array of the same shape
    """
    m = _matrix_for(deficiency)
    rgb = np.clip(np.nan_to_num(np.asarray(pixels, dtype=np.float64)), 0, 255)
    out = np.einsum('...j,ij->...i', rgb, m)
    # Round half up to match the scalar channel rounding
    return np.clip(np.floor(out + 0.5), 0, 255).astype(np.uint8)


def simulate_color_blindness(
    r: float,
    g: float,
    b: float,
    deficiency: Union[Deficiency, str],
) -> RGB:
    """
    Simulate how an RGB color appears with a given deficiency.

    Example:
        >>> simulate_color_blindness(255, 0, 0, "protanopia")
        RGB(r=145, g=142, b=0)
    """
    r_, g_, b_ = simulate_pixels(np.array([r, g, b]), deficiency)
    return RGB(r=int(r_), g=int(g_), b=int(b_))


def simulate_hex(
    hex_color: str,
    deficiency: Union[Deficiency, str],
) -> Optional[str]:
    """Hex-in, hex-out variant. None for unparsable input."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return simulate_color_blindness(*rgb.as_tuple(), deficiency).hex
