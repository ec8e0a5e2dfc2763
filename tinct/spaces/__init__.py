# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Space conversion kernels.

Every kernel is a pure, total function: out-of-range input is clamped,
never rejected. XYZ is an internal pivot and is not re-exported here.
"""

from tinct.spaces.colorspace import (
    lab_to_rgb,
    lch_to_rgb,
    oklab_to_rgb,
    oklch_to_rgb,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_oklch,
)
from tinct.spaces.cylindrical import (
    cmyk_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
)
from tinct.spaces.hexcodes import (
    hex_shorthand,
    hex_to_rgb,
    normalize_hex,
    rgb_to_hex,
    websafe,
)
from tinct.spaces.parse import parse_color

__all__ = [
    # Hex
    "hex_to_rgb",
    "rgb_to_hex",
    "normalize_hex",
    "websafe",
    "hex_shorthand",
    "parse_color",
    # Cylindrical / subtractive
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hwb",
    "hwb_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    # CIE
    "rgb_to_lab",
    "lab_to_rgb",
    "rgb_to_lch",
    "lch_to_rgb",
    # OKLab
    "rgb_to_oklab",
    "oklab_to_rgb",
    "rgb_to_oklch",
    "oklch_to_rgb",
]
