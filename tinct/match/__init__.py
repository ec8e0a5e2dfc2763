# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Nearest-match lookup against fixed reference palettes.
"""

from tinct.match.nearest import (
    MatchConfig,
    find_nearest,
    find_nearest_color_name,
    find_nearest_ncs,
    find_nearest_pantone,
    find_nearest_ral,
    find_nearest_tailwind,
    nearest_for_pixels,
    nearest_with_distance,
    rgb_distance,
)
from tinct.match.palettes import (
    COLOR_NAMES,
    NCS_COLORS,
    PANTONE_COLORS,
    RAL_COLORS,
    STANDARD_BACKGROUNDS,
    TAILWIND_COLORS,
)

__all__ = [
    # Tables
    "COLOR_NAMES",
    "TAILWIND_COLORS",
    "PANTONE_COLORS",
    "RAL_COLORS",
    "NCS_COLORS",
    "STANDARD_BACKGROUNDS",
    # Lookup
    "MatchConfig",
    "rgb_distance",
    "find_nearest",
    "nearest_with_distance",
    "nearest_for_pixels",
    "find_nearest_color_name",
    "find_nearest_tailwind",
    "find_nearest_pantone",
    "find_nearest_ral",
    "find_nearest_ncs",
]
