# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Perceptual metrics: contrast, legibility, temperature and color vision
deficiency simulation.
"""

from tinct.perception.contrast import (
    APCA_0_0_98G,
    APCA_THRESHOLDS,
    ApcaConstants,
    apca_contrast,
    apca_level,
    apca_pass,
    compare_foregrounds,
    min_font_size_apca,
    min_font_size_wcag,
    relative_luminance,
    suggest_accessible_color,
    suggest_accessible_variants,
    wcag_contrast_ratio,
)
from tinct.perception.temperature import color_temperature
from tinct.perception.vision import (
    CVD_MATRICES,
    simulate_color_blindness,
    simulate_hex,
    simulate_pixels,
)

__all__ = [
    # WCAG
    "relative_luminance",
    "wcag_contrast_ratio",
    "min_font_size_wcag",
    # APCA
    "ApcaConstants",
    "APCA_0_0_98G",
    "APCA_THRESHOLDS",
    "apca_contrast",
    "apca_level",
    "apca_pass",
    "min_font_size_apca",
    # Suggestions
    "suggest_accessible_color",
    "suggest_accessible_variants",
    "compare_foregrounds",
    # Temperature
    "color_temperature",
    # Color vision
    "CVD_MATRICES",
    "simulate_color_blindness",
    "simulate_hex",
    "simulate_pixels",
]
