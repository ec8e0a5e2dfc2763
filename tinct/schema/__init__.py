# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Value types for every supported color model.

All types in this module are immutable (frozen dataclasses).
"Changing" a color means computing a new record.
"""

from tinct.schema.color_models import (
    CMYK,
    HSL,
    HSV,
    HWB,
    LCH,
    RGB,
    AccessibleSuggestion,
    ApcaLevel,
    BlendMode,
    CodeTarget,
    ColorTemperature,
    ContrastComparison,
    Deficiency,
    Gradient,
    GradientKind,
    GradientPreset,
    GradientStop,
    Lab,
    MixSpace,
    Oklab,
    Oklch,
    PaletteEntry,
    Preference,
    SavedPalette,
    TemperatureKind,
)

__all__ = [
    # Device spaces
    "RGB",
    "HSL",
    "HSV",
    "HWB",
    "CMYK",
    # Perceptual spaces
    "Lab",
    "LCH",
    "Oklab",
    "Oklch",
    # Palettes
    "PaletteEntry",
    "SavedPalette",
    # Gradients
    "GradientKind",
    "GradientStop",
    "GradientPreset",
    "Gradient",
    # Metric results
    "ColorTemperature",
    "TemperatureKind",
    "ApcaLevel",
    "ContrastComparison",
    "AccessibleSuggestion",
    # Selectors
    "Deficiency",
    "BlendMode",
    "MixSpace",
    "Preference",
    "CodeTarget",
]
