# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Derived colors: tints and shades, harmonies, mixes, blends and gradients.

Every function takes hex input and returns new hex values; nothing is
modified in place.
"""

from tinct.derive.blend import BLEND_FUNCTIONS, blend_colors
from tinct.derive.gradient import GRADIENT_PRESETS, find_preset, render_gradient
from tinct.derive.harmony import HARMONY_OFFSETS, generate_harmonies
from tinct.derive.mixing import (
    generate_scale,
    interpolate_hue,
    mix_colors,
    mix_lab,
    mix_oklch,
    mix_rgb,
)
from tinct.derive.shades import generate_shades, generate_tints

__all__ = [
    # Tints / shades
    "generate_tints",
    "generate_shades",
    # Harmonies
    "HARMONY_OFFSETS",
    "generate_harmonies",
    # Mixing
    "mix_colors",
    "mix_rgb",
    "mix_lab",
    "mix_oklch",
    "interpolate_hue",
    "generate_scale",
    # Blending
    "BLEND_FUNCTIONS",
    "blend_colors",
    # Gradients
    "GRADIENT_PRESETS",
    "find_preset",
    "render_gradient",
]
