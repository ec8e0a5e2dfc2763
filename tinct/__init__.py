# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- color engine for design tooling.

Converts between color models, scores contrast for accessibility,
simulates color vision deficiencies, derives palettes and gradients, and
matches colors against reference palettes.

Quick start::

    from tinct import hex_to_rgb, wcag_contrast_ratio, format_code

    hex_to_rgb("#3b82f6")                       # RGB(r=59, g=130, b=246)
    wcag_contrast_ratio("#000000", "#ffffff")   # 21.0
    format_code("#3b82f6", "swiftui")
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.derive import (
    blend_colors,
    generate_harmonies,
    generate_scale,
    generate_shades,
    generate_tints,
    mix_colors,
    render_gradient,
)
from tinct.export import format_code
from tinct.history import push_history
from tinct.match import find_nearest_color_name, find_nearest_tailwind
from tinct.perception import (
    apca_contrast,
    color_temperature,
    simulate_color_blindness,
    suggest_accessible_color,
    wcag_contrast_ratio,
)
from tinct.schema import RGB, BlendMode, Deficiency, MixSpace
from tinct.spaces import hex_to_rgb, parse_color, rgb_to_hex

__all__ = [
    # Core conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "parse_color",
    # Perception
    "wcag_contrast_ratio",
    "apca_contrast",
    "suggest_accessible_color",
    "simulate_color_blindness",
    "color_temperature",
    # Derivation
    "generate_tints",
    "generate_shades",
    "generate_harmonies",
    "mix_colors",
    "generate_scale",
    "blend_colors",
    "render_gradient",
    # Lookup / export
    "find_nearest_color_name",
    "find_nearest_tailwind",
    "format_code",
    "push_history",
    # Types (commonly needed)
    "RGB",
    "Deficiency",
    "BlendMode",
    "MixSpace",
    # Version
    "__version__",
]
