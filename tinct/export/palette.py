# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Palette export: a list of hex codes as CSS, SCSS, JSON or a Tailwind
theme fragment.
"""

from __future__ import annotations

import json
from typing import Sequence

from tinct.spaces.hexcodes import round_half_up


def export_palette_css(colors: Sequence[str], prefix: str = "color") -> str:
    """One custom property per line: ``--color-1: #ff0000;``."""
    return "\n".join(f"--{prefix}-{i}: {c};" for i, c in enumerate(colors, start=1))


def export_palette_scss(colors: Sequence[str], prefix: str = "color") -> str:
    """One SCSS variable per line: ``$color-1: #ff0000;``."""
    return "\n".join(f"${prefix}-{i}: {c};" for i, c in enumerate(colors, start=1))


def export_palette_json(colors: Sequence[str]) -> str:
    return json.dumps(list(colors), indent=2)


def tailwind_shade(index: int, count: int) -> int:
    """
    Shade key for the ``index``-th of ``count`` colors.

    Colors are spread over 100-900 in steps of 100. A slot that rounds to 0
    becomes 50. Rounding is half-up, so 4 colors give 200, 500, 700, 900.
    """
    shade = round_half_up((index + 1) / count * 900 / 100) * 100
    return shade or 50


def export_palette_tailwind(colors: Sequence[str], name: str = "custom") -> str:
    """
    Tailwind ``theme.extend.colors`` fragment.

    Later colors overwrite earlier ones that land on the same shade key.

    Example:
        >>> print(export_palette_tailwind(["#000000", "#ffffff"], "mono"))
        {
          "mono": {
            "500": "#000000",
            "900": "#ffffff"
          }
        }
    """
    shades: dict[str, str] = {}
    for i, color in enumerate(colors):
        shades[str(tailwind_shade(i, len(colors)))] = color
    return json.dumps({name: shades}, indent=2)
