# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Text export for single colors and whole palettes.
"""

from tinct.export.code import CODE_TEMPLATES, format_code
from tinct.export.palette import (
    export_palette_css,
    export_palette_json,
    export_palette_scss,
    export_palette_tailwind,
    tailwind_shade,
)

__all__ = [
    "CODE_TEMPLATES",
    "format_code",
    "export_palette_css",
    "export_palette_scss",
    "export_palette_json",
    "export_palette_tailwind",
    "tailwind_shade",
]
