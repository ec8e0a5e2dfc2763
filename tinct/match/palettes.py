# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Reference palettes.

Each table is a read-only ``name -> #rrggbb`` mapping. Iteration order is
significant: nearest-match ties resolve to the earliest entry.

The Pantone, RAL and NCS tables are small subsets with sRGB approximations
of the physical swatches.
"""

from __future__ import annotations

from types import MappingProxyType

from tinct.schema import PaletteEntry


# Basic web names plus a few popular UI accents
COLOR_NAMES = MappingProxyType({
    "Black": "#000000", "White": "#ffffff", "Red": "#ff0000", "Lime": "#00ff00",
    "Blue": "#0000ff", "Yellow": "#ffff00", "Cyan": "#00ffff", "Magenta": "#ff00ff",
    "Silver": "#c0c0c0", "Gray": "#808080", "Maroon": "#800000", "Olive": "#808000",
    "Green": "#008000", "Purple": "#800080", "Teal": "#008080", "Navy": "#000080",
    "Indigo": "#6366f1", "Tailwind Red": "#ef4444", "Tailwind Blue": "#3b82f6",
    "Emerald": "#10b981", "Amber": "#f59e0b", "Pink": "#ec4899", "Violet": "#8b5cf6",
})

TAILWIND_COLORS = MappingProxyType({
    "slate-50": "#f8fafc", "slate-500": "#64748b", "slate-900": "#0f172a",
    "red-500": "#ef4444", "orange-500": "#f97316", "amber-500": "#f59e0b",
    "yellow-500": "#eab308", "lime-500": "#84cc16", "green-500": "#22c55e",
    "emerald-500": "#10b981", "teal-500": "#14b8a6", "cyan-500": "#06b6d4",
    "sky-500": "#0ea5e9", "blue-500": "#3b82f6", "indigo-500": "#6366f1",
    "violet-500": "#8b5cf6", "purple-500": "#a855f7", "fuchsia-500": "#d946ef",
    "pink-500": "#ec4899", "rose-500": "#f43f5e",
})

PANTONE_COLORS = MappingProxyType({
    "PMS 186 C": "#c8102e", "PMS 185 C": "#e4002b", "PMS 199 C": "#d50032",
    "PMS 032 C": "#f4364c", "PMS 021 C": "#fe5000", "PMS 151 C": "#ff8200",
    "PMS 123 C": "#ffc72c", "PMS 116 C": "#ffcd00", "PMS 109 C": "#ffd100",
    "PMS 382 C": "#c4d600", "PMS 375 C": "#97d700", "PMS 361 C": "#43b02a",
    "PMS 347 C": "#009a44", "PMS 3268 C": "#00ab84", "PMS 320 C": "#009ca6",
    "PMS 3005 C": "#0077c8", "PMS 300 C": "#005eb8", "PMS 286 C": "#0032a0",
    "PMS 2728 C": "#001489", "PMS 2685 C": "#56368a", "PMS 2607 C": "#500778",
    "PMS 254 C": "#84329b", "PMS 232 C": "#f74d8b", "PMS 219 C": "#e31c79",
    "PMS 485 C": "#da291c", "PMS 711 C": "#aa8066", "PMS 476 C": "#4e3524",
    "PMS Black C": "#2d2926", "PMS Cool Gray 11 C": "#53565a",
    "PMS Cool Gray 5 C": "#b1b3b3", "PMS White": "#ffffff",
    "PMS 7421 C": "#612141", "PMS 7462 C": "#00558c", "PMS 7741 C": "#44883e",
    "PMS 7548 C": "#ffc600", "PMS 7579 C": "#dc4405",
})

RAL_COLORS = MappingProxyType({
    "RAL 1000": "#bebd7f", "RAL 1001": "#c2b078", "RAL 1002": "#c6a664",
    "RAL 1003": "#e5be01", "RAL 1004": "#cda434", "RAL 1005": "#a98307",
    "RAL 2000": "#ed760e", "RAL 2001": "#c93c20", "RAL 2002": "#cb2821",
    "RAL 3000": "#af2b1e", "RAL 3001": "#a52019", "RAL 3002": "#a2231d",
    "RAL 3003": "#9b111e", "RAL 4001": "#6d3f5b", "RAL 4002": "#922b3e",
    "RAL 5000": "#354d73", "RAL 5002": "#20214f", "RAL 5003": "#1d1e33",
    "RAL 5005": "#1e2460", "RAL 5010": "#0e294b", "RAL 5015": "#2271b3",
    "RAL 6000": "#316650", "RAL 6001": "#287233", "RAL 6002": "#2d572c",
    "RAL 7000": "#78858b", "RAL 7001": "#8a9597", "RAL 7035": "#d7d7d7",
    "RAL 8000": "#826c34", "RAL 8001": "#955f20", "RAL 9001": "#fdf4e3",
    "RAL 9002": "#e7ebda", "RAL 9003": "#f4f4f4", "RAL 9005": "#0a0a0a",
    "RAL 9010": "#ffffff", "RAL 9016": "#f6f6f6", "RAL 9017": "#1e1e1e",
})

NCS_COLORS = MappingProxyType({
    "S 0500-N": "#f5f2e7", "S 0502-Y": "#f4f1e0", "S 0505-Y10R": "#f7efe0",
    "S 1000-N": "#e8e4d8", "S 1002-Y": "#e5e1d0", "S 1005-Y20R": "#e8dfd0",
    "S 1500-N": "#d8d4c8", "S 2000-N": "#c8c4b8", "S 2002-Y": "#cac6b5",
    "S 2005-Y30R": "#d4c8b5", "S 2010-Y30R": "#d8c4a8", "S 2020-Y30R": "#d8bc98",
    "S 3000-N": "#aca8a0", "S 4000-N": "#908c85", "S 4502-B": "#7e8890",
    "S 5000-N": "#787470", "S 6000-N": "#605c58", "S 7000-N": "#4a4644",
    "S 8000-N": "#353230", "S 9000-N": "#201f1e", "S 0520-Y10R": "#f7e8c8",
    "S 0540-Y10R": "#f7dca8", "S 0560-Y10R": "#f7d088", "S 1070-Y10R": "#e8b450",
    "S 2060-Y10R": "#d4a040", "S 3060-Y10R": "#b88c30", "S 2060-B": "#0078c8",
})

# Backgrounds for the contrast grid, light to dark
STANDARD_BACKGROUNDS: tuple[PaletteEntry, ...] = (
    PaletteEntry("White", "#ffffff"),
    PaletteEntry("Slate-50", "#f8fafc"),
    PaletteEntry("Slate-100", "#f1f5f9"),
    PaletteEntry("Gray-200", "#e5e7eb"),
    PaletteEntry("Gray-300", "#d1d5db"),
    PaletteEntry("Gray-400", "#9ca3af"),
    PaletteEntry("Gray-500", "#6b7280"),
    PaletteEntry("Gray-600", "#4b5563"),
    PaletteEntry("Gray-700", "#374151"),
    PaletteEntry("Gray-800", "#1f2937"),
    PaletteEntry("Slate-900", "#0f172a"),
    PaletteEntry("Black", "#000000"),
)
