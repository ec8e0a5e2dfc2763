# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Nearest-match lookup against reference palettes.

Distance is plain Euclidean distance between 0-255 RGB triples. Ties go to
the first entry in table order (``np.argmin`` returns the first minimum).

Generic names and Tailwind always answer with the closest entry. Brand
systems (Pantone, RAL, NCS) answer None when even the closest swatch is
too far away to be a meaningful match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np
from numpy.typing import NDArray

from tinct.schema import PaletteEntry
from tinct.match.palettes import (
    COLOR_NAMES,
    NCS_COLORS,
    PANTONE_COLORS,
    RAL_COLORS,
    TAILWIND_COLORS,
)
from tinct.spaces.hexcodes import hex_to_rgb

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchConfig:
    """Configuration for brand palette matching."""

    # Brand matches at or beyond this RGB distance are rejected.
    # For scale: black to white is ~441.7.
    brand_cutoff: float = 100.0


def _palette_arrays(palette: Mapping[str, str]) -> tuple[list[str], NDArray[np.float64]]:
    """Names and an (N, 3) float array of their RGB values.

    Entries whose hex does not parse are skipped.
    """
    names: list[str] = []
    rows: list[tuple[int, int, int]] = []
    for name, hex_value in palette.items():
        rgb = hex_to_rgb(hex_value)
        if rgb is not None:
            names.append(name)
            rows.append(rgb.as_tuple())
    return names, np.array(rows, dtype=np.float64).reshape(-1, 3)


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance between two RGB triples."""
    delta = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(np.sqrt(np.sum(delta ** 2)))


def nearest_with_distance(
    hex_color: str,
    palette: Mapping[str, str],
) -> Optional[tuple[PaletteEntry, float]]:
    """
    Closest palette entry and its distance.

    Returns:
        (entry, distance), or None for unparsable input or an empty palette
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    names, table = _palette_arrays(palette)
    if not names:
        return None

    target = np.array(rgb.as_tuple(), dtype=np.float64)
    distances = np.sqrt(np.sum((table - target) ** 2, axis=1))
    idx = int(np.argmin(distances))
    name = names[idx]
    return PaletteEntry(name=name, hex=palette[name].lower()), float(distances[idx])


def find_nearest(
    hex_color: str,
    palette: Mapping[str, str],
    *,
    max_distance: Optional[float] = None,
) -> Optional[PaletteEntry]:
    """
    Closest entry of ``palette`` to ``hex_color``.

    Args:
        hex_color: Color to match
        palette: ``name -> hex`` table
        max_distance: If given, matches at or beyond this distance are
            rejected

    Returns:
        The matching PaletteEntry, or None
    """
    found = nearest_with_distance(hex_color, palette)
    if found is None:
        return None
    entry, distance = found
    if max_distance is not None and distance >= max_distance:
        logger.debug(
            "Nearest match %s for %s is %.1f away (cutoff %.1f)",
            entry.name, hex_color, distance, max_distance,
        )
        return None
    return entry


def nearest_for_pixels(
    pixels: NDArray,
    palette: Mapping[str, str],
) -> tuple[PaletteEntry, ...]:
    """
    Match many RGB triples at once.

    Intended for the (N, 3) color lists produced by an external palette
    extractor. Returns one entry per row; empty for an empty palette.
    """
    names, table = _palette_arrays(palette)
    if not names:
        return ()
    rgb = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
    distances = np.sqrt(
        np.sum((rgb[:, np.newaxis, :] - table[np.newaxis, :, :]) ** 2, axis=-1)
    )
    return tuple(
        PaletteEntry(name=names[i], hex=palette[names[i]].lower())
        for i in np.argmin(distances, axis=1)
    )


# =============================================================================
# Named lookups
# =============================================================================


def find_nearest_color_name(hex_color: str) -> str:
    """Closest generic color name; ``"Unknown"`` for unparsable input."""
    entry = find_nearest(hex_color, COLOR_NAMES)
    return entry.name if entry is not None else "Unknown"


def find_nearest_tailwind(hex_color: str) -> Optional[str]:
    """
    Closest Tailwind token (e.g. ``"red-500"``), no cutoff.

    Example:
        >>> find_nearest_tailwind("#ef4444")
        'red-500'
    """
    entry = find_nearest(hex_color, TAILWIND_COLORS)
    return entry.name if entry is not None else None


def _find_brand(
    hex_color: str,
    palette: Mapping[str, str],
    config: Optional[MatchConfig],
) -> Optional[str]:
    cfg = config or MatchConfig()
    entry = find_nearest(hex_color, palette, max_distance=cfg.brand_cutoff)
    return entry.name if entry is not None else None


def find_nearest_pantone(hex_color: str, *, config: Optional[MatchConfig] = None) -> Optional[str]:
    """Closest Pantone swatch inside the cutoff, else None."""
    return _find_brand(hex_color, PANTONE_COLORS, config)


def find_nearest_ral(hex_color: str, *, config: Optional[MatchConfig] = None) -> Optional[str]:
    """Closest RAL Classic color inside the cutoff, else None."""
    return _find_brand(hex_color, RAL_COLORS, config)


def find_nearest_ncs(hex_color: str, *, config: Optional[MatchConfig] = None) -> Optional[str]:
    """Closest NCS notation inside the cutoff, else None."""
    return _find_brand(hex_color, NCS_COLORS, config)
