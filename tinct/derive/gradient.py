# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
CSS gradient rendering and presets.

Stops are always rendered in position order, regardless of the order they
were supplied in.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from tinct.schema import GradientKind, GradientPreset, GradientStop

logger = logging.getLogger(__name__)


GRADIENT_PRESETS: tuple[GradientPreset, ...] = (
    GradientPreset("Sunset", ("#ff6b6b", "#ffd93d", "#ff8e3c"), 135),
    GradientPreset("Ocean", ("#667eea", "#764ba2", "#66a6ff"), 135),
    GradientPreset("Forest", ("#134e5e", "#71b280"), 135),
    GradientPreset("Aurora", ("#00d2ff", "#3a7bd5", "#00d2ff"), 90),
    GradientPreset("Midnight", ("#232526", "#414345"), 180),
    GradientPreset("Candy", ("#d53369", "#daae51"), 135),
    GradientPreset("Peach", ("#ed6ea0", "#ec8c69"), 135),
    GradientPreset("Mojito", ("#1d976c", "#93f9b9"), 135),
    GradientPreset("Frost", ("#000428", "#004e92"), 180),
    GradientPreset("Stripe", ("#1fa2ff", "#12d8fa", "#a6ffcb"), 90),
    GradientPreset("Lavender", ("#e0c3fc", "#8ec5fc"), 135),
    GradientPreset("Fire", ("#f12711", "#f5af19"), 135),
    GradientPreset("Emerald", ("#348f50", "#56b4d3"), 135),
    GradientPreset("Royal", ("#141e30", "#243b55"), 135),
    GradientPreset("Rose", ("#ff0844", "#ffb199"), 135),
    GradientPreset("Grape", ("#5b247a", "#1bcedf"), 135),
    GradientPreset("Noir", ("#000000", "#434343"), 180),
    GradientPreset("Sky", ("#56ccf2", "#2f80ed"), 180),
)


def _number(value: float) -> str:
    """Format like a CSS author would: ``50``, ``33.33``, never ``50.0``."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def _as_kind(kind: Union[GradientKind, str]) -> GradientKind:
    try:
        return GradientKind(kind)
    except ValueError:
        logger.warning("Unknown gradient kind %r, rendering radial", kind)
        return GradientKind.RADIAL


def render_gradient(
    kind: Union[GradientKind, str],
    angle: float,
    stops: Iterable[GradientStop],
) -> str:
    """
    Render a CSS gradient function.

    Args:
        kind: linear, radial or conic
        angle: Degrees; ignored for radial gradients
        stops: Color stops in any order (positions in percent)

    Returns:
        e.g. ``linear-gradient(135deg, #6366f1 0%, #a855f7 100%)``
    """
    ordered = sorted(stops, key=lambda s: s.position)
    stop_list = ", ".join(f"{s.color} {_number(s.position)}%" for s in ordered)

    resolved = _as_kind(kind)
    if resolved is GradientKind.LINEAR:
        return f"linear-gradient({_number(angle)}deg, {stop_list})"
    if resolved is GradientKind.CONIC:
        return f"conic-gradient(from {_number(angle)}deg, {stop_list})"
    return f"radial-gradient(circle, {stop_list})"


def find_preset(name: str) -> GradientPreset | None:
    """Look up a preset by case-insensitive name."""
    wanted = name.strip().lower()
    for preset in GRADIENT_PRESETS:
        if preset.name.lower() == wanted:
            return preset
    return None
