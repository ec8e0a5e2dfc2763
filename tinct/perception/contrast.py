# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Contrast metrics and accessible-color search.

Two metrics are offered side by side:

1. WCAG 2 contrast ratio: symmetric luminance ratio in [1, 21]
2. APCA lightness contrast (Lc): polarity-aware, signed
   - positive Lc: dark text on a light background
   - negative Lc: light text on a dark background

The APCA constants are a versioned table (ApcaConstants) so a later
revision of the algorithm can be swapped in without touching the formula.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Sequence, Union

from tinct.schema import (
    AccessibleSuggestion,
    ApcaLevel,
    ContrastComparison,
    Preference,
)
from tinct.spaces.cylindrical import hsl_to_hex, rgb_to_hsl
from tinct.spaces.hexcodes import hex_to_rgb, normalize_hex, round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# Relative Luminance & WCAG
# =============================================================================


def _wcag_linear(channel: float) -> float:
    v = channel / 255
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(r: float, g: float, b: float) -> float:
    """
    WCAG 2 relative luminance of an RGB (0-255) color.

    Returns:
        Y in [0, 1] (0 = black, 1 = white)
    """
    return (
        0.2126 * _wcag_linear(r)
        + 0.7152 * _wcag_linear(g)
        + 0.0722 * _wcag_linear(b)
    )


def wcag_contrast_ratio(hex1: str, hex2: str) -> float:
    """
    WCAG contrast ratio ``(Y_lighter + 0.05) / (Y_darker + 0.05)``.

    Symmetric in its arguments. Returns 1.0 for identical colors, 21.0 for
    black on white, and 0.0 when either input is not a hex code.
    """
    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return 0.0
    y1 = relative_luminance(*rgb1.as_tuple())
    y2 = relative_luminance(*rgb2.as_tuple())
    return (max(y1, y2) + 0.05) / (min(y1, y2) + 0.05)


def min_font_size_wcag(ratio: float, is_large: bool = False) -> int:
    """Smallest comfortable font size (px) for a WCAG contrast ratio."""
    if ratio >= 7:
        return 12
    if ratio >= 4.5:
        return 14 if is_large else 18
    if ratio >= 3:
        return 24
    return 36  # Not recommended


# =============================================================================
# APCA
# =============================================================================


@dataclass(frozen=True)
class ApcaConstants:
    """Constant table for one published revision of APCA."""

    version: str = "0.0.98G-4g"

    # Simple power-law linearization and luminance coefficients
    main_trc: float = 2.4
    r_co: float = 0.2126729
    g_co: float = 0.7151522
    b_co: float = 0.0721750

    # Normal polarity (dark text on light background)
    norm_bg: float = 0.56
    norm_txt: float = 0.57

    # Reverse polarity (light text on dark background)
    rev_txt: float = 0.62
    rev_bg: float = 0.65

    # Soft black clamp
    blk_thrs: float = 0.022
    blk_clmp: float = 1.414

    scale_bow: float = 1.14
    scale_wob: float = 1.14

    # SAPC below this (Lc 10) is reported as zero
    lo_clip: float = 0.1
    # Luminance difference below which two colors are indistinguishable
    delta_y_min: float = 0.0005


APCA_0_0_98G = ApcaConstants()


def apca_luminance(
    r: float,
    g: float,
    b: float,
    config: Optional[ApcaConstants] = None,
) -> float:
    """Screen luminance Y used by APCA (power curve, no linear toe)."""
    cfg = config or APCA_0_0_98G
    return (
        cfg.r_co * (r / 255) ** cfg.main_trc
        + cfg.g_co * (g / 255) ** cfg.main_trc
        + cfg.b_co * (b / 255) ** cfg.main_trc
    )


def _soft_clamp(y: float, cfg: ApcaConstants) -> float:
    return y if y > cfg.blk_thrs else y + (cfg.blk_thrs - y) ** cfg.blk_clmp


def apca_contrast(
    text_hex: str,
    bg_hex: str,
    *,
    config: Optional[ApcaConstants] = None,
) -> float:
    """
    APCA lightness contrast (Lc) of text over a background.

    Args:
        text_hex: Foreground (text) color
        bg_hex: Background color
        config: Constant table (defaults to APCA 0.0.98G)

    Returns:
        Signed Lc rounded to one decimal, roughly -108..106.
        Positive = dark text on light background, negative = light text on
        dark background, 0.0 when |Lc| < 10, the luminances are within
        ``delta_y_min``, or either input is not a hex code.
    """
    cfg = config or APCA_0_0_98G
    text = hex_to_rgb(text_hex)
    bg = hex_to_rgb(bg_hex)
    if text is None or bg is None:
        return 0.0

    y_txt = _soft_clamp(apca_luminance(*text.as_tuple(), config=cfg), cfg)
    y_bg = _soft_clamp(apca_luminance(*bg.as_tuple(), config=cfg), cfg)

    if abs(y_bg - y_txt) < cfg.delta_y_min:
        return 0.0

    if y_bg > y_txt:
        # Dark text on light background
        sapc = (y_bg ** cfg.norm_bg - y_txt ** cfg.norm_txt) * cfg.scale_bow
        output = 0.0 if sapc < cfg.lo_clip else sapc * 100
    else:
        # Light text on dark background
        sapc = (y_bg ** cfg.rev_bg - y_txt ** cfg.rev_txt) * cfg.scale_wob
        output = 0.0 if sapc > -cfg.lo_clip else sapc * 100

    return round_half_up(output * 10) / 10


# Lc -> (label, minimum font size in px); checked top to bottom
_APCA_LEVELS = (
    (90, ApcaLevel("Preferred (Fluent)", 12)),
    (75, ApcaLevel("Preferred", 14)),
    (60, ApcaLevel("Minimum (Body)", 16)),
    (45, ApcaLevel("Minimum (Large)", 24)),
    (30, ApcaLevel("Non-text Only", 42)),
    (15, ApcaLevel("Invisible (UI Only)", 0)),
)

_APCA_FAIL = ApcaLevel("Fail", 0)

APCA_THRESHOLDS = MappingProxyType({
    "body_text": 60,    # 16px-20px
    "large_text": 45,   # >=24px or >=18px bold
    "ui_text": 75,      # buttons, inputs, labels
    "decorative": 30,   # icons, disabled
})


def apca_level(lc: float) -> ApcaLevel:
    """Readability bucket for an Lc value (sign ignored)."""
    magnitude = abs(lc)
    for floor, level in _APCA_LEVELS:
        if magnitude >= floor:
            return level
    return _APCA_FAIL


def apca_pass(lc: float, usage: str) -> bool:
    """True if |Lc| meets the threshold for ``usage`` (see APCA_THRESHOLDS).

    Unknown usages never pass.
    """
    threshold = APCA_THRESHOLDS.get(usage)
    if threshold is None:
        logger.warning("Unknown APCA usage %r", usage)
        return False
    return abs(lc) >= threshold


def min_font_size_apca(lc: float) -> float:
    """
    Smallest legible font size (px) for an Lc value.

    Returns ``math.inf`` below Lc 30: not usable for text at any size.
    """
    magnitude = abs(lc)
    if magnitude >= 90:
        return 12
    if magnitude >= 75:
        return 14
    if magnitude >= 60:
        return 16
    if magnitude >= 45:
        return 24
    if magnitude >= 30:
        return 32
    return math.inf


# =============================================================================
# Accessible Color Search
# =============================================================================

_MAX_STEPS = 100


def _as_preference(value: Union[Preference, str]) -> Preference:
    try:
        return Preference(value)
    except ValueError:
        logger.warning("Unknown search preference %r, searching both ways", value)
        return Preference.ANY


def suggest_accessible_color(
    bg: str,
    fg: str,
    preference: Union[Preference, str] = Preference.LIGHTER,
    target_ratio: float = 4.5,
) -> str:
    """
    Nudge a foreground's HSL lightness until it reaches ``target_ratio``.

    Hue and saturation are held fixed. Lightness moves outward one point
    per step (up, down, or alternating for ``any``), at most 100 steps per
    direction, so the walk always terminates.

    Args:
        bg: Background hex (fixed)
        fg: Starting foreground hex
        preference: ``lighter``, ``darker`` or ``any``
        target_ratio: WCAG ratio to reach (4.5 = AA body text)

    Returns:
        ``fg`` itself if it already passes, otherwise the first passing
        candidate. When lightness is exhausted: white for ``lighter``,
        black for ``darker``, and for ``any`` whichever of the two
        contrasts more with ``bg``. Unparsable ``fg`` is returned as-is.
    """
    fg_rgb = hex_to_rgb(fg)
    if fg_rgb is None:
        return fg
    pref = _as_preference(preference)
    hsl = rgb_to_hsl(*fg_rgb.as_tuple())

    def check(lightness: float) -> Optional[str]:
        candidate = hsl_to_hex(hsl.h, hsl.s, lightness)
        if wcag_contrast_ratio(bg, candidate) >= target_ratio:
            return candidate
        return None

    if check(hsl.l):
        return normalize_hex(fg)

    go_up = pref in (Preference.ANY, Preference.LIGHTER)
    go_down = pref in (Preference.ANY, Preference.DARKER)

    for i in range(1, _MAX_STEPS + 1):
        if go_up:
            found = check(min(100, math.floor(hsl.l + i)))
            if found:
                return found
        if go_down:
            found = check(max(0, math.ceil(hsl.l - i)))
            if found:
                return found

    logger.debug(
        "No lightness of %s reaches %.2f:1 against %s, falling back",
        fg, target_ratio, bg,
    )
    if pref is Preference.LIGHTER:
        return "#ffffff"
    if pref is Preference.DARKER:
        return "#000000"
    white = wcag_contrast_ratio(bg, "#ffffff")
    black = wcag_contrast_ratio(bg, "#000000")
    return "#ffffff" if white >= black else "#000000"


def _adjust_lightness(hex_color: str, delta: float) -> str:
    rgb = hex_to_rgb(hex_color)
    h, s, l = (0, 0, 0)
    if rgb is not None:
        hsl = rgb_to_hsl(*rgb.as_tuple())
        h, s, l = hsl.h, hsl.s, hsl.l
    return hsl_to_hex(h, s, max(0, min(100, l + delta)))


def suggest_accessible_variants(
    bg: str,
    fg: str,
    *,
    min_ratio: float = 4.5,
    min_lc: float = 60,
    limit: int = 6,
) -> list[AccessibleSuggestion]:
    """
    Lightness variants of ``fg`` passing both WCAG AA and APCA body text.

    Candidates are tried at ±5, ±10, ... ±60 lightness points, nearest
    first. Duplicates are skipped; at most ``limit`` are returned.
    """
    seen: set[str] = set()
    suggestions: list[AccessibleSuggestion] = []

    for step in range(5, 61, 5):
        for delta in (step, -step):
            candidate = _adjust_lightness(fg, delta)
            if candidate in seen:
                continue
            seen.add(candidate)

            wcag = wcag_contrast_ratio(bg, candidate)
            lc = apca_contrast(candidate, bg)
            if wcag >= min_ratio and abs(lc) >= min_lc:
                suggestions.append(
                    AccessibleSuggestion(hex=candidate, reason="WCAG AA + APCA Body Text")
                )
                if len(suggestions) >= limit:
                    return suggestions

    return suggestions


def compare_foregrounds(
    bg: str,
    foregrounds: Sequence[str],
    limit: int = 4,
) -> tuple[ContrastComparison, ...]:
    """WCAG ratio and APCA Lc of the first ``limit`` foregrounds on ``bg``."""
    return tuple(
        ContrastComparison(
            fg=fg,
            wcag=wcag_contrast_ratio(bg, fg),
            apca=apca_contrast(fg, bg),
        )
        for fg in foregrounds[:limit]
    )
