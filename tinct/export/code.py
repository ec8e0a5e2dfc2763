# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Code snippet export.

Renders one color as a literal for a target language or stylesheet.
Formatting is deterministic; fractional channels use a fixed number of
decimals so snippets diff cleanly.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from tinct.match import find_nearest_tailwind
from tinct.schema import RGB, CodeTarget
from tinct.spaces import rgb_to_hsl, rgb_to_hwb, rgb_to_lab, rgb_to_lch, rgb_to_oklch
from tinct.spaces.hexcodes import hex_to_rgb

logger = logging.getLogger(__name__)


def _fixed(value: float, digits: int) -> str:
    return f"{value:.{digits}f}"


def _unit(rgb: RGB) -> tuple[str, str, str]:
    """Channels as 0-1 fractions with three decimals."""
    return tuple(_fixed(c / 255, 3) for c in rgb.as_tuple())


def _digits(rgb: RGB) -> str:
    """Upper-case ``RRGGBB`` without a prefix."""
    return rgb.hex[1:].upper()


def _swift(rgb: RGB) -> str:
    r, g, b = _unit(rgb)
    return f"UIColor(red: {r}, green: {g}, blue: {b}, alpha: 1.0)"


def _swiftui(rgb: RGB) -> str:
    r, g, b = _unit(rgb)
    return f"Color(red: {r}, green: {g}, blue: {b})"


def _objective_c(rgb: RGB) -> str:
    r, g, b = _unit(rgb)
    return f"[UIColor colorWithRed:{r} green:{g} blue:{b} alpha:1.0]"


def _css_hsl(rgb: RGB) -> str:
    hsl = rgb_to_hsl(*rgb.as_tuple())
    return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"


def _css_hsla(rgb: RGB) -> str:
    hsl = rgb_to_hsl(*rgb.as_tuple())
    return f"hsla({hsl.h}, {hsl.s}%, {hsl.l}%, 1.0)"


def _css_hwb(rgb: RGB) -> str:
    hwb = rgb_to_hwb(*rgb.as_tuple())
    return f"hwb({hwb.h} {hwb.w}% {hwb.b}%)"


def _css_lab(rgb: RGB) -> str:
    lab = rgb_to_lab(*rgb.as_tuple())
    return f"lab({_fixed(lab.l, 1)}% {_fixed(lab.a, 1)} {_fixed(lab.b, 1)})"


def _css_lch(rgb: RGB) -> str:
    lch = rgb_to_lch(*rgb.as_tuple())
    return f"lch({_fixed(lch.l, 1)}% {_fixed(lch.c, 1)} {_fixed(lch.h, 1)})"


def _css_oklch(rgb: RGB) -> str:
    oklch = rgb_to_oklch(*rgb.as_tuple())
    return f"oklch({_fixed(oklch.l, 3)} {_fixed(oklch.c, 3)} {_fixed(oklch.h, 1)})"


def _tailwind(rgb: RGB) -> str:
    return find_nearest_tailwind(rgb.hex) or rgb.hex


CODE_TEMPLATES: dict[CodeTarget, Callable[[RGB], str]] = {
    CodeTarget.CSS_HEX: lambda rgb: rgb.hex,
    CodeTarget.CSS_RGB: lambda rgb: f"rgb({rgb.r}, {rgb.g}, {rgb.b})",
    CodeTarget.CSS_RGBA: lambda rgb: f"rgba({rgb.r}, {rgb.g}, {rgb.b}, 1.0)",
    CodeTarget.CSS_HSL: _css_hsl,
    CodeTarget.CSS_HSLA: _css_hsla,
    CodeTarget.CSS_HWB: _css_hwb,
    CodeTarget.CSS_LAB: _css_lab,
    CodeTarget.CSS_LCH: _css_lch,
    CodeTarget.CSS_OKLCH: _css_oklch,
    CodeTarget.CSS_VARIABLE: lambda rgb: f"--color-primary: {rgb.hex};",
    CodeTarget.SASS_VARIABLE: lambda rgb: f"$color-primary: {rgb.hex};",
    CodeTarget.TAILWIND: _tailwind,
    CodeTarget.SWIFT: _swift,
    CodeTarget.SWIFTUI: _swiftui,
    CodeTarget.OBJECTIVE_C: _objective_c,
    CodeTarget.FLUTTER: lambda rgb: f"Color(0xFF{_digits(rgb)})",
    CodeTarget.KOTLIN: lambda rgb: f"Color(0xFF{_digits(rgb)})",
    CodeTarget.ANDROID_XML: lambda rgb: (
        f'<color name="color_{rgb.hex[1:]}">#FF{_digits(rgb)}</color>'
    ),
    CodeTarget.ARGB_HEX: lambda rgb: f"#FF{_digits(rgb)}",
    CodeTarget.CSHARP: lambda rgb: f"Color.FromArgb(255, {rgb.r}, {rgb.g}, {rgb.b})",
    CodeTarget.JAVA_AWT: lambda rgb: f"new Color({rgb.r}, {rgb.g}, {rgb.b})",
    CodeTarget.INTEGER: lambda rgb: str(int(rgb.hex[1:], 16)),
    CodeTarget.HEX_INTEGER: lambda rgb: f"0x{_digits(rgb)}",
}


def format_code(hex_color: str, target: Union[CodeTarget, str] = CodeTarget.CSS_HEX) -> str:
    """
    Render ``hex_color`` as a snippet for ``target``.

    Args:
        hex_color: Six-digit hex, ``#`` optional
        target: CodeTarget or its string value (e.g. ``"swiftui"``)

    Returns:
        The snippet. Unparsable colors come back unchanged; unknown targets
        fall back to the canonical hex.

    Example:
        >>> format_code("#3b82f6", "css-hsl")
        'hsl(217, 91%, 60%)'
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return hex_color
    try:
        resolved = CodeTarget(target)
    except ValueError:
        logger.warning("Unknown code target %r, falling back to hex", target)
        return rgb.hex
    return CODE_TEMPLATES[resolved](rgb)
