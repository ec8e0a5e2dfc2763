# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Free-form color text parsing.

Accepted syntaxes (case-insensitive, surrounding whitespace ignored):
- ``#3b82f6`` / ``3b82f6``
- ``rgb(59, 130, 246)``
- ``hsl(217, 91%, 60%)`` (percent signs optional)

Anything else yields None so a live text field can ignore partial input
and keep its last valid color.
"""

from __future__ import annotations

import re
from typing import Optional

from tinct.spaces.cylindrical import hsl_to_rgb
from tinct.spaces.hexcodes import rgb_to_hex


_HEX6_RE = re.compile(r"^#?[a-f0-9]{6}$", re.IGNORECASE)
_RGB_RE = re.compile(
    r"rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE
)
_HSL_RE = re.compile(
    r"hsl\s*\(\s*(\d+)\s*,\s*(\d+)%?\s*,\s*(\d+)%?\s*\)", re.IGNORECASE
)


def parse_color(text: str) -> Optional[str]:
    """
    Normalize color text to a lowercase ``#rrggbb`` code.

    Args:
        text: User-typed color text

    Returns:
        Hex code, or None when the text matches no supported syntax
    """
    if not text:
        return None
    candidate = text.strip()

    if _HEX6_RE.match(candidate):
        return "#" + candidate.lstrip("#").lower()

    m = _RGB_RE.search(candidate)
    if m:
        return rgb_to_hex(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = _HSL_RE.search(candidate)
    if m:
        return hsl_to_rgb(int(m.group(1)), int(m.group(2)), int(m.group(3))).hex

    return None
