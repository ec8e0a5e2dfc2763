# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Recently used colors.

History is owned by the caller. ``push_history`` never mutates its input;
it returns the next state.
"""

from __future__ import annotations

from typing import Iterable

from tinct.spaces.hexcodes import normalize_hex

HISTORY_LIMIT = 20


def push_history(
    history: Iterable[str],
    hex_color: str,
    limit: int = HISTORY_LIMIT,
) -> tuple[str, ...]:
    """
    Put ``hex_color`` at the front of ``history``.

    An existing occurrence moves to the front instead of being repeated,
    and the result is capped at ``limit`` entries. Unparsable input leaves
    the history as it was.

    Example:
        >>> push_history(("#00ff00", "#ff0000"), "#FF0000")
        ('#ff0000', '#00ff00')
    """
    current = tuple(history)
    color = normalize_hex(hex_color)
    if color is None or limit <= 0:
        return current[:max(limit, 0)]
    rest = tuple(c for c in current if normalize_hex(c) != color)
    return ((color,) + rest)[:limit]
