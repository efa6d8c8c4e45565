"""Color token resolution for chat components."""

from __future__ import annotations

import re
from functools import lru_cache

NAMED_COLORS: dict[str, str] = {
    "black": "#000",
    "dark_blue": "#00A",
    "dark_green": "#0A0",
    "dark_aqua": "#0AA",
    "dark_red": "#A00",
    "dark_purple": "#A0A",
    "gold": "#FA0",
    "gray": "#AAA",
    "dark_gray": "#555",
    "blue": "#55F",
    "green": "#5F5",
    "aqua": "#5FF",
    "red": "#F55",
    "light_purple": "#F5F",
    "yellow": "#FF5",
    "white": "#FFF",
}

_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")


@lru_cache(maxsize=256)
def resolve_color(token: str | None) -> str | None:
    """Map a named or ``#RRGGBB`` token to a display color.

    Unknown names and malformed hex values resolve to None so the inherited
    color stays in effect.
    """
    if not token:
        return None
    named = NAMED_COLORS.get(token)
    if named is not None:
        return named
    if _HEX_RE.fullmatch(token):
        return token
    return None


def to_rich_color(display: str | None) -> str | None:
    """Expand ``#RGB`` shorthand into the ``#RRGGBB`` form Rich parses."""
    if display is None:
        return None
    if len(display) == 4:
        return "#" + "".join(ch * 2 for ch in display[1:]).lower()
    return display.lower()
