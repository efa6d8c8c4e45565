"""Style inheritance for the component tree."""

from __future__ import annotations

from dataclasses import dataclass

from mc_chat.colors import resolve_color
from mc_chat.models import Component

_FLAGS = ("bold", "italic", "underlined", "strikethrough", "obfuscated")


@dataclass(frozen=True)
class ResolvedStyle:
    """Fully determined style of a run; carries no inherit markers."""

    bold: bool = False
    italic: bool = False
    underlined: bool = False
    strikethrough: bool = False
    obfuscated: bool = False
    color: str | None = None
    font: str | None = None

    @property
    def decorations(self) -> tuple[str, ...]:
        """Text decorations applied together, in CSS keyword form."""
        parts: list[str] = []
        if self.underlined:
            parts.append("underline")
        if self.strikethrough:
            parts.append("line-through")
        return tuple(parts)


DEFAULT_STYLE = ResolvedStyle()


def merge_style(parent: ResolvedStyle, node: Component) -> ResolvedStyle:
    """Apply *node*'s explicit overrides on top of the *parent* style."""
    values = {}
    for flag in _FLAGS:
        own = getattr(node, flag)
        values[flag] = getattr(parent, flag) if own is None else bool(own)
    color = resolve_color(node.color)
    return ResolvedStyle(
        color=parent.color if color is None else color,
        font=parent.font if node.font is None else node.font,
        **values,
    )
