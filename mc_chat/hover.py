"""Hover tooltip packaging and placement policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from mc_chat.actions import classify_hover
from mc_chat.models import Component, HoverEvent
from mc_chat.style import DEFAULT_STYLE, ResolvedStyle

if TYPE_CHECKING:
    from mc_chat.resolver import ResolvedRun

HOVER_OFFSET = 15

ResolveFn = Callable[[Component, ResolvedStyle], "ResolvedRun"]


@dataclass(frozen=True)
class HoverIntent:
    """Resolved tooltip content plus how far from the pointer to draw it."""

    content: "ResolvedRun"
    offset: int = HOVER_OFFSET

    def placement(self) -> "HoverPlacement":
        return HoverPlacement(offset=self.offset)

    def release(self) -> None:
        self.content.release()


class HoverPlacement:
    """Pointer-driven tooltip position for one host run.

    Surfaces feed pointer events; the tooltip is visible only between enter
    and leave and follows the latest pointer position plus the offset.
    """

    def __init__(self, offset: int = HOVER_OFFSET) -> None:
        self.offset = offset
        self.visible = False
        self._pointer: tuple[int, int] | None = None

    def pointer_enter(self, x: int, y: int) -> None:
        self.visible = True
        self._pointer = (x, y)

    def pointer_move(self, x: int, y: int) -> None:
        self._pointer = (x, y)

    def pointer_leave(self) -> None:
        self.visible = False

    @property
    def position(self) -> tuple[int, int] | None:
        if not self.visible or self._pointer is None:
            return None
        x, y = self._pointer
        return x + self.offset, y + self.offset


class HoverRenderer:
    def __init__(self, *, enabled: bool = True, offset: int = HOVER_OFFSET) -> None:
        self.enabled = enabled
        self.offset = offset

    def render(self, event: HoverEvent | None, resolve: ResolveFn) -> HoverIntent | None:
        if not self.enabled:
            return None
        intent = classify_hover(event)
        if intent is None:
            return None
        # tooltip content starts from the root style, not the host's
        content = resolve(intent.component, DEFAULT_STYLE)
        return HoverIntent(content=content, offset=self.offset)
