"""Recording surface used in tests and non-interactive runs."""

from __future__ import annotations

from dataclasses import dataclass, field

from mc_chat.actions import ActionIntent, ClickDispatcher
from mc_chat.hover import HoverPlacement
from mc_chat.resolver import RunTree


@dataclass
class RecordedClick:
    key: str
    intent: ActionIntent
    handled: bool


@dataclass
class HeadlessSurface:
    dispatcher: ClickDispatcher | None = None
    watch_obfuscation: bool = False
    painted: list[RunTree] = field(default_factory=list)
    frames: list[str] = field(default_factory=list)
    clicks: list[RecordedClick] = field(default_factory=list)

    @property
    def current(self) -> RunTree | None:
        return self.painted[-1] if self.painted else None

    def paint(self, tree: RunTree) -> None:
        self.painted.append(tree)
        self.frames.append(tree.plain_text())
        if not self.watch_obfuscation:
            return
        for run in tree.flatten():
            if run.obfuscation is not None:
                run.obfuscation.add_listener(lambda _value, t=tree: self._record_frame(t))

    def _record_frame(self, tree: RunTree) -> None:
        if tree is self.current:
            self.frames.append(tree.plain_text())

    async def click(self, key: str) -> RecordedClick:
        tree = self.current
        run = tree.find(key) if tree is not None else None
        if run is None:
            raise KeyError(key)
        handled = False
        if self.dispatcher is not None:
            handled = await self.dispatcher.dispatch(run.action)
        record = RecordedClick(key=key, intent=run.action, handled=handled)
        self.clicks.append(record)
        return record

    def hover(self, key: str, x: int, y: int) -> HoverPlacement | None:
        """Simulate the pointer entering run *key* at (x, y)."""
        tree = self.current
        run = tree.find(key) if tree is not None else None
        if run is None or run.hover is None:
            return None
        placement = run.hover.placement()
        placement.pointer_enter(x, y)
        return placement
