"""Top-level renderer that owns the current run tree."""

from __future__ import annotations

import logging
import random
from typing import Any, Protocol

from mc_chat.resolver import RunTree, TreeResolver
from mc_chat.settings import ChatSettings
from mc_chat.timers import TimerScheduler

logger = logging.getLogger(__name__)


class RenderSurface(Protocol):
    def paint(self, tree: RunTree) -> None: ...


class ChatRenderer:
    """Resolve components and hand each fresh tree to a surface.

    Re-rendering releases the previous tree first so its timers stop.
    """

    def __init__(
        self,
        surface: RenderSurface,
        settings: ChatSettings | None = None,
        *,
        scheduler: TimerScheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.surface = surface
        self.resolver = TreeResolver(settings, scheduler=scheduler, rng=rng)
        self.tree: RunTree | None = None

    @property
    def settings(self) -> ChatSettings:
        return self.resolver.settings

    def render(self, component: Any) -> RunTree:
        tree = self.resolver.resolve_all(component)
        self._release_current()
        self.tree = tree
        self.surface.paint(tree)
        return tree

    def close(self) -> None:
        self._release_current()

    def _release_current(self) -> None:
        if self.tree is not None:
            logger.debug("Releasing previous run tree (%d roots)", len(self.tree))
            self.tree.release()
            self.tree = None

    def __enter__(self) -> "ChatRenderer":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
