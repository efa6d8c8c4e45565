"""Depth-first resolution of a component tree into styled runs."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from mc_chat.actions import ActionIntent, classify_click
from mc_chat.hover import HoverIntent, HoverRenderer
from mc_chat.models import Component, coerce_component, coerce_components
from mc_chat.obfuscation import ObfuscationHandle
from mc_chat.settings import ChatSettings
from mc_chat.style import DEFAULT_STYLE, ResolvedStyle, merge_style
from mc_chat.timers import ThreadingTimerScheduler, TimerScheduler
from mc_common.errors import InvalidComponentError

logger = logging.getLogger(__name__)

RunKey = tuple[int, ...]


@dataclass(frozen=True)
class ResolvedRun:
    """A styled piece of text with its interaction intents and child runs."""

    key: RunKey
    style: ResolvedStyle
    text: str | None
    action: ActionIntent
    hover: HoverIntent | None = None
    obfuscation: ObfuscationHandle | None = None
    children: tuple["ResolvedRun", ...] = ()

    @property
    def content(self) -> str:
        if self.obfuscation is not None:
            return self.obfuscation.value
        return self.text or ""

    @property
    def dotted_key(self) -> str:
        return ".".join(str(part) for part in self.key)

    def walk(self) -> Iterator["ResolvedRun"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def release(self) -> None:
        """Stop every animation owned by this run and its descendants."""
        for run in self.walk():
            if run.obfuscation is not None:
                run.obfuscation.release()
            if run.hover is not None:
                run.hover.release()


class RunTree:
    """Runs produced by one resolution pass."""

    def __init__(self, runs: Sequence[ResolvedRun]) -> None:
        self.runs: tuple[ResolvedRun, ...] = tuple(runs)
        self.released = False

    def __iter__(self) -> Iterator[ResolvedRun]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    def flatten(self) -> list[ResolvedRun]:
        return [run for root in self.runs for run in root.walk()]

    def find(self, key: RunKey | str) -> ResolvedRun | None:
        if isinstance(key, str):
            key = tuple(int(part) for part in key.split(".") if part)
        for run in self.flatten():
            if run.key == key:
                return run
        return None

    def plain_text(self) -> str:
        return "".join(run.content for run in self.flatten())

    def release(self) -> None:
        if self.released:
            return
        self.released = True
        for run in self.runs:
            run.release()

    def __enter__(self) -> "RunTree":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.release()


class TreeResolver:
    """Resolve components into :class:`ResolvedRun` trees.

    Every call builds a fresh tree; runs are never reused between passes.
    """

    def __init__(
        self,
        settings: ChatSettings | None = None,
        *,
        scheduler: TimerScheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or ChatSettings()
        self.scheduler = scheduler or ThreadingTimerScheduler()
        self.rng = rng
        self.hover_renderer = HoverRenderer(enabled=self.settings.hover_enabled)

    def resolve_all(self, value: Any) -> RunTree:
        components = coerce_components(value)
        runs: list[ResolvedRun] = []
        try:
            for index, component in enumerate(components):
                runs.append(self.resolve(component, DEFAULT_STYLE, (index,)))
        except Exception:
            RunTree(runs).release()
            raise
        logger.debug("Resolved %d root component(s)", len(runs))
        return RunTree(runs)

    def resolve(
        self,
        node: Component | str | Any,
        inherited: ResolvedStyle = DEFAULT_STYLE,
        key: RunKey = (0,),
    ) -> ResolvedRun:
        component = coerce_component(node)
        style = merge_style(inherited, component)
        action = classify_click(component.click_event, self.settings.link_target)
        hover = self.hover_renderer.render(component.hover_event, self._resolve_hover_root)

        children: list[ResolvedRun] = []
        obfuscation: ObfuscationHandle | None = None
        try:
            obfuscation = self._bind_text(component.text, style)
            for index, child in enumerate(self._extra_of(component)):
                children.append(self.resolve(child, style, key + (index,)))
        except Exception:
            # do not leak timers from a half-built subtree
            if obfuscation is not None:
                obfuscation.release()
            for child_run in children:
                child_run.release()
            if hover is not None:
                hover.release()
            raise

        return ResolvedRun(
            key=key,
            style=style,
            text=component.text,
            action=action,
            hover=hover,
            obfuscation=obfuscation,
            children=tuple(children),
        )

    def _resolve_hover_root(self, component: Component, style: ResolvedStyle) -> ResolvedRun:
        return self.resolve(component, style, (0,))

    def _bind_text(self, text: str | None, style: ResolvedStyle) -> ObfuscationHandle | None:
        if not text or not style.obfuscated:
            return None
        handle = ObfuscationHandle(
            text,
            interval_ms=self.settings.obfuscation_interval_ms,
            scheduler=self.scheduler,
            rng=self.rng,
        )
        return handle.start()

    @staticmethod
    def _extra_of(component: Component) -> Sequence[Any]:
        extra = component.extra
        if extra is None:
            return ()
        # validation already enforces a list; this catches model_construct() input
        if isinstance(extra, (str, bytes)) or not isinstance(extra, Sequence):
            raise InvalidComponentError(
                "Component 'extra' must be an ordered sequence",
                context={"type": type(extra).__name__},
            )
        return extra


def resolve_component(
    value: Any,
    settings: ChatSettings | None = None,
    *,
    scheduler: TimerScheduler | None = None,
    rng: random.Random | None = None,
) -> RunTree:
    """Resolve a component or list of components in one call."""
    return TreeResolver(settings, scheduler=scheduler, rng=rng).resolve_all(value)
