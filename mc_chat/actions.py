"""Click and hover action classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Mapping, Protocol, Union

from mc_chat.models import ClickAction, ClickEvent, Component, HoverAction, HoverEvent, coerce_component
from mc_common.errors import InvalidComponentError

logger = logging.getLogger(__name__)

DEFAULT_LINK_TARGET = "_blank"

_INDICATED_ONLY = {
    ClickAction.OPEN_FILE,
    ClickAction.RUN_COMMAND,
    ClickAction.SUGGEST_COMMAND,
    ClickAction.CHANGE_PAGE,
}


class ActionKind(str, Enum):
    """How a surface should treat a run's click action."""

    SUPPORTED = "supported"
    SUPPORTED_COPY = "supported_copy"
    UNSUPPORTED_INDICATED = "unsupported_indicated"
    NONE = "none"


@dataclass(frozen=True)
class OpenUrlIntent:
    """Navigate to ``url``; the link keeps the surrounding color and decoration."""

    url: str
    target: str = DEFAULT_LINK_TARGET
    inherit_style: bool = True

    kind: ClassVar[ActionKind] = ActionKind.SUPPORTED
    cursor: ClassVar[str | None] = "pointer"


@dataclass(frozen=True)
class CopyIntent:
    """Place ``text`` on the system clipboard."""

    text: str

    kind: ClassVar[ActionKind] = ActionKind.SUPPORTED_COPY
    cursor: ClassVar[str | None] = "pointer"


@dataclass(frozen=True)
class UnsupportedIntent:
    """A valid action that cannot be honoured here; shown as not allowed."""

    action: ClickAction
    value: str = ""

    kind: ClassVar[ActionKind] = ActionKind.UNSUPPORTED_INDICATED
    cursor: ClassVar[str | None] = "not-allowed"


@dataclass(frozen=True)
class NoAction:
    kind: ClassVar[ActionKind] = ActionKind.NONE
    cursor: ClassVar[str | None] = None


NO_ACTION = NoAction()

ActionIntent = Union[OpenUrlIntent, CopyIntent, UnsupportedIntent, NoAction]


@dataclass(frozen=True)
class ShowTextIntent:
    """Hover tooltip content, not yet resolved."""

    component: Component


def classify_click(
    event: ClickEvent | None, link_target: str = DEFAULT_LINK_TARGET
) -> ActionIntent:
    if event is None:
        return NO_ACTION
    action = event.action
    if action is ClickAction.OPEN_URL:
        return OpenUrlIntent(url=event.value, target=link_target)
    if action is ClickAction.COPY_TO_CLIPBOARD:
        return CopyIntent(text=event.value)
    if action in _INDICATED_ONLY:
        return UnsupportedIntent(action=action, value=event.value)
    return NO_ACTION


def _hover_component(value: Any) -> Component:
    if value is None:
        return Component(text="")
    if isinstance(value, (list, tuple)):
        return Component(text="", extra=[coerce_component(item) for item in value])
    if isinstance(value, (str, Mapping, Component)):
        return coerce_component(value)
    raise InvalidComponentError(
        "show_text hover value must be a component, string or list",
        context={"type": type(value).__name__},
    )


def classify_hover(event: HoverEvent | None) -> ShowTextIntent | None:
    """Only show_text produces a tooltip; other hover actions are inert."""
    if event is None or event.action is not HoverAction.SHOW_TEXT:
        return None
    return ShowTextIntent(component=_hover_component(event.value))


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


UrlOpener = Callable[[str, str], Any]


class ClickDispatcher:
    """Carry out a classified click using the surface's collaborators."""

    def __init__(self, clipboard: Clipboard, open_url: UrlOpener | None = None) -> None:
        self._clipboard = clipboard
        self._open_url = open_url

    async def dispatch(self, intent: ActionIntent) -> bool:
        """Return True when the click had an effect."""
        if isinstance(intent, OpenUrlIntent):
            if self._open_url is None:
                logger.debug("No URL opener configured; ignoring %s", intent.url)
                return False
            self._open_url(intent.url, intent.target)
            return True
        if isinstance(intent, CopyIntent):
            try:
                await self._clipboard.write_text(intent.text)
            except Exception:
                logger.error("Could not copy text to clipboard", exc_info=True)
                return False
            return True
        if isinstance(intent, UnsupportedIntent):
            logger.debug("Click action %s is not supported here", intent.action.value)
        return False
