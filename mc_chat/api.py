"""Public API surface for mc_chat."""

from mc_chat.actions import (
    ActionIntent,
    ActionKind,
    ClickDispatcher,
    Clipboard,
    CopyIntent,
    NO_ACTION,
    NoAction,
    OpenUrlIntent,
    ShowTextIntent,
    UnsupportedIntent,
    classify_click,
    classify_hover,
)
from mc_chat.colors import NAMED_COLORS, resolve_color
from mc_chat.hover import HOVER_OFFSET, HoverIntent, HoverPlacement, HoverRenderer
from mc_chat.models import (
    ClickAction,
    ClickEvent,
    Component,
    HoverAction,
    HoverEvent,
    coerce_component,
    coerce_components,
)
from mc_chat.obfuscation import OBFUSCATION_ALPHABET, ObfuscationHandle, ObfuscationState, scramble
from mc_chat.renderer import ChatRenderer, RenderSurface
from mc_chat.resolver import ResolvedRun, RunTree, TreeResolver, resolve_component
from mc_chat.settings import ChatSettings, load_settings
from mc_chat.style import DEFAULT_STYLE, ResolvedStyle, merge_style
from mc_chat.timers import AsyncioTimerScheduler, ThreadingTimerScheduler, TimerScheduler

__all__ = [
    "ActionIntent",
    "ActionKind",
    "AsyncioTimerScheduler",
    "ChatRenderer",
    "ChatSettings",
    "ClickAction",
    "ClickDispatcher",
    "ClickEvent",
    "Clipboard",
    "Component",
    "CopyIntent",
    "DEFAULT_STYLE",
    "HOVER_OFFSET",
    "HoverAction",
    "HoverEvent",
    "HoverIntent",
    "HoverPlacement",
    "HoverRenderer",
    "NAMED_COLORS",
    "NO_ACTION",
    "NoAction",
    "OBFUSCATION_ALPHABET",
    "ObfuscationHandle",
    "ObfuscationState",
    "OpenUrlIntent",
    "RenderSurface",
    "ResolvedRun",
    "ResolvedStyle",
    "RunTree",
    "ShowTextIntent",
    "ThreadingTimerScheduler",
    "TimerScheduler",
    "TreeResolver",
    "UnsupportedIntent",
    "classify_click",
    "classify_hover",
    "coerce_component",
    "coerce_components",
    "load_settings",
    "merge_style",
    "resolve_color",
    "resolve_component",
    "scramble",
]
