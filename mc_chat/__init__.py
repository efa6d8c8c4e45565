"""Resolution of rich chat components into styled, interactive runs."""

from mc_chat.api import ChatRenderer, ChatSettings, Component, ResolvedRun, RunTree, resolve_component

__all__ = ["ChatRenderer", "ChatSettings", "Component", "ResolvedRun", "RunTree", "resolve_component"]
