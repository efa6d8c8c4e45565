"""Stable UI API surface."""

from __future__ import annotations

from mc_ui.cli import app, main
from mc_ui.clipboard import SystemClipboard
from mc_ui.surfaces import HeadlessSurface, LiveRunTree, RecordedClick, RichSurface

__all__ = [
    "app",
    "main",
    "HeadlessSurface",
    "LiveRunTree",
    "RecordedClick",
    "RichSurface",
    "SystemClipboard",
]
