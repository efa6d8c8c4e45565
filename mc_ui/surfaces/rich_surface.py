"""Rich-based console surface for resolved runs."""

from __future__ import annotations

import sys
from typing import IO, Any

from rich.console import Console
from rich.style import Style
from rich.text import Text

from mc_chat.actions import OpenUrlIntent
from mc_chat.colors import to_rich_color
from mc_chat.resolver import ResolvedRun, RunTree


def run_style(run: ResolvedRun) -> Style:
    """Translate a run's resolved style and click intent into a Rich style."""
    style = run.style
    action = run.action
    meta: dict[str, Any] = {"key": run.dotted_key}
    if action.cursor:
        meta["cursor"] = action.cursor
    return Style(
        bold=style.bold,
        italic=style.italic,
        underline=style.underlined,
        strike=style.strikethrough,
        color=to_rich_color(style.color),
        link=action.url if isinstance(action, OpenUrlIntent) else None,
        meta=meta,
    )


def append_run(text: Text, run: ResolvedRun) -> None:
    content = run.content
    if content:
        text.append(content, style=run_style(run))
    for child in run.children:
        append_run(text, child)


def tree_text(tree: RunTree) -> Text:
    text = Text(no_wrap=False)
    for run in tree:
        append_run(text, run)
    return text


class LiveRunTree:
    """Renderable that re-reads obfuscated values on every refresh."""

    def __init__(self, tree: RunTree) -> None:
        self.tree = tree

    def __rich__(self) -> Text:
        return tree_text(self.tree)


class RichSurface:
    """Print run trees to a Rich console."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        stream: IO[str] | None = None,
        show_hover: bool = False,
    ) -> None:
        self.console = console or Console(file=stream or sys.stdout, highlight=False, soft_wrap=True)
        self.show_hover = show_hover
        self.last_tree: RunTree | None = None

    def paint(self, tree: RunTree) -> None:
        self.last_tree = tree
        self.console.print(tree_text(tree))
        if self.show_hover:
            for run in tree.flatten():
                hover = self.hover_text(run)
                if hover is not None:
                    self.console.print(Text.assemble((f"  [{run.dotted_key}] ", "dim"), hover))

    def to_text(self, tree: RunTree) -> Text:
        return tree_text(tree)

    def hover_text(self, run: ResolvedRun) -> Text | None:
        if run.hover is None:
            return None
        text = Text()
        append_run(text, run.hover.content)
        return text
