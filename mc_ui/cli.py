"""
Command-line interface for mcchat.

Renders chat component JSON files to the terminal and inspects how each run
resolves (style, click action, hover tooltip).
"""

from __future__ import annotations

import asyncio
import json
import time
import webbrowser
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.text import Text
from rich.tree import Tree

from mc_chat.actions import ActionKind, ClickDispatcher
from mc_chat.renderer import ChatRenderer
from mc_chat.resolver import ResolvedRun, RunTree, TreeResolver
from mc_chat.settings import ChatSettings, load_settings
from mc_common.errors import MCError
from mc_common.logging import configure_logging
from mc_ui.clipboard import SystemClipboard
from mc_ui.surfaces.rich_surface import LiveRunTree, RichSurface, run_style

app = typer.Typer(help="Render Minecraft-style chat components in the terminal.", no_args_is_help=True)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✖ {message}[/red]")
    return typer.Exit(1)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise _fail(f"Component file not found: {path}")
    except json.JSONDecodeError as exc:
        raise _fail(f"{path} is not valid JSON: {exc}")


def _settings(
    config: Optional[Path],
    interval: Optional[int],
    no_timer: bool,
    no_hover: bool,
) -> ChatSettings:
    overrides: dict[str, Any] = {}
    if interval is not None:
        overrides["obfuscation_interval_ms"] = interval
    if no_timer:
        overrides["obfuscation_interval_ms"] = None
    if no_hover:
        overrides["hover_enabled"] = False
    try:
        return load_settings(config, **overrides)
    except MCError as exc:
        raise _fail(str(exc))


def _open_url(url: str, target: str) -> None:
    webbrowser.open(url, new=2 if target == "_blank" else 0)


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options."""
    configure_logging(debug=debug, force=True)


@app.command("render")
def render_command(
    path: Path = typer.Argument(..., help="JSON file holding a component or a list of components."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file."),
    interval: Optional[int] = typer.Option(None, "--interval", min=1, help="Obfuscation interval in ms."),
    no_timer: bool = typer.Option(False, "--no-obfuscation-timer", help="Scramble obfuscated text once only."),
    no_hover: bool = typer.Option(False, "--no-hover", help="Skip hover tooltips."),
    show_hover: bool = typer.Option(False, "--show-hover", help="Print tooltip content under the text."),
    animate: float = typer.Option(0.0, "--animate", min=0.0, help="Seconds to animate obfuscated text."),
) -> None:
    """Render a component file with its resolved styles."""
    data = _load_json(path)
    settings = _settings(config, interval, no_timer, no_hover)
    if animate:
        _animate(data, settings, animate)
        return
    # a single static frame still shows obfuscated text scrambled
    settings = settings.model_copy(update={"obfuscation_interval_ms": None})
    surface = RichSurface(console, show_hover=show_hover)
    try:
        with ChatRenderer(surface, settings) as renderer:
            renderer.render(data)
    except MCError as exc:
        raise _fail(str(exc))


def _animate(data: Any, settings: ChatSettings, seconds: float) -> None:
    resolver = TreeResolver(settings)
    try:
        tree = resolver.resolve_all(data)
    except MCError as exc:
        raise _fail(str(exc))
    with tree, Live(LiveRunTree(tree), console=console, refresh_per_second=20):
        time.sleep(seconds)


def _describe(run: ResolvedRun) -> Text:
    label = Text(f"[{run.dotted_key}] ", style="dim")
    if run.content:
        label.append(run.content, style=run_style(run))
    else:
        label.append("(empty)", style="dim italic")
    flags = [
        name
        for name in ("bold", "italic", "underlined", "strikethrough", "obfuscated")
        if getattr(run.style, name)
    ]
    details = []
    if flags:
        details.append(",".join(flags))
    if run.style.color:
        details.append(run.style.color)
    if run.action.kind is not ActionKind.NONE:
        details.append(f"click={run.action.kind.value}")
    if details:
        label.append("  " + " ".join(details), style="cyan")
    return label


def _add_branch(parent: Tree, run: ResolvedRun) -> None:
    branch = parent.add(_describe(run))
    if run.hover is not None:
        hover_branch = branch.add(Text("hover", style="magenta"))
        _add_branch(hover_branch, run.hover.content)
    for child in run.children:
        _add_branch(branch, child)


def build_inspect_tree(tree: RunTree, title: str) -> Tree:
    root = Tree(Text(title, style="bold blue"))
    for run in tree:
        _add_branch(root, run)
    return root


@app.command("inspect")
def inspect_command(
    path: Path = typer.Argument(..., help="JSON file holding a component or a list of components."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file."),
    no_hover: bool = typer.Option(False, "--no-hover", help="Skip hover tooltips."),
) -> None:
    """Show the resolved run tree with styles and actions."""
    data = _load_json(path)
    settings = _settings(config, None, True, no_hover)
    try:
        tree = TreeResolver(settings).resolve_all(data)
    except MCError as exc:
        raise _fail(str(exc))
    with tree:
        console.print(build_inspect_tree(tree, str(path)))


@app.command("click")
def click_command(
    path: Path = typer.Argument(..., help="JSON file holding a component or a list of components."),
    key: str = typer.Argument(..., help="Dotted run key as shown by 'inspect', e.g. 0.1"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file."),
) -> None:
    """Perform the click action of one run."""
    data = _load_json(path)
    settings = _settings(config, None, True, False)
    try:
        tree = TreeResolver(settings).resolve_all(data)
    except MCError as exc:
        raise _fail(str(exc))
    with tree:
        run = tree.find(key)
        if run is None:
            raise _fail(f"No run with key {key}")
        dispatcher = ClickDispatcher(SystemClipboard(), open_url=_open_url)
        handled = asyncio.run(dispatcher.dispatch(run.action))
    kind = run.action.kind
    if handled:
        console.print(f"[green]✔ {kind.value}[/green]")
    elif kind is ActionKind.UNSUPPORTED_INDICATED:
        console.print(f"[yellow]⚠ Action {run.action.action.value} is not available here[/yellow]")
    elif kind is ActionKind.NONE:
        console.print("[dim]No click action on this run[/dim]")
    elif kind is ActionKind.SUPPORTED_COPY:
        # clipboard failures are logged by the dispatcher and stay silent here
        return
    else:
        raise _fail(f"Click action {kind.value} failed")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
