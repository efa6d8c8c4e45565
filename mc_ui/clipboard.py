"""System clipboard access through platform command-line tools."""

from __future__ import annotations

import asyncio
import logging
import shutil
from typing import Sequence

from mc_common.errors import ClipboardError

logger = logging.getLogger(__name__)

DEFAULT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class SystemClipboard:
    """Pipe text into the first clipboard tool found on PATH."""

    def __init__(self, commands: Sequence[Sequence[str]] = DEFAULT_COMMANDS) -> None:
        self.commands = [tuple(cmd) for cmd in commands]

    def resolve_command(self) -> tuple[str, ...] | None:
        for cmd in self.commands:
            if shutil.which(cmd[0]):
                return cmd
        return None

    async def write_text(self, text: str) -> None:
        cmd = self.resolve_command()
        if cmd is None:
            raise ClipboardError(
                "No clipboard tool available",
                context={"candidates": [c[0] for c in self.commands]},
            )
        logger.debug("Writing %d characters to clipboard via %s", len(text), cmd[0])
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
            _, stderr = await process.communicate(text.encode("utf-8"))
        except OSError as exc:
            raise ClipboardError(
                "Failed to launch clipboard tool", context={"command": cmd}, cause=exc
            ) from exc
        if process.returncode != 0:
            raise ClipboardError(
                "Clipboard tool exited with an error",
                context={
                    "command": cmd,
                    "returncode": process.returncode,
                    "stderr": (stderr or b"").decode("utf-8", "replace").strip(),
                },
            )
