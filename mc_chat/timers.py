"""One-shot timer schedulers used by animated text."""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingTimerScheduler:
    """Run each callback on a daemon ``threading.Timer``."""

    def __init__(self, *, name_prefix: str = "mcc-obfuscation") -> None:
        self._name_prefix = name_prefix

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.name = f"{self._name_prefix}-{id(timer):x}"
        timer.daemon = True
        timer.start()
        return timer


class AsyncioTimerScheduler:
    """Schedule callbacks on an asyncio event loop (single-threaded)."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)
