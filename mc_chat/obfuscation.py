"""Scrambled-text animation for obfuscated components.

Each obfuscated text node owns an :class:`ObfuscationHandle`. With an
interval configured the handle re-arms a one-shot timer after every scramble,
so the animation runs until the handle is released. Without an interval the
text is scrambled exactly once when the handle starts.
"""

from __future__ import annotations

import logging
import random
import threading
from enum import Enum
from typing import Callable

from mc_chat.timers import TimerHandle, TimerScheduler

logger = logging.getLogger(__name__)

OBFUSCATION_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

Listener = Callable[[str], None]
_Notification = tuple[str, list[Listener]]


def scramble(text: str, rng: random.Random | None = None) -> str:
    """Return a same-length string drawn uniformly from the alphabet."""
    chooser = rng or random
    return "".join(chooser.choice(OBFUSCATION_ALPHABET) for _ in range(len(text)))


class ObfuscationState(str, Enum):
    PENDING = "pending"
    SCRAMBLING = "scrambling"
    RELEASED = "released"


class ObfuscationHandle:
    """Live scrambled value of one text node."""

    def __init__(
        self,
        original: str,
        *,
        interval_ms: int | None,
        scheduler: TimerScheduler,
        rng: random.Random | None = None,
    ) -> None:
        self.original = original
        self.interval_ms = interval_ms
        self._scheduler = scheduler
        self._rng = rng
        self._value = original
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()
        self.state = ObfuscationState.PENDING
        self.scramble_count = 0

    @property
    def value(self) -> str:
        with self._lock:
            return self._value

    @property
    def active(self) -> bool:
        with self._lock:
            return self._timer is not None

    def add_listener(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def start(self) -> "ObfuscationHandle":
        with self._lock:
            if self.state is not ObfuscationState.PENDING:
                return self
            self.state = ObfuscationState.SCRAMBLING
            pending = self._enter()
        self._notify(pending)
        return self

    def restart(self) -> None:
        """Re-enter scrambling, e.g. to scramble again with the timer disabled."""
        with self._lock:
            if self.state is ObfuscationState.RELEASED:
                return
            self._cancel_timer()
            self.state = ObfuscationState.SCRAMBLING
            pending = self._enter()
        self._notify(pending)

    def release(self) -> None:
        with self._lock:
            if self.state is ObfuscationState.RELEASED:
                return
            self.state = ObfuscationState.RELEASED
            self._cancel_timer()
            self._listeners.clear()

    def _enter(self) -> _Notification | None:
        if self.interval_ms is None:
            return self._scramble()
        self._arm()
        return None

    def _arm(self) -> None:
        assert self.interval_ms is not None
        generation = self._generation
        self._timer = self._scheduler.call_later(
            self.interval_ms / 1000.0, lambda: self._fire(generation)
        )

    def _cancel_timer(self) -> None:
        # a timer that already fired may still be waiting for the lock
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if self.state is not ObfuscationState.SCRAMBLING or generation != self._generation:
                return
            self._timer = None
            pending = self._scramble()
            if self.interval_ms is not None:
                self._arm()
        self._notify(pending)

    def _scramble(self) -> _Notification:
        self._value = scramble(self._value, self._rng)
        self.scramble_count += 1
        return self._value, list(self._listeners)

    @staticmethod
    def _notify(pending: _Notification | None) -> None:
        # listeners run outside the lock; they may read other handles
        if pending is None:
            return
        value, listeners = pending
        for listener in listeners:
            try:
                listener(value)
            except Exception:
                logger.warning("Obfuscation listener failed", exc_info=True)
