import threading
import time

import pytest

from mc_chat.renderer import ChatRenderer
from mc_chat.settings import ChatSettings
from mc_chat.timers import ThreadingTimerScheduler
from mc_ui.surfaces.headless import HeadlessSurface

pytestmark = [pytest.mark.unit_ui, pytest.mark.slow]

OBFUSCATED_LINE = {
    "text": "",
    "extra": [{"text": f"secret{i}", "obfuscated": True} for i in range(8)],
}


def _wait_for(predicate, timeout: float = 3.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_watched_runs_keep_animating_on_timer_threads() -> None:
    surface = HeadlessSurface(watch_obfuscation=True)
    settings = ChatSettings(obfuscation_interval_ms=1)
    renderer = ChatRenderer(surface, settings, scheduler=ThreadingTimerScheduler())
    tree = renderer.render(OBFUSCATED_LINE)
    try:
        assert _wait_for(lambda: len(surface.frames) > 20)
        seen = len(surface.frames)
        assert _wait_for(lambda: len(surface.frames) > seen)

        result: list[str] = []
        reader = threading.Thread(target=lambda: result.append(tree.plain_text()), daemon=True)
        reader.start()
        reader.join(2.0)
        assert not reader.is_alive()
        assert len(result[0]) == sum(len(f"secret{i}") for i in range(8))
    finally:
        tree.release()


def test_release_stops_real_timers() -> None:
    surface = HeadlessSurface(watch_obfuscation=True)
    settings = ChatSettings(obfuscation_interval_ms=5)
    tree = ChatRenderer(surface, settings, scheduler=ThreadingTimerScheduler()).render(OBFUSCATED_LINE)
    assert _wait_for(lambda: len(surface.frames) > 1)
    tree.release()
    time.sleep(0.05)
    frozen = [run.obfuscation.scramble_count for run in tree.flatten() if run.obfuscation is not None]
    time.sleep(0.1)
    after = [run.obfuscation.scramble_count for run in tree.flatten() if run.obfuscation is not None]
    assert frozen == after
    assert len(frozen) == 8
