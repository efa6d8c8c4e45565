import pytest

from mc_chat.renderer import ChatRenderer
from mc_chat.settings import ChatSettings

pytestmark = pytest.mark.unit_chat


class RecordingSurface:
    def __init__(self) -> None:
        self.trees = []

    def paint(self, tree) -> None:
        self.trees.append(tree)


def test_render_hands_fresh_tree_to_surface(manual_scheduler) -> None:
    surface = RecordingSurface()
    renderer = ChatRenderer(surface, scheduler=manual_scheduler)
    tree = renderer.render({"text": "hi"})
    assert surface.trees == [tree]
    assert renderer.tree is tree
    assert renderer.settings == ChatSettings()


def test_rerender_releases_previous_tree(manual_scheduler, rng) -> None:
    surface = RecordingSurface()
    renderer = ChatRenderer(surface, scheduler=manual_scheduler, rng=rng)
    first = renderer.render({"text": "abc", "obfuscated": True})
    first_timer = manual_scheduler.pending[0]
    second = renderer.render({"text": "abc", "obfuscated": True})
    assert first.released
    assert first_timer.cancelled
    assert not second.released
    assert len(manual_scheduler.pending) == 1


def test_close_and_context_manager(manual_scheduler) -> None:
    surface = RecordingSurface()
    with ChatRenderer(surface, scheduler=manual_scheduler) as renderer:
        tree = renderer.render([{"text": "a", "obfuscated": True}])
    assert tree.released
    assert renderer.tree is None
    assert manual_scheduler.pending == []
