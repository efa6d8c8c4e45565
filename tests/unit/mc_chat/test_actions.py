import asyncio
import logging

import pytest

from mc_chat.actions import (
    NO_ACTION,
    ActionKind,
    ClickDispatcher,
    CopyIntent,
    OpenUrlIntent,
    UnsupportedIntent,
    classify_click,
    classify_hover,
)
from mc_chat.models import ClickAction, ClickEvent, Component, HoverEvent
from mc_common.errors import ClipboardError, InvalidComponentError

pytestmark = pytest.mark.unit_chat


class FakeClipboard:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[str] = []

    async def write_text(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("denied")
        self.writes.append(text)


@pytest.mark.parametrize(
    ("action", "kind"),
    [
        ("open_url", ActionKind.SUPPORTED),
        ("copy_to_clipboard", ActionKind.SUPPORTED_COPY),
        ("open_file", ActionKind.UNSUPPORTED_INDICATED),
        ("run_command", ActionKind.UNSUPPORTED_INDICATED),
        ("suggest_command", ActionKind.UNSUPPORTED_INDICATED),
        ("change_page", ActionKind.UNSUPPORTED_INDICATED),
        ("something_else", ActionKind.NONE),
    ],
)
def test_classify_click_is_total(action: str, kind: ActionKind) -> None:
    intent = classify_click(ClickEvent.model_validate({"action": action, "value": "v"}))
    assert intent.kind is kind


def test_classify_click_payloads() -> None:
    url = classify_click(ClickEvent(action="open_url", value="https://x.y"), link_target="_self")
    assert url == OpenUrlIntent(url="https://x.y", target="_self")
    assert url.inherit_style is True
    assert url.cursor == "pointer"

    copy = classify_click(ClickEvent(action="copy_to_clipboard", value="seed"))
    assert copy == CopyIntent(text="seed")

    unsupported = classify_click(ClickEvent(action="run_command", value="/help"))
    assert unsupported == UnsupportedIntent(action=ClickAction.RUN_COMMAND, value="/help")
    assert unsupported.cursor == "not-allowed"


def test_classify_click_absent() -> None:
    assert classify_click(None) is NO_ACTION
    assert NO_ACTION.cursor is None


def test_classify_hover_show_text_variants() -> None:
    assert classify_hover(HoverEvent(action="show_text", value="tip")).component == Component(text="tip")
    nested = classify_hover(HoverEvent(action="show_text", value={"text": "a", "bold": True}))
    assert nested.component.bold is True
    listed = classify_hover(HoverEvent(action="show_text", value=["a", {"text": "b"}]))
    assert [c.text for c in listed.component.extra] == ["a", "b"]


@pytest.mark.parametrize("action", ["show_item", "show_entity", "bogus"])
def test_classify_hover_other_actions_are_inert(action: str) -> None:
    assert classify_hover(HoverEvent.model_validate({"action": action, "value": {"id": "x"}})) is None
    assert classify_hover(None) is None


def test_classify_hover_rejects_opaque_show_text_value() -> None:
    with pytest.raises(InvalidComponentError):
        classify_hover(HoverEvent(action="show_text", value=12))


def test_dispatch_copy_writes_clipboard() -> None:
    clipboard = FakeClipboard()
    dispatcher = ClickDispatcher(clipboard)
    assert asyncio.run(dispatcher.dispatch(CopyIntent(text="/seed"))) is True
    assert clipboard.writes == ["/seed"]


def test_dispatch_copy_failure_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    dispatcher = ClickDispatcher(FakeClipboard(fail=True))
    with caplog.at_level(logging.ERROR, logger="mc_chat.actions"):
        assert asyncio.run(dispatcher.dispatch(CopyIntent(text="x"))) is False
    assert "Could not copy text to clipboard" in caplog.text


def test_dispatch_open_url_uses_opener() -> None:
    opened: list[tuple[str, str]] = []
    dispatcher = ClickDispatcher(FakeClipboard(), open_url=lambda url, target: opened.append((url, target)))
    assert asyncio.run(dispatcher.dispatch(OpenUrlIntent(url="https://x.y"))) is True
    assert opened == [("https://x.y", "_blank")]


def test_dispatch_unsupported_does_nothing() -> None:
    clipboard = FakeClipboard()
    opened: list[str] = []
    dispatcher = ClickDispatcher(clipboard, open_url=lambda url, target: opened.append(url))
    intent = classify_click(ClickEvent(action="run_command", value="/help"))
    assert asyncio.run(dispatcher.dispatch(intent)) is False
    assert asyncio.run(dispatcher.dispatch(NO_ACTION)) is False
    assert clipboard.writes == []
    assert opened == []
