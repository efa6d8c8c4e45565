"""Component tree models for rich chat text."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from mc_common.errors import InvalidComponentError


class ClickAction(str, Enum):
    """Click actions understood by the chat format."""

    OPEN_URL = "open_url"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"
    OPEN_FILE = "open_file"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: Any) -> "ClickAction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return cls.UNRECOGNIZED


class HoverAction(str, Enum):
    """Hover actions understood by the chat format."""

    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: Any) -> "HoverAction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return cls.UNRECOGNIZED


class ClickEvent(BaseModel):
    """Action performed when the text is clicked."""

    action: ClickAction = ClickAction.UNRECOGNIZED
    value: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("action", mode="before")
    @classmethod
    def _coerce_action(cls, value: Any) -> ClickAction:
        return ClickAction.parse(value)

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> str:
        # change_page carries a page number on the wire
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class HoverEvent(BaseModel):
    """Tooltip attached to a component. ``value`` is opaque unless show_text."""

    action: HoverAction = HoverAction.UNRECOGNIZED
    value: Any = Field(default=None, validation_alias=AliasChoices("value", "contents"))

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("action", mode="before")
    @classmethod
    def _coerce_action(cls, value: Any) -> HoverAction:
        return HoverAction.parse(value)


class Component(BaseModel):
    """A node of the chat component tree.

    Style flags are tri-state: ``None`` inherits from the parent, ``True`` and
    ``False`` override it.
    """

    text: str | None = None
    extra: list[Union[Component, str]] | None = None
    color: str | None = None
    font: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = Field(
        default=None, validation_alias=AliasChoices("obfuscated", "obfuscation")
    )
    click_event: ClickEvent | None = Field(
        default=None, validation_alias=AliasChoices("clickEvent", "click_event")
    )
    hover_event: HoverEvent | None = Field(
        default=None, validation_alias=AliasChoices("hoverEvent", "hover_event")
    )

    model_config = ConfigDict(frozen=True, extra="ignore")


Component.model_rebuild()


def _validation_messages(exc: ValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return messages


def coerce_component(node: Any) -> Component:
    """Return *node* as a Component, accepting bare strings and mappings."""
    if isinstance(node, Component):
        return node
    if isinstance(node, str):
        return Component(text=node)
    if isinstance(node, Mapping):
        try:
            return Component.model_validate(node)
        except ValidationError as exc:
            raise InvalidComponentError(
                "Component failed validation",
                context={"errors": _validation_messages(exc)},
                cause=exc,
            ) from exc
    raise InvalidComponentError(
        f"Unsupported component node type: {type(node).__name__}",
        context={"type": type(node).__name__},
    )


def coerce_components(value: Any) -> list[Component]:
    """Normalize a single component or an ordered list of them."""
    if value is None:
        return []
    if isinstance(value, Sequence) and not isinstance(value, str):
        return [coerce_component(item) for item in value]
    return [coerce_component(value)]
