"""Rendering configuration for chat components."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from mc_common.config.env import parse_bool_env, parse_interval_env
from mc_common.errors import ConfigurationError

DEFAULT_OBFUSCATION_INTERVAL_MS = 50


class ChatSettings(BaseModel):
    """Options controlling how a component tree is resolved."""

    obfuscation_interval_ms: int | None = Field(
        default=DEFAULT_OBFUSCATION_INTERVAL_MS,
        gt=0,
        description="Scramble period in milliseconds; None scrambles once only",
    )
    hover_enabled: bool = Field(default=True, description="Resolve show_text tooltips")
    link_target: str = Field(
        default="_blank", min_length=1, description="Presentation hint for open_url links"
    )

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator("obfuscation_interval_ms", mode="before")
    @classmethod
    def _parse_disabled(cls, value: Any) -> Any:
        if isinstance(value, str):
            present, interval = parse_interval_env(value)
            return interval if present else value
        return value


def _load_file_data(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}", context={"path": path}
        )
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            "Configuration file is not valid YAML", context={"path": path}, cause=exc
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping at the top level.", context={"path": path}
        )
    section = data.get("chat", data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            "Config section 'chat' must be a mapping.", context={"path": path}
        )
    return dict(section)


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    present, interval = parse_interval_env(env.get("MCC_OBFUSCATION_INTERVAL_MS"))
    if present:
        overrides["obfuscation_interval_ms"] = interval
    hover = parse_bool_env(env.get("MCC_HOVER_ENABLED"))
    if hover is not None:
        overrides["hover_enabled"] = hover
    target = env.get("MCC_LINK_TARGET")
    if target:
        overrides["link_target"] = target
    return overrides


def load_settings(
    path: Path | str | None = None,
    *,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> ChatSettings:
    """Build settings from an optional YAML file, the environment and kwargs.

    Later sources win: file, then ``MCC_*`` variables, then keyword overrides.
    """
    data: dict[str, Any] = {}
    if path is not None:
        data.update(_load_file_data(Path(path)))
    data.update(_env_overrides(os.environ if env is None else env))
    data.update(overrides)
    try:
        return ChatSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid chat settings",
            context={"errors": [err.get("msg") for err in exc.errors()]},
            cause=exc,
        ) from exc
