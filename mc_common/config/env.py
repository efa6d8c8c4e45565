"""Environment variable parsing utilities."""

from __future__ import annotations

_DISABLED_TOKENS = {"disabled", "none", "off", "null"}


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean from an environment variable string.

    Returns True for "1", "true", "yes", "on" (case-insensitive).
    Returns None if value is None or blank.
    """
    if value is None or not value.strip():
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_int_env(value: str | None) -> int | None:
    """Parse an integer from an environment variable string.

    Returns None if value is None or cannot be parsed.
    """
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_interval_env(value: str | None) -> tuple[bool, int | None]:
    """Parse a millisecond interval that may be switched off.

    Returns ``(present, interval)``. ``present`` is False when the variable is
    unset or unparsable; a disabled token ("disabled", "none", "off") yields
    ``(True, None)``.
    """
    if value is None:
        return False, None
    token = value.strip().lower()
    if token in _DISABLED_TOKENS:
        return True, None
    parsed = parse_int_env(token)
    if parsed is None:
        return False, None
    return True, parsed
