"""Public API surface for mc_common."""

from mc_common.config.env import parse_bool_env, parse_int_env, parse_interval_env
from mc_common.errors import (
    ClipboardError,
    ConfigurationError,
    InvalidComponentError,
    MCError,
    error_to_payload,
)
from mc_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "parse_bool_env",
    "parse_int_env",
    "parse_interval_env",
    "MCError",
    "InvalidComponentError",
    "ConfigurationError",
    "ClipboardError",
    "error_to_payload",
]
