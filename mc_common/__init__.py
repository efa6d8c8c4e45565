"""Shared helpers for mcchat."""

from mc_common.api import MCError, configure_logging

__all__ = ["configure_logging", "MCError"]
