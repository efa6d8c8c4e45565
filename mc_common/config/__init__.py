"""Configuration helpers shared across mcchat packages."""

from mc_common.config.env import parse_bool_env, parse_int_env, parse_interval_env

__all__ = ["parse_bool_env", "parse_int_env", "parse_interval_env"]
