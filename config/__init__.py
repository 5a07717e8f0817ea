"""Harness configuration read from the process environment."""

from .framework import SCHEMA, ConfigKey, FrameworkConfig, get_config

__all__ = [
    "SCHEMA",
    "ConfigKey",
    "FrameworkConfig",
    "get_config",
]
