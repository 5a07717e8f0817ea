"""Exception types raised by the test scaffold."""

from playwright.sync_api import Error as DriverError

__all__ = [
    "ConfigurationError",
    "DriverError",
    "FrameworkError",
    "UsageError",
]


class FrameworkError(Exception):
    """Base class for scaffold errors."""


class ConfigurationError(FrameworkError):
    """A configuration key is missing or holds an unusable value."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class UsageError(FrameworkError, TypeError):
    """A helper was called with arguments of the wrong type."""
