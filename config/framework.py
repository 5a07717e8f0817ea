"""Environment-backed configuration for the browser test harness.

Each harness setting is declared once in ``SCHEMA`` as a row of
(accessor name, environment key, type). ``FrameworkConfig`` snapshots those keys
from the environment at construction and exposes one read-only property per row.

String accessors return ``None`` when the key is unset. Integer accessors raise
``ConfigurationError`` when the key is unset or not a base-10 integer; a value that
is present but malformed is also rejected when the config is built.

Two keys keep their historical spelling (``ENVIRONEMNT`` and
``DEFAULT_DOWNLOAD_DIRECTRY``). The correctly spelled variants are not read.
"""

import functools
import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

from errors import ConfigurationError

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_REDACTED = "********"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class ConfigKey:
    """One configuration setting: accessor name, environment key and value type."""

    accessor: str
    env_key: str
    kind: Literal["str", "int"] = "str"
    secret: bool = False


SCHEMA: tuple[ConfigKey, ...] = (
    ConfigKey("environment", "ENVIRONEMNT"),
    ConfigKey("app_url", "APPURL"),
    ConfigKey("browser", "BROWSER"),
    ConfigKey("implicit_timeout", "IMPLICIT_WAIT", "int"),
    ConfigKey("explicit_timeout", "EXPLICIT_TIMEOUT", "int"),
    ConfigKey("email_endpoint", "EMAILENDPOINT"),
    ConfigKey("email_subject", "EMAILSUBJECT"),
    ConfigKey("email_body", "EMAILBODY"),
    ConfigKey("email_is_html", "EMAILISHTML"),
    ConfigKey("to_email_list", "EMAILTOLIST"),
    ConfigKey("cc_email_list", "EMAILCCLIST"),
    ConfigKey("email_service_key", "EMAILSERVICEKEY", secret=True),
    ConfigKey("email_test_report", "TESTREPORTEMAIL"),
    ConfigKey("pdf_test_report", "TESTREPORTPDF"),
    ConfigKey("default_downloading_directory", "DEFAULT_DOWNLOAD_DIRECTRY"),
)


def parse_int(key: str, raw: str) -> int:
    """Parse a signed base-10 32-bit integer, rejecting anything else."""
    if not _INT_PATTERN.fullmatch(raw):
        raise ConfigurationError(key, f"expected an integer, got {raw!r}")
    value = int(raw, 10)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConfigurationError(key, f"integer out of range, got {raw!r}")
    return value


class _Accessor:
    """Read-only property bound to a single schema row."""

    __slots__ = ("_entry",)

    def __init__(self, entry: ConfigKey) -> None:
        self._entry = entry

    def __get__(self, instance: "FrameworkConfig | None", owner: type) -> Any:
        if instance is None:
            return self
        return instance.get(self._entry)

    def __set__(self, instance: "FrameworkConfig", value: Any) -> None:
        raise AttributeError(f"{self._entry.accessor} is read-only")


class FrameworkConfig:
    """Typed, immutable view over the harness environment variables."""

    __slots__ = ("_values",)

    # Populated from SCHEMA below.
    environment: str | None
    app_url: str | None
    browser: str | None
    implicit_timeout: int
    explicit_timeout: int
    email_endpoint: str | None
    email_subject: str | None
    email_body: str | None
    email_is_html: str | None
    to_email_list: str | None
    cc_email_list: str | None
    email_service_key: str | None
    email_test_report: str | None
    pdf_test_report: str | None
    default_downloading_directory: str | None

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        source = os.environ if environ is None else environ
        values = {entry.env_key: source[entry.env_key] for entry in SCHEMA if entry.env_key in source}
        self._values: Mapping[str, str] = MappingProxyType(values)

        # Malformed integers fail here; missing ones fail on access.
        for entry in SCHEMA:
            if entry.kind == "int" and entry.env_key in values:
                parse_int(entry.env_key, values[entry.env_key])

        logger.debug("Loaded configuration: %s", self.as_dict())

    @staticmethod
    def schema() -> tuple[ConfigKey, ...]:
        return SCHEMA

    def get(self, entry: ConfigKey) -> str | int | None:
        """Resolve a schema row against the snapshot."""
        raw = self._values.get(entry.env_key)
        if entry.kind == "int":
            if raw is None:
                raise ConfigurationError(entry.env_key, "required integer setting is not set")
            return parse_int(entry.env_key, raw)
        return raw

    def is_set(self, env_key: str) -> bool:
        return env_key in self._values

    def as_dict(self, redact: bool = True) -> dict[str, str | None]:
        """Raw values keyed by accessor name, with secrets masked unless ``redact`` is False."""
        result: dict[str, str | None] = {}
        for entry in SCHEMA:
            raw = self._values.get(entry.env_key)
            if redact and entry.secret and raw:
                raw = _REDACTED
            result[entry.accessor] = raw
        return result

    def __repr__(self) -> str:
        set_keys = ", ".join(key for key, value in self.as_dict().items() if value is not None)
        return f"FrameworkConfig({set_keys})"


for _entry in SCHEMA:
    setattr(FrameworkConfig, _entry.accessor, _Accessor(_entry))
del _entry


@functools.lru_cache(maxsize=1)
def get_config() -> FrameworkConfig:
    """Return the process-wide configuration, built on first call."""
    return FrameworkConfig()
