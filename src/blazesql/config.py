"""
Builder configuration shared by predicate trees and statement composers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from .errors import ConfigurationError

EMPTY_IN_PRESERVE = "preserve"
EMPTY_IN_CONSTANT = "constant"
EMPTY_IN_POLICIES = (EMPTY_IN_PRESERVE, EMPTY_IN_CONSTANT)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_empty_in(value: str, *, key: str) -> str:
    normalized = value.strip().lower()
    if normalized not in EMPTY_IN_POLICIES:
        raise ConfigurationError(
            f"Invalid value for '{key}': {value!r} (expected one of {', '.join(EMPTY_IN_POLICIES)})"
        )
    return normalized


@dataclass(frozen=True)
class BuilderConfig:
    """
    Rendering and diagnostics options.

    ``empty_in`` controls how ``IN``/``NOT IN`` against an empty sequence is
    rendered: ``"preserve"`` emits ``col IN ()`` untouched, ``"constant"``
    replaces the comparison with ``1 = 0`` (IN) or ``1 = 1`` (NOT IN).
    ``redact_params`` masks sensitive-looking parameters in log records.
    """

    empty_in: str = EMPTY_IN_PRESERVE
    redact_params: bool = True

    def __post_init__(self) -> None:
        if self.empty_in not in EMPTY_IN_POLICIES:
            raise ConfigurationError(f"Unknown empty_in policy {self.empty_in!r}")

    @classmethod
    def from_env(cls, prefix: str = "BLAZESQL_", **overrides: Any) -> "BuilderConfig":
        """
        Build a config from ``<prefix>EMPTY_IN`` and ``<prefix>REDACT_PARAMS``.

        Explicit keyword overrides win over environment values.
        """

        values: dict[str, Any] = {}
        empty_in_key = f"{prefix}EMPTY_IN"
        redact_key = f"{prefix}REDACT_PARAMS"

        raw_empty_in = os.getenv(empty_in_key)
        if raw_empty_in:
            values["empty_in"] = _parse_empty_in(raw_empty_in, key=empty_in_key)
        raw_redact = os.getenv(redact_key)
        if raw_redact:
            values["redact_params"] = _parse_bool(raw_redact, key=redact_key)

        values.update(overrides)
        return cls(**values)


DEFAULT_CONFIG = BuilderConfig()
