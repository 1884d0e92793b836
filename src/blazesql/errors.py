"""
Exception hierarchy for BlazeSQL.
"""

from __future__ import annotations


class BlazeSQLError(Exception):
    """Base error for BlazeSQL failures."""


class InvalidArgumentError(BlazeSQLError, ValueError):
    """Raised when a statement composer receives arguments it cannot render."""


class ConfigurationError(BlazeSQLError):
    """Raised when builder configuration values are invalid."""
