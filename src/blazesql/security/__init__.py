"""Identifier quoting, operator safelisting and log redaction."""

from .operators import SAFE_OPERATORS, operators, validate_operator
from .quoting import (
    quote_column_name,
    quote_literal,
    quote_simple_column_name,
    quote_simple_table_name,
    quote_table_name,
)
from .redaction import redact_params

__all__ = [
    "SAFE_OPERATORS",
    "operators",
    "validate_operator",
    "quote_column_name",
    "quote_literal",
    "quote_simple_column_name",
    "quote_simple_table_name",
    "quote_table_name",
    "redact_params",
]
