"""
BlazeSQL public package initialization.

Fluent SQL fragment builders that bind every literal as a ``?`` parameter and
quote every identifier.
"""

from .builder import delete, insert, quote, select, update  # noqa: F401
from .config import BuilderConfig  # noqa: F401
from .errors import BlazeSQLError, ConfigurationError, InvalidArgumentError  # noqa: F401
from .query import JoinBuilder, JoinOnBuilder, WhereBuilder  # noqa: F401
from .security import (
    operators,
    quote_column_name,
    quote_simple_column_name,
    quote_simple_table_name,
    quote_table_name,
    validate_operator,
)  # noqa: F401
from .statements import DeleteBuilder, InsertBuilder, SelectBuilder, UpdateBuilder  # noqa: F401

__all__ = [
    "select",
    "insert",
    "update",
    "delete",
    "quote",
    "BuilderConfig",
    "BlazeSQLError",
    "ConfigurationError",
    "InvalidArgumentError",
    "WhereBuilder",
    "JoinOnBuilder",
    "JoinBuilder",
    "SelectBuilder",
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    "operators",
    "validate_operator",
    "quote_column_name",
    "quote_simple_column_name",
    "quote_simple_table_name",
    "quote_table_name",
]
