"""
Entry points for composing statements.
"""

from __future__ import annotations

from typing import Iterable, Union

from .config import BuilderConfig
from .security.quoting import quote_literal
from .statements import DeleteBuilder, InsertBuilder, SelectBuilder, UpdateBuilder


def select(columns: Union[str, Iterable[str]] = "*", *, config: BuilderConfig | None = None) -> SelectBuilder:
    return SelectBuilder(config=config).select(columns)


def insert(table: str, *, config: BuilderConfig | None = None) -> InsertBuilder:
    return InsertBuilder(config=config).into(table)


def update(table: str, *, config: BuilderConfig | None = None) -> UpdateBuilder:
    return UpdateBuilder(config=config).table(table)


def delete(table: str, *, config: BuilderConfig | None = None) -> DeleteBuilder:
    return DeleteBuilder(config=config).from_(table)


def quote(value: str) -> str:
    """Inline ``value`` as a SQL string literal. Prefer bound parameters."""
    return quote_literal(value)
