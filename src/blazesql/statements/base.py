"""
Helpers shared by the statement composers.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Optional, Tuple, Union

from ..config import BuilderConfig
from ..errors import InvalidArgumentError
from ..query.expressions import MISSING
from ..query.where import WhereBuilder

_LIST_SPLIT_RE = re.compile(r"\s*,\s*")


def split_list(value: Union[str, Iterable[Any]]) -> List[Any]:
    """
    Accept ``"a, b"`` or ``["a", "b"]`` and return the individual items.
    """
    if isinstance(value, str):
        return [item for item in _LIST_SPLIT_RE.split(value.strip()) if item]
    return list(value)


def raw_arguments(method: str, args: Tuple[Any, ...]) -> Tuple[Any, Tuple[Any, ...]]:
    """
    Split ``where_raw(statement, *bind)`` arguments into statement and binds.
    """
    if not args:
        raise InvalidArgumentError(f"{method}() requires a statement.")
    statement, bind = args[0], tuple(args[1:])
    if callable(statement):
        return statement, bind
    if not isinstance(statement, str) or not statement.strip():
        raise InvalidArgumentError(f"{method}() requires a non-empty SQL statement, got {statement!r}.")
    return statement, bind


class WhereClauseMixin:
    """
    WHERE delegation for composers that own a :class:`WhereBuilder`.
    """

    config: BuilderConfig
    _where: WhereBuilder

    def where(self, column: Any, operator: Any = "=", value: Any = MISSING):
        self._where.where(column, operator, value)
        return self

    def or_where(self, column: Any, operator: Any = "=", value: Any = MISSING):
        self._where.or_where(column, operator, value)
        return self

    def where_raw(self, *args: Any):
        statement, bind = raw_arguments("where_raw", args)
        self._where.where_raw(statement, bind)
        return self

    def or_where_raw(self, *args: Any):
        statement, bind = raw_arguments("or_where_raw", args)
        self._where.or_where_raw(statement, bind)
        return self

    def _where_clause(self) -> Tuple[str, List[Any], List[Optional[str]]]:
        sql, params, columns = self._where._linearize()
        if not sql:
            return "", [], []
        return f" WHERE {sql}", params, columns
