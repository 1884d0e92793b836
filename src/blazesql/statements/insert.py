"""
INSERT statement composer.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple, Union

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..errors import InvalidArgumentError
from ..query.compiler import PLACEHOLDER
from ..security.quoting import quote_column_name, quote_table_name
from ..utils.logging import get_logger, log_statement
from .base import split_list

logger = get_logger("statements.insert")


class InsertBuilder:
    """
    Multi-row INSERT composer. Each ``values()`` call adds one row.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._table = ""
        self._columns: List[str] = []
        self._rows: List[List[Any]] = []

    def into(self, table: str) -> "InsertBuilder":
        self._table = quote_table_name(table)
        return self

    def columns(self, columns: Union[str, Iterable[str]]) -> "InsertBuilder":
        self._columns.extend(quote_column_name(column) for column in split_list(columns))
        return self

    def values(self, row: Union[str, Iterable[Any]]) -> "InsertBuilder":
        values = split_list(row)
        if not values:
            raise InvalidArgumentError("values() requires at least one value.")
        self._rows.append(values)
        return self

    def build(self) -> Tuple[str, List[Any]]:
        params: List[Any] = []
        bound: List[Optional[str]] = []
        row_sql: List[str] = []
        for row in self._rows:
            row_sql.append("(" + ", ".join(PLACEHOLDER for _ in row) + ")")
            params.extend(row)
            bound.extend(self._columns[i] if i < len(self._columns) else None for i in range(len(row)))
        sql = f"INSERT INTO {self._table} ({', '.join(self._columns)}) VALUES {', '.join(row_sql)}"
        log_statement(logger, "INSERT", sql, params, columns=bound, redact=self.config.redact_params)
        return sql, params
