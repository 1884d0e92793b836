"""
SELECT statement composer.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple, Union

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..query.expressions import MISSING
from ..query.join import JoinBuilder
from ..query.where import WhereBuilder
from ..security.quoting import quote_column_name, quote_table_name
from ..utils.logging import get_logger, log_statement
from .base import WhereClauseMixin, split_list

logger = get_logger("statements.select")

_DIRECTIONS = ("ASC", "DESC")


class SelectBuilder(WhereClauseMixin):
    """
    Chainable SELECT composer.

    Parameters are ordered as the clauses appear: JOIN conditions, WHERE
    conditions, then LIMIT and OFFSET.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._columns: List[str] = []
        self._tables: List[str] = []
        self._group_by: List[str] = []
        self._order_by: List[Tuple[str, str]] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._where = WhereBuilder(config=self.config)
        self._joins = JoinBuilder(config=self.config)

    # Public API --------------------------------------------------------
    def select(self, columns: Union[str, Iterable[str]]) -> "SelectBuilder":
        self._columns.extend(quote_column_name(column) for column in split_list(columns))
        return self

    def from_(self, tables: Union[str, Iterable[str]]) -> "SelectBuilder":
        self._tables.extend(quote_table_name(table) for table in split_list(tables))
        return self

    def join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "SelectBuilder":
        self._joins.join(table, left, operator, right)
        return self

    def left_join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "SelectBuilder":
        self._joins.left_join(table, left, operator, right)
        return self

    def right_join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "SelectBuilder":
        self._joins.right_join(table, left, operator, right)
        return self

    def inner_join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "SelectBuilder":
        self._joins.inner_join(table, left, operator, right)
        return self

    def group_by(self, columns: Union[str, Iterable[str]]) -> "SelectBuilder":
        self._group_by.extend(quote_column_name(column) for column in split_list(columns))
        return self

    def order_by(self, column: str, direction: str = "ASC") -> "SelectBuilder":
        normalized = str(direction).strip().upper()
        if normalized not in _DIRECTIONS:
            logger.warning("Unrecognized ORDER BY direction %r replaced with 'ASC'", direction)
            normalized = "ASC"
        self._order_by.append((quote_column_name(column), normalized))
        return self

    def limit(self, value: Optional[int]) -> "SelectBuilder":
        self._limit = value
        return self

    def offset(self, value: Optional[int]) -> "SelectBuilder":
        self._offset = value
        return self

    def clone(self) -> "SelectBuilder":
        clone = SelectBuilder(config=self.config)
        clone._columns = list(self._columns)
        clone._tables = list(self._tables)
        clone._group_by = list(self._group_by)
        clone._order_by = list(self._order_by)
        clone._limit = self._limit
        clone._offset = self._offset
        clone._where = self._where.clone()
        clone._joins = self._joins.clone()
        return clone

    def build(self) -> Tuple[str, List[Any]]:
        select_list = ", ".join(self._columns) if self._columns else "*"
        sql_parts: List[str] = [f"SELECT {select_list} FROM {', '.join(self._tables)}"]
        params: List[Any] = []
        columns: List[Optional[str]] = []

        join_sql, join_params, join_columns = self._joins._linearize()
        sql_parts.append(join_sql)
        params.extend(join_params)
        columns.extend(join_columns)

        where_sql, where_params, where_columns = self._where_clause()
        sql_parts.append(where_sql)
        params.extend(where_params)
        columns.extend(where_columns)

        if self._group_by:
            sql_parts.append(f" GROUP BY {', '.join(self._group_by)}")

        if self._order_by:
            order_sql = ", ".join(f"{column} {direction}" for column, direction in self._order_by)
            sql_parts.append(f" ORDER BY {order_sql}")

        if self._limit is not None:
            sql_parts.append(" LIMIT ?")
            params.append(self._limit)
            columns.append(None)
        if self._offset is not None:
            sql_parts.append(" OFFSET ?")
            params.append(self._offset)
            columns.append(None)

        sql = "".join(sql_parts)
        log_statement(logger, "SELECT", sql, params, columns=columns, redact=self.config.redact_params)
        return sql, params
