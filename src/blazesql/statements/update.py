"""
UPDATE statement composer.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..query.compiler import PLACEHOLDER
from ..query.where import WhereBuilder
from ..security.quoting import quote_column_name, quote_table_name
from ..utils.logging import get_logger, log_statement
from .base import WhereClauseMixin

logger = get_logger("statements.update")


class UpdateBuilder(WhereClauseMixin):
    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._table = ""
        self._assignments: List[Tuple[str, Any]] = []
        self._where = WhereBuilder(config=self.config)

    def table(self, name: str) -> "UpdateBuilder":
        self._table = quote_table_name(name)
        return self

    def set(self, column: str, value: Any) -> "UpdateBuilder":
        self._assignments.append((quote_column_name(column), value))
        return self

    def build(self) -> Tuple[str, List[Any]]:
        set_sql = ", ".join(f"{column} = {PLACEHOLDER}" for column, _ in self._assignments)
        params: List[Any] = [value for _, value in self._assignments]
        columns: List[Optional[str]] = [column for column, _ in self._assignments]

        where_sql, where_params, where_columns = self._where_clause()
        params.extend(where_params)
        columns.extend(where_columns)
        if not where_sql:
            logger.warning("UPDATE on %s has no WHERE clause and will affect every row.", self._table)

        sql = f"UPDATE {self._table} SET {set_sql}{where_sql}"
        log_statement(logger, "UPDATE", sql, params, columns=columns, redact=self.config.redact_params)
        return sql, params
