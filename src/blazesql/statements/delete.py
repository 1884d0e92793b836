"""
DELETE statement composer.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..query.where import WhereBuilder
from ..security.quoting import quote_table_name
from ..utils.logging import get_logger, log_statement
from .base import WhereClauseMixin

logger = get_logger("statements.delete")


class DeleteBuilder(WhereClauseMixin):
    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._table = ""
        self._where = WhereBuilder(config=self.config)

    def from_(self, table: str) -> "DeleteBuilder":
        self._table = quote_table_name(table)
        return self

    def build(self) -> Tuple[str, List[Any]]:
        where_sql, params, columns = self._where_clause()
        if not where_sql:
            logger.warning("DELETE on %s has no WHERE clause and will remove every row.", self._table)
        sql = f"DELETE FROM {self._table}{where_sql}"
        log_statement(logger, "DELETE", sql, params, columns=columns, redact=self.config.redact_params)
        return sql, params
