"""
WHERE clause predicate tree.
"""

from __future__ import annotations

from typing import Any

from ..utils.logging import get_logger
from .expressions import MISSING, Connector, Leaf, Mode, Subtree, bind_values, column_ref
from .tree import PredicateTreeBuilder

logger = get_logger("query.where")


class WhereBuilder(PredicateTreeBuilder):
    """
    Chainable WHERE condition builder.

    ``where``/``or_where`` quote the column, safelist the operator and bind the
    value. Passing a callable instead of a column nests a parenthesized group::

        WhereBuilder().where("a", "=", 1).or_where(
            lambda w: w.where("b", ">", 2).where("c", "<", 3)
        ).build()
        # ('"a" = ? OR ("b" > ? AND "c" < ?)', [1, 2, 3])

    ``where_raw``/``or_where_raw`` emit caller text verbatim. The caller is
    responsible for the statement's safety and for supplying one bind value per
    placeholder; mismatches are not detected.
    """

    def where(self, column: Any, operator: Any = "=", value: Any = MISSING) -> "WhereBuilder":
        self._add_comparison(Connector.AND, column, operator, value)
        return self

    def or_where(self, column: Any, operator: Any = "=", value: Any = MISSING) -> "WhereBuilder":
        self._add_comparison(Connector.OR, column, operator, value)
        return self

    def where_raw(self, statement: Any, bind: Any = MISSING) -> "WhereBuilder":
        self._add_raw(Connector.AND, statement, bind)
        return self

    def or_where_raw(self, statement: Any, bind: Any = MISSING) -> "WhereBuilder":
        self._add_raw(Connector.OR, statement, bind)
        return self

    def _add_raw(self, connector: Connector, statement: Any, bind: Any) -> None:
        ref = column_ref(statement)
        if isinstance(ref, Subtree):
            self._nest(connector, Mode.UNSAFE, ref)
            return
        values = bind_values(bind)
        logger.debug("Raw predicate appended: %s (%d bind value(s))", ref.name, len(values))
        self._append(connector, Mode.UNSAFE, Leaf(column=ref.name, value=values))
