"""
Linearization of predicate trees into SQL fragments and ordered parameters.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from ..config import DEFAULT_CONFIG, EMPTY_IN_CONSTANT, BuilderConfig
from ..security.operators import is_membership, is_null_check
from .expressions import Leaf, LeafKind, Mode, Nested, PredicateNode, bind_values, is_sequence

PLACEHOLDER = "?"

_RANGE_OPERATORS = frozenset({"BETWEEN", "NOT BETWEEN"})


class PredicateCompiler:
    """
    Render a node list depth-first into ``(sql, params)``.

    Parameters are collected in the same left-to-right order their
    placeholders appear in the SQL, and are rebuilt from the nodes on every
    call so repeated compilation never accumulates.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def compile(self, nodes: Sequence[PredicateNode]) -> Tuple[str, List[Any]]:
        sql, params, _ = self.linearize(nodes)
        return sql, params

    def linearize(self, nodes: Sequence[PredicateNode]) -> Tuple[str, List[Any], List[Optional[str]]]:
        """
        Like :meth:`compile`, also returning the column each parameter binds
        to (``None`` for raw clauses).
        """
        parts: List[str] = []
        params: List[Any] = []
        columns: List[Optional[str]] = []

        for node in nodes:
            sql, node_params, node_columns = self._compile_node(node)
            if not sql:
                continue
            if parts:
                sql = f"{node.connector.value} {sql}"
            parts.append(sql)
            params.extend(node_params)
            columns.extend(node_columns)

        return " ".join(parts).strip(), params, columns

    # Node rendering ----------------------------------------------------
    def _compile_node(self, node: PredicateNode) -> Tuple[str, List[Any], List[Optional[str]]]:
        payload = node.payload
        if isinstance(payload, Nested):
            if not payload.sql:
                return "", [], []
            return f"({payload.sql})", list(payload.params), payload.bound_columns()
        if node.mode is Mode.UNSAFE:
            values = list(bind_values(payload.value))
            return payload.column.strip(), values, [None] * len(values)
        if payload.kind is LeafKind.COLUMN:
            return self._compile_column_comparison(payload), [], []
        sql, params = self._compile_value_comparison(payload)
        return sql, params, [payload.column] * len(params)

    def _compile_column_comparison(self, leaf: Leaf) -> str:
        if is_null_check(leaf.operator):
            return f"{leaf.column} {leaf.operator}"
        return f"{leaf.column} {leaf.operator} {leaf.value}"

    def _compile_value_comparison(self, leaf: Leaf) -> Tuple[str, List[Any]]:
        column, operator, value = leaf.column, leaf.operator, leaf.value

        if is_null_check(operator):
            return f"{column} {operator}", []

        if is_sequence(value) and is_membership(operator):
            if not value and self.config.empty_in == EMPTY_IN_CONSTANT:
                # IN () matches nothing, NOT IN () matches everything
                return ("1 = 0" if operator.upper() == "IN" else "1 = 1"), []
            placeholders = ", ".join(PLACEHOLDER for _ in value)
            return f"{column} {operator} ({placeholders})", list(value)

        if is_sequence(value) and len(value) == 2 and operator.upper() in _RANGE_OPERATORS:
            low, high = value
            return f"{column} {operator} {PLACEHOLDER} AND {PLACEHOLDER}", [low, high]

        return f"{column} {operator} {PLACEHOLDER}", [value]
