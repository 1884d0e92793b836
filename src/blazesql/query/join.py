"""
JOIN clauses and their ON condition trees.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..security.operators import is_null_check, validate_operator
from ..security.quoting import quote_column_name, quote_table_name
from .compiler import PredicateCompiler
from .expressions import MISSING, Connector, Leaf, LeafKind, Mode, Nested, PredicateNode, Subtree, column_ref
from .tree import PredicateTreeBuilder, resolve_shorthand


def _column_leaf(left: str, operator: Any, right: Any) -> Leaf:
    operator = validate_operator(operator)
    if is_null_check(operator):
        right_sql = None
    else:
        right_sql = quote_column_name("" if right is None else str(right))
    return Leaf(column=quote_column_name(left), operator=operator, value=right_sql, kind=LeafKind.COLUMN)


class JoinOnBuilder(PredicateTreeBuilder):
    """
    ON condition tree mixing column-to-column and column-to-value leaves.

    ``on``/``or_on`` compare two identifiers and never bind a parameter;
    ``where``/``or_where`` compare a column with a bound value.
    """

    def on(self, left: Any, operator: Any = "=", right: Any = MISSING) -> "JoinOnBuilder":
        self._add_column_comparison(Connector.AND, left, operator, right)
        return self

    def or_on(self, left: Any, operator: Any = "=", right: Any = MISSING) -> "JoinOnBuilder":
        self._add_column_comparison(Connector.OR, left, operator, right)
        return self

    def where(self, column: Any, operator: Any = "=", value: Any = MISSING) -> "JoinOnBuilder":
        self._add_comparison(Connector.AND, column, operator, value)
        return self

    def or_where(self, column: Any, operator: Any = "=", value: Any = MISSING) -> "JoinOnBuilder":
        self._add_comparison(Connector.OR, column, operator, value)
        return self

    def _add_column_comparison(self, connector: Connector, left: Any, operator: Any, right: Any) -> None:
        ref = column_ref(left)
        if isinstance(ref, Subtree):
            self._nest(connector, Mode.SAFE, ref)
            return
        operator, right = resolve_shorthand(operator, right)
        self._append(connector, Mode.SAFE, _column_leaf(ref.name, operator, right))


@dataclass(frozen=True)
class JoinClause:
    join_type: str
    table: str
    condition: Union[Leaf, Nested]


class JoinBuilder:
    """
    Ordered list of JOIN clauses rendered as `` <TYPE> <table> ON <condition>``.

    A callable in place of the left column receives a :class:`JoinOnBuilder`
    for compound conditions::

        JoinBuilder().left_join(
            "orders AS o",
            lambda on: on.on("o.user_id", "=", "u.id").where("o.status", "=", "paid"),
        ).build()
        # (' LEFT JOIN "orders" AS "o" ON "o"."user_id" = "u"."id" AND "o"."status" = ?', ['paid'])
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._joins: List[JoinClause] = []

    def join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "JoinBuilder":
        self._add_join("JOIN", table, left, operator, right)
        return self

    def left_join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "JoinBuilder":
        self._add_join("LEFT JOIN", table, left, operator, right)
        return self

    def right_join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "JoinBuilder":
        self._add_join("RIGHT JOIN", table, left, operator, right)
        return self

    def inner_join(self, table: str, left: Any, operator: Any = "=", right: Any = MISSING) -> "JoinBuilder":
        self._add_join("INNER JOIN", table, left, operator, right)
        return self

    def build(self) -> Tuple[str, List[Any]]:
        sql, params, _ = self._linearize()
        return sql, params

    def bound_columns(self) -> List[Optional[str]]:
        return self._linearize()[2]

    def clone(self) -> "JoinBuilder":
        clone = JoinBuilder(config=self.config)
        clone._joins = copy.deepcopy(self._joins)
        return clone

    @property
    def joins(self) -> Tuple[JoinClause, ...]:
        return tuple(self._joins)

    def is_empty(self) -> bool:
        return not self._joins

    def __len__(self) -> int:
        return len(self._joins)

    def _linearize(self) -> Tuple[str, List[Any], List[Optional[str]]]:
        compiler = PredicateCompiler(self.config)
        sql = ""
        params: List[Any] = []
        columns: List[Optional[str]] = []
        for clause in self._joins:
            condition = clause.condition
            if isinstance(condition, Nested):
                condition_sql = condition.sql
                condition_params, condition_columns = list(condition.params), condition.bound_columns()
            else:
                condition_sql, condition_params, condition_columns = compiler.linearize(
                    [PredicateNode(connector=Connector.AND, mode=Mode.SAFE, payload=condition)]
                )
            sql += f" {clause.join_type} {clause.table} ON {condition_sql}"
            params.extend(condition_params)
            columns.extend(condition_columns)
        return sql, params, columns

    def _add_join(self, join_type: str, table: str, left: Any, operator: Any, right: Any) -> None:
        ref = column_ref(left)
        if isinstance(ref, Subtree):
            child = JoinOnBuilder(config=self.config)
            ref.fill(child)
            sql, params, columns = child._linearize()
            condition: Union[Leaf, Nested] = Nested(sql=sql, params=tuple(params), columns=tuple(columns))
        else:
            operator, right = resolve_shorthand(operator, right)
            condition = _column_leaf(ref.name, operator, right)
        self._joins.append(JoinClause(join_type=join_type, table=quote_table_name(table), condition=condition))
