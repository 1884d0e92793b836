"""
Shared machinery for predicate tree builders.
"""

from __future__ import annotations

import copy
from typing import Any, List, Optional, Tuple, TypeVar

from ..config import DEFAULT_CONFIG, BuilderConfig
from ..security.operators import DEFAULT_OPERATOR, SAFE_OPERATORS, validate_operator
from ..security.quoting import quote_column_name
from .compiler import PredicateCompiler
from .expressions import MISSING, Connector, Leaf, Mode, Nested, PredicateNode, Subtree, column_ref

TreeT = TypeVar("TreeT", bound="PredicateTreeBuilder")


def resolve_shorthand(operator: Any, value: Any) -> Tuple[Any, Any]:
    """
    Expand the two-argument form ``where(column, value)``.

    When the right-hand side is omitted, a safelisted operator string is kept
    as the operator with a ``None`` value; anything else is the value compared
    with ``=``.
    """
    if value is not MISSING:
        return operator, value
    if isinstance(operator, str) and operator.upper() in SAFE_OPERATORS:
        return operator, None
    return DEFAULT_OPERATOR, operator


class PredicateTreeBuilder:
    """
    Append-only list of predicate nodes with AND/OR connectors.

    Subclasses expose the public append methods; this base owns nesting,
    linearization and cloning. A builder is meant to be owned by a single
    caller and is not synchronized.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._nodes: List[PredicateNode] = []

    # Output ------------------------------------------------------------
    def build(self) -> Tuple[str, List[Any]]:
        sql, params, _ = self._linearize()
        return sql, params

    def bound_columns(self) -> List[Optional[str]]:
        """Quoted column each ``build()`` parameter binds to; ``None`` for raw clauses."""
        return self._linearize()[2]

    def clone(self: TreeT) -> TreeT:
        clone = self.__class__(config=self.config)
        clone._nodes = copy.deepcopy(self._nodes)
        return clone

    @property
    def nodes(self) -> Tuple[PredicateNode, ...]:
        return tuple(self._nodes)

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self._nodes)})"

    # Internal helpers --------------------------------------------------
    def _linearize(self) -> Tuple[str, List[Any], List[Optional[str]]]:
        return PredicateCompiler(self.config).linearize(self._nodes)

    def _append(self, connector: Connector, mode: Mode, payload: Leaf | Nested) -> None:
        self._nodes.append(PredicateNode(connector=connector, mode=mode, payload=payload))

    def _nest(self, connector: Connector, mode: Mode, subtree: Subtree) -> None:
        child = self.__class__(config=self.config)
        subtree.fill(child)
        sql, params, columns = child._linearize()
        self._append(connector, mode, Nested(sql=sql, params=tuple(params), columns=tuple(columns)))

    def _add_comparison(self, connector: Connector, column: Any, operator: Any, value: Any) -> None:
        ref = column_ref(column)
        if isinstance(ref, Subtree):
            self._nest(connector, Mode.SAFE, ref)
            return
        operator, value = resolve_shorthand(operator, value)
        leaf = Leaf(
            column=quote_column_name(ref.name),
            operator=validate_operator(operator),
            value=value,
        )
        self._append(connector, Mode.SAFE, leaf)
