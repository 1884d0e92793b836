"""
Predicate tree primitives.

A predicate tree is an append-only list of :class:`PredicateNode` entries.
Each node carries either a :class:`Leaf` (a single comparison) or a
:class:`Nested` payload holding the already-linearized output of a child tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple, Union


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()
"""Default for omitted right-hand arguments, distinct from an explicit ``None``."""


class Connector(str, Enum):
    """How a node combines with the node before it."""

    AND = "AND"
    OR = "OR"


class Mode(str, Enum):
    SAFE = "SAFE"
    UNSAFE = "UNSAFE"


class LeafKind(str, Enum):
    """
    ``VALUE`` leaves bind their right-hand side as a parameter; ``COLUMN``
    leaves compare two identifiers and bind nothing.
    """

    VALUE = "WHERE"
    COLUMN = "ON"


@dataclass(frozen=True)
class Leaf:
    column: str
    operator: str | None = None
    value: Any = None
    kind: LeafKind = LeafKind.VALUE


@dataclass(frozen=True)
class Nested:
    sql: str
    params: Tuple[Any, ...] = ()
    columns: Tuple[Optional[str], ...] = ()

    def bound_columns(self) -> List[Optional[str]]:
        """Column per parameter, padded with ``None`` where unknown."""
        columns = list(self.columns[: len(self.params)])
        return columns + [None] * (len(self.params) - len(columns))


Payload = Union[Leaf, Nested]


@dataclass(frozen=True)
class PredicateNode:
    connector: Connector
    mode: Mode
    payload: Payload

    @property
    def is_nested(self) -> bool:
        return isinstance(self.payload, Nested)


# Column references ----------------------------------------------------
@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class Subtree:
    """Callback that populates a child builder passed as its only argument."""

    fill: Callable[[Any], Any]


ColumnRef = Union[Identifier, Subtree]


def column_ref(column: Any) -> ColumnRef:
    """
    Normalize an append-method argument into an explicit column reference.
    """
    if isinstance(column, (Identifier, Subtree)):
        return column
    if callable(column):
        return Subtree(column)
    return Identifier(str(column))


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def bind_values(bind: Any) -> Tuple[Any, ...]:
    """
    Normalize a raw-clause bind argument into an explicit parameter tuple.

    An omitted bind binds nothing, a list or tuple binds each element, and any
    other value (``None`` included) binds as a single parameter.
    """
    if bind is MISSING:
        return ()
    if is_sequence(bind):
        return tuple(bind)
    return (bind,)
