"""
Predicate tree construction APIs for BlazeSQL.
"""

from .compiler import PredicateCompiler
from .expressions import Connector, Leaf, LeafKind, Mode, Nested, PredicateNode
from .join import JoinBuilder, JoinClause, JoinOnBuilder
from .where import WhereBuilder

__all__ = [
    "Connector",
    "JoinBuilder",
    "JoinClause",
    "JoinOnBuilder",
    "Leaf",
    "LeafKind",
    "Mode",
    "Nested",
    "PredicateCompiler",
    "PredicateNode",
    "WhereBuilder",
]
