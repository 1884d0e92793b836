"""
Statement composers assembling predicate trees into full statements.
"""

from .delete import DeleteBuilder
from .insert import InsertBuilder
from .select import SelectBuilder
from .update import UpdateBuilder

__all__ = ["DeleteBuilder", "InsertBuilder", "SelectBuilder", "UpdateBuilder"]
