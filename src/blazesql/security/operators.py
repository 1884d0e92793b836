"""
Comparison operator safelist.
"""

from __future__ import annotations

import logging
from typing import Any, Final

logger = logging.getLogger("blazesql.security.operators")

DEFAULT_OPERATOR: Final[str] = "="

SAFE_OPERATORS: Final[frozenset[str]] = frozenset(
    {
        "=",
        "<",
        ">",
        "<=",
        ">=",
        "<>",
        "!=",
        "LIKE",
        "ILIKE",
        "NOT LIKE",
        "IN",
        "NOT IN",
        "BETWEEN",
        "NOT BETWEEN",
        "IS NULL",
        "IS NOT NULL",
        "IS",
        "IS NOT",
    }
)

NULL_CHECKS: Final[frozenset[str]] = frozenset({"IS NULL", "IS NOT NULL"})
MEMBERSHIP: Final[frozenset[str]] = frozenset({"IN", "NOT IN"})


def validate_operator(candidate: Any) -> str:
    """
    Return ``candidate`` unchanged when it is a safelisted operator.

    Matching is case-insensitive and the caller's casing is kept, so ``"like"``
    stays ``"like"``. Anything else silently becomes ``"="``.
    """
    if isinstance(candidate, str) and candidate.upper() in SAFE_OPERATORS:
        return candidate
    logger.warning("Unrecognized operator %r replaced with '%s'", candidate, DEFAULT_OPERATOR)
    return DEFAULT_OPERATOR


operators = validate_operator


def is_null_check(operator: str | None) -> bool:
    return operator is not None and operator.upper() in NULL_CHECKS


def is_membership(operator: str | None) -> bool:
    return operator is not None and operator.upper() in MEMBERSHIP
