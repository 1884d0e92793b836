"""
ANSI identifier and literal quoting.

Identifiers are wrapped in double quotes unless their shape marks them as
already quoted, a wildcard, an expression or a template placeholder. The rules
are a syntactic safelist, not a parser: nothing here raises, and identifiers
are expected to come from schema code rather than end users.
"""

from __future__ import annotations

import re

_ALIAS_RE = re.compile(r"\s+AS\s+", re.IGNORECASE)

_TABLE_PASSTHROUGH = ("(", "{{")
_COLUMN_PASSTHROUGH = ("(", "{{", "[[")


def quote_simple_table_name(name: str) -> str:
    if '"' in name:
        return name
    return f'"{name}"'


def quote_simple_column_name(name: str) -> str:
    if '"' in name or name == "*":
        return name
    return f'"{name}"'


def _split_alias(name: str) -> tuple[str, str] | None:
    parts = _ALIAS_RE.split(name, maxsplit=1)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def quote_table_name(name: str) -> str:
    """
    Quote a possibly schema-qualified and aliased table name.

    ``public.users AS u`` becomes ``"public"."users" AS "u"``.
    """
    if '"' in name:
        return name
    aliased = _split_alias(name)
    if aliased is not None:
        base, alias = aliased
        return f"{quote_table_name(base)} AS {quote_table_name(alias)}"
    if any(token in name for token in _TABLE_PASSTHROUGH):
        return name
    if "." in name:
        qualifier, _, leaf = name.rpartition(".")
        return f"{quote_table_name(qualifier)}.{quote_simple_table_name(leaf)}"
    return quote_simple_table_name(name)


def quote_column_name(name: str) -> str:
    """
    Quote a possibly table-qualified and aliased column name.

    ``users.name AS n`` becomes ``"users"."name" AS "n"``; ``*``, ``users.*``
    and expressions such as ``COUNT(*)`` keep their wildcard/expression text.
    """
    if '"' in name or name == "*":
        return name
    aliased = _split_alias(name)
    if aliased is not None:
        base, alias = aliased
        return f"{quote_column_name(base)} AS {quote_column_name(alias)}"
    if any(token in name for token in _COLUMN_PASSTHROUGH):
        return name
    if "." in name:
        qualifier, _, leaf = name.rpartition(".")
        return f"{quote_table_name(qualifier)}.{quote_simple_column_name(leaf)}"
    return quote_simple_column_name(name)


def quote_literal(value: str) -> str:
    """Render ``value`` as a single-quoted SQL string literal."""
    return "'" + str(value).replace("'", "''") + "'"
