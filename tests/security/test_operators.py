import logging

import pytest

from blazesql.security.operators import (
    SAFE_OPERATORS,
    is_membership,
    is_null_check,
    operators,
    validate_operator,
)


@pytest.mark.parametrize("operator", sorted(SAFE_OPERATORS))
def test_safelisted_operators_are_accepted(operator):
    assert validate_operator(operator) == operator


def test_original_case_is_preserved():
    assert validate_operator("like") == "like"
    assert validate_operator("Not In") == "Not In"
    assert validate_operator("is not null") == "is not null"


@pytest.mark.parametrize(
    "candidate",
    ["; DROP TABLE x", "= 1; DROP TABLE users", "==", "REGEXP", "", None, 5],
)
def test_unknown_operators_fall_back_to_equality(candidate):
    assert validate_operator(candidate) == "="


def test_fallback_is_logged_without_raising(caplog):
    caplog.set_level(logging.WARNING, logger="blazesql.security.operators")
    assert operators("; DROP TABLE x") == "="
    assert any("Unrecognized operator" in record.message for record in caplog.records)


def test_operators_alias_matches_validate_operator():
    assert operators is validate_operator


def test_operator_classification_is_case_insensitive():
    assert is_null_check("is null")
    assert is_null_check("IS NOT NULL")
    assert not is_null_check("IS")
    assert is_membership("not in")
    assert not is_membership("=")
    assert not is_membership(None)
