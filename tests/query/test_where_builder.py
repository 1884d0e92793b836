import pytest

from blazesql import select
from blazesql.query import Connector, Mode, Nested, WhereBuilder


def test_single_condition():
    assert WhereBuilder().where("id", "=", 1).build() == ('"id" = ?', [1])


def test_two_argument_form_binds_the_value_with_equality():
    assert WhereBuilder().where("status", "active").build() == ('"status" = ?', ["active"])


def test_two_argument_form_keeps_unary_operators():
    sql, params = WhereBuilder().where("deleted_at", "IS NOT NULL").build()
    assert sql == '"deleted_at" IS NOT NULL'
    assert params == []


def test_and_or_connectors_follow_append_order():
    builder = WhereBuilder().where("a", "=", 1).or_where("b", ">", 2).where("c", "<", 3)
    assert builder.build() == ('"a" = ? OR "b" > ? AND "c" < ?', [1, 2, 3])


def test_leading_connector_is_omitted():
    assert WhereBuilder().or_where("a", 1).build() == ('"a" = ?', [1])


def test_nested_group():
    builder = WhereBuilder().where(lambda w: w.where("a", 1).or_where("b", 2))
    assert builder.build() == ('("a" = ? OR "b" = ?)', [1, 2])


def test_nested_group_params_are_spliced_in_position():
    builder = (
        WhereBuilder()
        .where("a", 1)
        .where(lambda w: w.where("b", 2).or_where(lambda inner: inner.where("c", 3).where("d", 4)))
        .or_where("e", 5)
    )
    sql, params = builder.build()
    assert sql == '"a" = ? AND ("b" = ? OR ("c" = ? AND "d" = ?)) OR "e" = ?'
    assert params == [1, 2, 3, 4, 5]


def test_empty_nested_group_is_skipped():
    builder = WhereBuilder().where(lambda w: None).where("a", 1)
    assert builder.build() == ('"a" = ?', [1])


def test_in_expands_one_placeholder_per_element():
    assert WhereBuilder().where("id", "IN", [1, 2, 3]).build() == ('"id" IN (?, ?, ?)', [1, 2, 3])


def test_not_in_accepts_tuples():
    sql, params = WhereBuilder().where("role", "NOT IN", ("admin", "root")).build()
    assert sql == '"role" NOT IN (?, ?)'
    assert params == ["admin", "root"]


def test_in_operator_matching_is_case_insensitive():
    assert WhereBuilder().where("id", "in", [7, 8]).build() == ('"id" in (?, ?)', [7, 8])


def test_empty_in_is_rendered_as_is_by_default():
    assert WhereBuilder().where("id", "IN", []).build() == ('"id" IN ()', [])


def test_in_with_scalar_binds_single_value():
    assert WhereBuilder().where("id", "IN", 5).build() == ('"id" IN ?', [5])


@pytest.mark.parametrize("operator", ["IS NULL", "IS NOT NULL", "is null"])
def test_null_checks_ignore_the_value(operator):
    sql, params = WhereBuilder().where("deleted_at", operator, "ignored").build()
    assert sql == f'"deleted_at" {operator}'
    assert params == []


def test_between_with_pair_binds_both_bounds():
    assert WhereBuilder().where("age", "BETWEEN", (18, 65)).build() == ('"age" BETWEEN ? AND ?', [18, 65])


def test_operator_injection_falls_back_to_equality():
    sql, params = WhereBuilder().where("id", "= 1; DROP TABLE users", "").build()
    assert sql == '"id" = ?'
    assert params == [""]


def test_value_injection_is_bound_not_interpolated():
    sql, params = WhereBuilder().where("id", "=", "1; DROP TABLE users").build()
    assert sql == '"id" = ?'
    assert params == ["1; DROP TABLE users"]


def test_where_raw_scalar_bind():
    assert WhereBuilder().where_raw("LOWER(name) = ?", "john").build() == ("LOWER(name) = ?", ["john"])


def test_where_raw_sequence_bind_and_no_bind():
    builder = WhereBuilder().where_raw("age BETWEEN ? AND ?", [18, 30]).or_where_raw("users.vip = 1")
    assert builder.build() == ("age BETWEEN ? AND ? OR users.vip = 1", [18, 30])


def test_raw_text_is_not_quoted_or_validated():
    builder = WhereBuilder().where_raw("users.id = 1")
    assert builder.build() == ("users.id = 1", [])
    assert builder.nodes[0].mode is Mode.UNSAFE


def test_mixed_safe_and_raw_nodes_keep_parameter_alignment():
    builder = (
        WhereBuilder()
        .where("a", 1)
        .or_where_raw("b > ? AND b < ?", [10, 20])
        .where("c", "IN", ["x", "y"])
        .where("d", "IS NULL")
    )
    sql, params = builder.build()
    assert sql == '"a" = ? OR b > ? AND b < ? AND "c" IN (?, ?) AND "d" IS NULL'
    assert params == [1, 10, 20, "x", "y"]
    assert sql.count("?") == len(params)


def test_build_is_idempotent():
    builder = WhereBuilder().where("a", 1).where(lambda w: w.where("b", 2))
    first = builder.build()
    second = builder.build()
    assert first == second
    assert second[1] == [1, 2]


def test_empty_builder_builds_empty_fragment():
    builder = WhereBuilder()
    assert builder.is_empty()
    assert builder.build() == ("", [])


def test_node_model_records_connector_mode_and_payload():
    builder = WhereBuilder().where("a", 1).or_where(lambda w: w.where("b", 2))
    first, second = builder.nodes
    assert first.connector is Connector.AND
    assert first.mode is Mode.SAFE
    assert first.payload.column == '"a"'
    assert second.connector is Connector.OR
    assert second.is_nested
    assert second.payload == Nested(sql='"b" = ?', params=(2,), columns=('"b"',))


def test_append_methods_return_the_builder():
    builder = WhereBuilder()
    assert builder.where("a", 1) is builder
    assert builder.or_where("b", 2) is builder
    assert builder.where_raw("c = 1") is builder
    assert builder.or_where_raw("d = 1") is builder
    assert len(builder) == 4


def test_where_raw_explicit_none_binds_null():
    builder = WhereBuilder().where_raw("a IS ?", None).or_where_raw("b = ?", [None])
    sql, params = builder.build()
    assert sql == "a IS ? OR b = ?"
    assert params == [None, None]
    assert sql.count("?") == len(params)


def test_where_raw_explicit_none_matches_composer_layer():
    tree_params = WhereBuilder().where_raw("a IS ?", None).build()[1]
    statement_params = select("*").from_("t").where_raw("a IS ?", None).build()[1]
    assert tree_params == statement_params == [None]


def test_bound_columns_follow_parameter_order():
    builder = (
        WhereBuilder()
        .where("a", 1)
        .where(lambda w: w.where("b", "IN", [2, 3]).or_where_raw("c = ?", 4))
        .where("d", "IS NULL")
        .or_where("e", "BETWEEN", (5, 6))
    )
    assert builder.build()[1] == [1, 2, 3, 4, 5, 6]
    assert builder.bound_columns() == ['"a"', '"b"', '"b"', None, '"e"', '"e"']
