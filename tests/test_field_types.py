# File: /tests/test_field_types.py | Version: 1.0 | Title: Field type registry (defaults, operator sets, labels)
from tableviews.engine.field_types import (
    FieldType,
    FilterOperator,
    coerce_field_type,
    default_value_for,
    needs_value,
    operator_label,
    operators_for,
)


def test_default_values_per_type():
    assert default_value_for(FieldType.text) == ""
    assert default_value_for(FieldType.number) == 0
    assert default_value_for(FieldType.date) == ""
    assert default_value_for(FieldType.select) == ""
    assert default_value_for(FieldType.checkbox) is False


def test_default_value_accepts_plain_tags_and_unknown_types():
    assert default_value_for("number") == 0
    assert default_value_for("markdown") == ""
    assert default_value_for(None) == ""


def test_text_operators_in_order():
    assert [op.value for op in operators_for("text")] == [
        "equals",
        "not_equals",
        "contains",
        "not_contains",
        "starts_with",
        "ends_with",
        "is_empty",
        "is_not_empty",
    ]


def test_number_and_date_share_ordered_operators():
    expected = [
        "equals",
        "not_equals",
        "greater_than",
        "less_than",
        "greater_equal",
        "less_equal",
        "is_empty",
        "is_not_empty",
    ]
    assert [op.value for op in operators_for(FieldType.number)] == expected
    assert [op.value for op in operators_for(FieldType.date)] == expected


def test_select_and_checkbox_operators():
    assert operators_for("select") == [
        FilterOperator.equals,
        FilterOperator.not_equals,
        FilterOperator.is_empty,
        FilterOperator.is_not_empty,
    ]
    assert operators_for("checkbox") == [
        FilterOperator.is_checked,
        FilterOperator.is_not_checked,
    ]


def test_unknown_type_falls_back_to_equality_operators():
    assert operators_for("rating") == [FilterOperator.equals, FilterOperator.not_equals]


def test_operators_for_returns_a_fresh_list():
    ops = operators_for("text")
    ops.clear()
    assert len(operators_for("text")) == 8


def test_operator_labels():
    assert operator_label(FilterOperator.not_equals) == "Does not equal"
    assert operator_label("greater_equal") == "Greater than or equal"
    assert operator_label("matches_regex") == "matches_regex"


def test_needs_value():
    assert needs_value("contains") is True
    assert needs_value(FilterOperator.greater_than) is True
    for op in ("is_empty", "is_not_empty", "is_checked", "is_not_checked"):
        assert needs_value(op) is False


def test_coerce_field_type():
    assert coerce_field_type("date") is FieldType.date
    assert coerce_field_type(FieldType.select) is FieldType.select
    assert coerce_field_type("unknown") is None
