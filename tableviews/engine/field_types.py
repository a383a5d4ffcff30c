# File: /tableviews/engine/field_types.py | Version: 1.0 | Title: Field Type Registry (defaults + operator sets)
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class FieldType(str, Enum):
    text = "text"
    number = "number"
    date = "date"
    select = "select"
    checkbox = "checkbox"


class FilterOperator(str, Enum):
    equals = "equals"
    not_equals = "not_equals"
    contains = "contains"
    not_contains = "not_contains"
    starts_with = "starts_with"
    ends_with = "ends_with"
    is_empty = "is_empty"
    is_not_empty = "is_not_empty"
    greater_than = "greater_than"
    less_than = "less_than"
    greater_equal = "greater_equal"
    less_equal = "less_equal"
    is_checked = "is_checked"
    is_not_checked = "is_not_checked"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


_TEXT_OPERATORS: Tuple[FilterOperator, ...] = (
    FilterOperator.equals,
    FilterOperator.not_equals,
    FilterOperator.contains,
    FilterOperator.not_contains,
    FilterOperator.starts_with,
    FilterOperator.ends_with,
    FilterOperator.is_empty,
    FilterOperator.is_not_empty,
)

# number and date share the ordered comparison set
_ORDERED_OPERATORS: Tuple[FilterOperator, ...] = (
    FilterOperator.equals,
    FilterOperator.not_equals,
    FilterOperator.greater_than,
    FilterOperator.less_than,
    FilterOperator.greater_equal,
    FilterOperator.less_equal,
    FilterOperator.is_empty,
    FilterOperator.is_not_empty,
)

_OPERATORS: Dict[FieldType, Tuple[FilterOperator, ...]] = {
    FieldType.text: _TEXT_OPERATORS,
    FieldType.number: _ORDERED_OPERATORS,
    FieldType.date: _ORDERED_OPERATORS,
    FieldType.select: (
        FilterOperator.equals,
        FilterOperator.not_equals,
        FilterOperator.is_empty,
        FilterOperator.is_not_empty,
    ),
    FieldType.checkbox: (
        FilterOperator.is_checked,
        FilterOperator.is_not_checked,
    ),
}

_FALLBACK_OPERATORS: Tuple[FilterOperator, ...] = (
    FilterOperator.equals,
    FilterOperator.not_equals,
)

_DEFAULTS: Dict[FieldType, Any] = {
    FieldType.text: "",
    FieldType.number: 0,
    FieldType.date: "",
    FieldType.select: "",
    FieldType.checkbox: False,
}

_LABELS: Dict[FilterOperator, str] = {
    FilterOperator.equals: "Equals",
    FilterOperator.not_equals: "Does not equal",
    FilterOperator.contains: "Contains",
    FilterOperator.not_contains: "Does not contain",
    FilterOperator.starts_with: "Starts with",
    FilterOperator.ends_with: "Ends with",
    FilterOperator.is_empty: "Is empty",
    FilterOperator.is_not_empty: "Is not empty",
    FilterOperator.greater_than: "Greater than",
    FilterOperator.less_than: "Less than",
    FilterOperator.greater_equal: "Greater than or equal",
    FilterOperator.less_equal: "Less than or equal",
    FilterOperator.is_checked: "Is checked",
    FilterOperator.is_not_checked: "Is not checked",
}

_VALUELESS_OPERATORS = frozenset(
    {
        FilterOperator.is_empty,
        FilterOperator.is_not_empty,
        FilterOperator.is_checked,
        FilterOperator.is_not_checked,
    }
)


def coerce_field_type(value: Any) -> Optional[FieldType]:
    """Return the FieldType for a tag, or None when the tag is not recognized."""
    try:
        return FieldType(getattr(value, "value", value))
    except ValueError:
        return None


def default_value_for(field_type: Any) -> Any:
    """
    Zero value used to initialize a record cell for a column of this type.
    Unknown types fall back to the empty string.
    """
    ft = coerce_field_type(field_type)
    if ft is None:
        return ""
    return _DEFAULTS[ft]


def operators_for(field_type: Any) -> List[FilterOperator]:
    ft = coerce_field_type(field_type)
    if ft is None:
        return list(_FALLBACK_OPERATORS)
    return list(_OPERATORS[ft])


def operator_label(operator: Any) -> str:
    raw = getattr(operator, "value", operator)
    try:
        return _LABELS[FilterOperator(raw)]
    except ValueError:
        return str(raw)


def needs_value(operator: Any) -> bool:
    raw = getattr(operator, "value", operator)
    return raw not in {op.value for op in _VALUELESS_OPERATORS}
