# File: /tableviews/engine/__init__.py | Version: 1.0 | Path: /tableviews/engine/__init__.py
"""
View engine: pure functions deriving a view's rows from a table snapshot.
"""
from .field_types import (
    FieldType,
    FilterOperator,
    SortDirection,
    default_value_for,
    needs_value,
    operator_label,
    operators_for,
)
from .filtering import apply_filters, evaluate
from .resolution import resolve
from .sorting import apply_sorts, compare

__all__ = [
    "FieldType",
    "FilterOperator",
    "SortDirection",
    "default_value_for",
    "needs_value",
    "operator_label",
    "operators_for",
    "evaluate",
    "apply_filters",
    "compare",
    "apply_sorts",
    "resolve",
]
