# File: /tableviews/engine/filtering.py | Version: 1.1 | Title: Filter Predicate Evaluator (typed operators, AND composition)
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence

from tableviews.engine.field_types import FieldType, FilterOperator
from tableviews.engine.values import NAN, is_truthy, to_number, to_text, to_timestamp

if TYPE_CHECKING:
    from tableviews.schemas.table import FieldOut, FilterOut, RecordOut

log = logging.getLogger(__name__)


def _cell(record: RecordOut, field_id: str) -> Any:
    return (record.data or {}).get(field_id)


def _folded(value: Any) -> str:
    # falsy cells read as "" so 0 / False never match "0" / "false"
    return to_text(value).lower() if is_truthy(value) else ""


def _ordered_operands(record: RecordOut, filter: FilterOut, field_type: str):
    data = record.data or {}
    value, filter_value = data.get(filter.field_id), filter.value
    if field_type in (FieldType.number.value, FieldType.date.value):
        coerce = to_number if field_type == FieldType.number.value else to_timestamp
        # a stored null coerces to 0 / the epoch; only a missing cell is NaN
        a = coerce(value) if filter.field_id in data else NAN
        return a, coerce(filter_value)
    return to_text(value), to_text(filter_value)


_COMPARISONS: Dict[str, Callable[[Any, Any], bool]] = {
    FilterOperator.greater_than.value: lambda a, b: a > b,
    FilterOperator.less_than.value: lambda a, b: a < b,
    FilterOperator.greater_equal.value: lambda a, b: a >= b,
    FilterOperator.less_equal.value: lambda a, b: a <= b,
}


def evaluate(record: RecordOut, filter: FilterOut, field: Optional[FieldOut]) -> bool:
    """
    Does `record` satisfy `filter`?

    A missing `field` (dangling field id) and an unknown operator both pass.
    The operator is not checked against the field type here; whatever was
    stored on the view is evaluated as-is.
    """
    if field is None:
        return True

    value = _cell(record, filter.field_id)
    filter_value = filter.value
    op = str(getattr(filter.operator, "value", filter.operator))

    if op == FilterOperator.equals.value:
        return value == filter_value
    if op == FilterOperator.not_equals.value:
        return value != filter_value
    if op == FilterOperator.contains.value:
        return _folded(filter_value) in _folded(value)
    if op == FilterOperator.not_contains.value:
        return _folded(filter_value) not in _folded(value)
    if op == FilterOperator.starts_with.value:
        return _folded(value).startswith(_folded(filter_value))
    if op == FilterOperator.ends_with.value:
        return _folded(value).endswith(_folded(filter_value))
    if op == FilterOperator.is_empty.value:
        return not is_truthy(value)
    if op == FilterOperator.is_not_empty.value:
        return is_truthy(value)
    if op in _COMPARISONS:
        a, b = _ordered_operands(record, filter, str(field.type))
        # NaN operands make every comparison False
        return _COMPARISONS[op](a, b)
    if op == FilterOperator.is_checked.value:
        return is_truthy(value)
    if op == FilterOperator.is_not_checked.value:
        return not is_truthy(value)

    log.debug("Unknown filter operator %r on filter %s; passing", op, filter.id)
    return True


def apply_filters(
    records: Sequence[RecordOut],
    filters: Optional[Sequence[FilterOut]],
    fields: Sequence[FieldOut],
) -> List[RecordOut]:
    """Keep the records that pass every filter, in input order."""
    if not filters:
        return list(records)

    by_id = {f.id: f for f in fields}
    for flt in filters:
        if flt.field_id not in by_id:
            log.debug("Filter %s references unknown field %s; skipped", flt.id, flt.field_id)

    return [
        r
        for r in records
        if all(evaluate(r, flt, by_id.get(flt.field_id)) for flt in filters)
    ]
