# File: /tableviews/engine/sorting.py | Version: 1.0 | Title: Sort Comparator (type-aware, stable multi-key)
from __future__ import annotations

import logging
import unicodedata
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

from tableviews.engine.field_types import FieldType, SortDirection
from tableviews.engine.values import is_nan, is_truthy, to_number, to_text, to_timestamp

if TYPE_CHECKING:
    from tableviews.schemas.table import FieldOut, RecordOut, SortOut

log = logging.getLogger(__name__)


def _sign(diff: float) -> int:
    if is_nan(diff) or diff == 0:
        return 0
    return -1 if diff < 0 else 1


def _number_key(value: Any) -> float:
    n = to_number(value)
    return 0.0 if is_nan(n) else n


def _date_key(value: Any) -> float:
    # missing and unparseable dates both sort as the epoch
    if not is_truthy(value):
        return 0.0
    ts = to_timestamp(value)
    return 0.0 if is_nan(ts) else ts


def _collation_key(value: Any) -> Tuple[str, str]:
    s = to_text(value).lower() if is_truthy(value) else ""
    base = "".join(
        ch for ch in unicodedata.normalize("NFKD", s) if not unicodedata.combining(ch)
    )
    return base.casefold(), s


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare(record_a: RecordOut, record_b: RecordOut, field: FieldOut) -> int:
    """
    Order two records on one field: -1, 0 or 1.

    Checkbox columns put checked rows first in ascending order. That is the
    grid's long-standing convention and callers rely on it.
    """
    a = (record_a.data or {}).get(field.id)
    b = (record_b.data or {}).get(field.id)
    field_type = str(getattr(field.type, "value", field.type))

    if field_type == FieldType.number.value:
        return _sign(_number_key(a) - _number_key(b))
    if field_type == FieldType.date.value:
        return _sign(_date_key(a) - _date_key(b))
    if field_type == FieldType.checkbox.value:
        return int(is_truthy(b)) - int(is_truthy(a))
    return _cmp(_collation_key(a), _collation_key(b))


def apply_sorts(
    records: Sequence[RecordOut],
    sorts: Optional[Sequence[SortOut]],
    fields: Sequence[FieldOut],
) -> List[RecordOut]:
    if not sorts:
        return list(records)

    by_id = {f.id: f for f in fields}
    keys: List[Tuple[FieldOut, bool]] = []
    for s in sorts:
        field = by_id.get(s.field_id)
        if field is None:
            log.debug("Sort %s references unknown field %s; skipped", s.id, s.field_id)
            continue
        descending = str(getattr(s.direction, "value", s.direction)) == SortDirection.desc.value
        keys.append((field, descending))

    if not keys:
        return list(records)

    def _multi_key(ra: RecordOut, rb: RecordOut) -> int:
        for field, descending in keys:
            c = compare(ra, rb, field)
            if c:
                return -c if descending else c
        return 0

    # sorted() is stable: rows tied on every key keep their input order
    return sorted(records, key=cmp_to_key(_multi_key))
