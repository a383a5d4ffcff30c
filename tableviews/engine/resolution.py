# File: /tableviews/engine/resolution.py | Version: 1.0 | Title: View Resolution (filter stage, then sort stage)
from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from tableviews.engine.filtering import apply_filters
from tableviews.engine.sorting import apply_sorts

if TYPE_CHECKING:
    from tableviews.schemas.table import FieldOut, RecordOut, ViewOut


def resolve(
    records: Sequence[RecordOut], view: ViewOut, fields: Sequence[FieldOut]
) -> List[RecordOut]:
    """
    Records shown by `view`: those passing all of its filters, ordered by its
    sorts (first sort is the primary key).

    Pure: inputs are never mutated and a new list is always returned, so
    several views can be resolved concurrently over the same snapshot.
    """
    filtered = apply_filters(records, view.filters, fields)
    return apply_sorts(filtered, view.sorts, fields)
