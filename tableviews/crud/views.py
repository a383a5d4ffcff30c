# File: /tableviews/crud/views.py | Version: 1.0 | Title: CRUD helpers for Views (filters, sorts, resolution)
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from tableviews.crud.tables import next_position
from tableviews.engine.field_types import SortDirection
from tableviews.engine.resolution import resolve
from tableviews.models.table import DataTable, TableView, gen_uuid
from tableviews.schemas.table import (
    FieldOut,
    FilterCreate,
    RecordOut,
    SortCreate,
    ViewCreate,
    ViewOut,
    ViewUpdate,
)

log = logging.getLogger(__name__)


def _filter_row(data: FilterCreate) -> Dict[str, Any]:
    return {
        "id": gen_uuid(),
        "field_id": data.field_id,
        "operator": data.operator.value,
        "value": data.value,
    }


def _sort_row(field_id: str, direction: str) -> Dict[str, Any]:
    return {"id": gen_uuid(), "field_id": field_id, "direction": direction}


def _with_sort(sorts: List[Dict[str, Any]], field_id: str, direction: str) -> List[Dict[str, Any]]:
    # One sort per field: an existing one is dropped and the new one goes last
    kept = [s for s in sorts or [] if s.get("field_id") != field_id]
    return kept + [_sort_row(field_id, direction)]


def get_view(db: Session, table_id: str, view_id: str) -> Optional[TableView]:
    return db.get(TableView, {"table_id": table_id, "id": view_id})


def list_views(table: DataTable) -> List[TableView]:
    return list(table.views)


def create_view(db: Session, table: DataTable, data: ViewCreate) -> TableView:
    sorts: List[Dict[str, Any]] = []
    for s in data.sorts:
        sorts = _with_sort(sorts, s.field_id, s.direction.value)

    v = TableView(
        id=data.id or gen_uuid(),
        table_id=table.id,
        name=data.name,
        type=data.type,
        filters=[_filter_row(f) for f in data.filters],
        sorts=sorts,
        hidden_fields=list(data.hidden_fields),
        position=next_position(table.views),
    )
    db.add(v)
    db.commit()
    db.refresh(v)
    return v


def update_view(db: Session, v: TableView, data: ViewUpdate) -> TableView:
    if data.name is not None:
        v.name = data.name
    if data.type is not None:
        v.type = data.type
    if data.hidden_fields is not None:
        v.hidden_fields = list(data.hidden_fields)
    db.commit()
    db.refresh(v)
    return v


def delete_view(db: Session, table: DataTable, v: TableView) -> bool:
    """
    Refuses (returns False) to delete a table's last view. Deleting the active
    view makes the first remaining view active.
    """
    if len(table.views) <= 1:
        return False
    table.views.remove(v)
    db.delete(v)
    if table.active_view_id == v.id:
        table.active_view_id = table.views[0].id
    db.commit()
    log.info("Deleted view %s from table %s", v.id, table.id)
    return True


def set_active_view(db: Session, table: DataTable, v: TableView) -> DataTable:
    table.active_view_id = v.id
    db.commit()
    db.refresh(table)
    return table


def duplicate_view(db: Session, table: DataTable, v: TableView) -> TableView:
    copy = TableView(
        id=gen_uuid(),
        table_id=table.id,
        name=f"{v.name} (Copy)",
        type=v.type,
        filters=[dict(f) for f in v.filters or []],
        sorts=[dict(s) for s in v.sorts or []],
        hidden_fields=list(v.hidden_fields or []),
        position=next_position(table.views),
    )
    db.add(copy)
    db.commit()
    db.refresh(copy)
    return copy


# ---- Filters ----


def add_filter(db: Session, v: TableView, data: FilterCreate) -> TableView:
    v.filters = [*(v.filters or []), _filter_row(data)]
    db.commit()
    db.refresh(v)
    return v


def remove_filter(db: Session, v: TableView, filter_id: str) -> bool:
    remaining = [f for f in v.filters or [] if f.get("id") != filter_id]
    if len(remaining) == len(v.filters or []):
        return False
    v.filters = remaining
    db.commit()
    db.refresh(v)
    return True


# ---- Sorts ----


def add_sort(db: Session, v: TableView, data: SortCreate) -> TableView:
    v.sorts = _with_sort(v.sorts, data.field_id, data.direction.value)
    db.commit()
    db.refresh(v)
    return v


def remove_sort(db: Session, v: TableView, field_id: str) -> TableView:
    v.sorts = [s for s in v.sorts or [] if s.get("field_id") != field_id]
    db.commit()
    db.refresh(v)
    return v


def toggle_sort(db: Session, v: TableView, field_id: str) -> TableView:
    """Cycle a field's sort: unsorted -> ascending -> descending -> unsorted."""
    current = next((s for s in v.sorts or [] if s.get("field_id") == field_id), None)
    if current is None:
        return add_sort(db, v, SortCreate(field_id=field_id, direction=SortDirection.asc))
    if current.get("direction") == SortDirection.asc.value:
        return add_sort(db, v, SortCreate(field_id=field_id, direction=SortDirection.desc))
    return remove_sort(db, v, field_id)


# ---- Resolution ----


def view_records(table: DataTable, v: TableView) -> List[RecordOut]:
    """Snapshot the table and run the view engine over it."""
    fields = [FieldOut.model_validate(f) for f in table.fields]
    records = [RecordOut.model_validate(r) for r in table.records]
    return resolve(records, ViewOut.model_validate(v), fields)
