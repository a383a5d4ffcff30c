# File: /tableviews/routers/views.py | Version: 1.0 | Title: Views Router (CRUD, filters, sorts, apply)
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from tableviews.crud.views import (
    add_filter,
    add_sort,
    create_view,
    delete_view as crud_delete_view,
    duplicate_view,
    get_view,
    list_views,
    remove_filter,
    remove_sort,
    set_active_view,
    toggle_sort,
    update_view as crud_update_view,
    view_records,
)
from tableviews.db.session import get_db
from tableviews.engine.field_types import operators_for
from tableviews.models.table import DataTable, TableView
from tableviews.routers.tables import table_or_404
from tableviews.schemas.table import (
    FilterCreate,
    SortCreate,
    TableSummary,
    ViewCreate,
    ViewOut,
    ViewRecordsOut,
    ViewUpdate,
)

router = APIRouter(prefix="/tables", tags=["Views"])


# ----------------------------
# Helpers
# ----------------------------
def _view_or_404(db: Session, table_id: str, view_id: str) -> TableView:
    v = get_view(db, table_id, view_id)
    if v is None:
        raise HTTPException(status_code=404, detail="View not found")
    return v


def _check_filter(table: DataTable, data: FilterCreate) -> None:
    field = next((f for f in table.fields if f.id == data.field_id), None)
    if field is None:
        raise HTTPException(status_code=404, detail="Field not found")
    if data.operator not in operators_for(field.type):
        raise HTTPException(
            status_code=400,
            detail=f"Operator '{data.operator.value}' is not valid for {field.type} fields",
        )


def _check_sort_field(table: DataTable, field_id: str) -> None:
    if not any(f.id == field_id for f in table.fields):
        raise HTTPException(status_code=404, detail="Field not found")


# ----------------------------
# CRUD endpoints
# ----------------------------
@router.get("/{table_id}/views", response_model=List[ViewOut], summary="List a table's views")
def list_views_endpoint(table_id: str, db: Session = Depends(get_db)):
    return list_views(table_or_404(db, table_id))


@router.post("/{table_id}/views", response_model=ViewOut, summary="Create a view")
def create_view_endpoint(table_id: str, data: ViewCreate, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    if data.id and get_view(db, table_id, data.id) is not None:
        raise HTTPException(status_code=409, detail="View id already exists")
    for f in data.filters:
        _check_filter(table, f)
    for s in data.sorts:
        _check_sort_field(table, s.field_id)
    return create_view(db, table, data)


@router.get("/{table_id}/views/{view_id}", response_model=ViewOut, summary="Get a view")
def get_view_endpoint(table_id: str, view_id: str, db: Session = Depends(get_db)):
    table_or_404(db, table_id)
    return _view_or_404(db, table_id, view_id)


@router.patch("/{table_id}/views/{view_id}", response_model=ViewOut, summary="Rename or retype a view")
def update_view_endpoint(
    table_id: str, view_id: str, data: ViewUpdate, db: Session = Depends(get_db)
):
    table_or_404(db, table_id)
    return crud_update_view(db, _view_or_404(db, table_id, view_id), data)


@router.delete("/{table_id}/views/{view_id}", summary="Delete a view (never the last one)")
def delete_view_endpoint(table_id: str, view_id: str, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    v = _view_or_404(db, table_id, view_id)
    if not crud_delete_view(db, table, v):
        raise HTTPException(status_code=409, detail="Cannot delete the last view")
    return {"detail": "View deleted"}


@router.post(
    "/{table_id}/views/{view_id}/activate",
    response_model=TableSummary,
    summary="Make a view the table's active view",
)
def activate_view_endpoint(table_id: str, view_id: str, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    return set_active_view(db, table, _view_or_404(db, table_id, view_id))


@router.post(
    "/{table_id}/views/{view_id}/duplicate",
    response_model=ViewOut,
    summary="Copy a view with its filters, sorts and hidden fields",
)
def duplicate_view_endpoint(table_id: str, view_id: str, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    return duplicate_view(db, table, _view_or_404(db, table_id, view_id))


# ----------------------------
# Filters & sorts
# ----------------------------
@router.post("/{table_id}/views/{view_id}/filters", response_model=ViewOut, summary="Add a filter")
def add_filter_endpoint(
    table_id: str, view_id: str, data: FilterCreate, db: Session = Depends(get_db)
):
    table = table_or_404(db, table_id)
    v = _view_or_404(db, table_id, view_id)
    _check_filter(table, data)
    return add_filter(db, v, data)


@router.delete(
    "/{table_id}/views/{view_id}/filters/{filter_id}",
    response_model=ViewOut,
    summary="Remove a filter",
)
def remove_filter_endpoint(
    table_id: str, view_id: str, filter_id: str, db: Session = Depends(get_db)
):
    table_or_404(db, table_id)
    v = _view_or_404(db, table_id, view_id)
    if not remove_filter(db, v, filter_id):
        raise HTTPException(status_code=404, detail="Filter not found")
    return v


@router.put(
    "/{table_id}/views/{view_id}/sorts",
    response_model=ViewOut,
    summary="Sort by a field (replaces an existing sort on that field)",
)
def add_sort_endpoint(
    table_id: str, view_id: str, data: SortCreate, db: Session = Depends(get_db)
):
    table = table_or_404(db, table_id)
    v = _view_or_404(db, table_id, view_id)
    _check_sort_field(table, data.field_id)
    return add_sort(db, v, data)


@router.delete(
    "/{table_id}/views/{view_id}/sorts/{field_id}",
    response_model=ViewOut,
    summary="Stop sorting by a field",
)
def remove_sort_endpoint(
    table_id: str, view_id: str, field_id: str, db: Session = Depends(get_db)
):
    table_or_404(db, table_id)
    return remove_sort(db, _view_or_404(db, table_id, view_id), field_id)


@router.post(
    "/{table_id}/views/{view_id}/sorts/{field_id}:toggle",
    response_model=ViewOut,
    summary="Cycle a field's sort: none, ascending, descending",
)
def toggle_sort_endpoint(
    table_id: str, view_id: str, field_id: str, db: Session = Depends(get_db)
):
    table = table_or_404(db, table_id)
    v = _view_or_404(db, table_id, view_id)
    _check_sort_field(table, field_id)
    return toggle_sort(db, v, field_id)


# ----------------------------
# APPLY: /tables/{id}/views/{id}/records
# ----------------------------
@router.get(
    "/{table_id}/views/{view_id}/records",
    response_model=ViewRecordsOut,
    summary="Records shown by a view (filtered, then sorted)",
)
def view_records_endpoint(table_id: str, view_id: str, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    v = _view_or_404(db, table_id, view_id)
    items = view_records(table, v)
    return {"view_id": v.id, "count": len(items), "items": items}
