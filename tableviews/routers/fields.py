# File: /tableviews/routers/fields.py | Version: 1.0 | Title: Fields Router (add/update/delete/reorder)
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from tableviews.crud.fields import (
    add_field,
    delete_field,
    get_field,
    reorder_fields,
    update_field,
)
from tableviews.db.session import get_db
from tableviews.models.table import TableField
from tableviews.routers.tables import table_or_404
from tableviews.schemas.table import FieldCreate, FieldOut, FieldReorder, FieldUpdate

router = APIRouter(prefix="/tables", tags=["Fields"])


def _field_or_404(db: Session, table_id: str, field_id: str) -> TableField:
    f = get_field(db, table_id, field_id)
    if f is None:
        raise HTTPException(status_code=404, detail="Field not found")
    return f


@router.post("/{table_id}/fields", response_model=FieldOut, summary="Add a field")
def add_field_endpoint(table_id: str, data: FieldCreate, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    if data.id and get_field(db, table_id, data.id) is not None:
        raise HTTPException(status_code=409, detail="Field id already exists")
    return add_field(db, table, data)


@router.post(
    "/{table_id}/fields:reorder",
    response_model=List[FieldOut],
    summary="Move a field to another position",
)
def reorder_fields_endpoint(
    table_id: str, data: FieldReorder, db: Session = Depends(get_db)
):
    table = table_or_404(db, table_id)
    fields = reorder_fields(db, table, data.from_index, data.to_index)
    if fields is None:
        raise HTTPException(status_code=400, detail="Field index out of range")
    return fields


@router.patch("/{table_id}/fields/{field_id}", response_model=FieldOut, summary="Update a field")
def update_field_endpoint(
    table_id: str, field_id: str, data: FieldUpdate, db: Session = Depends(get_db)
):
    table_or_404(db, table_id)
    return update_field(db, _field_or_404(db, table_id, field_id), data)


@router.delete("/{table_id}/fields/{field_id}", summary="Delete a field and its cells")
def delete_field_endpoint(table_id: str, field_id: str, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    delete_field(db, table, _field_or_404(db, table_id, field_id))
    return {"detail": "Field deleted"}
