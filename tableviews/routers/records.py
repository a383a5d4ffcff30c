# File: /tableviews/routers/records.py | Version: 1.0 | Title: Records Router (CRUD + lifecycle status)
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from tableviews.crud.records import (
    add_record,
    delete_record,
    get_record,
    list_records,
    mark_record_idle,
    remove_record,
    update_record,
)
from tableviews.db.session import get_db
from tableviews.models.table import TableRecord
from tableviews.routers.tables import table_or_404
from tableviews.schemas.table import RecordCreate, RecordOut, RecordUpdate

router = APIRouter(prefix="/tables", tags=["Records"])


def _record_or_404(db: Session, table_id: str, record_id: str) -> TableRecord:
    r = get_record(db, table_id, record_id)
    if r is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return r


@router.get("/{table_id}/records", response_model=List[RecordOut], summary="List records in table order")
def list_records_endpoint(table_id: str, db: Session = Depends(get_db)):
    return list_records(table_or_404(db, table_id))


@router.post("/{table_id}/records", response_model=RecordOut, summary="Add a record")
def add_record_endpoint(table_id: str, data: RecordCreate, db: Session = Depends(get_db)):
    table = table_or_404(db, table_id)
    if data.id and get_record(db, table_id, data.id) is not None:
        raise HTTPException(status_code=409, detail="Record id already exists")
    return add_record(db, table, data)


@router.patch(
    "/{table_id}/records/{record_id}",
    response_model=RecordOut,
    summary="Merge new cell values into a record",
)
def update_record_endpoint(
    table_id: str, record_id: str, data: RecordUpdate, db: Session = Depends(get_db)
):
    table_or_404(db, table_id)
    return update_record(db, _record_or_404(db, table_id, record_id), data)


@router.delete(
    "/{table_id}/records/{record_id}",
    summary="Mark a record as exiting (or remove it with purge=true)",
)
def delete_record_endpoint(
    table_id: str,
    record_id: str,
    purge: bool = Query(default=False),
    db: Session = Depends(get_db),
):
    table_or_404(db, table_id)
    rec = _record_or_404(db, table_id, record_id)
    if purge:
        remove_record(db, rec)
        return {"detail": "Record removed"}
    return RecordOut.model_validate(delete_record(db, rec))


@router.post(
    "/{table_id}/records/{record_id}/idle",
    response_model=RecordOut,
    summary="Mark a record as idle",
)
def idle_record_endpoint(table_id: str, record_id: str, db: Session = Depends(get_db)):
    table_or_404(db, table_id)
    return mark_record_idle(db, _record_or_404(db, table_id, record_id))
