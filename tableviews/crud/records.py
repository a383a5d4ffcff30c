# File: /tableviews/crud/records.py | Version: 1.0 | Title: Record CRUD (+ lifecycle status transitions)
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from tableviews.crud.tables import next_position
from tableviews.engine.field_types import default_value_for
from tableviews.models.table import DataTable, TableRecord, gen_uuid
from tableviews.schemas.table import RecordCreate, RecordUpdate


def get_record(db: Session, table_id: str, record_id: str) -> Optional[TableRecord]:
    return db.get(TableRecord, {"table_id": table_id, "id": record_id})


def list_records(table: DataTable) -> List[TableRecord]:
    return list(table.records)


def add_record(db: Session, table: DataTable, data: RecordCreate) -> TableRecord:
    """
    New records start as "entering". Cells for fields missing from the payload
    are initialized with each field type's default value.
    """
    values = dict(data.data or {})
    for field in table.fields:
        if field.id not in values:
            values[field.id] = default_value_for(field.type)

    rec = TableRecord(
        id=data.id or gen_uuid(),
        table_id=table.id,
        data=values,
        status="entering",
        position=next_position(table.records),
    )
    db.add(rec)
    db.commit()
    db.refresh(rec)
    return rec


def _set_status(db: Session, rec: TableRecord, status: str) -> TableRecord:
    rec.status = status
    db.commit()
    db.refresh(rec)
    return rec


def update_record(db: Session, rec: TableRecord, data: RecordUpdate) -> TableRecord:
    # Shallow merge; keys absent from the payload keep their value
    rec.data = {**(rec.data or {}), **data.data}
    return _set_status(db, rec, "updating")


def delete_record(db: Session, rec: TableRecord) -> TableRecord:
    """Soft delete: the row stays until `remove_record` once its exit has played."""
    return _set_status(db, rec, "exiting")


def mark_record_idle(db: Session, rec: TableRecord) -> TableRecord:
    return _set_status(db, rec, "idle")


def remove_record(db: Session, rec: TableRecord) -> bool:
    db.delete(rec)
    db.commit()
    return True
