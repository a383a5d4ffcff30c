# File: /tableviews/crud/fields.py | Version: 1.0 | Title: Field CRUD (add/update/delete/reorder)
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from tableviews.crud.tables import field_from_create, next_position
from tableviews.engine.field_types import default_value_for
from tableviews.models.table import DataTable, TableField
from tableviews.schemas.table import FieldCreate, FieldUpdate


def get_field(db: Session, table_id: str, field_id: str) -> Optional[TableField]:
    return db.get(TableField, {"table_id": table_id, "id": field_id})


def add_field(db: Session, table: DataTable, data: FieldCreate) -> TableField:
    """
    Append a column. Every existing record gets the type's default value for it.
    """
    field = field_from_create(table.id, data, next_position(table.fields))
    table.fields.append(field)

    default = default_value_for(field.type)
    for rec in table.records:
        rec.data = {**(rec.data or {}), field.id: default}

    db.commit()
    db.refresh(field)
    return field


def update_field(db: Session, field: TableField, data: FieldUpdate) -> TableField:
    # A type change leaves stored cells as they are
    if data.name is not None:
        field.name = data.name
    if data.type is not None:
        field.type = data.type.value
    if data.required is not None:
        field.required = bool(data.required)
    if data.options is not None:
        field.options = list(data.options)
    db.commit()
    db.refresh(field)
    return field


def delete_field(db: Session, table: DataTable, field: TableField) -> bool:
    """
    Remove the column and its cell from every record. Filters and sorts that
    still point at it are left in place; view resolution skips them.
    """
    for rec in table.records:
        if field.id in (rec.data or {}):
            rec.data = {k: v for k, v in rec.data.items() if k != field.id}
    table.fields.remove(field)
    db.delete(field)
    db.commit()
    return True


def reorder_fields(
    db: Session, table: DataTable, from_index: int, to_index: int
) -> Optional[List[TableField]]:
    """Move one field; returns None when either index is out of range."""
    fields = list(table.fields)
    if not (0 <= from_index < len(fields)) or not (0 <= to_index < len(fields)):
        return None
    moved = fields.pop(from_index)
    fields.insert(to_index, moved)
    for position, f in enumerate(fields):
        f.position = position
    db.commit()
    return list(table.fields)
