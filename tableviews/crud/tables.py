# File: /tableviews/crud/tables.py | Version: 1.0 | Title: CRUD helpers for Tables (+ default table seed)
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from tableviews.engine.field_types import FieldType, default_value_for
from tableviews.models.table import DataTable, TableField, TableRecord, TableView, gen_uuid
from tableviews.schemas.table import FieldCreate, TableCreate

log = logging.getLogger(__name__)


def next_position(rows: Iterable) -> int:
    return max((r.position for r in rows), default=-1) + 1


def _default_view(table_id: str) -> TableView:
    return TableView(
        id=gen_uuid(),
        table_id=table_id,
        name="All Records",
        type="grid",
        filters=[],
        sorts=[],
        hidden_fields=[],
        position=0,
    )


def field_from_create(table_id: str, data: FieldCreate, position: int) -> TableField:
    return TableField(
        id=data.id or gen_uuid(),
        table_id=table_id,
        name=data.name,
        type=data.type.value,
        required=bool(data.required),
        options=list(data.options) if data.options else None,
        position=position,
    )


def create_table(db: Session, data: TableCreate) -> DataTable:
    """
    A new table always starts with one grid view ("All Records"), made active.
    Without explicit fields it gets a single required text column "Name".
    """
    table_id = data.id or gen_uuid()
    fields = data.fields or [FieldCreate(name="Name", type=FieldType.text, required=True)]

    table = DataTable(id=table_id, name=data.name)
    table.fields = [field_from_create(table_id, f, i) for i, f in enumerate(fields)]
    view = _default_view(table_id)
    table.views = [view]
    table.active_view_id = view.id

    db.add(table)
    db.commit()
    db.refresh(table)
    log.info("Created table %s (%s) with %d field(s)", table.id, table.name, len(fields))
    return table


def get_table(db: Session, table_id: str) -> Optional[DataTable]:
    return db.get(DataTable, table_id)


def list_tables(db: Session) -> List[DataTable]:
    return db.query(DataTable).order_by(DataTable.created_at.asc(), DataTable.name.asc()).all()


def seed_default_table(db: Session) -> Optional[DataTable]:
    """Populate an empty store with the sample task table. No-op otherwise."""
    if db.query(DataTable).first() is not None:
        return None

    table = create_table(
        db,
        TableCreate(
            id="default-table",
            name="My Table",
            fields=[
                FieldCreate(id="field-1", name="Name", type=FieldType.text, required=True),
                FieldCreate(
                    id="field-2",
                    name="Status",
                    type=FieldType.select,
                    options=["Todo", "In Progress", "Done"],
                ),
                FieldCreate(id="field-3", name="Priority", type=FieldType.number),
            ],
        ),
    )
    samples = [
        ("record-1", {"field-1": "Sample Task", "field-2": "Todo", "field-3": 1}),
        ("record-2", {"field-1": "Another Task", "field-2": "In Progress", "field-3": 2}),
    ]
    for position, (record_id, values) in enumerate(samples):
        data = {f.id: default_value_for(f.type) for f in table.fields}
        data.update(values)
        db.add(
            TableRecord(
                id=record_id,
                table_id=table.id,
                data=data,
                status="idle",
                position=position,
            )
        )
    db.commit()
    db.refresh(table)
    log.info("Seeded default table %s", table.id)
    return table
