# File: /tableviews/routers/tables.py | Version: 1.0 | Title: Tables Router (create/list/get)
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from tableviews.crud.tables import create_table, get_table, list_tables
from tableviews.db.session import get_db
from tableviews.models.table import DataTable
from tableviews.schemas.table import TableCreate, TableOut, TableSummary

router = APIRouter(prefix="/tables", tags=["Tables"])


def table_or_404(db: Session, table_id: str) -> DataTable:
    t = get_table(db, table_id)
    if t is None:
        raise HTTPException(status_code=404, detail="Table not found")
    return t


@router.get("", response_model=List[TableSummary], summary="List tables")
def list_tables_endpoint(db: Session = Depends(get_db)):
    return list_tables(db)


@router.post("", response_model=TableOut, summary="Create a table (with a default view)")
def create_table_endpoint(data: TableCreate, db: Session = Depends(get_db)):
    if data.id and get_table(db, data.id) is not None:
        raise HTTPException(status_code=409, detail="Table id already exists")
    if data.fields:
        ids = [f.id for f in data.fields if f.id]
        if len(ids) != len(set(ids)):
            raise HTTPException(status_code=400, detail="Duplicate field id")
    return create_table(db, data)


@router.get("/{table_id}", response_model=TableOut, summary="Get a table with fields, records and views")
def get_table_endpoint(table_id: str, db: Session = Depends(get_db)):
    return table_or_404(db, table_id)
