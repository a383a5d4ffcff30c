# File: /tableviews/models/table.py | Version: 1.0 | Title: SQLAlchemy models for Tables, Fields, Records, Views
from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Dict, List as TList, Optional
from uuid import uuid4

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tableviews.db.base_class import Base


def gen_uuid() -> str:
    return str(uuid4())


class DataTable(Base):
    __tablename__ = "data_table"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    active_view_id: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )

    fields: Mapped[TList["TableField"]] = relationship(
        back_populates="table",
        cascade="all, delete-orphan",
        order_by="TableField.position",
    )
    records: Mapped[TList["TableRecord"]] = relationship(
        back_populates="table",
        cascade="all, delete-orphan",
        order_by="TableRecord.position",
    )
    views: Mapped[TList["TableView"]] = relationship(
        back_populates="table",
        cascade="all, delete-orphan",
        order_by="TableView.position",
    )


class TableField(Base):
    __tablename__ = "table_field"

    # ids are unique per table, not globally
    table_id: Mapped[str] = mapped_column(ForeignKey("data_table.id"), primary_key=True)
    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Free-form: retyping a column never rewrites the cells already stored
    type: Mapped[str] = mapped_column(String(50), nullable=False, default="text")
    required: Mapped[bool] = mapped_column(Boolean, default=False)
    options: Mapped[Optional[TList[str]]] = mapped_column(JSON, nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    table: Mapped["DataTable"] = relationship(back_populates="fields")


class TableRecord(Base):
    __tablename__ = "table_record"
    __table_args__ = (Index("ix_table_record_table_position", "table_id", "position"),)

    table_id: Mapped[str] = mapped_column(ForeignKey("data_table.id"), primary_key=True)
    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    # JSON columns are not mutation-tracked: always assign a new dict
    data: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="entering")
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    table: Mapped["DataTable"] = relationship(back_populates="records")


class TableView(Base):
    __tablename__ = "table_view"

    table_id: Mapped[str] = mapped_column(ForeignKey("data_table.id"), primary_key=True)
    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="grid")

    # Lists of {"id", "field_id", "operator", "value"} / {"id", "field_id", "direction"}
    filters: Mapped[TList[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    sorts: Mapped[TList[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    hidden_fields: Mapped[TList[str]] = mapped_column(JSON, nullable=False, default=list)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    table: Mapped["DataTable"] = relationship(back_populates="views")
