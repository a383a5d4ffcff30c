# File: /tableviews/schemas/table.py | Version: 1.0 | Title: Pydantic v2 schemas for Tables, Fields, Records, Views
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from tableviews.engine.field_types import FieldType, FilterOperator, SortDirection
from tableviews.schemas._base import BaseSchema

RecordStatus = Literal["entering", "idle", "updating", "exiting"]
ViewType = Literal["grid", "list"]


# ---- Fields ----


class FieldCreate(BaseModel):
    id: Optional[str] = Field(default=None, min_length=1, max_length=100)
    name: str = Field(default="New Field", min_length=1, max_length=200)
    type: FieldType = FieldType.text
    required: bool = False
    options: Optional[List[str]] = None


class FieldUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    type: Optional[FieldType] = None
    required: Optional[bool] = None
    options: Optional[List[str]] = None


class FieldReorder(BaseModel):
    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)


class FieldOut(BaseSchema):
    id: str
    name: str
    # Plain str: rows written before a type was retired must still load
    type: str
    required: bool = False
    options: Optional[List[str]] = None


# ---- Records ----


class RecordCreate(BaseModel):
    id: Optional[str] = Field(default=None, min_length=1, max_length=100)
    data: Dict[str, Any] = Field(default_factory=dict)


class RecordUpdate(BaseModel):
    data: Dict[str, Any]


class RecordOut(BaseSchema):
    id: str
    data: Dict[str, Any] = Field(default_factory=dict)
    status: str = "idle"


# ---- Filters & Sorts ----


class FilterCreate(BaseModel):
    field_id: str
    operator: FilterOperator
    value: Optional[str] = ""


class FilterOut(BaseSchema):
    id: str
    field_id: str
    operator: str
    value: Optional[str] = ""


class SortCreate(BaseModel):
    field_id: str
    direction: SortDirection = SortDirection.asc


class SortOut(BaseSchema):
    id: str
    field_id: str
    direction: str = SortDirection.asc.value


# ---- Views ----


class ViewCreate(BaseModel):
    id: Optional[str] = Field(default=None, min_length=1, max_length=100)
    name: str = Field(default="New View", min_length=1, max_length=200)
    type: ViewType = "grid"
    filters: List[FilterCreate] = Field(default_factory=list)
    sorts: List[SortCreate] = Field(default_factory=list)
    hidden_fields: List[str] = Field(default_factory=list)


class ViewUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    type: Optional[ViewType] = None
    hidden_fields: Optional[List[str]] = None


class ViewOut(BaseSchema):
    id: str
    name: str
    type: str = "grid"
    filters: List[FilterOut] = Field(default_factory=list)
    sorts: List[SortOut] = Field(default_factory=list)
    hidden_fields: List[str] = Field(default_factory=list)


class ViewRecordsOut(BaseModel):
    view_id: str
    count: int
    items: List[RecordOut]


# ---- Tables ----


class TableCreate(BaseModel):
    id: Optional[str] = Field(default=None, min_length=1, max_length=100)
    name: str = Field(default="New Table", min_length=1, max_length=200)
    fields: Optional[List[FieldCreate]] = None


class TableSummary(BaseSchema):
    id: str
    name: str
    active_view_id: Optional[str] = None


class TableOut(TableSummary):
    fields: List[FieldOut] = Field(default_factory=list)
    records: List[RecordOut] = Field(default_factory=list)
    views: List[ViewOut] = Field(default_factory=list)


# ---- Field type registry listing ----


class OperatorOut(BaseModel):
    value: str
    label: str
    needs_value: bool


class FieldTypeOut(BaseModel):
    type: str
    default_value: Any = None
    operators: List[OperatorOut]
