# File: /tableviews/routers/field_types.py | Version: 1.0 | Title: Field type registry listing
from typing import List

from fastapi import APIRouter

from tableviews.engine.field_types import (
    FieldType,
    default_value_for,
    needs_value,
    operator_label,
    operators_for,
)
from tableviews.schemas.table import FieldTypeOut, OperatorOut

router = APIRouter(tags=["Field Types"])


@router.get("/field-types", response_model=List[FieldTypeOut])
def list_field_types() -> List[FieldTypeOut]:
    """
    Supported column types with their default cell value and filter operators,
    in the order a filter picker should offer them.
    """
    return [
        FieldTypeOut(
            type=ft.value,
            default_value=default_value_for(ft),
            operators=[
                OperatorOut(value=op.value, label=operator_label(op), needs_value=needs_value(op))
                for op in operators_for(ft)
            ],
        )
        for ft in FieldType
    ]
