# File: /tableviews/schemas/_base.py | Version: 1.0 | Title: Pydantic Base Schema for ORM-backed output models
from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    # ORM rows and plain dicts both validate into output schemas
    model_config = ConfigDict(from_attributes=True)
