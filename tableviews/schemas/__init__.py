# File: /tableviews/schemas/__init__.py | Version: 1.0 | Path: /tableviews/schemas/__init__.py
from . import table

__all__ = ["table"]
