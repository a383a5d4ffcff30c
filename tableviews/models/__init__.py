# File: /tableviews/models/__init__.py | Version: 1.0 | Title: Models Package Exports
from .table import DataTable, TableField, TableRecord, TableView

__all__ = ["DataTable", "TableField", "TableRecord", "TableView"]
