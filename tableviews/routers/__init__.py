# File: /tableviews/routers/__init__.py | Version: 1.0 | Path: /tableviews/routers/__init__.py
"""
Router package exports.

Keeping these explicit helps static analyzers and avoids surprises
when importing submodules like: `from tableviews.routers import views as views_router`.
"""
from . import field_types, fields, health, records, tables, views

__all__ = ["field_types", "fields", "health", "records", "tables", "views"]
