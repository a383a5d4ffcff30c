# File: /tableviews/__init__.py | Version: 1.0 | Path: /tableviews/__init__.py
"""Airtable-style table store with a pure filter/sort view engine."""

__version__ = "1.0.0"
