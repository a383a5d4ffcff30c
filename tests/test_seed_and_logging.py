# File: /tests/test_seed_and_logging.py | Version: 1.0 | Title: Default table seed + logging configuration
import json
import logging

from tableviews.core.logging import JsonConsole, configure_logging
from tableviews.crud.tables import list_tables, seed_default_table
from tableviews.crud.views import view_records


def test_seed_default_table_on_empty_store(db_session):
    table = seed_default_table(db_session)
    assert table is not None
    assert table.id == "default-table"
    assert table.name == "My Table"
    assert [f.id for f in table.fields] == ["field-1", "field-2", "field-3"]
    assert table.fields[1].options == ["Todo", "In Progress", "Done"]
    assert [r.id for r in table.records] == ["record-1", "record-2"]
    assert table.records[0].data == {"field-1": "Sample Task", "field-2": "Todo", "field-3": 1}
    assert all(r.status == "idle" for r in table.records)

    view = table.views[0]
    assert table.active_view_id == view.id
    assert [r.id for r in view_records(table, view)] == ["record-1", "record-2"]


def test_seed_is_a_noop_when_tables_exist(db_session):
    seed_default_table(db_session)
    assert seed_default_table(db_session) is None
    assert len(list_tables(db_session)) == 1


def test_json_formatter():
    record = logging.LogRecord("tableviews.engine", logging.DEBUG, __file__, 1, "skipped %s", ("f1",), None)
    payload = json.loads(JsonConsole().format(record))
    assert payload == {"level": "DEBUG", "logger": "tableviews.engine", "message": "skipped f1"}


def test_configure_logging_sets_levels():
    try:
        configure_logging(level="debug", use_json=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        assert any(isinstance(h.formatter, JsonConsole) for h in logging.getLogger().handlers)
    finally:
        configure_logging(level="INFO", use_json=False)
