# File: /tests/test_health_and_field_types.py | Version: 1.0 | Title: Health probes + field type registry endpoint


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_readyz(client):
    r = client.get("/readyz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "db": "ok"}


def test_field_types_listing(client):
    r = client.get("/field-types")
    assert r.status_code == 200
    by_type = {row["type"]: row for row in r.json()}
    assert list(by_type) == ["text", "number", "date", "select", "checkbox"]

    assert by_type["number"]["default_value"] == 0
    assert by_type["checkbox"]["default_value"] is False
    assert by_type["text"]["default_value"] == ""

    checkbox_ops = by_type["checkbox"]["operators"]
    assert checkbox_ops == [
        {"value": "is_checked", "label": "Is checked", "needs_value": False},
        {"value": "is_not_checked", "label": "Is not checked", "needs_value": False},
    ]
    assert [op["value"] for op in by_type["select"]["operators"]] == [
        "equals",
        "not_equals",
        "is_empty",
        "is_not_empty",
    ]
    assert by_type["date"]["operators"][2] == {
        "value": "greater_than",
        "label": "Greater than",
        "needs_value": True,
    }
