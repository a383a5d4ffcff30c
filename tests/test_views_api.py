# File: /tests/test_views_api.py | Version: 1.0 | Title: Views API (CRUD, active view, duplicate, filters, sorts)
from __future__ import annotations

from typing import Dict


def _table(client) -> Dict[str, str]:
    payload = {
        "fields": [
            {"id": "name", "name": "Name"},
            {"id": "qty", "name": "Qty", "type": "number"},
            {"id": "done", "name": "Done", "type": "checkbox"},
        ]
    }
    body = client.post("/tables", json=payload).json()
    return {"tid": body["id"], "vid": body["active_view_id"]}


def test_views_crud_lifecycle(client):
    ids = _table(client)
    tid = ids["tid"]

    # --- Create ---
    r = client.post(
        f"/tables/{tid}/views",
        json={"name": "Open items", "type": "list", "hidden_fields": ["qty"]},
    )
    assert r.status_code == 200, r.text
    view = r.json()
    assert view["type"] == "list" and view["hidden_fields"] == ["qty"]

    # --- List ---
    names = [v["name"] for v in client.get(f"/tables/{tid}/views").json()]
    assert names == ["All Records", "Open items"]

    # --- Update ---
    r2 = client.patch(f"/tables/{tid}/views/{view['id']}", json={"name": "Renamed", "type": "grid"})
    assert r2.status_code == 200
    assert r2.json()["name"] == "Renamed"
    assert r2.json()["type"] == "grid"
    assert r2.json()["hidden_fields"] == ["qty"]

    # --- Delete ---
    r3 = client.delete(f"/tables/{tid}/views/{view['id']}")
    assert r3.status_code == 200
    assert r3.json()["detail"] == "View deleted"
    assert client.get(f"/tables/{tid}/views/{view['id']}").status_code == 404


def test_last_view_cannot_be_deleted(client):
    ids = _table(client)
    r = client.delete(f"/tables/{ids['tid']}/views/{ids['vid']}")
    assert r.status_code == 409
    assert len(client.get(f"/tables/{ids['tid']}/views").json()) == 1


def test_deleting_active_view_activates_first_remaining(client):
    ids = _table(client)
    tid = ids["tid"]
    second = client.post(f"/tables/{tid}/views", json={"name": "Second"}).json()["id"]

    r = client.post(f"/tables/{tid}/views/{second}/activate")
    assert r.status_code == 200
    assert r.json()["active_view_id"] == second

    client.delete(f"/tables/{tid}/views/{second}")
    assert client.get(f"/tables/{tid}").json()["active_view_id"] == ids["vid"]


def test_duplicate_view_copies_configuration(client):
    ids = _table(client)
    tid, vid = ids["tid"], ids["vid"]
    client.post(f"/tables/{tid}/views/{vid}/filters", json={"field_id": "qty", "operator": "greater_than", "value": "1"})
    client.put(f"/tables/{tid}/views/{vid}/sorts", json={"field_id": "name", "direction": "desc"})

    r = client.post(f"/tables/{tid}/views/{vid}/duplicate")
    assert r.status_code == 200, r.text
    copy = r.json()
    assert copy["id"] != vid
    assert copy["name"] == "All Records (Copy)"
    assert [f["field_id"] for f in copy["filters"]] == ["qty"]
    assert [(s["field_id"], s["direction"]) for s in copy["sorts"]] == [("name", "desc")]

    # editing the copy leaves the original alone
    client.delete(f"/tables/{tid}/views/{copy['id']}/filters/{copy['filters'][0]['id']}")
    assert len(client.get(f"/tables/{tid}/views/{vid}").json()["filters"]) == 1


def test_add_and_remove_filter(client):
    ids = _table(client)
    tid, vid = ids["tid"], ids["vid"]

    r = client.post(
        f"/tables/{tid}/views/{vid}/filters",
        json={"field_id": "name", "operator": "contains", "value": "ab"},
    )
    assert r.status_code == 200, r.text
    flt = r.json()["filters"][0]
    assert flt["operator"] == "contains" and flt["value"] == "ab" and flt["id"]

    r2 = client.delete(f"/tables/{tid}/views/{vid}/filters/{flt['id']}")
    assert r2.status_code == 200
    assert r2.json()["filters"] == []

    assert client.delete(f"/tables/{tid}/views/{vid}/filters/{flt['id']}").status_code == 404


def test_filter_validation(client):
    ids = _table(client)
    url = f"/tables/{ids['tid']}/views/{ids['vid']}/filters"

    # operator not offered for checkbox columns
    r = client.post(url, json={"field_id": "done", "operator": "contains", "value": "x"})
    assert r.status_code == 400
    # unknown field
    assert client.post(url, json={"field_id": "nope", "operator": "equals"}).status_code == 404
    # unknown operator
    assert client.post(url, json={"field_id": "name", "operator": "regex"}).status_code == 422


def test_add_sort_replaces_existing_sort_for_field(client):
    ids = _table(client)
    url = f"/tables/{ids['tid']}/views/{ids['vid']}/sorts"

    client.put(url, json={"field_id": "qty"})
    client.put(url, json={"field_id": "name", "direction": "asc"})
    r = client.put(url, json={"field_id": "qty", "direction": "desc"})
    assert r.status_code == 200, r.text
    assert [(s["field_id"], s["direction"]) for s in r.json()["sorts"]] == [
        ("name", "asc"),
        ("qty", "desc"),
    ]

    r2 = client.delete(f"{url}/qty")
    assert r2.status_code == 200
    assert [s["field_id"] for s in r2.json()["sorts"]] == ["name"]


def test_toggle_sort_cycles(client):
    ids = _table(client)
    url = f"/tables/{ids['tid']}/views/{ids['vid']}/sorts/qty:toggle"

    first = client.post(url)
    assert first.status_code == 200, first.text
    assert [(s["field_id"], s["direction"]) for s in first.json()["sorts"]] == [("qty", "asc")]

    second = client.post(url).json()
    assert [(s["field_id"], s["direction"]) for s in second["sorts"]] == [("qty", "desc")]

    third = client.post(url).json()
    assert third["sorts"] == []

    assert client.post(f"/tables/{ids['tid']}/views/{ids['vid']}/sorts/nope:toggle").status_code == 404


def test_create_view_with_filters_and_sorts(client):
    ids = _table(client)
    r = client.post(
        f"/tables/{ids['tid']}/views",
        json={
            "name": "Big",
            "filters": [{"field_id": "qty", "operator": "greater_equal", "value": "10"}],
            "sorts": [
                {"field_id": "qty", "direction": "asc"},
                {"field_id": "qty", "direction": "desc"},
            ],
        },
    )
    assert r.status_code == 200, r.text
    # one sort per field survives
    assert [(s["field_id"], s["direction"]) for s in r.json()["sorts"]] == [("qty", "desc")]


def test_missing_view_404(client):
    ids = _table(client)
    assert client.get(f"/tables/{ids['tid']}/views/nope").status_code == 404
    assert client.get(f"/tables/{ids['tid']}/views/nope/records").status_code == 404
