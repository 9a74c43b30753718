import pytest

from models.dropdown import DropdownValue


@pytest.fixture
def category(client, admin_headers):
    r = client.post("/dropdowns/categories", json={
        "category_name": "Feed types", "category_key": "feed_type", "description": "Feeding form",
    }, headers=admin_headers)
    assert r.status_code == 201, r.text
    return r.json()


def _add_value(client, admin_headers, category_id, value, **extra):
    r = client.post(f"/dropdowns/categories/{category_id}/values", json={"value": value, **extra}, headers=admin_headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_display_order_defaults_to_end(client, admin_headers, category):
    first = _add_value(client, admin_headers, category["category_id"], "Fondant")
    second = _add_value(client, admin_headers, category["category_id"], "Syrup 1:1")
    explicit = _add_value(client, admin_headers, category["category_id"], "Pollen patty", display_order=10)
    last = _add_value(client, admin_headers, category["category_id"], "Invert syrup")

    assert first["display_order"] == 1
    assert second["display_order"] == 2
    assert explicit["display_order"] == 10
    assert last["display_order"] == 11


def test_values_sorted_by_display_order(client, admin_headers, headers, category):
    _add_value(client, admin_headers, category["category_id"], "Late", display_order=5)
    _add_value(client, admin_headers, category["category_id"], "Early", display_order=1)

    cats = client.get("/dropdowns", headers=headers).json()
    assert [v["value"] for v in cats[0]["values"]] == ["Early", "Late"]


def test_toggle_and_active_values(client, admin_headers, headers, category):
    fondant = _add_value(client, admin_headers, category["category_id"], "Fondant")
    _add_value(client, admin_headers, category["category_id"], "Syrup")

    r = client.post(f"/dropdowns/values/{fondant['value_id']}/toggle", headers=admin_headers)
    assert r.json()["is_active"] is False
    active = client.get("/dropdowns/feed_type/values", headers=headers).json()
    assert [v["value"] for v in active] == ["Syrup"]

    r = client.post(f"/dropdowns/values/{fondant['value_id']}/toggle", headers=admin_headers)
    assert r.json()["is_active"] is True
    assert len(client.get("/dropdowns/feed_type/values", headers=headers).json()) == 2


def test_unknown_category_key_has_no_values(client, headers):
    assert client.get("/dropdowns/nothing_here/values", headers=headers).json() == []


def test_category_key_unique(client, admin_headers, category):
    r = client.post("/dropdowns/categories", json={"category_name": "Again", "category_key": "feed_type"}, headers=admin_headers)
    assert r.status_code == 409


def test_category_key_format(client, admin_headers):
    r = client.post("/dropdowns/categories", json={"category_name": "Bad", "category_key": "Bad Key"}, headers=admin_headers)
    assert r.status_code == 422


def test_update_value_and_category(client, admin_headers, category):
    v = _add_value(client, admin_headers, category["category_id"], "Fondnat")
    r = client.patch(f"/dropdowns/values/{v['value_id']}", json={"value": "Fondant"}, headers=admin_headers)
    assert r.json()["value"] == "Fondant"

    r = client.patch(f"/dropdowns/categories/{category['category_id']}", json={"category_name": "Feeds"}, headers=admin_headers)
    assert r.json()["category_name"] == "Feeds"
    assert r.json()["category_key"] == "feed_type"


def test_delete_category_removes_values(client, admin_headers, category, db_session):
    _add_value(client, admin_headers, category["category_id"], "Fondant")
    assert client.delete(f"/dropdowns/categories/{category['category_id']}", headers=admin_headers).status_code == 204
    assert db_session.query(DropdownValue).count() == 0
    assert client.get("/dropdowns", headers=admin_headers).json() == []


def test_delete_value(client, admin_headers, category):
    v = _add_value(client, admin_headers, category["category_id"], "Fondant")
    assert client.delete(f"/dropdowns/values/{v['value_id']}", headers=admin_headers).status_code == 204
    assert client.delete(f"/dropdowns/values/{v['value_id']}", headers=admin_headers).status_code == 404


def test_writes_require_admin(client, headers, category):
    r = client.post("/dropdowns/categories", json={"category_name": "X", "category_key": "x"}, headers=headers)
    assert r.status_code == 403
    r = client.post(f"/dropdowns/categories/{category['category_id']}/values", json={"value": "X"}, headers=headers)
    assert r.status_code == 403
    assert client.delete(f"/dropdowns/categories/{category['category_id']}", headers=headers).status_code == 403
