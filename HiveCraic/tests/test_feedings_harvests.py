from datetime import timedelta

from utils.datetime_utils import today_local


def test_feeding_crud_and_hive_number(client, headers, make_hive):
    hive = make_hive(headers, "H-05")
    r = client.post("/feedings", json={
        "hive_id": hive["hive_id"], "feed_date": str(today_local()),
        "feed_type": "Sugar syrup 2:1", "quantity": 2.5, "unit": "liters",
    }, headers=headers)
    assert r.status_code == 201, r.text
    f = r.json()
    assert f["hive_number"] == "H-05"
    assert f["quantity"] == 2.5
    assert f["unit"] == "liters"

    r = client.patch(f"/feedings/{f['feeding_id']}", json={"quantity": 3}, headers=headers)
    assert r.json()["quantity"] == 3.0

    assert client.delete(f"/feedings/{f['feeding_id']}", headers=headers).status_code == 204


def test_feeding_unit_validated(client, headers, make_hive):
    hive = make_hive(headers)
    r = client.post("/feedings", json={
        "hive_id": hive["hive_id"], "feed_date": str(today_local()), "feed_type": "Fondant", "unit": "pints",
    }, headers=headers)
    assert r.status_code == 422


def test_feedings_filter_by_hive_and_apiary(client, headers, make_apiary, make_hive):
    orchard = make_apiary(headers, "Orchard")
    h1 = make_hive(headers, "H-1", apiary_id=orchard["apiary_id"])
    h2 = make_hive(headers, "H-2")
    today = today_local()
    for hive, days in ((h1, 1), (h2, 2), (h1, 3)):
        client.post("/feedings", json={
            "hive_id": hive["hive_id"], "feed_date": str(today - timedelta(days=days)), "feed_type": "Fondant",
        }, headers=headers)

    all_rows = client.get("/feedings", headers=headers).json()
    assert [r["hive_number"] for r in all_rows] == ["H-1", "H-2", "H-1"]

    by_hive = client.get("/feedings", params={"hive_id": h2["hive_id"]}, headers=headers).json()
    assert [r["hive_number"] for r in by_hive] == ["H-2"]

    by_apiary = client.get("/feedings", params={"apiary_id": orchard["apiary_id"]}, headers=headers).json()
    assert len(by_apiary) == 2
    assert {r["hive_number"] for r in by_apiary} == {"H-1"}


def test_harvest_crud_and_filters(client, headers, other_headers, make_apiary, make_hive):
    apiary = make_apiary(headers, "Heather Hill")
    hive = make_hive(headers, "H-9", apiary_id=apiary["apiary_id"])
    other = make_hive(headers, "H-10")

    r = client.post("/harvests", json={
        "hive_id": hive["hive_id"], "harvest_date": str(today_local()),
        "honey_weight": 12.5, "wax_weight": 0.8, "frames_harvested": 9,
    }, headers=headers)
    assert r.status_code == 201, r.text
    h = r.json()
    assert h["hive_number"] == "H-9"
    assert h["unit"] == "kg"
    assert h["honey_weight"] == 12.5

    client.post("/harvests", json={"hive_id": other["hive_id"], "harvest_date": str(today_local())}, headers=headers)

    rows = client.get("/harvests", params={"apiary_id": apiary["apiary_id"]}, headers=headers).json()
    assert [x["harvest_id"] for x in rows] == [h["harvest_id"]]

    assert client.get("/harvests", headers=other_headers).json() == []
    assert client.get(f"/harvests/{h['harvest_id']}", headers=other_headers).status_code == 404


def test_harvest_on_foreign_hive(client, headers, other_headers, make_hive):
    theirs = make_hive(other_headers)
    r = client.post("/harvests", json={"hive_id": theirs["hive_id"], "harvest_date": str(today_local())}, headers=headers)
    assert r.status_code == 422
