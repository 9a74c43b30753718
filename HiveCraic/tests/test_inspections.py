from datetime import date, timedelta

import pytest

from utils.datetime_utils import today_local


@pytest.fixture
def hive(make_hive, headers):
    return make_hive(headers, "H-01")


def test_inspection_defaults_and_hive_number(make_inspection, headers, hive):
    ins = make_inspection(headers, hive["hive_id"], today_local())
    assert ins["hive_number"] == "H-01"
    assert ins["brood_pattern_rating"] == 3
    assert ins["temperament_rating"] == 3
    assert ins["population_strength"] == 3
    assert ins["queen_seen"] is False
    assert ins["brood_frames"] is None


@pytest.mark.parametrize("field,value", [
    ("brood_pattern_rating", 0),
    ("brood_pattern_rating", 6),
    ("temperament_rating", 9),
    ("brood_frames", 11),
    ("brood_frames", -1),
    ("honey_stores", "Plenty"),
])
def test_inspection_field_ranges(client, headers, hive, field, value):
    body = {"hive_id": hive["hive_id"], "inspection_date": str(today_local()), field: value}
    assert client.post("/inspections", json=body, headers=headers).status_code == 422


def test_inspection_on_foreign_hive_rejected(client, headers, other_headers, make_hive):
    theirs = make_hive(other_headers, "T-1")
    body = {"hive_id": theirs["hive_id"], "inspection_date": str(today_local())}
    assert client.post("/inspections", json=body, headers=headers).status_code == 422


def test_inspection_list_period_filters(client, headers, hive, make_hive, make_inspection):
    today = today_local()
    other_hive = make_hive(headers, "H-02")
    make_inspection(headers, hive["hive_id"], today - timedelta(days=10))
    make_inspection(headers, hive["hive_id"], today - timedelta(days=120))
    make_inspection(headers, hive["hive_id"], today - timedelta(days=300))
    make_inspection(headers, other_hive["hive_id"], today - timedelta(days=500))

    def dates(**params):
        r = client.get("/inspections", params=params, headers=headers)
        assert r.status_code == 200, r.text
        return [(today - date.fromisoformat(i["inspection_date"])).days for i in r.json()]

    assert dates() == [10, 120, 300, 500]
    assert dates(period="3months") == [10]
    assert dates(period="6months") == [10, 120]
    assert dates(period="1year") == [10, 120, 300]
    assert dates(period="all", hive_id=other_hive["hive_id"]) == [500]

    start = today - timedelta(days=310)
    end = today - timedelta(days=100)
    assert dates(period="custom", start_date=str(start), end_date=str(end)) == [120, 300]
    assert dates(period="custom", start_date=str(start)) == [10, 120, 300]


def test_inspection_custom_period_bad_range(client, headers):
    today = today_local()
    r = client.get("/inspections", params={
        "period": "custom", "start_date": str(today), "end_date": str(today - timedelta(days=1)),
    }, headers=headers)
    assert r.status_code == 400


def test_inspection_summary(client, headers, hive, make_inspection):
    today = today_local()
    make_inspection(headers, hive["hive_id"], today - timedelta(days=3),
                    brood_pattern_rating=5, temperament_rating=4, population_strength=4,
                    brood_frames=8, queen_seen=True, eggs_present=True)
    make_inspection(headers, hive["hive_id"], today - timedelta(days=20),
                    brood_pattern_rating=3, temperament_rating=2, population_strength=3,
                    queen_seen=False, eggs_present=True)
    make_inspection(headers, hive["hive_id"], today - timedelta(days=400),
                    brood_pattern_rating=1, temperament_rating=1, population_strength=1)

    r = client.get("/inspections/summary", params={"period": "3months", "hive_id": hive["hive_id"]}, headers=headers)
    assert r.status_code == 200
    s = r.json()
    assert s["period"] == "3months"
    assert s["count"] == 2
    assert s["avg_brood_pattern"] == 4.0
    assert s["avg_temperament"] == 3.0
    assert s["avg_population_strength"] == 3.5
    assert s["avg_brood_frames"] == 8.0
    assert s["queen_seen_pct"] == 50.0
    assert s["eggs_present_pct"] == 100.0


def test_inspection_summary_empty(client, headers):
    s = client.get("/inspections/summary", headers=headers).json()
    assert s["count"] == 0
    assert s["avg_brood_pattern"] is None
    assert s["queen_seen_pct"] is None


def test_inspection_update_and_delete(client, headers, hive, make_inspection):
    ins = make_inspection(headers, hive["hive_id"], today_local())
    r = client.patch(f"/inspections/{ins['inspection_id']}", json={
        "honey_stores": "Good", "disease_issues": "chalkbrood", "inspection_date": None,
    }, headers=headers)
    assert r.status_code == 200
    assert r.json()["honey_stores"] == "Good"
    assert r.json()["inspection_date"] == ins["inspection_date"]

    assert client.delete(f"/inspections/{ins['inspection_id']}", headers=headers).status_code == 204
    assert client.get(f"/inspections/{ins['inspection_id']}", headers=headers).status_code == 404


def test_inspections_of_other_user_hidden(client, headers, other_headers, make_hive, make_inspection):
    theirs = make_hive(other_headers, "T-1")
    ins = make_inspection(other_headers, theirs["hive_id"], today_local())
    assert client.get("/inspections", headers=headers).json() == []
    assert client.get(f"/inspections/{ins['inspection_id']}", headers=headers).status_code == 404
