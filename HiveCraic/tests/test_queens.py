from datetime import date, timedelta

from utils.datetime_utils import today_local


def test_queen_marking_color_stored_from_birth_year(make_queen, headers):
    queen = make_queen(headers, "Q-23", birth_date="2023-06-01")
    assert queen["marking_color"] == "Red"
    assert queen["expected_marking_color"] == "Red"
    assert queen["source"] == "bred"
    assert queen["status"] == "active"


def test_queen_explicit_marking_color_kept(make_queen, headers):
    queen = make_queen(headers, "Q-24", birth_date="2024-06-01", marking_color="None")
    assert queen["marking_color"] == "None"
    assert queen["expected_marking_color"] == "Green"


def test_queen_without_birth_date(make_queen, headers):
    queen = make_queen(headers, "Q-unknown", source="swarm")
    assert queen["marking_color"] is None
    assert queen["age"] is None
    assert queen["expected_marking_color"] is None


def test_queen_age_is_computed(make_queen, headers):
    born = today_local() - timedelta(days=40)
    queen = make_queen(headers, "Q-young", birth_date=str(born))
    assert queen["age"]["total_days"] == 40
    assert queen["age"]["years"] == 0


def test_queen_birth_date_in_future_rejected(client, headers):
    tomorrow = today_local() + timedelta(days=1)
    r = client.post("/queens", json={"queen_number": "Q-F", "birth_date": str(tomorrow)}, headers=headers)
    assert r.status_code == 422


def test_queens_newest_first_with_filters(client, headers, other_headers, make_queen):
    make_queen(headers, "Q-001", genetics="Buckfast")
    make_queen(headers, "Q-002", genetics="Native Irish black bee", status="retired")
    make_queen(headers, "Q-003", genetics="Carniolan")
    make_queen(other_headers, "Q-999", genetics="Buckfast")

    r = client.get("/queens", headers=headers)
    assert [q["queen_number"] for q in r.json()] == ["Q-003", "Q-002", "Q-001"]

    r = client.get("/queens", params={"status": "retired"}, headers=headers)
    assert [q["queen_number"] for q in r.json()] == ["Q-002"]

    r = client.get("/queens", params={"search": "buck"}, headers=headers)
    assert [q["queen_number"] for q in r.json()] == ["Q-001"]

    r = client.get("/queens", params={"search": "q-00"}, headers=headers)
    assert len(r.json()) == 3


def test_queen_search_treats_wildcards_literally(client, headers, make_queen):
    make_queen(headers, "Q-001")
    make_queen(headers, "Q_002")
    make_queen(headers, "Q-003", genetics="100% Buckfast")

    r = client.get("/queens", params={"search": "_"}, headers=headers)
    assert [q["queen_number"] for q in r.json()] == ["Q_002"]

    r = client.get("/queens", params={"search": "%"}, headers=headers)
    assert [q["queen_number"] for q in r.json()] == ["Q-003"]


def test_queen_update(client, headers, make_queen):
    queen = make_queen(headers, "Q-1")
    r = client.patch(f"/queens/{queen['queen_id']}", json={
        "status": "dead", "performance_notes": "superseded", "birth_date": str(date(2022, 5, 1)),
    }, headers=headers)
    assert r.status_code == 200
    assert r.json()["status"] == "dead"
    assert r.json()["expected_marking_color"] == "Yellow"


def test_deleting_queen_detaches_hives_and_batches(client, headers, make_queen, make_hive):
    queen = make_queen(headers, "Q-M")
    hive = make_hive(headers, queen_id=queen["queen_id"])
    batch = client.post("/batches", json={
        "batch_name": "Spring graft", "mother_queen_id": queen["queen_id"], "graft_date": str(today_local()),
    }, headers=headers).json()

    assert client.delete(f"/queens/{queen['queen_id']}", headers=headers).status_code == 204

    assert client.get(f"/hives/{hive['hive_id']}", headers=headers).json()["queen_id"] is None
    r = client.get(f"/batches/{batch['batch_id']}", headers=headers)
    assert r.json()["mother_queen_id"] is None
    assert r.json()["mother_queen_number"] is None
