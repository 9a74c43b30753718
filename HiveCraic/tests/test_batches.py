from datetime import timedelta

from utils.datetime_utils import today_local


def test_batch_with_mother_queen(client, headers, make_queen):
    queen = make_queen(headers, "Q-Breeder")
    r = client.post("/batches", json={
        "batch_name": "June graft", "mother_queen_id": queen["queen_id"],
        "graft_date": str(today_local()), "cell_count": 20,
    }, headers=headers)
    assert r.status_code == 201, r.text
    b = r.json()
    assert b["status"] == "grafted"
    assert b["mother_queen_number"] == "Q-Breeder"

    r = client.patch(f"/batches/{b['batch_id']}", json={
        "status": "emerged", "emergence_date": str(today_local() + timedelta(days=12)),
    }, headers=headers)
    assert r.status_code == 200
    assert r.json()["status"] == "emerged"


def test_batch_mother_queen_must_be_own(client, headers, other_headers, make_queen):
    theirs = make_queen(other_headers, "Q-T")
    r = client.post("/batches", json={
        "batch_name": "Sneaky", "mother_queen_id": theirs["queen_id"], "graft_date": str(today_local()),
    }, headers=headers)
    assert r.status_code == 422


def test_batch_emergence_before_graft_rejected(client, headers):
    r = client.post("/batches", json={
        "batch_name": "Backwards", "graft_date": str(today_local()),
        "emergence_date": str(today_local() - timedelta(days=1)),
    }, headers=headers)
    assert r.status_code == 422


def test_batch_status_filter_and_delete(client, headers):
    for name, status in (("A", "grafted"), ("B", "mated"), ("C", "completed")):
        client.post("/batches", json={"batch_name": name, "graft_date": str(today_local()), "status": status}, headers=headers)

    mated = client.get("/batches", params={"status": "mated"}, headers=headers).json()
    assert [b["batch_name"] for b in mated] == ["B"]

    assert client.delete(f"/batches/{mated[0]['batch_id']}", headers=headers).status_code == 204
    assert len(client.get("/batches", headers=headers).json()) == 2


def test_batch_update_keeps_emergence_after_graft(client, headers):
    r = client.post("/batches", json={"batch_name": "July graft", "graft_date": "2024-06-10"}, headers=headers)
    batch_id = r.json()["batch_id"]

    r = client.patch(f"/batches/{batch_id}", json={"emergence_date": "2024-06-01"}, headers=headers)
    assert r.status_code == 422

    client.patch(f"/batches/{batch_id}", json={"emergence_date": "2024-06-22"}, headers=headers)
    r = client.patch(f"/batches/{batch_id}", json={"graft_date": "2024-06-30"}, headers=headers)
    assert r.status_code == 422

    stored = client.get(f"/batches/{batch_id}", headers=headers).json()
    assert stored["graft_date"] == "2024-06-10"
    assert stored["emergence_date"] == "2024-06-22"
