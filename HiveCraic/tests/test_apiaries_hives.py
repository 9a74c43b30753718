from datetime import timedelta

from models.hive import Hive
from models.inspection import Inspection
from models.feeding import Feeding
from models.varroa import VarroaCheck
from utils.datetime_utils import today_local


# Apiaries

def test_apiary_crud(client, headers):
    r = client.post("/apiaries", json={"name": "Bog Road", "city": "Galway", "eircode": "H91 X2Y3"}, headers=headers)
    assert r.status_code == 201
    apiary = r.json()
    assert apiary["name"] == "Bog Road"

    r = client.patch(f"/apiaries/{apiary['apiary_id']}", json={"notes": "sheltered"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["notes"] == "sheltered"
    assert r.json()["city"] == "Galway"

    assert client.delete(f"/apiaries/{apiary['apiary_id']}", headers=headers).status_code == 204
    assert client.get(f"/apiaries/{apiary['apiary_id']}", headers=headers).status_code == 404


def test_apiaries_listed_by_name_and_scoped_to_owner(client, headers, other_headers, make_apiary):
    make_apiary(headers, "Orchard")
    make_apiary(headers, "Bog Road")
    make_apiary(other_headers, "Across the Lane")

    r = client.get("/apiaries", headers=headers)
    assert [a["name"] for a in r.json()] == ["Bog Road", "Orchard"]


def test_apiary_of_other_user_is_not_found(client, headers, other_headers, make_apiary):
    theirs = make_apiary(other_headers, "Theirs")
    assert client.get(f"/apiaries/{theirs['apiary_id']}", headers=headers).status_code == 404
    assert client.patch(f"/apiaries/{theirs['apiary_id']}", json={"name": "Mine"}, headers=headers).status_code == 404
    assert client.delete(f"/apiaries/{theirs['apiary_id']}", headers=headers).status_code == 404


def test_apiary_name_required(client, headers):
    assert client.post("/apiaries", json={"name": "   "}, headers=headers).status_code == 422


# Hives

def test_hive_resolves_apiary_and_queen(client, headers, make_apiary, make_queen, make_hive):
    apiary = make_apiary(headers, "Orchard")
    queen = make_queen(headers, "Q-7")
    hive = make_hive(headers, "H-01", apiary_id=apiary["apiary_id"], queen_id=queen["queen_id"], queen_marked=True)

    assert hive["apiary_name"] == "Orchard"
    assert hive["queen_number"] == "Q-7"
    assert hive["status"] == "active"
    assert hive["queen_marked"] is True
    assert hive["queen_mated"] is False


def test_hive_zero_ids_mean_no_link(make_hive, headers):
    hive = make_hive(headers, "H-02", apiary_id=0, queen_id=0)
    assert hive["apiary_id"] is None
    assert hive["queen_id"] is None


def test_hive_rejects_references_of_other_user(client, headers, other_headers, make_apiary, make_queen):
    their_apiary = make_apiary(other_headers, "Theirs")
    their_queen = make_queen(other_headers, "Q-X")

    r = client.post("/hives", json={"hive_number": "H-1", "apiary_id": their_apiary["apiary_id"]}, headers=headers)
    assert r.status_code == 422
    r = client.post("/hives", json={"hive_number": "H-1", "queen_id": their_queen["queen_id"]}, headers=headers)
    assert r.status_code == 422


def test_hive_list_filters_and_order(client, headers, make_apiary, make_hive):
    orchard = make_apiary(headers, "Orchard")
    make_hive(headers, "H-03", apiary_id=orchard["apiary_id"])
    make_hive(headers, "H-01", apiary_id=orchard["apiary_id"], status="queenless")
    make_hive(headers, "H-02")

    r = client.get("/hives", headers=headers)
    assert [h["hive_number"] for h in r.json()] == ["H-01", "H-02", "H-03"]

    r = client.get("/hives", params={"status": "queenless"}, headers=headers)
    assert [h["hive_number"] for h in r.json()] == ["H-01"]

    r = client.get("/hives", params={"apiary_id": orchard["apiary_id"]}, headers=headers)
    assert [h["hive_number"] for h in r.json()] == ["H-01", "H-03"]

    assert client.get("/hives", params={"status": "bogus"}, headers=headers).status_code == 422


def test_hive_vocabularies_validated(client, headers, make_hive, db_session):
    hive = make_hive(headers, "H-09")
    assert hive["status"] == "active"
    stored = db_session.get(Hive, hive["hive_id"])
    assert stored.status == "active"

    r = client.post("/hives", json={"hive_number": "H-10", "queen_marking_color": "Purple"}, headers=headers)
    assert r.status_code == 422
    r = client.patch(f"/hives/{hive['hive_id']}", json={"status": "swarmed"}, headers=headers)
    assert r.status_code == 422

    r = client.patch(f"/hives/{hive['hive_id']}", json={"queen_marking_color": "Blue"}, headers=headers)
    assert r.json()["queen_marking_color"] == "Blue"


def test_hive_update_unlinks_with_null(client, headers, make_apiary, make_hive):
    apiary = make_apiary(headers)
    hive = make_hive(headers, apiary_id=apiary["apiary_id"])

    r = client.patch(f"/hives/{hive['hive_id']}", json={"apiary_id": None, "status": "retired"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["apiary_id"] is None
    assert r.json()["apiary_name"] is None
    assert r.json()["status"] == "retired"


def test_hive_update_ignores_null_for_required_fields(client, headers, make_hive):
    hive = make_hive(headers, "H-09")
    r = client.patch(f"/hives/{hive['hive_id']}", json={"hive_number": None, "notes": "calm"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["hive_number"] == "H-09"


def test_deleting_apiary_detaches_hives(client, headers, make_apiary, make_hive):
    apiary = make_apiary(headers)
    hive = make_hive(headers, apiary_id=apiary["apiary_id"])

    assert client.delete(f"/apiaries/{apiary['apiary_id']}", headers=headers).status_code == 204

    r = client.get(f"/hives/{hive['hive_id']}", headers=headers)
    assert r.status_code == 200
    assert r.json()["apiary_id"] is None


def test_deleting_hive_removes_its_records(client, headers, make_hive, make_inspection, db_session):
    hive = make_hive(headers)
    make_inspection(headers, hive["hive_id"], today_local())
    client.post("/feedings", json={
        "hive_id": hive["hive_id"], "feed_date": str(today_local()), "feed_type": "Fondant",
    }, headers=headers)
    client.post("/varroa/checks", json={
        "hive_id": hive["hive_id"], "check_date": str(today_local() - timedelta(days=1)),
        "method": "Alcohol wash", "mites_count": 3, "sample_size": 300,
    }, headers=headers)

    assert client.delete(f"/hives/{hive['hive_id']}", headers=headers).status_code == 204

    assert db_session.query(Inspection).count() == 0
    assert db_session.query(Feeding).count() == 0
    assert db_session.query(VarroaCheck).count() == 0
