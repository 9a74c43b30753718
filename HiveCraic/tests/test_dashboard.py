from datetime import timedelta

from utils.datetime_utils import today_local


def test_dashboard_counts_own_records(client, headers, other_headers, make_queen, make_hive, make_inspection):
    make_queen(headers, "Q-1")
    make_queen(headers, "Q-2", status="retired")
    hive = make_hive(headers, "H-1")
    make_hive(headers, "H-2")
    for name, status in (("A", "grafted"), ("B", "emerged"), ("C", "mated")):
        client.post("/batches", json={"batch_name": name, "graft_date": str(today_local()), "status": status}, headers=headers)

    today = today_local()
    for days in (0, 2, 7, 8, 30, 60):
        make_inspection(headers, hive["hive_id"], today - timedelta(days=days))

    theirs = make_hive(other_headers, "T-1")
    make_inspection(other_headers, theirs["hive_id"], today)

    r = client.get("/dashboard", headers=headers)
    assert r.status_code == 200
    stats = r.json()
    assert stats["role"] == "User"
    assert stats["total_queens"] == 2
    assert stats["active_queens"] == 1
    assert stats["total_hives"] == 2
    assert stats["active_batches"] == 2
    assert stats["inspections_last_7_days"] == 3

    recent = stats["recent_inspections"]
    assert len(recent) == 5
    assert recent[0]["inspection_date"] == str(today)
    assert all(i["hive_number"] == "H-1" for i in recent)


def test_dashboard_empty(client, headers):
    stats = client.get("/dashboard", headers=headers).json()
    assert stats["total_hives"] == 0
    assert stats["recent_inspections"] == []


def test_system_stats_admin_only(client, headers, other_headers, admin_headers, make_apiary, make_hive, make_queen):
    make_apiary(headers)
    make_hive(headers, "H-1")
    make_hive(other_headers, "T-1")
    make_queen(other_headers, "Q-1")
    client.post("/support/tickets", json={"ticket_type": "problem", "subject": "s", "description": "d"}, headers=headers)

    assert client.get("/dashboard/system", headers=headers).status_code == 403

    r = client.get("/dashboard/system", headers=admin_headers)
    assert r.status_code == 200
    stats = r.json()
    assert stats["total_users"] == 3
    assert stats["total_apiaries"] == 1
    assert stats["total_hives"] == 2
    assert stats["total_queens"] == 1
    assert stats["open_tickets"] == 1
    # everyone above made a request just now
    assert stats["online_users"] == 3


def test_admin_dashboard_role(client, admin_headers):
    assert client.get("/dashboard", headers=admin_headers).json()["role"] == "Admin"
