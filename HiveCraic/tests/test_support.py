import pytest


@pytest.fixture
def ticket(client, headers):
    r = client.post("/support/tickets", json={
        "ticket_type": "problem", "subject": "Cannot save inspection", "description": "Spinner forever",
    }, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_new_ticket_defaults(ticket, user):
    assert ticket["status"] == "open"
    assert ticket["priority"] == "normal"
    assert ticket["user_id"] == user.user_id
    assert ticket["user_email"] == user.email


def test_ticket_type_validated(client, headers):
    r = client.post("/support/tickets", json={"ticket_type": "rant", "subject": "x", "description": "y"}, headers=headers)
    assert r.status_code == 422


def test_users_see_only_own_tickets(client, headers, other_headers, ticket):
    client.post("/support/tickets", json={
        "ticket_type": "suggestion", "subject": "Dark mode", "description": "Please",
    }, headers=other_headers)

    mine = client.get("/support/tickets", headers=headers).json()
    assert [t["ticket_id"] for t in mine] == [ticket["ticket_id"]]


def test_owner_edits_open_ticket(client, headers, ticket):
    r = client.patch(f"/support/tickets/{ticket['ticket_id']}", json={"subject": "Cannot save inspections"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["subject"] == "Cannot save inspections"
    assert r.json()["description"] == "Spinner forever"


def test_resolved_ticket_is_locked(client, headers, admin_headers, ticket):
    client.patch(f"/support/admin/tickets/{ticket['ticket_id']}", json={"status": "resolved"}, headers=admin_headers)
    r = client.patch(f"/support/tickets/{ticket['ticket_id']}", json={"subject": "again"}, headers=headers)
    assert r.status_code == 409


def test_owner_closes_ticket(client, headers, ticket):
    r = client.post(f"/support/tickets/{ticket['ticket_id']}/close", headers=headers)
    assert r.status_code == 200
    assert r.json()["status"] == "closed"
    r = client.patch(f"/support/tickets/{ticket['ticket_id']}", json={"description": "more"}, headers=headers)
    assert r.status_code == 409


def test_other_user_cannot_touch_ticket(client, other_headers, ticket):
    assert client.patch(f"/support/tickets/{ticket['ticket_id']}", json={"subject": "x"}, headers=other_headers).status_code == 404
    assert client.post(f"/support/tickets/{ticket['ticket_id']}/close", headers=other_headers).status_code == 404


def test_admin_lists_and_updates_tickets(client, headers, other_headers, admin_headers, ticket):
    client.post("/support/tickets", json={
        "ticket_type": "suggestion", "subject": "Dark mode", "description": "Please",
    }, headers=other_headers)

    assert len(client.get("/support/admin/tickets", headers=admin_headers).json()) == 2
    suggestions = client.get("/support/admin/tickets", params={"ticket_type": "suggestion"}, headers=admin_headers).json()
    assert [t["subject"] for t in suggestions] == ["Dark mode"]

    r = client.patch(f"/support/admin/tickets/{ticket['ticket_id']}", json={
        "status": "in_progress", "priority": "urgent", "admin_notes": "Looking into it",
    }, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["status"] == "in_progress"
    assert r.json()["priority"] == "urgent"
    assert r.json()["admin_notes"] == "Looking into it"

    urgent = client.get("/support/admin/tickets", params={"priority": "urgent"}, headers=admin_headers).json()
    assert [t["ticket_id"] for t in urgent] == [ticket["ticket_id"]]


def test_admin_endpoints_forbidden_for_users(client, headers, ticket):
    assert client.get("/support/admin/tickets", headers=headers).status_code == 403
    r = client.patch(f"/support/admin/tickets/{ticket['ticket_id']}", json={"status": "closed"}, headers=headers)
    assert r.status_code == 403


def test_admin_update_unknown_ticket(client, admin_headers):
    assert client.patch("/support/admin/tickets/424242", json={"status": "closed"}, headers=admin_headers).status_code == 404
