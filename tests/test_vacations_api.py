from fastapi.testclient import TestClient

from hr_portal.models.audit_event import AuditEvent

from tests.helpers import ALEX, DALER, DENIS, IVAN, as_user, create_user


def _create(client: TestClient, email: str, **overrides):
    body = {
        "type": "vacation",
        "reason": "Личные обстоятельства",
        "start_date": "2025-08-01",
        "end_date": "2025-08-15",
    }
    body.update(overrides)
    return client.post("/vacation/requests", json=body, headers=as_user(email))


def test_create_approve_and_second_resolve_conflicts(db_session, client: TestClient):
    r = _create(client, ALEX)
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["status"] == "pending"
    assert created["user_id"] == 3
    assert created["manager_id"] == 4
    assert created["user_team"] == "backend"

    r = client.put(
        f"/vacation/requests/{created['id']}/status",
        json={"status": "approved", "manager_comment": "ОК"},
        headers=as_user(DENIS),
    )
    assert r.status_code == 200, r.text
    approved = r.json()
    assert approved["status"] == "approved"
    assert approved["manager_comment"] == "ОК"

    r = client.put(
        f"/vacation/requests/{created['id']}/status",
        json={"status": "rejected"},
        headers=as_user(DENIS),
    )
    assert r.status_code == 409
    assert r.json()["error"] == "illegal_transition"

    r = client.get(f"/vacation/requests/{created['id']}", headers=as_user(ALEX))
    assert r.json()["status"] == "approved"
    assert r.json()["updated_at"] == approved["updated_at"]

    actions = [
        e.action
        for e in db_session.query(AuditEvent)
        .filter(AuditEvent.entity_type == "vacation_request", AuditEvent.entity_id == created["id"])
        .order_by(AuditEvent.id)
    ]
    assert actions == ["VACATION_REQUEST_CREATED", "VACATION_REQUEST_RESOLVED"]


def test_only_assigned_manager_can_resolve(client: TestClient):
    # request 3 is routed to denis
    r = client.put("/vacation/requests/3/status", json={"status": "approved"}, headers=as_user(DALER))
    assert r.status_code == 403

    r = client.put("/vacation/requests/3/status", json={"status": "approved"}, headers=as_user(ALEX))
    assert r.status_code == 403

    r = client.get("/vacation/requests/3", headers=as_user(ALEX))
    assert r.json()["status"] == "pending"


def test_resolve_rejects_unknown_status(client: TestClient):
    r = client.put("/vacation/requests/3/status", json={"status": "pending"}, headers=as_user(DENIS))
    assert r.status_code == 422


def test_resolve_unknown_request(client: TestClient):
    r = client.put("/vacation/requests/999/status", json={"status": "approved"}, headers=as_user(DENIS))
    assert r.status_code == 404
    assert r.json()["error"] == "not_found"


def test_create_requires_auth(client: TestClient):
    r = client.post(
        "/vacation/requests",
        json={"type": "vacation", "reason": "x", "start_date": "2025-08-01", "end_date": "2025-08-02"},
    )
    assert r.status_code == 401


def test_create_validation(client: TestClient):
    assert _create(client, ALEX, reason="").status_code == 422
    assert _create(client, ALEX, type="holiday").status_code == 422

    r = _create(client, ALEX, start_date="2025-08-15", end_date="2025-08-01")
    assert r.status_code == 400
    assert r.json()["error"] == "invalid_input"


def test_create_without_team_manager(db_session, client: TestClient):
    create_user(db_session, "solo@zinda.ai", "Solo", team="research")
    r = _create(client, "solo@zinda.ai")
    assert r.status_code == 412
    assert r.json()["error"] == "precondition_failed"


def test_list_own_requests(client: TestClient):
    r = client.get("/vacation/requests", headers=as_user(ALEX))
    assert r.status_code == 200
    assert [x["id"] for x in r.json()] == [2, 3]

    r = client.get("/me/vacation-requests", headers=as_user(ALEX))
    assert [x["id"] for x in r.json()] == [2, 3]


def test_list_requests_of_other_user(client: TestClient):
    r = client.get("/vacation/requests", params={"user_id": 3}, headers=as_user(IVAN))
    assert r.status_code == 403

    r = client.get("/vacation/requests", params={"user_id": 3}, headers=as_user(DALER))
    assert r.status_code == 200
    assert len(r.json()) == 2

    r = client.get("/vacation/requests", params={"user_id": 999}, headers=as_user(DALER))
    assert r.status_code == 404


def test_pending_for_manager(client: TestClient):
    r = client.get("/vacation/pending", headers=as_user(DENIS))
    assert r.status_code == 200
    assert [x["id"] for x in r.json()] == [3]

    created = _create(client, ALEX).json()
    r = client.get("/vacation/pending", params={"manager_id": 4}, headers=as_user(DENIS))
    assert [x["id"] for x in r.json()] == [3, created["id"]]

    client.put(f"/vacation/requests/{created['id']}/status", json={"status": "rejected"}, headers=as_user(DENIS))
    r = client.get("/vacation/pending", headers=as_user(DENIS))
    assert [x["id"] for x in r.json()] == [3]


def test_pending_is_manager_only_and_own_only(client: TestClient):
    assert client.get("/vacation/pending", headers=as_user(ALEX)).status_code == 403
    r = client.get("/vacation/pending", params={"manager_id": 4}, headers=as_user(DALER))
    assert r.status_code == 403


def test_timestamps_keep_utc_across_reads(client: TestClient):
    created = _create(client, ALEX).json()
    assert created["created_at"].endswith("Z")

    fetched = client.get(f"/vacation/requests/{created['id']}", headers=as_user(ALEX)).json()
    assert fetched["created_at"] == created["created_at"]
    assert fetched["updated_at"] == created["updated_at"]

    resolved = client.put(
        f"/vacation/requests/{created['id']}/status",
        json={"status": "approved"},
        headers=as_user(DENIS),
    ).json()
    assert resolved["updated_at"].endswith("Z")
    assert resolved["created_at"] == created["created_at"]

    listed = client.get("/vacation/requests", headers=as_user(ALEX)).json()
    assert [r for r in listed if r["id"] == created["id"]][0]["updated_at"] == resolved["updated_at"]
