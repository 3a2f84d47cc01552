from fastapi.testclient import TestClient

from tests.helpers import ALEX, DALER, DENIS, IVAN, as_user


def test_list_users_requires_auth(client: TestClient):
    assert client.get("/users").status_code == 401


def test_employee_sees_only_own_compensation(client: TestClient):
    r = client.get("/users", headers=as_user(IVAN))
    assert r.status_code == 200
    users = {u["id"]: u for u in r.json()}
    assert list(users) == [1, 2, 3, 4]

    assert users[1]["salary"] == 1200
    assert users[1]["total_compensation"] == 1400
    for uid in (2, 3, 4):
        assert "salary" not in users[uid]
        assert "bonus" not in users[uid]
        assert "documents" not in users[uid]
        assert users[uid]["email"]


def test_manager_sees_everyones_compensation(client: TestClient):
    r = client.get("/users", headers=as_user(DENIS))
    assert all("salary" in u for u in r.json())


def test_list_users_limit_offset(client: TestClient):
    r = client.get("/users", params={"limit": 2, "offset": 1}, headers=as_user(IVAN))
    assert [u["id"] for u in r.json()] == [2, 3]


def test_list_users_with_pagination(client: TestClient):
    r = client.get(
        "/users",
        params={"limit": 2, "offset": 1, "include_pagination": "true"},
        headers=as_user(IVAN),
    )
    assert r.status_code == 200
    body = r.json()
    assert [u["id"] for u in body["items"]] == [2, 3]
    assert "salary" not in body["items"][0]
    assert body["pagination"] == {"total": 4, "limit": 2, "offset": 1, "has_more": True}

    r = client.get(
        "/users",
        params={"limit": 2, "offset": 2, "include_pagination": "true"},
        headers=as_user(DENIS),
    )
    body = r.json()
    assert [u["id"] for u in body["items"]] == [3, 4]
    assert body["pagination"]["has_more"] is False
    assert all("salary" in u for u in body["items"])


def test_get_user(client: TestClient):
    r = client.get("/users/2", headers=as_user(IVAN))
    assert r.status_code == 200
    assert r.json()["name"] == "Далер Алямов"
    assert "salary" not in r.json()

    r = client.get("/users/1", headers=as_user(DALER))
    assert r.json()["documents"][0]["name"] == "Passport.pdf"

    assert client.get("/users/999", headers=as_user(IVAN)).status_code == 404


def test_team_members(client: TestClient):
    r = client.get("/users/team/backend", headers=as_user(IVAN))
    assert r.status_code == 200
    assert [u["id"] for u in r.json()] == [3, 4]

    assert client.get("/users/team/design", headers=as_user(IVAN)).status_code == 404


def test_team_manager_and_teams(client: TestClient):
    r = client.get("/users/team/frontend/manager", headers=as_user(ALEX))
    assert r.json()["id"] == 2

    r = client.get("/users/teams", headers=as_user(ALEX))
    assert r.json() == ["backend", "frontend"]


def test_subordinates(client: TestClient):
    r = client.get("/users/manager/4/subordinates", headers=as_user(DENIS))
    assert r.status_code == 200
    assert [u["id"] for u in r.json()] == [3]

    assert client.get("/users/manager/3/subordinates", headers=as_user(DENIS)).status_code == 404


def test_avatar_owner_only(client: TestClient):
    r = client.put("/users/3/avatar", json={"avatar": "https://example.test/alex.png"}, headers=as_user(ALEX))
    assert r.status_code == 200
    assert r.json()["avatar"] == "https://example.test/alex.png"

    r = client.put("/users/3/avatar", json={"avatar": "https://example.test/x.png"}, headers=as_user(DENIS))
    assert r.status_code == 403

    r = client.delete("/users/3/avatar", headers=as_user(ALEX))
    assert r.status_code == 200
    assert r.json()["avatar"] is None
