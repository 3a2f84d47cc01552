from fastapi.testclient import TestClient
from hr_portal.main import app

from tests.helpers import DENIS, as_user


def test_me_requires_header(db_session):
    client = TestClient(app)
    r = client.get("/me")
    assert r.status_code == 401


def test_me_unknown_email(db_session):
    client = TestClient(app)
    r = client.get("/me", headers=as_user("ghost@zinda.ai"))
    assert r.status_code == 401


def test_me_dev_header_matches_email_exactly(db_session):
    client = TestClient(app)
    assert client.get("/me", headers=as_user(DENIS.upper())).status_code == 401
    assert client.get("/me", headers=as_user(DENIS)).status_code == 200


def test_me_returns_full_profile(db_session):
    client = TestClient(app)
    r = client.get("/me", headers=as_user(DENIS))
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == DENIS
    assert body["role"] == "manager"
    assert body["salary"] == 2200
    assert body["total_compensation"] == 2650
    assert body["documents"] == []
