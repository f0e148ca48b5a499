import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from staydesk.core.errors import register_error_handlers

USER = {"username": "host.maria", "email": "maria@staydesk.io", "password": "correct-horse-battery"}


@pytest.fixture()
def gated_client(app):
    """Same routers as the app, mounted with REQUIRE_AUTH switched on."""
    from staydesk.main import include_routers

    gated = FastAPI()
    register_error_handlers(gated)
    include_routers(gated, "/api", require_auth=True)
    with TestClient(gated) as test_client:
        yield test_client


def _register(client):
    resp = client.post("/api/users", json=USER)
    assert resp.status_code == 201, resp.text
    return resp.json()


def _bearer(client):
    resp = client.post("/api/auth/login", json={"username": USER["username"], "password": USER["password"]})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def test_resources_require_a_session(gated_client):
    resp = gated_client.get("/api/properties")
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"

    _register(gated_client)
    resp = gated_client.get("/api/properties", headers=_bearer(gated_client))
    assert resp.status_code == 200
    assert resp.json() == []


def test_only_registration_stays_open(gated_client):
    user = _register(gated_client)

    assert gated_client.get("/api/users").status_code == 401
    assert gated_client.get(f"/api/users/{user['id']}").status_code == 401
    assert gated_client.get(f"/api/users/{user['id']}", headers=_bearer(gated_client)).status_code == 200


def test_login_is_not_gated(gated_client):
    resp = gated_client.post("/api/auth/login", json={"username": "nobody", "password": "whatever-pass"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid username or password"}
