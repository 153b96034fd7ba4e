"""
Tests for /auth endpoints, health check and error shape.
"""
import pytest

from jobly.core.security import decode_token

API = "/api/v1"

NEW_USER = {
    "username": "new",
    "password": "password",
    "firstName": "First",
    "lastName": "Last",
    "email": "new@email.com",
}


class TestRegister:
    def test_returns_token_for_regular_user(self, client, settings):
        resp = client.post(f"{API}/auth/register", json=NEW_USER)

        assert resp.status_code == 201
        payload = decode_token(resp.json()["token"], settings)
        assert payload["username"] == "new"
        assert payload["isAdmin"] is False

    def test_token_identifies_caller(self, client):
        token = client.post(f"{API}/auth/register", json=NEW_USER).json()["token"]

        resp = client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert resp.json() == {"username": "new", "isAdmin": False}

    def test_duplicate(self, client):
        client.post(f"{API}/auth/register", json=NEW_USER)
        resp = client.post(f"{API}/auth/register", json=NEW_USER)

        assert resp.status_code == 400
        assert resp.json()["error"] == "DUPLICATE_USERNAME"

    @pytest.mark.parametrize(
        "body",
        [
            {**NEW_USER, "isAdmin": True},
            {**NEW_USER, "email": "not-an-email"},
            {**NEW_USER, "password": "shrt"},
            {"username": "new"},
        ],
    )
    def test_invalid_body(self, client, body):
        resp = client.post(f"{API}/auth/register", json=body)
        assert resp.status_code == 400


class TestToken:
    def test_valid_credentials(self, client, settings, users):
        resp = client.post(
            f"{API}/auth/token",
            json={"username": "u1", "password": "password1"},
        )

        assert resp.status_code == 200
        assert decode_token(resp.json()["token"], settings)["username"] == "u1"

    @pytest.mark.parametrize(
        "credentials",
        [
            {"username": "u1", "password": "wrong-password"},
            {"username": "nope", "password": "password1"},
        ],
    )
    def test_invalid_credentials(self, client, users, credentials):
        resp = client.post(f"{API}/auth/token", json=credentials)

        assert resp.status_code == 401
        assert resp.json() == {
            "error": "INVALID_CREDENTIALS",
            "message": "Invalid username/password",
            "status": 401,
            "details": None,
        }

    def test_missing_field(self, client):
        resp = client.post(f"{API}/auth/token", json={"username": "u1"})
        assert resp.status_code == 400


class TestMe:
    def test_anonymous_rejected(self, client):
        resp = client.get(f"{API}/auth/me")
        assert resp.status_code == 401


def test_health(client):
    resp = client.get(f"{API}/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.json()["checks"] == {"database": "healthy"}


def test_root(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["name"] == "Jobly API"


def test_unknown_route(client):
    resp = client.get(f"{API}/nowhere")
    assert resp.status_code == 404
