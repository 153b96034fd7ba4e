"""
Pytest configuration and fixtures for testing.

Every test gets a fresh application bound to its own SQLite file, so tests
never share rows. Tokens are minted directly with the test secret; the
principal comes from the claims, not from a users row.
"""
import pytest
from fastapi.testclient import TestClient

from jobly.core.config import Settings
from jobly.core.security import create_access_token
from jobly.main import create_app

API = "/api/v1"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        secret_key="test-secret-key",
        environment="test",
        bcrypt_rounds=4,
    )


@pytest.fixture
def client(settings):
    """FastAPI test client; entering it runs startup (table creation)."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(settings):
    return bearer(create_access_token("admin", True, settings))


@pytest.fixture
def u1_headers(settings):
    return bearer(create_access_token("u1", False, settings))


@pytest.fixture
def seeded(client, admin_headers):
    """
    Three companies and four jobs, all created through the API.

    Returns the created job ids keyed by title.
    """
    for n in (1, 2, 3):
        resp = client.post(
            f"{API}/companies/",
            json={
                "handle": f"c{n}",
                "name": f"C{n}",
                "description": f"Desc{n}",
                "numEmployees": n,
                "logoUrl": f"http://c{n}.img",
            },
            headers=admin_headers,
        )
        assert resp.status_code == 201, resp.text

    jobs = [
        {"title": "J1", "salary": 100, "equity": "0.1", "companyHandle": "c1"},
        {"title": "J2", "salary": 200, "equity": "0.2", "companyHandle": "c1"},
        {"title": "J3", "salary": 300, "equity": "0", "companyHandle": "c1"},
        {"title": "J4", "salary": None, "equity": None, "companyHandle": "c1"},
    ]
    ids = {}
    for job in jobs:
        resp = client.post(f"{API}/jobs/", json=job, headers=admin_headers)
        assert resp.status_code == 201, resp.text
        ids[job["title"]] = resp.json()["id"]
    return ids


@pytest.fixture
def users(client, admin_headers):
    """Two regular users, u1 and u2, created by an admin."""
    for n in (1, 2):
        resp = client.post(
            f"{API}/users/",
            json={
                "username": f"u{n}",
                "password": f"password{n}",
                "firstName": f"U{n}F",
                "lastName": f"U{n}L",
                "email": f"user{n}@user.com",
                "isAdmin": False,
            },
            headers=admin_headers,
        )
        assert resp.status_code == 201, resp.text


@pytest.fixture
def u2_headers(settings):
    return bearer(create_access_token("u2", False, settings))
