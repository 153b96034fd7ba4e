"""
Tests for the authorization chain.
"""
import pytest

from jobly.api.deps import require_admin, require_admin_or_self, require_user
from jobly.core.config import Settings
from jobly.core.exceptions import AdminRequiredException, UnauthorizedException
from jobly.core.security import create_access_token
from jobly.schemas.auth import Principal

API = "/api/v1"

ADMIN = Principal(username="admin", is_admin=True)
U1 = Principal(username="u1", is_admin=False)


class TestRequireUser:
    def test_anonymous_rejected(self):
        with pytest.raises(UnauthorizedException):
            require_user(None)

    def test_any_principal_passes(self):
        assert require_user(U1) is U1


class TestRequireAdmin:
    def test_admin_passes(self):
        assert require_admin(ADMIN) is ADMIN

    @pytest.mark.parametrize("principal", [None, U1])
    def test_others_rejected(self, principal):
        with pytest.raises(AdminRequiredException) as exc_info:
            require_admin(principal)
        assert exc_info.value.status_code == 401


class TestRequireAdminOrSelf:
    def test_self_passes(self):
        assert require_admin_or_self("u1", U1) is U1

    def test_admin_passes_for_anyone(self):
        assert require_admin_or_self("u1", ADMIN) is ADMIN

    @pytest.mark.parametrize("principal", [None, U1])
    def test_others_rejected(self, principal):
        with pytest.raises(UnauthorizedException):
            require_admin_or_self("u2", principal)


class TestAuthenticate:
    def test_bad_token_proceeds_anonymously(self, client):
        resp = client.get(
            f"{API}/companies/",
            headers={"Authorization": "Bearer garbage"},
        )
        assert resp.status_code == 200

    def test_bad_token_not_a_principal(self, client):
        resp = client.get(f"{API}/auth/me", headers={"Authorization": "Bearer garbage"})
        assert resp.status_code == 401

    def test_forged_admin_token_rejected(self, client):
        forged = create_access_token(
            "admin", True, Settings(secret_key="wrong-secret", environment="test")
        )
        resp = client.post(
            f"{API}/companies/",
            json={"handle": "x", "name": "X"},
            headers={"Authorization": f"Bearer {forged}"},
        )
        assert resp.status_code == 401
        assert resp.json()["error"] == "ADMIN_REQUIRED"

    def test_me_reports_claims(self, client, u1_headers):
        resp = client.get(f"{API}/auth/me", headers=u1_headers)
        assert resp.status_code == 200
        assert resp.json() == {"username": "u1", "isAdmin": False}
