"""Integration tests for registration, login and identity."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from hrms.core.auth.backend import create_access_token
from hrms.modules.organisations.repos import OrganisationRepository
from hrms.modules.users.models import User
from hrms.modules.users.repos import UserRepository
from tests.conftest import TEST_PASSWORD


pytestmark = pytest.mark.integration


REGISTER_BODY = {
    "orgName": "Acme",
    "adminName": "Alice",
    "email": "alice@acme.com",
    "password": "correct-horse-battery",
}


class TestRegister:
    """Tests for POST /api/auth/register."""

    async def test_register_success(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json=REGISTER_BODY)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Organisation registered successfully"
        assert data["token"]
        assert data["user"]["name"] == "Alice"
        assert data["user"]["email"] == "alice@acme.com"
        assert set(data["user"]) == {"id", "name", "email", "organisation_id"}

    async def test_register_token_works(self, client: AsyncClient):
        response = await client.post("/api/auth/register", json=REGISTER_BODY)
        token = response.json()["token"]

        me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert me.status_code == 200
        assert me.json()["id"] == response.json()["user"]["id"]

    @pytest.mark.parametrize("field", ["orgName", "adminName", "email", "password"])
    async def test_register_missing_field(self, client: AsyncClient, field: str):
        body = {k: v for k, v in REGISTER_BODY.items() if k != field}

        response = await client.post("/api/auth/register", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "All fields are required"

    async def test_register_duplicate_organisation(self, client: AsyncClient):
        await client.post("/api/auth/register", json=REGISTER_BODY)

        response = await client.post(
            "/api/auth/register",
            json={**REGISTER_BODY, "email": "someone-else@acme.com"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Organisation name already taken"

    async def test_register_duplicate_email(self, client: AsyncClient):
        """Emails are unique across organisations."""
        await client.post("/api/auth/register", json=REGISTER_BODY)

        response = await client.post(
            "/api/auth/register",
            json={**REGISTER_BODY, "orgName": "Globex"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    async def test_register_race_hits_unique_constraint(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ):
        """A duplicate that slips past the lookups is rejected by the constraint."""
        first = await client.post("/api/auth/register", json=REGISTER_BODY)
        monkeypatch.setattr(OrganisationRepository, "get_by_name", AsyncMock(return_value=None))
        monkeypatch.setattr(UserRepository, "get_by_email", AsyncMock(return_value=None))

        response = await client.post("/api/auth/register", json=REGISTER_BODY)

        assert response.status_code == 400
        assert response.json()["detail"] == "Organisation name or email already registered"
        assert response.json()["type"].endswith("/errors/duplicate")

        me = await client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {first.json()['token']}"}
        )
        assert me.status_code == 200
        assert me.json()["email"] == REGISTER_BODY["email"]

    async def test_register_invalid_email(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/register",
            json={**REGISTER_BODY, "email": "not-an-email"},
        )

        assert response.status_code == 400


class TestLogin:
    """Tests for POST /api/auth/login."""

    async def test_login_success(self, client: AsyncClient, user: User):
        response = await client.post(
            "/api/auth/login",
            json={"email": user.email, "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["id"] == str(user.id)
        assert data["user"]["organisation_id"] == str(user.organisation_id)

    async def test_login_blank_fields(self, client: AsyncClient):
        response = await client.post("/api/auth/login", json={"email": "alice@acme.com"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Email and password are required"

    async def test_login_failures_are_indistinguishable(self, client: AsyncClient, user: User):
        wrong_password = await client.post(
            "/api/auth/login",
            json={"email": user.email, "password": "not-the-password"},
        )
        unknown_email = await client.post(
            "/api/auth/login",
            json={"email": "nobody@acme.com", "password": TEST_PASSWORD},
        )

        malformed_email = await client.post(
            "/api/auth/login",
            json={"email": "nobody", "password": TEST_PASSWORD},
        )

        responses = [wrong_password, unknown_email, malformed_email]
        assert [r.status_code for r in responses] == [401, 401, 401]
        assert {r.json()["detail"] for r in responses} == {"Invalid credentials"}
        assert len({r.json()["type"] for r in responses}) == 1


class TestMe:
    """Tests for GET /api/auth/me and credential enforcement."""

    async def test_me(self, authenticated_client: AsyncClient, user: User):
        response = await authenticated_client.get("/api/auth/me")

        assert response.status_code == 200
        assert response.json() == {
            "id": str(user.id),
            "name": user.name,
            "email": user.email,
            "organisation_id": str(user.organisation_id),
        }

    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/api/auth/me")

        assert response.status_code == 401

    async def test_garbage_token(self, client: AsyncClient):
        response = await client.get(
            "/api/auth/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401

    async def test_expired_token(self, client: AsyncClient, user: User):
        token = create_access_token(
            user.id, user.organisation_id, expires_delta=timedelta(seconds=-1)
        )

        response = await client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("GET", "/api/employees"),
            ("POST", "/api/employees"),
            ("GET", "/api/teams"),
            ("POST", "/api/teams/assign"),
            ("GET", "/api/logs"),
        ],
    )
    async def test_protected_routes_require_token(
        self, client: AsyncClient, method: str, path: str
    ):
        response = await client.request(method, path, json={})

        assert response.status_code == 401
