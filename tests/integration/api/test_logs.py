"""Integration tests for the audit log."""

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.core.audit.models import LogEntry
from hrms.core.constants import MAX_REQUEST_ID_LENGTH
from tests.integration.conftest import RegisterOrganisation


pytestmark = pytest.mark.integration


async def _actions(db: AsyncSession) -> list[str]:
    result = await db.execute(select(LogEntry.action))
    return sorted(result.scalars().all())


class TestAuditTrail:
    """Every state-changing action leaves exactly one log row."""

    async def test_register_and_login_are_logged(
        self, client: AsyncClient, db: AsyncSession, register_organisation: RegisterOrganisation
    ):
        await register_organisation("Acme", email="alice@acme.com")
        await client.post(
            "/api/auth/login",
            json={"email": "alice@acme.com", "password": "correct-horse-battery"},
        )

        assert await _actions(db) == ["login", "register"]

    async def test_failed_operations_are_not_logged(
        self, authenticated_client: AsyncClient, db: AsyncSession
    ):
        await authenticated_client.post("/api/employees", json={"first_name": "Bob"})
        await authenticated_client.post("/api/teams", json={})
        await authenticated_client.delete(
            "/api/teams/00000000-0000-0000-0000-000000000000"
        )

        assert await _actions(db) == []

    async def test_request_id_is_recorded(
        self, authenticated_client: AsyncClient, db: AsyncSession
    ):
        await authenticated_client.post(
            "/api/teams", json={"name": "Eng"}, headers={"X-Request-ID": "req-42"}
        )

        entry = (await db.execute(select(LogEntry))).scalar_one()
        assert entry.action == "team_create"
        assert entry.request_id == "req-42"

    async def test_oversized_request_id_fits_column(
        self, authenticated_client: AsyncClient, db: AsyncSession
    ):
        response = await authenticated_client.post(
            "/api/teams", json={"name": "Eng"}, headers={"X-Request-ID": "r" * 200}
        )

        assert response.status_code == 201
        entry = (await db.execute(select(LogEntry))).scalar_one()
        assert len(entry.request_id) <= MAX_REQUEST_ID_LENGTH
        assert entry.request_id == response.headers["X-Request-ID"]


class TestListLogs:
    """Tests for GET /api/logs."""

    async def test_newest_first_with_user(self, authenticated_client: AsyncClient, user):
        await authenticated_client.post("/api/teams", json={"name": "Eng"})
        team_id = (await authenticated_client.get("/api/teams")).json()["teams"][0]["id"]
        await authenticated_client.put(f"/api/teams/{team_id}", json={"name": "Platform"})

        response = await authenticated_client.get("/api/logs")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [entry["action"] for entry in data["items"]] == ["team_update", "team_create"]
        assert data["items"][0]["user_id"] == str(user.id)
        assert data["items"][0]["metadata"] == {
            "teamId": team_id,
            "updates": {"name": "Platform"},
        }

    async def test_pagination(self, authenticated_client: AsyncClient):
        for i in range(5):
            await authenticated_client.post("/api/teams", json={"name": f"Team {i}"})

        response = await authenticated_client.get("/api/logs", params={"page": 2, "page_size": 2})

        data = response.json()
        assert data["total"] == 5
        assert data["page"] == 2
        assert data["page_size"] == 2
        assert len(data["items"]) == 2

    async def test_page_size_is_capped(self, authenticated_client: AsyncClient):
        response = await authenticated_client.get("/api/logs", params={"page_size": 1000})

        assert response.status_code == 400
