"""Integration tests for multi-tenancy isolation.

Every record belongs to one organisation; an admin of another
organisation can neither see nor touch it, and foreign IDs are reported
as not found.
"""

import pytest
from httpx import AsyncClient

from tests.integration.conftest import RegisterOrganisation


pytestmark = pytest.mark.integration


class TestTenantIsolation:
    """Acme and Globex share one database and see nothing of each other."""

    @pytest.fixture
    async def acme(self, register_organisation: RegisterOrganisation) -> dict[str, str]:
        return await register_organisation("Acme", email="alice@acme.com")

    @pytest.fixture
    async def globex(self, register_organisation: RegisterOrganisation) -> dict[str, str]:
        return await register_organisation("Globex", email="hank@globex.com")

    @pytest.fixture
    async def acme_employee(self, client: AsyncClient, acme: dict[str, str]) -> dict:
        response = await client.post(
            "/api/employees",
            headers=acme,
            json={"first_name": "Bob", "last_name": "Builder", "email": "bob@acme.com"},
        )
        return response.json()["employee"]

    @pytest.fixture
    async def acme_team(self, client: AsyncClient, acme: dict[str, str]) -> dict:
        response = await client.post("/api/teams", headers=acme, json={"name": "Eng"})
        return response.json()["team"]

    async def test_lists_are_scoped(
        self, client: AsyncClient, acme_employee: dict, acme_team: dict, globex: dict[str, str]
    ):
        employees = await client.get("/api/employees", headers=globex)
        teams = await client.get("/api/teams", headers=globex)

        assert employees.json() == {"employees": []}
        assert teams.json() == {"teams": []}

    async def test_cannot_update_foreign_employee(
        self, client: AsyncClient, acme: dict[str, str], acme_employee: dict, globex: dict[str, str]
    ):
        response = await client.put(
            f"/api/employees/{acme_employee['id']}",
            headers=globex,
            json={"first_name": "Mallory"},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Employee not found"
        employees = (await client.get("/api/employees", headers=acme)).json()["employees"]
        assert employees[0]["first_name"] == "Bob"

    async def test_cannot_delete_foreign_employee(
        self, client: AsyncClient, acme: dict[str, str], acme_employee: dict, globex: dict[str, str]
    ):
        response = await client.delete(f"/api/employees/{acme_employee['id']}", headers=globex)

        assert response.status_code == 404
        employees = (await client.get("/api/employees", headers=acme)).json()["employees"]
        assert len(employees) == 1

    async def test_cannot_update_or_delete_foreign_team(
        self, client: AsyncClient, acme_team: dict, globex: dict[str, str]
    ):
        update = await client.put(
            f"/api/teams/{acme_team['id']}", headers=globex, json={"name": "Hijacked"}
        )
        delete = await client.delete(f"/api/teams/{acme_team['id']}", headers=globex)

        assert update.status_code == 404
        assert delete.status_code == 404

    async def test_cannot_assign_foreign_employee(
        self, client: AsyncClient, acme_employee: dict, globex: dict[str, str]
    ):
        globex_team = (
            await client.post("/api/teams", headers=globex, json={"name": "Sales"})
        ).json()["team"]

        response = await client.post(
            "/api/teams/assign",
            headers=globex,
            json={"teamId": globex_team["id"], "employeeId": acme_employee["id"]},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Employee not found"

    async def test_cannot_assign_to_foreign_team(
        self, client: AsyncClient, acme_team: dict, globex: dict[str, str]
    ):
        globex_employee = (
            await client.post(
                "/api/employees",
                headers=globex,
                json={"first_name": "Hank", "last_name": "Scorpio", "email": "hank@globex.com"},
            )
        ).json()["employee"]

        response = await client.post(
            "/api/teams/assign",
            headers=globex,
            json={"teamId": acme_team["id"], "employeeId": globex_employee["id"]},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Team not found"

    async def test_logs_are_scoped(
        self, client: AsyncClient, acme: dict[str, str], acme_employee: dict, globex: dict[str, str]
    ):
        globex_logs = (await client.get("/api/logs", headers=globex)).json()["items"]

        assert [entry["action"] for entry in globex_logs] == ["register"]
