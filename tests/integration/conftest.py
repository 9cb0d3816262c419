"""Fixtures for tests that drive the HTTP API."""

from collections.abc import Awaitable, Callable

import pytest
from httpx import AsyncClient


RegisterOrganisation = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
def register_organisation(client: AsyncClient) -> RegisterOrganisation:
    """Register an organisation through the API and return its auth headers."""

    async def _register(
        org_name: str,
        admin_name: str = "Admin",
        email: str | None = None,
        password: str = "correct-horse-battery",
    ) -> dict[str, str]:
        response = await client.post(
            "/api/auth/register",
            json={
                "orgName": org_name,
                "adminName": admin_name,
                "email": email or f"admin@{org_name.lower()}.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register
