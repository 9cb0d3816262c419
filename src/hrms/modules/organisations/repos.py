"""Organisation repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from hrms.api.dependencies import DBSession
from hrms.modules.organisations.models import Organisation


class OrganisationRepository:
    """Repository for Organisation database operations.

    Organisations are the tenant root, so lookups here are system-level.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, organisation: Organisation) -> Organisation:
        """Create a new organisation.

        Args:
            organisation: Organisation instance to create

        Returns:
            The created organisation with ID populated
        """
        self.session.add(organisation)
        await self.session.flush()
        await self.session.refresh(organisation)
        return organisation

    async def get_by_name(self, name: str) -> Organisation | None:
        """Get an organisation by its unique name."""
        stmt = select(Organisation).where(Organisation.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


# Type alias for dependency injection
OrganisationRepo = Annotated[OrganisationRepository, Depends(OrganisationRepository)]
