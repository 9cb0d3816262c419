"""Team repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from hrms.api.dependencies import DBSession
from hrms.modules.assignments.models import EmployeeTeam
from hrms.modules.teams.models import Team


class TeamRepository:
    """Repository for Team database operations.

    All queries are scoped to the caller's organisation.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, team: Team) -> Team:
        """Create a new team."""
        self.session.add(team)
        await self.session.flush()
        await self.session.refresh(team)
        return team

    async def get_by_id(self, team_id: UUID, organisation_id: UUID) -> Team | None:
        """Get a team by ID within an organisation.

        Args:
            team_id: The team's UUID
            organisation_id: Organisation the team must belong to

        Returns:
            Team if found, None otherwise
        """
        stmt = select(Team).where(
            Team.id == team_id,
            Team.organisation_id == organisation_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_members(self, organisation_id: UUID) -> list[Team]:
        """List an organisation's teams with their assignments and employees loaded."""
        stmt = (
            select(Team)
            .where(Team.organisation_id == organisation_id)
            .options(selectinload(Team.assignments).selectinload(EmployeeTeam.employee))
            .order_by(Team.created_at, Team.name)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, team: Team) -> Team:
        """Flush pending changes to a team and reload it."""
        await self.session.flush()
        await self.session.refresh(team)
        return team

    async def delete(self, team: Team) -> None:
        """Delete a team row. Assignment rows must already be gone."""
        await self.session.delete(team)
        await self.session.flush()


# Type alias for dependency injection
TeamRepo = Annotated[TeamRepository, Depends(TeamRepository)]
