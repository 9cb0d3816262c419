"""Team service for business logic."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from hrms.core.audit.service import AuditSvc
from hrms.core.errors import NotFoundError
from hrms.core.utils.validation import is_blank, require_fields
from hrms.modules.assignments.repos import AssignmentRepo
from hrms.modules.teams.models import Team
from hrms.modules.teams.repos import TeamRepo
from hrms.modules.teams.schemas import TeamCreate, TeamUpdate


logger = structlog.get_logger()


class TeamService:
    """Service for team management operations."""

    def __init__(
        self,
        repo: TeamRepo,
        assignments: AssignmentRepo,
        audit: AuditSvc,
    ) -> None:
        self.repo = repo
        self.assignments = assignments
        self.audit = audit

    async def _get_owned(self, team_id: UUID, organisation_id: UUID) -> Team:
        team = await self.repo.get_by_id(team_id, organisation_id)
        if not team:
            raise NotFoundError("Team not found", resource="team", resource_id=str(team_id))
        return team

    async def create_team(
        self,
        organisation_id: UUID,
        user_id: UUID,
        data: TeamCreate,
    ) -> Team:
        """Create a team in the caller's organisation.

        Raises:
            ValidationError: If the name is blank
        """
        require_fields({"name": data.name}, "Team name is required")

        team = await self.repo.create(
            Team(
                organisation_id=organisation_id,
                name=data.name,
                description=data.description,
            )
        )

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="team_create",
            metadata={"teamId": str(team.id), "name": team.name},
        )

        logger.info("team_created", team_id=str(team.id))
        return team

    async def list_teams(self, organisation_id: UUID) -> list[Team]:
        """List the organisation's teams with their members loaded."""
        return await self.repo.list_with_members(organisation_id)

    async def update_team(
        self,
        organisation_id: UUID,
        user_id: UUID,
        team_id: UUID,
        data: TeamUpdate,
    ) -> Team:
        """Apply a partial update to a team.

        Raises:
            NotFoundError: If the team is not in the organisation
        """
        team = await self._get_owned(team_id, organisation_id)

        if not is_blank(data.name):
            team.name = data.name
        if "description" in data.model_fields_set:
            team.description = data.description

        team = await self.repo.update(team)

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="team_update",
            metadata={
                "teamId": str(team.id),
                "updates": data.model_dump(exclude_unset=True),
            },
        )

        logger.info("team_updated", team_id=str(team.id))
        return team

    async def delete_team(
        self,
        organisation_id: UUID,
        user_id: UUID,
        team_id: UUID,
    ) -> None:
        """Delete a team and its assignments.

        Raises:
            NotFoundError: If the team is not in the organisation
        """
        team = await self._get_owned(team_id, organisation_id)

        removed = await self.assignments.delete_for_team(team.id)
        await self.repo.delete(team)

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="team_delete",
            metadata={"teamId": str(team_id)},
        )

        logger.info("team_deleted", team_id=str(team_id), assignments_removed=removed)


# Type alias for dependency injection
TeamSvc = Annotated[TeamService, Depends(TeamService)]
