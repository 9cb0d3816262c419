"""Team API routes, including employee assignment."""

from uuid import UUID

from fastapi import status

from hrms.api.schemas import MessageResponse
from hrms.core.auth.dependencies import CurrentIdentity
from hrms.modules.assignments.schemas import (
    AssignmentEnvelope,
    AssignmentRequest,
    AssignmentResponse,
)
from hrms.modules.assignments.services import AssignmentSvc
from hrms.modules.teams import router
from hrms.modules.teams.schemas import (
    TeamCreate,
    TeamEnvelope,
    TeamListResponse,
    TeamResponse,
    TeamUpdate,
    TeamWithEmployeesResponse,
)
from hrms.modules.teams.services import TeamSvc


# ============================================================
# Team Routes
# ============================================================


@router.post(
    "",
    response_model=TeamEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create team",
)
async def create_team(
    data: TeamCreate,
    identity: CurrentIdentity,
    service: TeamSvc,
) -> TeamEnvelope:
    """Create a team in the current organisation."""
    team = await service.create_team(identity.organisation_id, identity.user_id, data)
    return TeamEnvelope(
        message="Team created successfully",
        team=TeamResponse.model_validate(team),
    )


@router.get(
    "",
    response_model=TeamListResponse,
    summary="List teams",
    description="Lists the organisation's teams, each with its employees.",
)
async def list_teams(
    identity: CurrentIdentity,
    service: TeamSvc,
) -> TeamListResponse:
    """List teams in the current organisation."""
    teams = await service.list_teams(identity.organisation_id)
    return TeamListResponse(teams=[TeamWithEmployeesResponse.from_team(t) for t in teams])


@router.put(
    "/{team_id}",
    response_model=TeamEnvelope,
    summary="Update team",
)
async def update_team(
    team_id: UUID,
    data: TeamUpdate,
    identity: CurrentIdentity,
    service: TeamSvc,
) -> TeamEnvelope:
    """Update a team."""
    team = await service.update_team(identity.organisation_id, identity.user_id, team_id, data)
    return TeamEnvelope(
        message="Team updated successfully",
        team=TeamResponse.model_validate(team),
    )


@router.delete(
    "/{team_id}",
    response_model=MessageResponse,
    summary="Delete team",
    description="Deletes a team and all of its assignments.",
)
async def delete_team(
    team_id: UUID,
    identity: CurrentIdentity,
    service: TeamSvc,
) -> MessageResponse:
    """Delete a team."""
    await service.delete_team(identity.organisation_id, identity.user_id, team_id)
    return MessageResponse(message="Team deleted successfully")


# ============================================================
# Assignment Routes
# ============================================================


@router.post(
    "/assign",
    response_model=AssignmentEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Assign employee to team",
)
async def assign_employee(
    data: AssignmentRequest,
    identity: CurrentIdentity,
    service: AssignmentSvc,
) -> AssignmentEnvelope:
    """Assign an employee to a team."""
    assignment = await service.assign(
        identity.organisation_id,
        identity.user_id,
        team_id=data.team_id,
        employee_id=data.employee_id,
    )
    return AssignmentEnvelope(
        message="Employee assigned to team successfully",
        assignment=AssignmentResponse.model_validate(assignment),
    )


@router.post(
    "/unassign",
    response_model=MessageResponse,
    summary="Unassign employee from team",
)
async def unassign_employee(
    data: AssignmentRequest,
    identity: CurrentIdentity,
    service: AssignmentSvc,
) -> MessageResponse:
    """Remove an employee from a team."""
    await service.unassign(
        identity.organisation_id,
        identity.user_id,
        team_id=data.team_id,
        employee_id=data.employee_id,
    )
    return MessageResponse(message="Employee unassigned from team successfully")
