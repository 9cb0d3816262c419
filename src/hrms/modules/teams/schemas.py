"""Pydantic schemas for team operations."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hrms.core.constants import MAX_NAME_LENGTH


if TYPE_CHECKING:
    from hrms.modules.teams.models import Team


class TeamCreate(BaseModel):
    """Schema for creating a team."""

    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    description: str | None = None


class TeamUpdate(BaseModel):
    """Schema for a partial team update.

    A blank name keeps the stored value; `description` is only touched
    when present in the request body.
    """

    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    description: str | None = None


class TeamResponse(BaseModel):
    """Schema for team response data."""

    id: UUID
    organisation_id: UUID
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TeamMemberSummary(BaseModel):
    """An employee on the team, with the assignment time."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    assigned_at: datetime


class TeamWithEmployeesResponse(TeamResponse):
    """Team together with its members."""

    employees: list[TeamMemberSummary] = []

    @classmethod
    def from_team(cls, team: "Team") -> "TeamWithEmployeesResponse":
        """Build from a team whose assignments and employees are loaded."""
        assignments = sorted(team.assignments, key=lambda a: a.assigned_at)
        return cls(
            **TeamResponse.model_validate(team).model_dump(),
            employees=[
                TeamMemberSummary(
                    id=a.employee.id,
                    first_name=a.employee.first_name,
                    last_name=a.employee.last_name,
                    email=a.employee.email,
                    phone=a.employee.phone,
                    assigned_at=a.assigned_at,
                )
                for a in assignments
            ],
        )


class TeamEnvelope(BaseModel):
    """Create/update response."""

    message: str
    team: TeamResponse


class TeamListResponse(BaseModel):
    """Schema for listing teams."""

    teams: list[TeamWithEmployeesResponse]
