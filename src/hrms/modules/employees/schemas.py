"""Pydantic schemas for employee operations."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from hrms.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_PHONE_LENGTH


if TYPE_CHECKING:
    from hrms.modules.employees.models import Employee


class EmployeeCreate(BaseModel):
    """Schema for creating an employee.

    Required fields are checked for blankness by the service.
    """

    first_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    last_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    email: str | None = Field(None, max_length=MAX_EMAIL_LENGTH)
    phone: str | None = Field(None, max_length=MAX_PHONE_LENGTH)


class EmployeeUpdate(BaseModel):
    """Schema for a partial employee update.

    Blank names and email keep their stored value. `phone` is only
    touched when present in the request body; an explicit null clears it.
    """

    first_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    last_name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    email: str | None = Field(None, max_length=MAX_EMAIL_LENGTH)
    phone: str | None = Field(None, max_length=MAX_PHONE_LENGTH)


class EmployeeResponse(BaseModel):
    """Schema for employee response data."""

    id: UUID
    organisation_id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class EmployeeTeamSummary(BaseModel):
    """A team the employee belongs to, with the assignment time."""

    id: UUID
    name: str
    description: str | None = None
    assigned_at: datetime


class EmployeeWithTeamsResponse(EmployeeResponse):
    """Employee together with its team memberships."""

    teams: list[EmployeeTeamSummary] = []

    @classmethod
    def from_employee(cls, employee: "Employee") -> "EmployeeWithTeamsResponse":
        """Build from an employee whose assignments and teams are loaded."""
        assignments = sorted(employee.assignments, key=lambda a: a.assigned_at)
        return cls(
            **EmployeeResponse.model_validate(employee).model_dump(),
            teams=[
                EmployeeTeamSummary(
                    id=assignment.team.id,
                    name=assignment.team.name,
                    description=assignment.team.description,
                    assigned_at=assignment.assigned_at,
                )
                for assignment in assignments
            ],
        )


class EmployeeEnvelope(BaseModel):
    """Create/update response."""

    message: str
    employee: EmployeeResponse


class EmployeeListResponse(BaseModel):
    """Schema for listing employees."""

    employees: list[EmployeeWithTeamsResponse]
