"""Pydantic schemas for assignment operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AssignmentRequest(BaseModel):
    """Body of assign and unassign requests."""

    team_id: UUID | None = Field(None, alias="teamId")
    employee_id: UUID | None = Field(None, alias="employeeId")

    model_config = ConfigDict(populate_by_name=True)


class AssignmentResponse(BaseModel):
    """An employee/team assignment."""

    id: UUID
    employee_id: UUID
    team_id: UUID
    assigned_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AssignmentEnvelope(BaseModel):
    """Assign response."""

    message: str
    assignment: AssignmentResponse
