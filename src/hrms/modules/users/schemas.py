"""Pydantic schemas for user operations."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Public fields of an admin user."""

    id: UUID
    name: str
    email: str
    organisation_id: UUID

    model_config = ConfigDict(from_attributes=True)
