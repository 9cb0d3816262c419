"""Pydantic schemas for audit log responses."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LogEntryResponse(BaseModel):
    """A single audit log entry."""

    id: UUID
    organisation_id: UUID
    user_id: UUID | None = None
    action: str
    metadata: dict[str, Any] | None = Field(None, validation_alias="metadata_")
    request_id: str | None = None
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class LogEntryListResponse(BaseModel):
    """Paginated audit log listing."""

    items: list[LogEntryResponse]
    total: int
    page: int
    page_size: int
