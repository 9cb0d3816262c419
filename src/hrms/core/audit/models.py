"""Audit log database model.

Stores one append-only entry per state-changing action.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, DateTime, ForeignKey, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from hrms.core.constants import MAX_ACTION_LENGTH, MAX_REQUEST_ID_LENGTH
from hrms.core.database.base import Base, UUIDMixin


class LogEntry(Base, UUIDMixin):
    """Audit log entry for tracking who did what, when.

    Rows are only ever inserted; the application has no update or
    delete path for this table.

    Attributes:
        organisation_id: The organisation this action belongs to
        user_id: The admin who performed the action (nullable)
        action: Action tag (register, login, employee_create, team_assign, ...)
        metadata_: Free-form context about the action
        request_id: Correlation ID of the request that wrote the entry
        timestamp: When the action occurred
    """

    __tablename__ = "logs"

    organisation_id: Mapped[UUID] = mapped_column(
        ForeignKey("organisations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    action: Mapped[str] = mapped_column(
        String(MAX_ACTION_LENGTH),
        nullable=False,
        index=True,
    )
    metadata_: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata",  # Column name in database
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=True,
    )
    request_id: Mapped[str | None] = mapped_column(
        String(MAX_REQUEST_ID_LENGTH),
        nullable=True,
        index=True,
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<LogEntry(id={self.id}, action={self.action}, "
            f"organisation_id={self.organisation_id})>"
        )
