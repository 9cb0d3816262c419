"""Audit service for appending and reading log entries."""

from typing import Annotated, Any
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy import func, select

from hrms.api.dependencies import DBSession
from hrms.core.audit.models import LogEntry


log = structlog.get_logger()


class AuditService:
    """Service for the append-only audit log.

    Every mutating service operation calls `log` after its own writes,
    in the same transaction.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def log(
        self,
        organisation_id: UUID,
        action: str,
        user_id: UUID | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> LogEntry:
        """Append an audit log entry.

        The current request ID is taken from the structlog context, where
        the request ID middleware binds it.

        Args:
            organisation_id: Organisation the action belongs to
            action: Action tag (e.g., "employee_create")
            user_id: Admin who performed the action
            metadata: Additional JSON-serializable context

        Returns:
            Created log entry

        Example:
            await audit.log(
                organisation_id=org_id,
                action="team_assign",
                user_id=user_id,
                metadata={"teamId": str(team_id), "employeeId": str(employee_id)},
            )
        """
        request_id = structlog.contextvars.get_contextvars().get("request_id")

        entry = LogEntry(
            organisation_id=organisation_id,
            user_id=user_id,
            action=action,
            metadata_=metadata,
            request_id=request_id,
        )

        self.session.add(entry)
        await self.session.flush()

        log.info(
            "audit_log_created",
            action=action,
            organisation_id=str(organisation_id),
            user_id=str(user_id) if user_id else None,
        )

        return entry

    async def list_entries(
        self,
        organisation_id: UUID,
        page: int = 1,
        page_size: int = 20,
    ) -> tuple[list[LogEntry], int]:
        """List an organisation's log entries, newest first.

        Args:
            organisation_id: The organisation's UUID
            page: Page number (1-indexed)
            page_size: Number of items per page

        Returns:
            Tuple of (entries, total count)
        """
        count_stmt = (
            select(func.count())
            .select_from(LogEntry)
            .where(LogEntry.organisation_id == organisation_id)
        )
        total = (await self.session.execute(count_stmt)).scalar_one()

        offset = (page - 1) * page_size
        stmt = (
            select(LogEntry)
            .where(LogEntry.organisation_id == organisation_id)
            .order_by(LogEntry.timestamp.desc(), LogEntry.id)
            .offset(offset)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total


# Type alias for dependency injection
AuditSvc = Annotated[AuditService, Depends(AuditService)]
