"""Audit log API routes (read-only)."""

from fastapi import APIRouter, Query

from hrms.core.audit.schemas import LogEntryListResponse, LogEntryResponse
from hrms.core.audit.service import AuditSvc
from hrms.core.auth.dependencies import CurrentIdentity
from hrms.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


router = APIRouter(prefix="/logs", tags=["logs"])


@router.get(
    "",
    response_model=LogEntryListResponse,
    summary="List audit log entries",
    description="Returns the caller's organisation's audit log, newest first.",
)
async def list_logs(
    identity: CurrentIdentity,
    audit: AuditSvc,
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> LogEntryListResponse:
    """List audit log entries for the current organisation."""
    entries, total = await audit.list_entries(
        identity.organisation_id, page=page, page_size=page_size
    )
    return LogEntryListResponse(
        items=[LogEntryResponse.model_validate(entry) for entry in entries],
        total=total,
        page=page,
        page_size=page_size,
    )
