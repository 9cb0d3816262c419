"""Append-only audit log."""

from hrms.core.audit.models import LogEntry
from hrms.core.audit.service import AuditService, AuditSvc


__all__ = [
    "AuditService",
    "AuditSvc",
    "LogEntry",
]
