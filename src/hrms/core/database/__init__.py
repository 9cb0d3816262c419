"""Database layer - session management, base models, and mixins."""

from hrms.core.database.base import Base, OrganisationMixin, TimestampMixin, UUIDMixin
from hrms.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "OrganisationMixin",
    "TimestampMixin",
    "UUIDMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
]
