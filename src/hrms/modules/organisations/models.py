"""Organisation database models."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from hrms.core.constants import MAX_NAME_LENGTH
from hrms.core.database.base import Base, TimestampMixin, UUIDMixin


class Organisation(Base, UUIDMixin, TimestampMixin):
    """Organisation model, the tenant root.

    All tenant-scoped data references this table via organisation_id.
    """

    __tablename__ = "organisations"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Organisation(id={self.id}, name={self.name})>"
