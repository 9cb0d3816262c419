"""Team database models."""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.core.constants import MAX_NAME_LENGTH
from hrms.core.database.base import Base, OrganisationMixin, TimestampMixin, UUIDMixin


if TYPE_CHECKING:
    from hrms.modules.assignments.models import EmployeeTeam


class Team(Base, UUIDMixin, TimestampMixin, OrganisationMixin):
    """Team within an organisation.

    Attributes:
        name: Team name
        description: Optional free-text description
        assignments: Memberships (read-only view of employee_teams)
    """

    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    # Assignment rows are deleted explicitly before the team
    assignments: Mapped[list["EmployeeTeam"]] = relationship(
        "EmployeeTeam",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Team(id={self.id}, name={self.name}, organisation_id={self.organisation_id})>"
