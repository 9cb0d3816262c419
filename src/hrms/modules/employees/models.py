"""Employee database models."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_PHONE_LENGTH
from hrms.core.database.base import Base, OrganisationMixin, TimestampMixin, UUIDMixin


if TYPE_CHECKING:
    from hrms.modules.assignments.models import EmployeeTeam


class Employee(Base, UUIDMixin, TimestampMixin, OrganisationMixin):
    """Employee record managed by an organisation's admins.

    Email is deliberately not unique: two employees of the same
    organisation may share one.

    Attributes:
        first_name: Given name
        last_name: Family name
        email: Contact email
        phone: Optional phone number
        assignments: Team memberships (read-only view of employee_teams)
    """

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    last_name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        index=True,
    )
    phone: Mapped[str | None] = mapped_column(
        String(MAX_PHONE_LENGTH),
        nullable=True,
    )

    # Assignment rows are deleted explicitly before the employee
    assignments: Mapped[list["EmployeeTeam"]] = relationship(
        "EmployeeTeam",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email={self.email}, organisation_id={self.organisation_id})>"
