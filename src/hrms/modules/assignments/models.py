"""Employee/team assignment database models."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.core.database.base import Base, UUIDMixin


if TYPE_CHECKING:
    from hrms.modules.employees.models import Employee
    from hrms.modules.teams.models import Team


class EmployeeTeam(Base, UUIDMixin):
    """Join row linking one employee to one team.

    The (employee_id, team_id) pair is unique at the database level so
    concurrent assigns of the same pair cannot both succeed. Both sides
    belonging to the same organisation is checked by the service.

    Attributes:
        employee_id: The assigned employee
        team_id: The team
        assigned_at: When the assignment was made
    """

    __tablename__ = "employee_teams"
    __table_args__ = (
        UniqueConstraint("employee_id", "team_id", name="uq_employee_teams_employee_team"),
    )

    employee_id: Mapped[UUID] = mapped_column(
        ForeignKey("employees.id"),
        nullable=False,
        index=True,
    )
    team_id: Mapped[UUID] = mapped_column(
        ForeignKey("teams.id"),
        nullable=False,
        index=True,
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    employee: Mapped["Employee"] = relationship(
        "Employee",
        lazy="raise",
    )
    team: Mapped["Team"] = relationship(
        "Team",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<EmployeeTeam(employee_id={self.employee_id}, team_id={self.team_id})>"
