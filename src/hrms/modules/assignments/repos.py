"""Assignment repository for the employee_teams join table."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, select

from hrms.api.dependencies import DBSession
from hrms.modules.assignments.models import EmployeeTeam


class AssignmentRepository:
    """Repository for EmployeeTeam rows.

    The join table carries no organisation_id; callers resolve both
    sides under the caller's organisation before touching it.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, assignment: EmployeeTeam) -> EmployeeTeam:
        """Insert an assignment inside a savepoint.

        A unique-constraint violation rolls back only the savepoint and
        propagates as IntegrityError, leaving the outer transaction usable.
        """
        async with self.session.begin_nested():
            self.session.add(assignment)
            await self.session.flush()
        await self.session.refresh(assignment)
        return assignment

    async def get(self, employee_id: UUID, team_id: UUID) -> EmployeeTeam | None:
        """Get the assignment row for an (employee, team) pair."""
        stmt = select(EmployeeTeam).where(
            EmployeeTeam.employee_id == employee_id,
            EmployeeTeam.team_id == team_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, assignment: EmployeeTeam) -> None:
        """Delete a single assignment row."""
        await self.session.delete(assignment)
        await self.session.flush()

    async def delete_for_employee(self, employee_id: UUID) -> int:
        """Delete every assignment of an employee.

        Returns:
            Number of rows deleted
        """
        result = await self.session.execute(
            delete(EmployeeTeam).where(EmployeeTeam.employee_id == employee_id)
        )
        return result.rowcount

    async def delete_for_team(self, team_id: UUID) -> int:
        """Delete every assignment to a team.

        Returns:
            Number of rows deleted
        """
        result = await self.session.execute(
            delete(EmployeeTeam).where(EmployeeTeam.team_id == team_id)
        )
        return result.rowcount


# Type alias for dependency injection
AssignmentRepo = Annotated[AssignmentRepository, Depends(AssignmentRepository)]
