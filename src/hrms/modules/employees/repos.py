"""Employee repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from hrms.api.dependencies import DBSession
from hrms.modules.assignments.models import EmployeeTeam
from hrms.modules.employees.models import Employee


class EmployeeRepository:
    """Repository for Employee database operations.

    Every lookup takes the caller's organisation_id; a row belonging to
    another organisation is indistinguishable from a missing one.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, employee: Employee) -> Employee:
        """Create a new employee.

        Args:
            employee: Employee instance to create

        Returns:
            The created employee with ID populated
        """
        self.session.add(employee)
        await self.session.flush()
        await self.session.refresh(employee)
        return employee

    async def get_by_id(self, employee_id: UUID, organisation_id: UUID) -> Employee | None:
        """Get an employee by ID within an organisation.

        Args:
            employee_id: The employee's UUID
            organisation_id: Organisation the employee must belong to

        Returns:
            Employee if found, None otherwise
        """
        stmt = select(Employee).where(
            Employee.id == employee_id,
            Employee.organisation_id == organisation_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_teams(self, organisation_id: UUID) -> list[Employee]:
        """List an organisation's employees with their assignments and teams loaded."""
        stmt = (
            select(Employee)
            .where(Employee.organisation_id == organisation_id)
            .options(selectinload(Employee.assignments).selectinload(EmployeeTeam.team))
            .order_by(Employee.created_at, Employee.last_name, Employee.first_name)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, employee: Employee) -> Employee:
        """Flush pending changes to an employee and reload it."""
        await self.session.flush()
        await self.session.refresh(employee)
        return employee

    async def delete(self, employee: Employee) -> None:
        """Delete an employee row.

        Assignment rows must already be gone.
        """
        await self.session.delete(employee)
        await self.session.flush()


# Type alias for dependency injection
EmployeeRepo = Annotated[EmployeeRepository, Depends(EmployeeRepository)]
