"""Employee service for business logic."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from hrms.core.audit.service import AuditSvc
from hrms.core.errors import NotFoundError
from hrms.core.utils.validation import is_blank, require_fields
from hrms.modules.assignments.repos import AssignmentRepo
from hrms.modules.employees.models import Employee
from hrms.modules.employees.repos import EmployeeRepo
from hrms.modules.employees.schemas import EmployeeCreate, EmployeeUpdate


logger = structlog.get_logger()


class EmployeeService:
    """Service for employee management operations.

    Every operation is scoped to the caller's organisation and appends
    an audit log entry when it changes state.
    """

    def __init__(
        self,
        repo: EmployeeRepo,
        assignments: AssignmentRepo,
        audit: AuditSvc,
    ) -> None:
        self.repo = repo
        self.assignments = assignments
        self.audit = audit

    async def _get_owned(self, employee_id: UUID, organisation_id: UUID) -> Employee:
        employee = await self.repo.get_by_id(employee_id, organisation_id)
        if not employee:
            raise NotFoundError(
                "Employee not found",
                resource="employee",
                resource_id=str(employee_id),
            )
        return employee

    async def create_employee(
        self,
        organisation_id: UUID,
        user_id: UUID,
        data: EmployeeCreate,
    ) -> Employee:
        """Create an employee in the caller's organisation.

        Args:
            organisation_id: Caller's organisation
            user_id: Acting admin
            data: Employee fields

        Returns:
            The created employee

        Raises:
            ValidationError: If first name, last name or email is blank
        """
        require_fields(
            {"first_name": data.first_name, "last_name": data.last_name, "email": data.email},
            "First name, last name, and email are required",
        )

        employee = await self.repo.create(
            Employee(
                organisation_id=organisation_id,
                first_name=data.first_name,
                last_name=data.last_name,
                email=data.email,
                phone=data.phone,
            )
        )

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="employee_create",
            metadata={
                "employeeId": str(employee.id),
                "first_name": employee.first_name,
                "last_name": employee.last_name,
                "email": employee.email,
            },
        )

        logger.info("employee_created", employee_id=str(employee.id))
        return employee

    async def list_employees(self, organisation_id: UUID) -> list[Employee]:
        """List the organisation's employees with their teams loaded."""
        return await self.repo.list_with_teams(organisation_id)

    async def update_employee(
        self,
        organisation_id: UUID,
        user_id: UUID,
        employee_id: UUID,
        data: EmployeeUpdate,
    ) -> Employee:
        """Apply a partial update to an employee.

        Blank names and email keep the stored value. Phone is changed
        only when the request carried it.

        Raises:
            NotFoundError: If the employee is not in the organisation
        """
        employee = await self._get_owned(employee_id, organisation_id)

        for field in ("first_name", "last_name", "email"):
            value = getattr(data, field)
            if not is_blank(value):
                setattr(employee, field, value)

        if "phone" in data.model_fields_set:
            employee.phone = data.phone

        employee = await self.repo.update(employee)

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="employee_update",
            metadata={
                "employeeId": str(employee.id),
                "updates": data.model_dump(exclude_unset=True),
            },
        )

        logger.info("employee_updated", employee_id=str(employee.id))
        return employee

    async def delete_employee(
        self,
        organisation_id: UUID,
        user_id: UUID,
        employee_id: UUID,
    ) -> None:
        """Delete an employee and its team assignments.

        Raises:
            NotFoundError: If the employee is not in the organisation
        """
        employee = await self._get_owned(employee_id, organisation_id)

        removed = await self.assignments.delete_for_employee(employee.id)
        await self.repo.delete(employee)

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="employee_delete",
            metadata={"employeeId": str(employee_id)},
        )

        logger.info(
            "employee_deleted",
            employee_id=str(employee_id),
            assignments_removed=removed,
        )


# Type alias for dependency injection
EmployeeSvc = Annotated[EmployeeService, Depends(EmployeeService)]
