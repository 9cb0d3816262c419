"""Employee API routes."""

from uuid import UUID

from fastapi import status

from hrms.api.schemas import MessageResponse
from hrms.core.auth.dependencies import CurrentIdentity
from hrms.modules.employees import router
from hrms.modules.employees.schemas import (
    EmployeeCreate,
    EmployeeEnvelope,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
    EmployeeWithTeamsResponse,
)
from hrms.modules.employees.services import EmployeeSvc


@router.post(
    "",
    response_model=EmployeeEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
)
async def create_employee(
    data: EmployeeCreate,
    identity: CurrentIdentity,
    service: EmployeeSvc,
) -> EmployeeEnvelope:
    """Create an employee in the current organisation."""
    employee = await service.create_employee(
        identity.organisation_id, identity.user_id, data
    )
    return EmployeeEnvelope(
        message="Employee created successfully",
        employee=EmployeeResponse.model_validate(employee),
    )


@router.get(
    "",
    response_model=EmployeeListResponse,
    summary="List employees",
    description="Lists the organisation's employees, each with its teams.",
)
async def list_employees(
    identity: CurrentIdentity,
    service: EmployeeSvc,
) -> EmployeeListResponse:
    """List employees in the current organisation."""
    employees = await service.list_employees(identity.organisation_id)
    return EmployeeListResponse(
        employees=[EmployeeWithTeamsResponse.from_employee(e) for e in employees]
    )


@router.put(
    "/{employee_id}",
    response_model=EmployeeEnvelope,
    summary="Update employee",
)
async def update_employee(
    employee_id: UUID,
    data: EmployeeUpdate,
    identity: CurrentIdentity,
    service: EmployeeSvc,
) -> EmployeeEnvelope:
    """Update an employee."""
    employee = await service.update_employee(
        identity.organisation_id, identity.user_id, employee_id, data
    )
    return EmployeeEnvelope(
        message="Employee updated successfully",
        employee=EmployeeResponse.model_validate(employee),
    )


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    summary="Delete employee",
    description="Deletes an employee and removes it from all teams.",
)
async def delete_employee(
    employee_id: UUID,
    identity: CurrentIdentity,
    service: EmployeeSvc,
) -> MessageResponse:
    """Delete an employee."""
    await service.delete_employee(identity.organisation_id, identity.user_id, employee_id)
    return MessageResponse(message="Employee deleted successfully")
