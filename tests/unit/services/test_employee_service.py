"""Unit tests for the employee service."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from hrms.core.errors import NotFoundError, ValidationError
from hrms.modules.employees.models import Employee
from hrms.modules.employees.schemas import EmployeeCreate, EmployeeUpdate
from hrms.modules.employees.services import EmployeeService
from tests.factories import EmployeeCreateFactory


ORG_ID = uuid4()
USER_ID = uuid4()


@pytest.fixture
def repo():
    repo = AsyncMock()
    repo.create.side_effect = _persist
    repo.update.side_effect = lambda employee: employee
    return repo


@pytest.fixture
def assignments():
    return AsyncMock()


@pytest.fixture
def audit():
    return AsyncMock()


@pytest.fixture
def service(repo, assignments, audit) -> EmployeeService:
    return EmployeeService(repo=repo, assignments=assignments, audit=audit)


def _persist(employee: Employee) -> Employee:
    employee.id = uuid4()
    return employee


def _employee(**overrides) -> Employee:
    fields = {
        "id": uuid4(),
        "organisation_id": ORG_ID,
        "first_name": "Bob",
        "last_name": "Builder",
        "email": "bob@acme.com",
        "phone": "555-0100",
    }
    fields.update(overrides)
    return Employee(**fields)


class TestCreateEmployee:
    """Tests for EmployeeService.create_employee."""

    @pytest.mark.parametrize("blank", ["first_name", "last_name", "email"])
    async def test_required_fields(self, service, repo, blank):
        data = EmployeeCreateFactory.build(**{blank: " "})

        with pytest.raises(ValidationError) as exc_info:
            await service.create_employee(ORG_ID, USER_ID, data)

        assert exc_info.value.message == "First name, last name, and email are required"
        repo.create.assert_not_called()

    async def test_creates_in_callers_organisation(self, service, audit):
        data = EmployeeCreateFactory.build()

        employee = await service.create_employee(ORG_ID, USER_ID, data)

        assert employee.organisation_id == ORG_ID
        assert employee.first_name == data.first_name
        audit.log.assert_awaited_once()
        kwargs = audit.log.await_args.kwargs
        assert kwargs["action"] == "employee_create"
        assert kwargs["user_id"] == USER_ID
        assert kwargs["metadata"]["employeeId"] == str(employee.id)

    async def test_phone_is_optional(self, service):
        data = EmployeeCreate(first_name="Bob", last_name="Builder", email="bob@acme.com")

        employee = await service.create_employee(ORG_ID, USER_ID, data)

        assert employee.phone is None


class TestUpdateEmployee:
    """Tests for EmployeeService.update_employee partial-update rules."""

    async def test_missing_employee(self, service, repo, audit):
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.update_employee(ORG_ID, USER_ID, uuid4(), EmployeeUpdate())

        assert exc_info.value.message == "Employee not found"
        audit.log.assert_not_called()

    async def test_blank_names_keep_prior_values(self, service, repo):
        repo.get_by_id.return_value = _employee()

        employee = await service.update_employee(
            ORG_ID,
            USER_ID,
            uuid4(),
            EmployeeUpdate(first_name="", last_name="   ", email=None),
        )

        assert employee.first_name == "Bob"
        assert employee.last_name == "Builder"
        assert employee.email == "bob@acme.com"

    async def test_absent_phone_keeps_prior_value(self, service, repo):
        repo.get_by_id.return_value = _employee()

        employee = await service.update_employee(
            ORG_ID, USER_ID, uuid4(), EmployeeUpdate(first_name="Robert")
        )

        assert employee.first_name == "Robert"
        assert employee.phone == "555-0100"

    async def test_explicit_null_clears_phone(self, service, repo):
        repo.get_by_id.return_value = _employee()

        employee = await service.update_employee(
            ORG_ID, USER_ID, uuid4(), EmployeeUpdate.model_validate({"phone": None})
        )

        assert employee.phone is None

    async def test_logs_submitted_updates(self, service, repo, audit):
        existing = _employee()
        repo.get_by_id.return_value = existing

        await service.update_employee(
            ORG_ID, USER_ID, existing.id, EmployeeUpdate(phone="555-0199")
        )

        kwargs = audit.log.await_args.kwargs
        assert kwargs["action"] == "employee_update"
        assert kwargs["metadata"] == {
            "employeeId": str(existing.id),
            "updates": {"phone": "555-0199"},
        }


class TestDeleteEmployee:
    """Tests for EmployeeService.delete_employee."""

    async def test_missing_employee(self, service, repo, assignments):
        repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.delete_employee(ORG_ID, USER_ID, uuid4())

        assignments.delete_for_employee.assert_not_called()
        repo.delete.assert_not_called()

    async def test_removes_assignments_then_employee_then_logs(
        self, service, repo, assignments, audit
    ):
        existing = _employee()
        repo.get_by_id.return_value = existing
        calls: list[str] = []
        assignments.delete_for_employee.side_effect = lambda _id: calls.append("assignments") or 0
        repo.delete.side_effect = lambda _employee: calls.append("employee")
        audit.log.side_effect = lambda **_kwargs: calls.append("log")

        await service.delete_employee(ORG_ID, USER_ID, existing.id)

        assert calls == ["assignments", "employee", "log"]
        assignments.delete_for_employee.assert_awaited_once_with(existing.id)
        assert audit.log.await_args.kwargs["action"] == "employee_delete"
