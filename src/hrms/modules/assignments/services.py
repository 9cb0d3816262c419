"""Assignment service: the employee/team many-to-many relation."""

from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from hrms.core.audit.service import AuditSvc
from hrms.core.errors import ConflictError, NotFoundError
from hrms.core.utils.validation import require_fields
from hrms.modules.assignments.models import EmployeeTeam
from hrms.modules.assignments.repos import AssignmentRepo
from hrms.modules.employees.models import Employee
from hrms.modules.employees.repos import EmployeeRepo
from hrms.modules.teams.models import Team
from hrms.modules.teams.repos import TeamRepo


logger = structlog.get_logger()


class AssignmentService:
    """Service for assigning employees to teams.

    Both the team and the employee must resolve under the caller's
    organisation; a cross-tenant ID is reported as not found.
    """

    def __init__(
        self,
        repo: AssignmentRepo,
        employees: EmployeeRepo,
        teams: TeamRepo,
        audit: AuditSvc,
    ) -> None:
        self.repo = repo
        self.employees = employees
        self.teams = teams
        self.audit = audit

    async def _resolve(
        self,
        organisation_id: UUID,
        team_id: UUID | None,
        employee_id: UUID | None,
    ) -> tuple[Team, Employee]:
        require_fields(
            {"teamId": team_id, "employeeId": employee_id},
            "Team ID and Employee ID are required",
        )

        team = await self.teams.get_by_id(team_id, organisation_id)
        if not team:
            raise NotFoundError("Team not found", resource="team", resource_id=str(team_id))

        employee = await self.employees.get_by_id(employee_id, organisation_id)
        if not employee:
            raise NotFoundError(
                "Employee not found", resource="employee", resource_id=str(employee_id)
            )

        return team, employee

    async def assign(
        self,
        organisation_id: UUID,
        user_id: UUID,
        team_id: UUID | None,
        employee_id: UUID | None,
    ) -> EmployeeTeam:
        """Assign an employee to a team.

        Args:
            organisation_id: Caller's organisation
            user_id: Acting admin
            team_id: Team to assign to
            employee_id: Employee to assign

        Returns:
            The created assignment

        Raises:
            ValidationError: If either ID is missing
            NotFoundError: If the team or employee is not in the organisation
            ConflictError: If the pair is already assigned
        """
        team, employee = await self._resolve(organisation_id, team_id, employee_id)

        if await self.repo.get(employee.id, team.id):
            raise ConflictError("Employee already assigned to this team")

        try:
            assignment = await self.repo.create(
                EmployeeTeam(
                    employee_id=employee.id,
                    team_id=team.id,
                    assigned_at=datetime.now(UTC),
                )
            )
        except IntegrityError as e:
            # A concurrent request inserted the same pair first
            raise ConflictError("Employee already assigned to this team") from e

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="team_assign",
            metadata={"teamId": str(team.id), "employeeId": str(employee.id)},
        )

        logger.info(
            "employee_assigned",
            team_id=str(team.id),
            employee_id=str(employee.id),
        )

        return assignment

    async def unassign(
        self,
        organisation_id: UUID,
        user_id: UUID,
        team_id: UUID | None,
        employee_id: UUID | None,
    ) -> None:
        """Remove an employee from a team.

        Raises:
            ValidationError: If either ID is missing
            NotFoundError: If the team, the employee or the assignment
                does not exist in the organisation
        """
        team, employee = await self._resolve(organisation_id, team_id, employee_id)

        assignment = await self.repo.get(employee.id, team.id)
        if not assignment:
            raise NotFoundError("Assignment not found", resource="assignment")

        await self.repo.delete(assignment)

        await self.audit.log(
            organisation_id=organisation_id,
            user_id=user_id,
            action="team_unassign",
            metadata={"teamId": str(team.id), "employeeId": str(employee.id)},
        )

        logger.info(
            "employee_unassigned",
            team_id=str(team.id),
            employee_id=str(employee.id),
        )


# Type alias for dependency injection
AssignmentSvc = Annotated[AssignmentService, Depends(AssignmentService)]
