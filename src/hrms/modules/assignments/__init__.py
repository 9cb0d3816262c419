"""Assignments module - employee/team membership.

Routes live under /teams (see the teams module).
"""

from hrms.modules.assignments.models import EmployeeTeam


__all__ = ["EmployeeTeam"]
