"""Test factories."""

from tests.factories.employee import EmployeeCreateFactory
from tests.factories.team import TeamCreateFactory


__all__ = ["EmployeeCreateFactory", "TeamCreateFactory"]
