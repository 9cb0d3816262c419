"""Employees module for employee records."""

from fastapi import APIRouter


router = APIRouter(prefix="/employees", tags=["employees"])

# Import routes to register them (must be after router is defined)
from hrms.modules.employees import routes  # noqa: F401, E402
