"""Teams module for teams and team membership."""

from fastapi import APIRouter


router = APIRouter(prefix="/teams", tags=["teams"])

# Import routes to register them (must be after router is defined)
from hrms.modules.teams import routes  # noqa: F401, E402
