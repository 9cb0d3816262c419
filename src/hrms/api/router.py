"""Root API router with health endpoints and module mounting."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text

from hrms.api.dependencies import DBSession
from hrms.config import settings
from hrms.core.audit.routes import router as audit_router
from hrms.core.auth.routes import router as auth_router
from hrms.modules import discover_modules


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    message: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    checks: dict[str, str]


# Create root API router
api_router = APIRouter()

# Health check endpoints (no API prefix)
health_router = APIRouter(tags=["health"])


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns 200 if the process is running.",
)
async def health() -> HealthResponse:
    """Liveness probe endpoint."""
    return HealthResponse(status="OK", message=f"{settings.app_name} is running")


@health_router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Checks database connectivity.",
)
async def readiness(db: DBSession) -> JSONResponse:
    """Readiness probe endpoint."""
    checks: dict[str, str] = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as e:
        checks["database"] = type(e).__name__

    all_ok = all(v == "ok" for v in checks.values())

    return JSONResponse(
        status_code=status.HTTP_200_OK
        if all_ok
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if all_ok else "degraded",
            "checks": checks,
        },
    )


# Prefixed API router
prefixed_router = APIRouter(prefix=settings.api_prefix)
prefixed_router.include_router(auth_router)
prefixed_router.include_router(audit_router)

# Mount discovered module routers
for module_router in discover_modules():
    prefixed_router.include_router(module_router)

# Include routers in main api_router
api_router.include_router(health_router)
api_router.include_router(prefixed_router)
