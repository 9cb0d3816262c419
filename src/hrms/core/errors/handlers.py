"""Exception handlers rendering errors as RFC 7807 problem details.

Every error body carries ``type``, ``title``, ``status``, ``detail`` and
``instance``, plus the ``request_id`` bound by RequestIdMiddleware so a
client report can be matched to the audit log and the request logs.
"""

from typing import TYPE_CHECKING, Any, cast

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hrms.config import settings
from hrms.core.errors.exceptions import AppException


if TYPE_CHECKING:
    from starlette.types import ExceptionHandler


logger = structlog.get_logger()


def _problem(
    request: Request,
    status_code: int,
    error_code: str,
    title: str,
    detail: str,
    **extra: Any,
) -> JSONResponse:
    content: dict[str, Any] = {
        "type": f"{settings.api_docs_base_url}/errors/{error_code}",
        "title": title,
        "status": status_code,
        "detail": detail,
        "instance": request.url.path,
    }
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        content["request_id"] = request_id
    # Core fields win over exception details of the same name
    for key, value in extra.items():
        content.setdefault(key, value)

    return JSONResponse(status_code=status_code, content=content)


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors to ``{field, message, type}`` entries."""
    errors = []
    for error in exc.errors():
        parts = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append(
            {
                "field": ".".join(parts) or "unknown",
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
        )
    return errors


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    logger.warning(
        "app_exception",
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        path=request.url.path,
        details=exc.details,
    )

    return _problem(
        request,
        exc.status_code,
        exc.error_code,
        exc.error_code.replace("_", " ").title(),
        exc.message,
        **exc.details,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed bodies, wrong types and unparseable path ids.

    These share the 400 status of domain validation failures.
    """
    errors = _field_errors(exc)
    logger.warning("validation_error", path=request.url.path, error_count=len(errors))

    return _problem(
        request,
        status.HTTP_400_BAD_REQUEST,
        "validation_error",
        "Validation Error",
        "Request validation failed",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer 500 without exposing its details."""
    logger.exception(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
    )

    return _problem(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_error",
        "Internal Server Error",
        "Internal server error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the handlers for domain, request validation and unexpected errors."""
    app.add_exception_handler(AppException, cast("ExceptionHandler", app_exception_handler))
    app.add_exception_handler(
        RequestValidationError, cast("ExceptionHandler", validation_exception_handler)
    )
    app.add_exception_handler(Exception, generic_exception_handler)
