"""Error handling module with RFC 7807 Problem Details."""

from hrms.core.errors.exceptions import (
    AppException,
    BadRequestError,
    ConflictError,
    DuplicateError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from hrms.core.errors.handlers import register_exception_handlers


__all__ = [
    # Exceptions
    "AppException",
    "BadRequestError",
    "ConflictError",
    "DuplicateError",
    "InvalidCredentialsError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
    # Handlers
    "register_exception_handlers",
]
