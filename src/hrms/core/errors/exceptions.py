"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
Every service method raises one of these; anything else reaching the
handlers is treated as an internal fault.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(AppException):
    """Raised for general client errors.

    Example:
        raise BadRequestError("Invalid request format")
    """

    message = "Bad request"
    error_code = "bad_request"
    status_code = 400


class ValidationError(BadRequestError):
    """Raised when required input is missing or malformed.

    Example:
        raise ValidationError(
            "Team name is required",
            errors=[{"field": "name", "message": "Field is required"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class DuplicateError(BadRequestError):
    """Raised when a globally unique value is already taken.

    Example:
        raise DuplicateError("Email already registered", error_code="email_exists")
    """

    message = "Resource already exists"
    error_code = "duplicate"


class ConflictError(BadRequestError):
    """Raised when a relation that must be unique already exists.

    Example:
        raise ConflictError("Employee already assigned to this team")
    """

    message = "Resource conflict"
    error_code = "already_assigned"


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid.

    Example:
        raise UnauthorizedError("Invalid or expired token", error_code="invalid_token")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class InvalidCredentialsError(UnauthorizedError):
    """Raised on a failed login.

    The message is the same whether the email is unknown or the
    password is wrong.
    """

    message = "Invalid credentials"
    error_code = "invalid_credentials"

    def __init__(self) -> None:
        super().__init__()


class NotFoundError(AppException):
    """Raised when a resource is absent or belongs to another organisation.

    Example:
        raise NotFoundError("Employee not found", resource="employee", resource_id=str(id))
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)
