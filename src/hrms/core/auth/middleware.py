"""Request identity and organisation context middleware.

This module provides middleware for:
- Binding the caller's organisation to the request context
- Request tracing with unique IDs
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from hrms.core.auth.backend import decode_token
from hrms.core.constants import MAX_REQUEST_ID_LENGTH


if TYPE_CHECKING:
    from starlette.types import ASGIApp


class OrganisationContextMiddleware(BaseHTTPMiddleware):
    """Middleware that binds organisation context to requests.

    Decodes the bearer credential (if present) and adds organisation_id
    and user_id to request.state and the structlog context. It never
    rejects a request; protected routes enforce authentication through
    the `CurrentIdentity` dependency.

    Attributes:
        exclude_paths: Paths that never carry organisation context
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or [
            "/health",
            "/docs",
            "/redoc",
            "/openapi.json",
        ]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and inject organisation context."""
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            token_data = decode_token(auth_header.split(" ", 1)[1])

            if token_data:
                request.state.organisation_id = token_data.organisation_id
                request.state.user_id = token_data.user_id

                structlog.contextvars.bind_contextvars(
                    organisation_id=str(token_data.organisation_id),
                    user_id=str(token_data.user_id),
                )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    A client-supplied X-Request-ID is honoured when it fits the audit
    log column; otherwise a fresh UUID replaces it.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process the request and add request ID."""
        request_id = request.headers.get("X-Request-ID")
        if not request_id or len(request_id) > MAX_REQUEST_ID_LENGTH:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(
                "request_id", "organisation_id", "user_id"
            )

        response.headers["X-Request-ID"] = request_id
        return response
