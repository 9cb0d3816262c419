"""FastAPI dependencies for authentication.

The authorization gate: protected routes depend on `CurrentIdentity`,
which verifies the bearer credential on every request. No server-side
session state is kept.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hrms.core.auth.backend import decode_token
from hrms.core.auth.schemas import TokenData
from hrms.core.errors import UnauthorizedError


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and validate identity from the Authorization header.

    Args:
        credentials: Bearer token credentials from the request

    Returns:
        Decoded identity

    Raises:
        UnauthorizedError: If the credential is missing, invalid or expired
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    return token_data


# Type alias for cleaner dependency injection
CurrentIdentity = Annotated[TokenData, Depends(get_token_data)]
