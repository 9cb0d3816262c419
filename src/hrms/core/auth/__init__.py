"""Authentication module for passwords and signed credentials."""

from hrms.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from hrms.core.auth.dependencies import CurrentIdentity, get_token_data
from hrms.core.auth.middleware import OrganisationContextMiddleware, RequestIdMiddleware
from hrms.core.auth.schemas import TokenData


__all__ = [
    # Dependencies
    "CurrentIdentity",
    # Middleware
    "OrganisationContextMiddleware",
    "RequestIdMiddleware",
    # Schemas
    "TokenData",
    # Credential utilities
    "create_access_token",
    "decode_token",
    "get_token_data",
    # Password utilities
    "hash_password",
    "verify_password",
]
