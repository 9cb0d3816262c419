"""Authentication backend for passwords and signed credentials.

This module provides core authentication utilities including:
- Password hashing with bcrypt
- JWT credential creation and verification
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from hrms.config import settings
from hrms.core.auth.schemas import TokenData
from hrms.core.constants import BCRYPT_ROUNDS


# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Salted bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# ============================================================
# JWT Credential Utilities
# ============================================================


def get_token_lifetime() -> timedelta:
    """Lifetime of an issued credential."""
    return timedelta(days=settings.access_token_expire_days)


def create_access_token(
    user_id: UUID,
    organisation_id: UUID,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed credential for an admin.

    Args:
        user_id: The user's UUID
        organisation_id: The user's organisation UUID
        expires_delta: Optional custom lifetime (defaults to 7 days)

    Returns:
        Encoded JWT
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta if expires_delta is not None else get_token_lifetime())

    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "organisation_id": str(organisation_id),
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenData | None:
    """Decode and validate a JWT credential.

    Args:
        token: The JWT to decode

    Returns:
        TokenData if valid, None if the signature is bad, the
        credential has expired, or claims are missing or malformed
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )

        user_id = payload.get("sub")
        organisation_id = payload.get("organisation_id")
        exp = payload.get("exp")

        if not user_id or not organisation_id or exp is None:
            return None

        return TokenData(
            user_id=UUID(user_id),
            organisation_id=UUID(organisation_id),
            exp=datetime.fromtimestamp(exp, tz=UTC),
        )

    except (JWTError, ValueError, TypeError):
        return None
