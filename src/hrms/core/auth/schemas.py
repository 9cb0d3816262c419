"""Authentication schemas for credentials and identity."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hrms.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_PASSWORD_LENGTH
from hrms.modules.users.schemas import UserResponse


class TokenData(BaseModel):
    """Identity extracted from a verified credential.

    Attributes:
        user_id: The admin's UUID
        organisation_id: The admin's organisation UUID
        exp: Credential expiration time
    """

    user_id: UUID
    organisation_id: UUID
    exp: datetime


class RegisterRequest(BaseModel):
    """Register an organisation together with its first admin.

    Fields are optional at the schema level so that a blank or missing
    value is reported by the service with a single message.
    """

    org_name: str | None = Field(None, alias="orgName", max_length=MAX_NAME_LENGTH)
    admin_name: str | None = Field(None, alias="adminName", max_length=MAX_NAME_LENGTH)
    email: EmailStr | None = None
    password: str | None = Field(None, max_length=MAX_PASSWORD_LENGTH)

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """Email/password login.

    The email is not format-checked: a malformed address is simply an
    unknown one and fails as invalid credentials.
    """

    email: str | None = Field(None, max_length=MAX_EMAIL_LENGTH)
    password: str | None = Field(None, max_length=MAX_PASSWORD_LENGTH)


class AuthResponse(BaseModel):
    """Credential issued by register and login."""

    message: str
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Credential lifetime in seconds")
    user: UserResponse
