"""Authentication API routes.

Provides endpoints for:
- Organisation registration
- Login
- Current admin profile
"""

from fastapi import APIRouter, status

from hrms.core.auth.backend import get_token_lifetime
from hrms.core.auth.dependencies import CurrentIdentity
from hrms.core.auth.schemas import AuthResponse, LoginRequest, RegisterRequest
from hrms.core.auth.service import AuthSvc
from hrms.modules.users.schemas import UserResponse


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register organisation",
    description="Creates a new organisation and its first admin user.",
)
async def register(
    data: RegisterRequest,
    service: AuthSvc,
) -> AuthResponse:
    """Register a new organisation and admin."""
    user, token = await service.register(
        org_name=data.org_name,
        admin_name=data.admin_name,
        email=data.email,
        password=data.password,
    )

    return AuthResponse(
        message="Organisation registered successfully",
        token=token,
        expires_in=int(get_token_lifetime().total_seconds()),
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login with email and password",
    description="Authenticate with email and password to receive a bearer credential.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
) -> AuthResponse:
    """Login with email and password."""
    user, token = await service.login(email=data.email, password=data.password)

    return AuthResponse(
        message="Login successful",
        token=token,
        expires_in=int(get_token_lifetime().total_seconds()),
        user=UserResponse.model_validate(user),
    )


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    description="Returns the authenticated admin's public fields.",
)
async def get_me(
    identity: CurrentIdentity,
    service: AuthSvc,
) -> UserResponse:
    """Get current admin profile."""
    user = await service.get_user(identity.user_id, identity.organisation_id)
    return UserResponse.model_validate(user)
