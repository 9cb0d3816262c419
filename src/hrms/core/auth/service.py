"""Authentication service for registration and login."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy.exc import IntegrityError

from hrms.api.dependencies import DBSession
from hrms.core.audit.service import AuditSvc
from hrms.core.auth.backend import create_access_token, hash_password, verify_password
from hrms.core.errors import (
    DuplicateError,
    InvalidCredentialsError,
    UnauthorizedError,
)
from hrms.core.utils.validation import require_fields
from hrms.modules.organisations.models import Organisation
from hrms.modules.organisations.repos import OrganisationRepo
from hrms.modules.users.models import User
from hrms.modules.users.repos import UserRepo


logger = structlog.get_logger()


class AuthService:
    """Service for authentication operations.

    Handles organisation registration and admin login. Credentials are
    stateless: nothing is stored server-side when one is issued.
    """

    def __init__(
        self,
        db: DBSession,
        org_repo: OrganisationRepo,
        user_repo: UserRepo,
        audit: AuditSvc,
    ) -> None:
        self.db = db
        self.org_repo = org_repo
        self.user_repo = user_repo
        self.audit = audit

    async def register(
        self,
        org_name: str | None,
        admin_name: str | None,
        email: str | None,
        password: str | None,
    ) -> tuple[User, str]:
        """Register a new organisation and its first admin.

        Organisation, user and the `register` log entry are written in
        the request's single transaction.

        Args:
            org_name: Name for the new organisation
            admin_name: Admin's display name
            email: Admin's email address
            password: Plain text password

        Returns:
            Tuple of (user, credential)

        Raises:
            ValidationError: If any field is blank
            DuplicateError: If the organisation name or the email is taken
        """
        require_fields(
            {"orgName": org_name, "adminName": admin_name, "email": email, "password": password},
            "All fields are required",
        )

        if await self.org_repo.get_by_name(org_name):
            raise DuplicateError(
                "Organisation name already taken",
                error_code="organisation_exists",
            )

        if await self.user_repo.get_by_email(email):
            raise DuplicateError(
                "Email already registered",
                error_code="email_exists",
            )

        # Unique constraints close the window between the checks above and the inserts
        try:
            async with self.db.begin_nested():
                organisation = await self.org_repo.create(Organisation(name=org_name))
                user = await self.user_repo.create(
                    User(
                        organisation_id=organisation.id,
                        email=email,
                        password_hash=hash_password(password),
                        name=admin_name,
                    )
                )
        except IntegrityError as e:
            raise DuplicateError(
                "Organisation name or email already registered",
                error_code="duplicate",
            ) from e

        await self.audit.log(
            organisation_id=organisation.id,
            user_id=user.id,
            action="register",
            metadata={"orgName": org_name, "adminName": admin_name, "email": email},
        )

        logger.info(
            "organisation_registered",
            organisation_id=str(organisation.id),
            user_id=str(user.id),
        )

        return user, create_access_token(user.id, organisation.id)

    async def login(
        self,
        email: str | None,
        password: str | None,
    ) -> tuple[User, str]:
        """Authenticate an admin with email and password.

        Args:
            email: User's email address
            password: Plain text password

        Returns:
            Tuple of (user, credential)

        Raises:
            ValidationError: If email or password is blank
            InvalidCredentialsError: If the email is unknown or the password
                is wrong (indistinguishable to the caller)
        """
        require_fields(
            {"email": email, "password": password},
            "Email and password are required",
        )

        user = await self.user_repo.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.info("login_failed", reason="unknown_email" if not user else "bad_password")
            raise InvalidCredentialsError()

        await self.audit.log(
            organisation_id=user.organisation_id,
            user_id=user.id,
            action="login",
            metadata={"email": email},
        )

        return user, create_access_token(user.id, user.organisation_id)

    async def get_user(self, user_id: UUID, organisation_id: UUID) -> User:
        """Get the admin a credential was issued to.

        Raises:
            UnauthorizedError: If the user no longer exists
        """
        user = await self.user_repo.get_by_id(user_id, organisation_id)
        if not user:
            raise UnauthorizedError(
                "User not found",
                error_code="user_not_found",
            )
        return user


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
