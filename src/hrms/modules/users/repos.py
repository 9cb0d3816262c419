"""User repository for database operations."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import select

from hrms.api.dependencies import DBSession
from hrms.modules.users.models import User


class UserRepository:
    """Repository for User database operations.

    Emails are globally unique, so email lookups are not tenant-scoped:
    login and registration run before any organisation is known.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User instance to create

        Returns:
            The created user with ID populated
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID, organisation_id: UUID) -> User | None:
        """Get a user by ID within an organisation.

        Args:
            user_id: The user's UUID
            organisation_id: Organisation the user must belong to

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(
            User.id == user_id,
            User.organisation_id == organisation_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address across all organisations."""
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


# Type alias for dependency injection
UserRepo = Annotated[UserRepository, Depends(UserRepository)]
