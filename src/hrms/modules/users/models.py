"""User database models."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hrms.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH
from hrms.core.database.base import Base, OrganisationMixin, TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin, OrganisationMixin):
    """User model representing an organisation admin.

    Attributes:
        email: Email address, unique across all organisations
        password_hash: Bcrypt-hashed password
        name: Display name
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, organisation_id={self.organisation_id})>"
