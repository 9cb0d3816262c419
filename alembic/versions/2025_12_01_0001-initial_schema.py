"""initial_schema

Revision ID: 3f9a1c7d2e40
Revises:
Create Date: 2025-12-01 00:01:00.000000

Creates organisations, users, employees, teams, employee_teams and logs.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f9a1c7d2e40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _organisation_fk() -> sa.Column:
    return sa.Column(
        "organisation_id",
        sa.Uuid(),
        sa.ForeignKey("organisations.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "organisations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_organisations_id", "organisations", ["id"])
    op.create_index("ix_organisations_name", "organisations", ["name"], unique=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        _organisation_fk(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_organisation_id", "users", ["organisation_id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "employees",
        sa.Column("id", sa.Uuid(), nullable=False),
        _organisation_fk(),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_employees_id", "employees", ["id"])
    op.create_index("ix_employees_organisation_id", "employees", ["organisation_id"])
    op.create_index("ix_employees_email", "employees", ["email"])

    op.create_table(
        "teams",
        sa.Column("id", sa.Uuid(), nullable=False),
        _organisation_fk(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_teams_id", "teams", ["id"])
    op.create_index("ix_teams_organisation_id", "teams", ["organisation_id"])

    op.create_table(
        "employee_teams",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("employee_id", sa.Uuid(), sa.ForeignKey("employees.id"), nullable=False),
        sa.Column("team_id", sa.Uuid(), sa.ForeignKey("teams.id"), nullable=False),
        sa.Column(
            "assigned_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("employee_id", "team_id", name="uq_employee_teams_employee_team"),
    )
    op.create_index("ix_employee_teams_id", "employee_teams", ["id"])
    op.create_index("ix_employee_teams_employee_id", "employee_teams", ["employee_id"])
    op.create_index("ix_employee_teams_team_id", "employee_teams", ["team_id"])

    op.create_table(
        "logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        _organisation_fk(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("action", sa.String(length=50), nullable=False),
        sa.Column("metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("request_id", sa.String(length=64), nullable=True),
        sa.Column(
            "timestamp",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_logs_id", "logs", ["id"])
    op.create_index("ix_logs_organisation_id", "logs", ["organisation_id"])
    op.create_index("ix_logs_user_id", "logs", ["user_id"])
    op.create_index("ix_logs_action", "logs", ["action"])
    op.create_index("ix_logs_request_id", "logs", ["request_id"])
    op.create_index("ix_logs_timestamp", "logs", ["timestamp"])


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_table("logs")
    op.drop_table("employee_teams")
    op.drop_table("teams")
    op.drop_table("employees")
    op.drop_table("users")
    op.drop_table("organisations")
