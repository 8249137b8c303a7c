"""Initial schema — admins, tracks, users, cohorts, enrollments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

All foreign keys cascade on delete: track → users → enrollments, cohort → enrollments.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.Text, nullable=False, unique=True),
        sa.Column("password", sa.Text, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "tracks",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False, unique=True),
        sa.Column("phone_number", sa.Text, nullable=False, unique=True),
        sa.Column(
            "track_id", sa.Integer,
            sa.ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False,
        ),
        *_timestamps(),
    )

    op.create_table(
        "cohorts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("orientation_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("duration", sa.Text, nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "enrollments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "cohort_id", sa.Integer,
            sa.ForeignKey("cohorts.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("admitted", sa.Boolean, nullable=True),
        sa.Column("confirmed", sa.Boolean, nullable=True),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "cohort_id", name="uq_enrollments_user_cohort"),
    )


def downgrade() -> None:
    op.drop_table("enrollments")
    op.drop_table("cohorts")
    op.drop_table("users")
    op.drop_table("tracks")
    op.drop_table("admins")
