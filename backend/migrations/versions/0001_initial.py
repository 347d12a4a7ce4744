"""Initial schema – users and ghost_nets

Revision ID: 0001_initial
Revises:
Create Date: 2026-02-05

Creates both core tables with their unique constraints and indexes.
Actor columns on ghost_nets are plain integers (no foreign keys).
"""

from alembic import op
import sqlalchemy as sa

# Alembic revision identifiers
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # -- users ----------------------------------------------------------
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(32), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column(
            "role",
            sa.Enum("REPORTER", "SALVOR", name="user_role"),
            nullable=False,
            server_default="REPORTER",
        ),
        sa.Column("phone_number", sa.String(32), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )

    # -- ghost_nets -----------------------------------------------------
    op.create_table(
        "ghost_nets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("size", sa.Float(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("REPORTED", "SCHEDULED", "RECOVERED", "CANCELLED", name="ghost_net_status"),
            nullable=False,
            server_default="REPORTED",
        ),
        sa.Column("reported_by", sa.Integer(), nullable=True),
        sa.Column("reported_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("scheduled_by", sa.Integer(), nullable=True),
        sa.Column("scheduled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("recovered_by", sa.Integer(), nullable=True),
        sa.Column("recovered_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("cancelled_by", sa.Integer(), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("idx_ghost_nets_status", "ghost_nets", ["status"])
    op.create_index("idx_ghost_nets_reported_by", "ghost_nets", ["reported_by"])


def downgrade() -> None:
    op.drop_index("idx_ghost_nets_reported_by", table_name="ghost_nets")
    op.drop_index("idx_ghost_nets_status", table_name="ghost_nets")
    op.drop_table("ghost_nets")
    op.drop_table("users")
