"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Creates the booking tables:
- Drivers
- Rides (driver assignment)
- Hotels (room inventory)
"""

from typing import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create all database tables."""

    # ==================== DRIVERS ====================
    op.create_table(
        "drivers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default="available"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )

    # ==================== RIDES ====================
    op.create_table(
        "rides",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("pickup", sa.Text, nullable=False),
        sa.Column("destination", sa.Text, nullable=False),
        sa.Column("driver_id", sa.Integer, sa.ForeignKey("drivers.id"), index=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending", index=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )

    # ==================== HOTELS ====================
    op.create_table(
        "hotels",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("location", sa.Text, nullable=False, index=True),
        sa.Column("price_per_night", sa.Float, nullable=False),
        sa.Column("rating", sa.Float, nullable=False, server_default="4.0"),
        sa.Column("amenities", sa.Text),
        sa.Column("description", sa.Text),
        sa.Column("available_rooms", sa.Integer, nullable=False, server_default="10"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.CheckConstraint("available_rooms >= 0", name="ck_hotels_available_rooms_non_negative"),
    )


def downgrade() -> None:
    """Drop all database tables in reverse order."""
    op.drop_table("hotels")
    op.drop_table("rides")
    op.drop_table("drivers")
