"""Users with long-term preferences, trips, notifications

Revision ID: initial_001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = "initial_001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("role", sa.String(20), server_default="traveler"),
        sa.Column("gender", sa.String(30), nullable=True),
        sa.Column("clothing_size", sa.String(20), nullable=True),
        sa.Column("dietary_preference", sa.String(20), server_default="none"),
        sa.Column("travel_style", sa.String(20), server_default="relaxed"),
        sa.Column("social_intent", sa.String(20), server_default="casual"),
        sa.Column("language_preference", sa.String(30), server_default="english"),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "trips",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("user_id", sa.Uuid, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("destination", sa.String(120), nullable=False),
        sa.Column("start_date", sa.Date, nullable=False),
        sa.Column("end_date", sa.Date, nullable=False),
        sa.Column("travel_group", sa.String(20), nullable=False),
        sa.Column("accommodation", sa.String(20), nullable=True),
        sa.Column("safety_sensitivity", sa.String(20), server_default="normal"),
        sa.Column("comfort_level", sa.String(20), server_default="moderate"),
        sa.Column("activity_intensity", sa.String(20), nullable=True),
        sa.Column("is_active", sa.Boolean, server_default=sa.false()),
        sa.Column("status", sa.String(20), server_default="planned"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("end_date > start_date", name="ck_trips_end_after_start"),
    )
    op.create_index("ix_trips_user_id", "trips", ["user_id"])
    op.create_index("ix_trips_destination", "trips", ["destination"])
    op.create_index("ix_trips_user_active", "trips", ["user_id", "is_active"])
    op.create_index("ix_trips_dates", "trips", ["start_date", "end_date"])

    op.create_table(
        "notifications",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("user_id", sa.Uuid, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("trip_id", sa.Uuid, sa.ForeignKey("trips.id", ondelete="SET NULL"), nullable=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("priority", sa.String(10), server_default="medium"),
        sa.Column("is_read", sa.Boolean, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(
        "ix_notifications_user_read", "notifications", ["user_id", "is_read", "created_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_notifications_user_read", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("ix_trips_dates", table_name="trips")
    op.drop_index("ix_trips_user_active", table_name="trips")
    op.drop_index("ix_trips_destination", table_name="trips")
    op.drop_index("ix_trips_user_id", table_name="trips")
    op.drop_table("trips")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
