"""Create tenant, resource, pricing, booking and notification tables

Revision ID: 3c1f9a7d2b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


revision = "3c1f9a7d2b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "tenants",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("role", sa.String(), nullable=False, server_default="hall_owner"),
        sa.Column("name", sa.String()),
        sa.Column("email", sa.String(), index=True),
        sa.Column("business_name", sa.String()),
        sa.Column("address", sa.String()),
        sa.Column("phone", sa.String()),
        sa.Column("event_types", sa.JSON(), nullable=False),
    )

    op.create_table(
        "customers",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("tenant_id", sa.String(32), sa.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("name", sa.String()),
        sa.Column("email", sa.String(), index=True),
    )

    op.create_table(
        "resources",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("tenant_id", sa.String(32), sa.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("name", sa.String(), nullable=False, server_default=""),
        sa.Column("type", sa.String(), nullable=False, server_default="hall"),
        sa.Column("capacity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("code", sa.String(), nullable=False, server_default=""),
        sa.Column("description", sa.String(), nullable=False, server_default=""),
    )

    op.create_table(
        "pricing_rules",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("tenant_id", sa.String(32), sa.ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("resource_id", sa.String(32), sa.ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("resource_name", sa.String(), nullable=False, server_default=""),
        sa.Column("rate_type", sa.String(), nullable=False, server_default="hourly"),
        sa.Column("weekday_rate", sa.Float(), nullable=False, server_default="0"),
        sa.Column("weekend_rate", sa.Float(), nullable=False, server_default="0"),
        sa.Column("description", sa.String(), nullable=False, server_default=""),
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("tenant_id", sa.String(32), sa.ForeignKey("tenants.id"), nullable=False, index=True),
        sa.Column("resource_ids", sa.JSON(), nullable=False),
        sa.Column("resource_names", sa.JSON(), nullable=False),
        sa.Column("resource_id", sa.String(32)),
        sa.Column("resource_name", sa.String()),
        sa.Column("booking_date", sa.Date(), nullable=False, index=True),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("customer_id", sa.String(32)),
        sa.Column("customer_name", sa.String(), nullable=False),
        sa.Column("customer_email", sa.String(), nullable=False),
        sa.Column("customer_phone", sa.String(), nullable=False),
        sa.Column("customer_avatar", sa.String()),
        sa.Column("event_type", sa.String(), nullable=False),
        sa.Column("guest_count", sa.Integer()),
        sa.Column("additional_description", sa.String(), nullable=False, server_default=""),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        sa.Column("calculated_price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("price_breakdown", sa.JSON()),
        sa.Column("booking_code", sa.String(), nullable=False),
        sa.Column("source", sa.String(), nullable=False, server_default="website"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_bookings_booking_code", "bookings", ["booking_code"], unique=True)

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("user_id", sa.String(32), nullable=False, index=True),
        sa.Column("type", sa.String(), nullable=False, server_default="new_booking"),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("message", sa.String(), nullable=False),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table("notifications")
    op.drop_index("ix_bookings_booking_code", table_name="bookings")
    op.drop_table("bookings")
    op.drop_table("pricing_rules")
    op.drop_table("resources")
    op.drop_table("customers")
    op.drop_table("tenants")
