"""create devices and attribute_kv tables

Revision ID: 20261018_01
Revises:
Create Date: 2026-10-18 09:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261018_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "devices",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("tenant_id", sa.String(length=36), nullable=False),
        sa.Column("customer_id", sa.String(length=36), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=255), nullable=True),
        sa.Column("label", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_devices_tenant_id", "devices", ["tenant_id"])
    op.create_index("ix_devices_customer_id", "devices", ["customer_id"])

    op.create_table(
        "attribute_kv",
        sa.Column("entity_id", sa.String(length=36), sa.ForeignKey("devices.id"), primary_key=True),
        sa.Column("attribute_scope", sa.String(length=32), primary_key=True),
        sa.Column("attribute_key", sa.String(length=255), primary_key=True),
        sa.Column("data_type", sa.String(length=16), nullable=False),
        sa.Column("bool_v", sa.Boolean(), nullable=True),
        sa.Column("long_v", sa.BigInteger(), nullable=True),
        sa.Column("dbl_v", sa.Float(), nullable=True),
        sa.Column("str_v", sa.Text(), nullable=True),
        sa.Column("json_v", sa.Text(), nullable=True),
        sa.Column("last_update_ts", sa.BigInteger(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("attribute_kv")
    op.drop_index("ix_devices_customer_id", table_name="devices")
    op.drop_index("ix_devices_tenant_id", table_name="devices")
    op.drop_table("devices")
