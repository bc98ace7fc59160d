"""add fcmToken to Accounts

Revision ID: 20211203085847_fcm_token
Revises: 20210714000000_init_schema
Create Date: 2021-12-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20211203085847_fcm_token"
down_revision = "20210714000000_init_schema"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Device push-notification token.
    op.add_column("Accounts", sa.Column("fcmToken", sa.String(255), nullable=True))


def downgrade() -> None:
    op.drop_column("Accounts", "fcmToken")
