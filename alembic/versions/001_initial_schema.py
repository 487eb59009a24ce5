"""Initial schema — account and message tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "account",
        sa.Column("account_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.UniqueConstraint("username", name="uq_account_username"),
    )

    op.create_table(
        "message",
        sa.Column("message_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "posted_by", sa.Integer,
            sa.ForeignKey("account.account_id"), nullable=False,
        ),
        sa.Column("message_text", sa.String(255), nullable=False),
        sa.Column("time_posted_epoch", sa.Float, nullable=True),
    )
    op.create_index("ix_message_posted_by", "message", ["posted_by"])


def downgrade() -> None:
    op.drop_index("ix_message_posted_by", table_name="message")
    op.drop_table("message")
    op.drop_table("account")
