"""Add custom_card table for rank card customization.

Revision ID: 002_custom_card
Revises: 001_initial
Create Date: 2026-10-16

One row per user (personal card) or guild (guild default card).
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_custom_card"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_COLOR_COLUMNS = (
    "username", "rank", "level", "border", "background",
    "progress_foreground", "progress_background",
    "foreground_xp_count", "background_xp_count",
)


def upgrade() -> None:
    op.create_table(
        "custom_card",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=False),
        *(sa.Column(name, sa.String(7), nullable=True) for name in _COLOR_COLUMNS),
        sa.Column("font", sa.String(64), nullable=True),
        sa.Column("toy_image", sa.String(64), nullable=True),
        sa.Column("card_layout", sa.String(64), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("custom_card")
