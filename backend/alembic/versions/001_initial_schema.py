"""Initial schema — levels, guild_configs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

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
        "levels",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=False),
        sa.Column("guild", sa.BigInteger, primary_key=True, autoincrement=False),
        sa.Column("xp", sa.BigInteger, nullable=False, server_default="0"),
        sa.CheckConstraint("xp >= 0", name="ck_levels_xp_non_negative"),
    )
    op.create_index("ix_levels_guild_xp", "levels", ["guild", "xp"])

    op.create_table(
        "guild_configs",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=False),
        sa.Column("one_at_a_time", sa.Boolean, nullable=True),
        sa.Column("level_up_message", sa.String(512), nullable=True),
        sa.Column("level_up_channel", sa.BigInteger, nullable=True),
        sa.Column("ping_users", sa.Boolean, nullable=True),
        sa.Column("max_xp_per_message", sa.SmallInteger, nullable=True),
        sa.Column("min_xp_per_message", sa.SmallInteger, nullable=True),
        sa.Column("message_cooldown", sa.SmallInteger, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("guild_configs")
    op.drop_index("ix_levels_guild_xp", table_name="levels")
    op.drop_table("levels")
