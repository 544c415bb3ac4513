"""GuildConfigRecord ORM — per-guild leveling settings.

Invariants:
    - One row per guild; absence means every setting is at its default
    - Numeric settings fit SmallInteger (validated before write in core/guild_config.py)

Design Decisions:
    - Nullable columns instead of stored defaults: "unset" stays distinguishable from
      an explicit value equal to the default, and defaults can change without a migration
"""

from sqlalchemy import BigInteger, Boolean, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from xpd_slash.db.base import Base


class GuildConfigRecord(Base):
    """Stored configuration for one guild."""
    __tablename__ = "guild_configs"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    one_at_a_time: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    level_up_message: Mapped[str | None] = mapped_column(String(512), nullable=True)
    level_up_channel: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    ping_users: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    max_xp_per_message: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    min_xp_per_message: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    message_cooldown: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
