"""ExperienceRecord ORM — accumulated experience per (user, guild).

Invariants:
    - xp is a non-negative, monotonically non-decreasing counter
    - (id, guild) is the primary key; a missing row means zero experience
    - This service only reads the table; the message listener owns writes

Design Decisions:
    - Table name "levels" and column names kept compatible with the listener's schema
    - BigInteger for snowflakes: Discord ids exceed 32 bits
    - (guild, xp) index: rank queries count rows above a value within one guild
"""

from sqlalchemy import BigInteger, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from xpd_slash.db.base import Base


class ExperienceRecord(Base):
    """Experience counter for one user in one guild."""
    __tablename__ = "levels"
    __table_args__ = (
        Index("ix_levels_guild_xp", "guild", "xp"),
        CheckConstraint("xp >= 0", name="ck_levels_xp_non_negative"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    guild: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    xp: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
