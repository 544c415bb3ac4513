"""CustomCardRecord ORM — stored rank card choices for one user or one guild.

Invariants:
    - id is a user id (personal card) or a guild id (guild default card)
    - NULL columns fall through to the next layer (guild, then built-in defaults)

Design Decisions:
    - One table for both card kinds, keyed by snowflake, so a fetch is a single IN query
    - Every column nullable, layout included: a user card that only changes colors
      keeps the guild's layout
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from xpd_slash.db.base import Base


class CustomCardRecord(Base):
    """Card customization row."""
    __tablename__ = "custom_card"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    username: Mapped[str | None] = mapped_column(String(7), nullable=True)
    rank: Mapped[str | None] = mapped_column(String(7), nullable=True)
    level: Mapped[str | None] = mapped_column(String(7), nullable=True)
    border: Mapped[str | None] = mapped_column(String(7), nullable=True)
    background: Mapped[str | None] = mapped_column(String(7), nullable=True)
    progress_foreground: Mapped[str | None] = mapped_column(String(7), nullable=True)
    progress_background: Mapped[str | None] = mapped_column(String(7), nullable=True)
    foreground_xp_count: Mapped[str | None] = mapped_column(String(7), nullable=True)
    background_xp_count: Mapped[str | None] = mapped_column(String(7), nullable=True)
    font: Mapped[str | None] = mapped_column(String(64), nullable=True)
    toy_image: Mapped[str | None] = mapped_column(String(64), nullable=True)
    card_layout: Mapped[str | None] = mapped_column(String(64), nullable=True)
