"""Level Queries — the two reads behind every rank lookup.

Invariants:
    - A missing (user, guild) row is NOT an error: get_experience returns None (zero XP)
    - Rank = count of rows in the same guild with strictly greater xp, plus one
    - Never cached: other users' experience changes between requests

Design Decisions:
    - Two independent statements, no transaction linking them: a concurrent XP award
      between the reads can skew rank by one for a moment (accepted staleness window)
    - Functions take an AsyncSession so the caller owns session lifetime and error mapping
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from xpd_slash.core.domain_types import GuildId, UserId, UserStats
from xpd_slash.models.level import ExperienceRecord


async def get_experience(
    db: AsyncSession, user_id: UserId, guild_id: GuildId,
) -> int | None:
    """Stored XP for the user in this guild, or None if they have no row."""
    result = await db.execute(
        select(ExperienceRecord.xp).where(
            ExperienceRecord.id == user_id,
            ExperienceRecord.guild == guild_id,
        ),
    )
    return result.scalar_one_or_none()


async def count_ranked_above(
    db: AsyncSession, guild_id: GuildId, xp: int,
) -> int:
    result = await db.execute(
        select(func.count()).select_from(ExperienceRecord).where(
            ExperienceRecord.guild == guild_id,
            ExperienceRecord.xp > xp,
        ),
    )
    return result.scalar_one()


async def get_user_stats(
    db: AsyncSession, user_id: UserId, guild_id: GuildId,
) -> UserStats:
    xp = await get_experience(db, user_id, guild_id) or 0
    above = await count_ranked_above(db, guild_id, xp)
    return UserStats(xp=xp, rank=above + 1)
