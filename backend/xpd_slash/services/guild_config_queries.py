"""Guild Config Queries — load, upsert, and delete per-guild settings.

Invariants:
    - query_guild_config returns None when the guild has never been configured
    - update_guild_config validates the MERGED config before anything is written
    - Writes commit in the same session they were made in

Design Decisions:
    - Read-merge-write through the ORM instead of dialect-specific upserts:
      the same code runs on PostgreSQL (production) and SQLite (tests)
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from xpd_slash.core.domain_types import GuildId
from xpd_slash.core.guild_config import GuildConfig, validate_config
from xpd_slash.models.guild_config import GuildConfigRecord

logger = logging.getLogger(__name__)

_FIELDS = (
    "one_at_a_time", "level_up_message", "level_up_channel", "ping_users",
    "max_xp_per_message", "min_xp_per_message", "message_cooldown",
)


def _to_config(record: GuildConfigRecord) -> GuildConfig:
    return GuildConfig(**{name: getattr(record, name) for name in _FIELDS})


async def query_guild_config(
    db: AsyncSession, guild_id: GuildId,
) -> GuildConfig | None:
    record = await db.get(GuildConfigRecord, guild_id)
    return _to_config(record) if record else None


async def update_guild_config(
    db: AsyncSession, guild_id: GuildId, update: GuildConfig,
) -> GuildConfig:
    """Overlay `update` on the stored config, validate, persist, return the result."""
    record = await db.get(GuildConfigRecord, guild_id)
    current = _to_config(record) if record else GuildConfig()
    merged = current.merged_with(update)
    validate_config(merged)
    if record is None:
        record = GuildConfigRecord(id=guild_id)
        db.add(record)
    for name in _FIELDS:
        setattr(record, name, getattr(merged, name))
    await db.commit()
    logger.info(f"Updated config for guild {guild_id}", extra={"guild_id": guild_id})
    return merged


async def delete_guild_config(db: AsyncSession, guild_id: GuildId) -> None:
    await db.execute(
        delete(GuildConfigRecord).where(GuildConfigRecord.id == guild_id),
    )
    await db.commit()
