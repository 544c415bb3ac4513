"""Level Handlers — rank/level lookups for every command shape (1 method).

Invariants:
    - Experience and rank are re-read from the database on every call
    - A user with no row behaves exactly like one with zero experience
    - Reply is ephemeral unless the invoker asked to show it off

Design Decisions:
    - Target already resolved by the dispatcher: the handler never looks at raw payloads
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from xpd_slash.core.domain_types import GuildId, MemberDisplayInfo, UserId
from xpd_slash.core.format_messages import format_level_message
from xpd_slash.schemas.interaction import InteractionResponse, message_response
from xpd_slash.services.level_queries import get_user_stats

logger = logging.getLogger(__name__)


class LevelHandlers:
    """Level lookups — shared by /rank, /level, "Get level" and "Get author level"."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_level(
        self,
        guild_id: GuildId,
        target: MemberDisplayInfo,
        invoker_id: UserId,
        showoff: bool = False,
    ) -> InteractionResponse:
        stats = await get_user_stats(self.db, target.id, guild_id)
        logger.debug(
            f"Level lookup for {target.id}: xp={stats.xp} rank={stats.rank}",
            extra={"guild_id": guild_id},
        )
        content = format_level_message(target, target.id == invoker_id, stats)
        return message_response(content, ephemeral=not showoff)
