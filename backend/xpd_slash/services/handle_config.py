"""Config Handlers — /config sub-commands for per-guild leveling settings (4 methods).

Invariants:
    - Every reply is ephemeral embed text (settings are an administrator concern)
    - Validation failures raise GuildConfigValidationError BEFORE anything is written
    - level_up_channel must be a guild text channel from resolved data

Design Decisions:
    - Sub-command routing via explicit dict (ADR: every mapping visible in one place)
    - Option parsing lives here, not in schemas: the wire format is generic option lists
"""

from collections.abc import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from xpd_slash.core.domain_types import ChannelType, GuildId, OptionType
from xpd_slash.core.errors import (
    GuildConfigValidationError,
    NoResolvedDataError,
    UnrecognizedCommandError,
)
from xpd_slash.core.guild_config import (
    GuildConfig, check_i16, check_level_up_message, describe_config,
)
from xpd_slash.schemas.interaction import (
    CommandData, CommandOption, Embed, InteractionResponse, message_response,
)
from xpd_slash.services.guild_config_queries import (
    delete_guild_config, query_guild_config, update_guild_config,
)


class ConfigHandlers:
    """Guild config — get, reset, levels, rewards."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._handlers: dict[
            str, Callable[[CommandData, CommandOption, GuildId], Awaitable[str]]
        ] = {
            "get": self.get_config,
            "reset": self.reset_config,
            "levels": self.update_levels,
            "rewards": self.update_rewards,
        }

    async def process_config(
        self, data: CommandData, guild_id: GuildId,
    ) -> InteractionResponse:
        sub = data.options[0] if data.options else None
        if sub is None or sub.type != OptionType.SUB_COMMAND:
            raise UnrecognizedCommandError(data.name)
        handler = self._handlers.get(sub.name)
        if handler is None:
            raise UnrecognizedCommandError(f"{data.name} {sub.name}")
        text = await handler(data, sub, guild_id)
        return message_response(embeds=[Embed(description=text)])

    async def get_config(
        self, data: CommandData, sub: CommandOption, guild_id: GuildId,
    ) -> str:
        config = await query_guild_config(self.db, guild_id)
        return describe_config(config or GuildConfig())

    async def reset_config(
        self, data: CommandData, sub: CommandOption, guild_id: GuildId,
    ) -> str:
        await delete_guild_config(self.db, guild_id)
        return "Reset guild reward config, but NOT rewards themselves!"

    async def update_rewards(
        self, data: CommandData, sub: CommandOption, guild_id: GuildId,
    ) -> str:
        values = sub.option_values()
        await update_guild_config(
            self.db, guild_id,
            GuildConfig(one_at_a_time=values.get("one_at_a_time")),
        )
        return "Updated rewards config!"

    async def update_levels(
        self, data: CommandData, sub: CommandOption, guild_id: GuildId,
    ) -> str:
        values = sub.option_values()
        level_up_message = values.get("level_up_message")
        check_level_up_message(level_up_message)
        channel_id = values.get("level_up_channel")
        if channel_id is not None:
            channel_id = int(channel_id)
            self._check_text_channel(data, channel_id)
        update = GuildConfig(
            level_up_message=level_up_message,
            level_up_channel=channel_id,
            ping_users=values.get("ping_users"),
            max_xp_per_message=check_i16(
                "max_xp_per_message", values.get("max_xp_per_message"),
            ),
            min_xp_per_message=check_i16(
                "min_xp_per_message", values.get("min_xp_per_message"),
            ),
            message_cooldown=check_i16(
                "message_cooldown", values.get("message_cooldown"),
            ),
        )
        config = await update_guild_config(self.db, guild_id, update)
        return describe_config(config)

    @staticmethod
    def _check_text_channel(data: CommandData, channel_id: int) -> None:
        if data.resolved is None:
            raise NoResolvedDataError()
        channel = data.resolved.channels.get(channel_id)
        if channel is None or channel.type != ChannelType.GUILD_TEXT:
            raise GuildConfigValidationError("Level-up channel must be a text channel!")
