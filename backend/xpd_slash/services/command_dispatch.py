"""Command Dispatch — explicit routing from a decoded interaction to one handler.

Invariants:
    - Every slash-command name → handler mapping is visible in one dict
    - Unknown slash command names raise UnrecognizedCommandError
    - Component, modal, and autocomplete data raise WrongInteractionDataError
    - User- and message-context commands always resolve to a level lookup
    - Leveling, config, and guild-card commands require a guild: they are scoped by guild

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: no convention-over-config)
    - Handlers instantiated per-dispatch with the shared DB session
    - Errors raised, not returned: the interaction processor owns turning them into
      an ephemeral follow-up, so no handler needs to know about delivery
"""

import logging
from collections.abc import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from xpd_slash.core.domain_types import (
    CommandType, GuildId, InteractionType, MemberDisplayInfo, OptionType,
)
from xpd_slash.core.errors import (
    NoGuildIdError,
    NoInteractionDataError,
    NoInvokerError,
    UnrecognizedCommandError,
    WrongInteractionDataError,
)
from xpd_slash.schemas.interaction import (
    CommandData, Interaction, InteractionResponse,
)
from xpd_slash.services.handle_card import CardHandlers
from xpd_slash.services.handle_config import ConfigHandlers
from xpd_slash.services.handle_help import help_response
from xpd_slash.services.handle_levels import LevelHandlers
from xpd_slash.services.resolve_target import display_info, resolve_target

logger = logging.getLogger(__name__)

SlashHandler = Callable[
    [CommandData, MemberDisplayInfo, GuildId | None], Awaitable[InteractionResponse],
]


def invoker_of(interaction: Interaction) -> MemberDisplayInfo:
    """Guild invocations carry member (+nick); DM invocations carry user."""
    if interaction.member is not None and interaction.member.user is not None:
        return display_info(interaction.member.user, interaction.member.nick)
    if interaction.user is not None:
        return display_info(interaction.user)
    raise NoInvokerError()


def _require_guild(guild_id: GuildId | None) -> GuildId:
    if guild_id is None:
        raise NoGuildIdError()
    return guild_id


class CommandDispatch:
    """Routes command name/type → handler. Explicit registration, no auto-discovery."""

    def __init__(self, db: AsyncSession):
        self._levels = LevelHandlers(db)
        self._config = ConfigHandlers(db)
        self._cards = CardHandlers(db)

        # ADR: every mapping explicit — adding a command requires editing this dict
        self._slash_handlers: dict[str, SlashHandler] = {
            "rank": self._level_lookup,
            "level": self._level_lookup,
            "help": self._help,
            "config": self._guild_config,
            "card": self._card,
            "guild-card": self._guild_card,
        }

    async def execute(self, interaction: Interaction) -> InteractionResponse:
        """Route a non-ping interaction. Raises XpdError subclasses on failure."""
        data = interaction.data
        if data is None:
            raise NoInteractionDataError()
        if not isinstance(data, CommandData) or (
            interaction.type != InteractionType.APPLICATION_COMMAND
        ):
            raise WrongInteractionDataError()
        invoker = invoker_of(interaction)
        guild_id = GuildId(interaction.guild_id) if interaction.guild_id else None
        logger.info(
            f"Dispatching command '{data.name}' (type {data.type})",
            extra={
                "interaction_id": interaction.id,
                "guild_id": guild_id,
                "command_name": data.name,
            },
        )

        if data.type == CommandType.CHAT_INPUT:
            handler = self._slash_handlers.get(data.name)
            if handler is None:
                raise UnrecognizedCommandError(data.name)
            return await handler(data, invoker, guild_id)
        if data.type in (CommandType.USER, CommandType.MESSAGE):
            return await self._level_lookup(data, invoker, guild_id)
        raise WrongInteractionDataError()

    async def _level_lookup(
        self, data: CommandData, invoker: MemberDisplayInfo, guild_id: GuildId | None,
    ) -> InteractionResponse:
        target = resolve_target(data, invoker)
        showoff = data.option("showoff")
        return await self._levels.get_level(
            _require_guild(guild_id),
            target,
            invoker.id,
            showoff=bool(
                showoff is not None
                and showoff.type == OptionType.BOOLEAN
                and showoff.value
            ),
        )

    async def _help(
        self, data: CommandData, invoker: MemberDisplayInfo, guild_id: GuildId | None,
    ) -> InteractionResponse:
        return help_response()

    async def _guild_config(
        self, data: CommandData, invoker: MemberDisplayInfo, guild_id: GuildId | None,
    ) -> InteractionResponse:
        return await self._config.process_config(data, _require_guild(guild_id))

    async def _card(
        self, data: CommandData, invoker: MemberDisplayInfo, guild_id: GuildId | None,
    ) -> InteractionResponse:
        return await self._cards.process_user_card(data, invoker, guild_id)

    async def _guild_card(
        self, data: CommandData, invoker: MemberDisplayInfo, guild_id: GuildId | None,
    ) -> InteractionResponse:
        return await self._cards.process_guild_card(data, _require_guild(guild_id))
