"""Card Handlers — /card and /guild-card sub-commands (reset, fetch, edit).

Invariants:
    - Every reply is ephemeral embed text
    - Edits validate every option BEFORE anything is written
    - /card edits and resets only ever touch the invoker's own card
    - /guild-card requires a guild and only touches that guild's card

Design Decisions:
    - Sub-command routing via explicit dict (ADR: every mapping visible in one place)
    - Fetch shows the effective settings (user over guild over defaults), not the raw row
"""

from collections.abc import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from xpd_slash.core.card_customization import (
    describe_customizations, parse_card_edit,
)
from xpd_slash.core.domain_types import GuildId, MemberDisplayInfo, OptionType
from xpd_slash.core.errors import UnrecognizedCommandError
from xpd_slash.schemas.interaction import (
    CommandData, CommandOption, Embed, InteractionResponse, message_response,
)
from xpd_slash.services.card_queries import (
    delete_card, get_customizations, update_card,
)

CardAction = Callable[[CommandOption], Awaitable[str]]


def _sub_command(data: CommandData) -> CommandOption:
    sub = data.options[0] if data.options else None
    if sub is None or sub.type != OptionType.SUB_COMMAND:
        raise UnrecognizedCommandError(data.name)
    return sub


class CardHandlers:
    """Rank card customization for users and guilds."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def process_user_card(
        self, data: CommandData, invoker: MemberDisplayInfo, guild_id: GuildId | None,
    ) -> InteractionResponse:
        async def fetch(sub: CommandOption) -> str:
            target = sub.option_values().get("user")
            target_id = int(target) if target is not None else invoker.id
            ids = [target_id, guild_id] if guild_id else [target_id]
            return describe_customizations(await get_customizations(self.db, ids))

        return await self._route(data, {
            "reset": lambda sub: self._reset(invoker.id),
            "fetch": fetch,
            "edit": lambda sub: self._edit(invoker.id, sub),
        })

    async def process_guild_card(
        self, data: CommandData, guild_id: GuildId,
    ) -> InteractionResponse:
        async def fetch(sub: CommandOption) -> str:
            return describe_customizations(
                await get_customizations(self.db, [guild_id]),
            )

        return await self._route(data, {
            "reset": lambda sub: self._reset(guild_id),
            "fetch": fetch,
            "edit": lambda sub: self._edit(guild_id, sub),
        })

    async def _route(
        self, data: CommandData, actions: dict[str, CardAction],
    ) -> InteractionResponse:
        sub = _sub_command(data)
        action = actions.get(sub.name)
        if action is None:
            raise UnrecognizedCommandError(f"{data.name} {sub.name}")
        text = await action(sub)
        return message_response(embeds=[Embed(description=text)])

    async def _reset(self, card_id: int) -> str:
        await delete_card(self.db, card_id)
        return "Card settings cleared!"

    async def _edit(self, card_id: int, sub: CommandOption) -> str:
        changes = parse_card_edit(sub.option_values())
        await update_card(self.db, card_id, changes)
        return "Updated card!"
