"""Card Handlers — /card and /guild-card reset, fetch, edit.

Tests cover:
    - Fetch with nothing stored shows defaults
    - Edit persists and fetch shows the effective (user over guild) settings
    - Invalid edits write nothing
    - Reset clears the invoker's card only
    - /guild-card outside a guild → NoGuildIdError
"""

import pytest

from xpd_slash.core.domain_types import GuildId, MemberDisplayInfo, UserId
from xpd_slash.core.errors import (
    CardCustomizationError,
    NoGuildIdError,
    UnrecognizedCommandError,
)
from xpd_slash.schemas.interaction import CommandData
from xpd_slash.services.card_queries import get_customizations
from xpd_slash.services.command_dispatch import CommandDispatch
from xpd_slash.services.handle_card import CardHandlers

from tests.services.interaction_payloads import command_payload, to_interaction

GUILD = GuildId(5000)
INVOKER = MemberDisplayInfo(id=UserId(10), name="invoker")


def _card(name: str, sub: str, options: list[dict] | None = None) -> CommandData:
    return CommandData.model_validate({
        "id": "1", "name": name, "type": 1,
        "options": [{"name": sub, "type": 1, "options": options or []}],
    })


async def _user_card(db, sub, options=None, guild_id=GUILD) -> str:
    response = await CardHandlers(db).process_user_card(
        _card("card", sub, options), INVOKER, guild_id,
    )
    assert response.data.flags == 64
    return response.data.embeds[0].description


async def _guild_card(db, sub, options=None) -> str:
    response = await CardHandlers(db).process_guild_card(
        _card("guild-card", sub, options), GUILD,
    )
    return response.data.embeds[0].description


async def test_fetch_defaults(test_db):
    text = await _user_card(test_db, "fetch")
    assert "Card layout: `classic.svg`" in text
    assert "Font: `Roboto`" in text


async def test_edit_then_fetch(test_db):
    assert await _user_card(test_db, "edit", [
        {"name": "background", "type": 3, "value": "123abc"},
        {"name": "font", "type": 3, "value": "Lato"},
    ]) == "Updated card!"
    text = await _user_card(test_db, "fetch")
    assert "Background color: `#123ABC`" in text
    assert "Font: `Lato`" in text


async def test_user_card_layers_over_guild_card(test_db):
    await _guild_card(test_db, "edit", [
        {"name": "border", "type": 3, "value": "#000001"},
        {"name": "card_layout", "type": 3, "value": "vertical.svg"},
    ])
    await _user_card(test_db, "edit", [{"name": "border", "type": 3, "value": "#000002"}])

    text = await _user_card(test_db, "fetch")
    assert "Border color: `#000002`" in text
    assert "Card layout: `vertical.svg`" in text
    assert "Border color: `#000001`" in await _guild_card(test_db, "fetch")


async def test_fetch_other_user(test_db):
    await CardHandlers(test_db).process_user_card(
        _card("card", "edit", [{"name": "rank", "type": 3, "value": "ABCDEF"}]),
        MemberDisplayInfo(id=UserId(20), name="alice"),
        GUILD,
    )
    text = await _user_card(test_db, "fetch", [{"name": "user", "type": 6, "value": "20"}])
    assert "Rank color: `#ABCDEF`" in text


async def test_invalid_edit_writes_nothing(test_db):
    with pytest.raises(CardCustomizationError):
        await _user_card(test_db, "edit", [
            {"name": "username", "type": 3, "value": "00FF00"},
            {"name": "toy_image", "type": 3, "value": "dragon.png"},
        ])
    card = await get_customizations(test_db, [INVOKER.id])
    assert card.username == "#FFFFFF"


async def test_reset_clears_only_own_card(test_db):
    await _guild_card(test_db, "edit", [{"name": "level", "type": 3, "value": "111111"}])
    await _user_card(test_db, "edit", [{"name": "level", "type": 3, "value": "222222"}])

    assert await _user_card(test_db, "reset") == "Card settings cleared!"
    assert "Level color: `#111111`" in await _user_card(test_db, "fetch")


async def test_card_outside_guild_uses_own_card(test_db):
    await _user_card(test_db, "edit", [{"name": "font", "type": 3, "value": "Mojang"}])
    assert "Font: `Mojang`" in await _user_card(test_db, "fetch", guild_id=None)


async def test_unknown_sub_command(test_db):
    with pytest.raises(UnrecognizedCommandError):
        await _user_card(test_db, "preview")


async def test_guild_card_outside_guild(test_db):
    payload = command_payload(
        "guild-card", guild_id=None,
        options=[{"name": "fetch", "type": 1, "options": []}],
    )
    with pytest.raises(NoGuildIdError):
        await CommandDispatch(test_db).execute(to_interaction(payload))


async def test_card_routed_through_dispatch(test_db):
    payload = command_payload(
        "card", options=[{"name": "fetch", "type": 1, "options": []}],
    )
    response = await CommandDispatch(test_db).execute(to_interaction(payload))
    assert "Card layout" in response.data.embeds[0].description
