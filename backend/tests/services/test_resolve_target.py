"""Target Resolution — slash, user-context, and message-context commands.

Tests cover:
    - Slash command with no user option → invoker
    - Slash command with user option → resolved user (+ resolved member nick)
    - User-context → target_id in resolved.users
    - Message-context → author of resolved message
    - Missing resolved data / target → typed errors
"""

import pytest

from xpd_slash.core.domain_types import MemberDisplayInfo, UserId
from xpd_slash.core.errors import (
    NoMessageTargetIdError,
    NoResolvedDataError,
    NoTargetError,
    WrongInteractionDataError,
)
from xpd_slash.schemas.interaction import CommandData
from xpd_slash.services.resolve_target import resolve_target

INVOKER = MemberDisplayInfo(id=UserId(10), name="invoker")


def _data(**fields) -> CommandData:
    return CommandData.model_validate({"id": "1", "name": "rank", "type": 1, **fields})


def test_slash_without_option_targets_invoker():
    assert resolve_target(_data(), INVOKER) is INVOKER


def test_slash_with_user_option_targets_resolved_user():
    data = _data(
        options=[{"name": "user", "type": 6, "value": "20"}],
        resolved={
            "users": {"20": {"id": "20", "username": "alice", "global_name": "Alice"}},
            "members": {"20": {"nick": "Ally"}},
        },
    )
    target = resolve_target(data, INVOKER)
    assert target.id == 20
    assert target.display_name == "Ally"


def test_slash_user_option_without_resolved_data():
    data = _data(options=[{"name": "user", "type": 6, "value": "20"}])
    with pytest.raises(NoResolvedDataError):
        resolve_target(data, INVOKER)


def test_slash_user_option_missing_from_resolved():
    data = _data(
        options=[{"name": "user", "type": 6, "value": "20"}],
        resolved={"users": {}},
    )
    with pytest.raises(NoTargetError):
        resolve_target(data, INVOKER)


def test_user_command_targets_resolved_user():
    data = _data(
        name="Get level", type=2, target_id="20",
        resolved={"users": {"20": {"id": "20", "username": "alice"}}},
    )
    assert resolve_target(data, INVOKER).display_name == "alice"


def test_message_command_targets_author():
    data = _data(
        name="Get author level", type=3, target_id="555",
        resolved={"messages": {"555": {
            "id": "555", "author": {"id": "30", "username": "carol"},
        }}},
    )
    target = resolve_target(data, INVOKER)
    assert target.id == 30
    assert target.name == "carol"


def test_message_command_without_target_id():
    data = _data(name="Get author level", type=3, resolved={"messages": {}})
    with pytest.raises(NoMessageTargetIdError):
        resolve_target(data, INVOKER)


def test_message_command_unknown_message():
    data = _data(name="Get author level", type=3, target_id="555", resolved={})
    with pytest.raises(NoTargetError):
        resolve_target(data, INVOKER)


def test_unknown_command_type():
    with pytest.raises(WrongInteractionDataError):
        resolve_target(_data(type=4), INVOKER)
