"""Domain Types — verifies wire discriminator values and identity wrappers.

Tests:
    - Interaction and response type numbers match the platform
    - Ephemeral flag is bit 6
    - NewType wrappers are transparent ints
"""

from xpd_slash.core.domain_types import (
    CommandType,
    GuildId,
    InteractionResponseType,
    InteractionType,
    MessageFlags,
    UserId,
)


def test_identity_types_wrap_int():
    assert UserId(123) == 123
    assert GuildId(456) == 456


def test_interaction_type_values():
    assert InteractionType.PING == 1
    assert InteractionType.APPLICATION_COMMAND == 2
    assert InteractionType.MESSAGE_COMPONENT == 3
    assert InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE == 4
    assert InteractionType.MODAL_SUBMIT == 5


def test_response_type_values():
    assert InteractionResponseType.PONG == 1
    assert InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE == 4
    assert InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE == 5


def test_command_type_values():
    assert [t.value for t in CommandType] == [1, 2, 3]


def test_ephemeral_flag():
    assert MessageFlags.EPHEMERAL == 64
