"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, GuildId, ChannelId, MessageId, InteractionId wrap Discord snowflakes (int)
    - All wire-level discriminators encoded as IntEnums — no raw number matching
    - MemberDisplayInfo is the single downstream "target user" type for every command shape

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for Discord discriminators: serialize to JSON as plain numbers
"""

from dataclasses import dataclass, replace
from enum import IntEnum, IntFlag
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
GuildId = NewType("GuildId", int)
ChannelId = NewType("ChannelId", int)
MessageId = NewType("MessageId", int)
InteractionId = NewType("InteractionId", int)


# ─── Discord Enums ───────────────────────────────────────────────

class InteractionType(IntEnum):
    """Inbound interaction kinds."""
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class CommandType(IntEnum):
    """Application command invocation shapes."""
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class OptionType(IntEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10


class InteractionResponseType(IntEnum):
    """Response kinds this service emits."""
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5


class ChannelType(IntEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5


class MessageFlags(IntFlag):
    EPHEMERAL = 1 << 6


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class MemberDisplayInfo:
    """Who a command result is about — built from a user plus optional guild nick."""
    id: UserId
    name: str
    global_name: str | None = None
    nick: str | None = None
    discriminator: str | None = None
    bot: bool = False

    @property
    def display_name(self) -> str:
        if self.nick:
            return self.nick
        if self.global_name:
            return self.global_name
        # Legacy accounts still carry a 4-digit tag; "0" marks migrated usernames
        if self.discriminator and self.discriminator != "0":
            return f"{self.name}#{self.discriminator}"
        return self.name

    def with_nick(self, nick: str | None) -> "MemberDisplayInfo":
        return replace(self, nick=nick)


@dataclass(frozen=True)
class UserStats:
    """Experience and rank read in one request (not transactionally linked)."""
    xp: int
    rank: int
