"""Target Resolution — one resolver per command shape, all returning MemberDisplayInfo.

Invariants:
    - Each resolver returns exactly one target or raises a typed command error
    - Slash commands: explicit "user" option → resolved.users, else the invoker
    - User-context commands: target_id → resolved.users
    - Message-context commands: target_id → resolved.messages[...].author
    - Nicknames come from resolved.members when the platform sent them
    - No IO: everything needed is in the interaction payload

Design Decisions:
    - Explicit dict of CommandType → resolver (ADR: every mapping visible in one place)
    - Slash commands take the invoker as a parameter; context commands never default to it
"""

from collections.abc import Callable

from xpd_slash.core.domain_types import (
    CommandType, MemberDisplayInfo, OptionType, UserId,
)
from xpd_slash.core.errors import (
    NoMessageTargetIdError,
    NoResolvedDataError,
    NoTargetError,
    WrongInteractionDataError,
)
from xpd_slash.schemas.interaction import CommandData, ResolvedData, User


def display_info(user: User, nick: str | None = None) -> MemberDisplayInfo:
    return MemberDisplayInfo(
        id=UserId(user.id),
        name=user.username,
        global_name=user.global_name,
        nick=nick,
        discriminator=user.discriminator,
        bot=user.bot,
    )


def _resolved(data: CommandData) -> ResolvedData:
    if data.resolved is None:
        raise NoResolvedDataError()
    return data.resolved


def _with_member_nick(resolved: ResolvedData, user: User) -> MemberDisplayInfo:
    member = resolved.members.get(user.id)
    return display_info(user, member.nick if member else None)


def resolve_slash_target(
    data: CommandData, invoker: MemberDisplayInfo,
) -> MemberDisplayInfo:
    option = data.option("user")
    if option is None or option.type != OptionType.USER or option.value is None:
        return invoker
    resolved = _resolved(data)
    user = resolved.users.get(int(option.value))
    if user is None:
        raise NoTargetError()
    return _with_member_nick(resolved, user)


def resolve_user_command_target(data: CommandData) -> MemberDisplayInfo:
    if data.target_id is None:
        raise NoMessageTargetIdError()
    resolved = _resolved(data)
    user = resolved.users.get(data.target_id)
    if user is None:
        raise NoTargetError()
    return _with_member_nick(resolved, user)


def resolve_message_command_target(data: CommandData) -> MemberDisplayInfo:
    if data.target_id is None:
        raise NoMessageTargetIdError()
    resolved = _resolved(data)
    message = resolved.messages.get(data.target_id)
    if message is None:
        raise NoTargetError()
    return _with_member_nick(resolved, message.author)


_RESOLVERS: dict[int, Callable[[CommandData, MemberDisplayInfo], MemberDisplayInfo]] = {
    CommandType.CHAT_INPUT: resolve_slash_target,
    CommandType.USER: lambda data, _invoker: resolve_user_command_target(data),
    CommandType.MESSAGE: lambda data, _invoker: resolve_message_command_target(data),
}


def resolve_target(
    data: CommandData, invoker: MemberDisplayInfo,
) -> MemberDisplayInfo:
    """Single entry point: pick the resolver for this command's shape."""
    resolver = _RESOLVERS.get(data.type)
    if resolver is None:
        raise WrongInteractionDataError()
    return resolver(data, invoker)
