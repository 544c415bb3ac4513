"""Guild Configuration — pure merge, validation, and display of per-guild settings.

Invariants:
    - Unset fields stay None; defaults are applied only when reading/validating
    - min_xp_per_message <= max_xp_per_message after defaults are applied
    - Numeric settings fit a signed 16-bit column
    - Level-up template only uses known placeholders ({user_mention}, {level})

Design Decisions:
    - Validation runs on the MERGED config (stored + requested) so a partial update
      cannot leave the guild in an invalid state
    - describe_config is the user-facing "get" rendering; "unset" marks absent values
"""

import re
from dataclasses import dataclass, fields, replace

from xpd_slash.core.errors import GuildConfigValidationError

TEMPLATE_VARIABLES = ("user_mention", "level")
DEFAULT_MAX_XP_PER_MESSAGE = 25
DEFAULT_MIN_XP_PER_MESSAGE = 15
DEFAULT_MESSAGE_COOLDOWN = 60
MAX_LEVEL_UP_MESSAGE_LEN = 512

_I16_MIN, _I16_MAX = -(2 ** 15), 2 ** 15 - 1
_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


@dataclass(frozen=True)
class GuildConfig:
    one_at_a_time: bool | None = None
    level_up_message: str | None = None
    level_up_channel: int | None = None
    ping_users: bool | None = None
    max_xp_per_message: int | None = None
    min_xp_per_message: int | None = None
    message_cooldown: int | None = None

    def merged_with(self, update: "GuildConfig") -> "GuildConfig":
        """Overlay every field `update` sets on top of this config."""
        changes = {
            f.name: getattr(update, f.name)
            for f in fields(update)
            if getattr(update, f.name) is not None
        }
        return replace(self, **changes)


def check_i16(name: str, value: int | None) -> int | None:
    if value is not None and not _I16_MIN <= value <= _I16_MAX:
        raise GuildConfigValidationError(
            f"The value {value} for {name} is out of range "
            f"({_I16_MIN} to {_I16_MAX})",
        )
    return value


def check_level_up_message(template: str | None) -> None:
    if template is None:
        return
    if len(template) > MAX_LEVEL_UP_MESSAGE_LEN:
        raise GuildConfigValidationError(
            f"Level-up message must be at most {MAX_LEVEL_UP_MESSAGE_LEN} characters long",
        )
    for variable in _PLACEHOLDER.findall(template):
        if variable not in TEMPLATE_VARIABLES:
            raise GuildConfigValidationError(
                f"Unknown level-up message variable `{variable}`. "
                f"Allowed: {', '.join(TEMPLATE_VARIABLES)}",
            )


def validate_config(config: GuildConfig) -> None:
    """Raise GuildConfigValidationError if the effective config is inconsistent."""
    max_xp = _or_default(config.max_xp_per_message, DEFAULT_MAX_XP_PER_MESSAGE)
    min_xp = _or_default(config.min_xp_per_message, DEFAULT_MIN_XP_PER_MESSAGE)
    if max_xp < min_xp:
        raise GuildConfigValidationError(
            f"The selected minimum XP value of {min_xp} is more than "
            f"the selected maximum of {max_xp}",
        )


def describe_config(config: GuildConfig) -> str:
    lines = [
        f"One reward role at a time: {_tribool(config.one_at_a_time, False)}",
        f"Level-up message: {_code_or_unset(config.level_up_message)}",
        f"Level-up channel: {_mention_or_unset(config.level_up_channel)}",
        f"Ping users on level-up: {_tribool(config.ping_users, None)}",
        "Maximum XP per message: "
        f"{_or_default(config.max_xp_per_message, DEFAULT_MAX_XP_PER_MESSAGE)}",
        "Minimum XP per message: "
        f"{_or_default(config.min_xp_per_message, DEFAULT_MIN_XP_PER_MESSAGE)}",
        "Cooldown (seconds): "
        f"{_or_default(config.message_cooldown, DEFAULT_MESSAGE_COOLDOWN)}",
    ]
    return "\n".join(lines)


def _or_default(value: int | None, default: int) -> int:
    return default if value is None else value


def _tribool(value: bool | None, default: bool | None) -> str:
    effective = default if value is None else value
    if effective is None:
        return "unset"
    return "true" if effective else "false"


def _code_or_unset(value: str | None) -> str:
    return "unset" if value is None else f"`{value}`"


def _mention_or_unset(channel_id: int | None) -> str:
    return "unset" if channel_id is None else f"`<#{channel_id}>`"
