"""Interaction Schemas — Pydantic models for the Discord interaction wire format.

Invariants:
    - Snowflakes arrive as JSON strings and are coerced to int at the boundary
    - decode_interaction is the ONLY entry point for untrusted bytes, and only
      after signature verification
    - Unknown fields are ignored (the platform adds fields without versioning)
    - A ping decodes from its type alone, whatever else it carries; every other kind
      must carry the id and token its follow-up is addressed with
    - Response models serialize with exclude_none so optional fields never appear as null

Design Decisions:
    - data is a union of CommandData | ComponentData | ModalSubmitData; pydantic picks
      the variant by its required fields (name/type vs custom_id/component_type vs components)
    - Resolved maps keyed by int snowflake: lookups use the same type the options carry
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

from xpd_slash.core.domain_types import (
    InteractionResponseType,
    InteractionType,
    MessageFlags,
)
from xpd_slash.core.errors import MalformedPayloadError


# ─── Entities ────────────────────────────────────────────────────

class User(BaseModel):
    id: int
    username: str
    discriminator: str | None = None
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False


class Member(BaseModel):
    """Guild member. Partial in resolved data (no user field)."""
    user: User | None = None
    nick: str | None = None
    roles: list[int] = Field(default_factory=list)
    permissions: str | None = None


class Message(BaseModel):
    id: int
    channel_id: int | None = None
    author: User
    content: str = ""


class Channel(BaseModel):
    id: int
    type: int
    name: str | None = None


class ResolvedData(BaseModel):
    users: dict[int, User] = Field(default_factory=dict)
    members: dict[int, Member] = Field(default_factory=dict)
    messages: dict[int, Message] = Field(default_factory=dict)
    channels: dict[int, Channel] = Field(default_factory=dict)


# ─── Interaction Data Variants ───────────────────────────────────

class CommandOption(BaseModel):
    name: str
    type: int
    value: str | int | float | bool | None = None
    options: list["CommandOption"] = Field(default_factory=list)
    focused: bool | None = None

    def option_values(self) -> dict:
        """Sub-command options as name → value."""
        return {o.name: o.value for o in self.options}


class CommandData(BaseModel):
    """Application command invocation (slash, user-context, message-context)."""
    id: int
    name: str
    type: int
    resolved: ResolvedData | None = None
    options: list[CommandOption] = Field(default_factory=list)
    guild_id: int | None = None
    target_id: int | None = None

    def option(self, name: str) -> CommandOption | None:
        return next((o for o in self.options if o.name == name), None)


class ComponentData(BaseModel):
    custom_id: str
    component_type: int
    values: list[str] = Field(default_factory=list)


class ModalSubmitData(BaseModel):
    custom_id: str
    components: list[dict[str, Any]]


class Interaction(BaseModel):
    id: int | None = None
    application_id: int | None = None
    type: InteractionType
    token: str | None = None
    data: CommandData | ComponentData | ModalSubmitData | None = None
    guild_id: int | None = None
    channel_id: int | None = None
    member: Member | None = None
    user: User | None = None
    version: int = 1

    @model_validator(mode="before")
    @classmethod
    def ignore_ping_contents(cls, values: Any) -> Any:
        """A ping is answered from its type alone; nothing else in it is read."""
        if isinstance(values, dict) and values.get("type") == InteractionType.PING:
            return {"type": InteractionType.PING}
        return values

    @model_validator(mode="after")
    def require_reply_handles(self) -> "Interaction":
        if self.type != InteractionType.PING and (self.id is None or self.token is None):
            raise ValueError("id and token are required for non-ping interactions")
        return self


def decode_interaction(body: bytes) -> Interaction:
    """Parse verified request bytes. Raises MalformedPayloadError."""
    try:
        return Interaction.model_validate_json(body)
    except ValidationError as e:
        raise MalformedPayloadError(
            f"{e.error_count()} validation error(s): "
            + "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()[:5]
            ),
        ) from e


# ─── Responses ───────────────────────────────────────────────────

class Embed(BaseModel):
    title: str | None = None
    description: str | None = None
    color: int | None = None


class InteractionResponseData(BaseModel):
    content: str | None = None
    embeds: list[Embed] | None = None
    flags: int | None = None
    allowed_mentions: dict[str, list[str]] | None = None


class InteractionResponse(BaseModel):
    type: InteractionResponseType
    data: InteractionResponseData | None = None

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


def pong() -> InteractionResponse:
    return InteractionResponse(type=InteractionResponseType.PONG)


def deferred() -> InteractionResponse:
    return InteractionResponse(
        type=InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE,
    )


def message_response(
    content: str | None = None,
    *,
    ephemeral: bool = True,
    embeds: list[Embed] | None = None,
) -> InteractionResponse:
    """ChannelMessageWithSource reply. Mentions never ping from this bot's replies."""
    return InteractionResponse(
        type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
        data=InteractionResponseData(
            content=content,
            embeds=embeds,
            flags=int(MessageFlags.EPHEMERAL) if ephemeral else None,
            allowed_mentions={"parse": []},
        ),
    )
