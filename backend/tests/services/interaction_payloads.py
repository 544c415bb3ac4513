"""Builders for raw interaction payloads used across service tests."""

import json

from nacl.signing import SigningKey

from xpd_slash.core.verify_signature import SIGNATURE_HEADER, TIMESTAMP_HEADER
from xpd_slash.schemas.interaction import Interaction

GUILD_ID = 5000
INVOKER_ID = 10
OTHER_ID = 20
APPLICATION_ID = 1000


def user(user_id: int, username: str, **extra) -> dict:
    return {"id": str(user_id), "username": username, "discriminator": "0", **extra}


def command_payload(
    name: str = "rank",
    *,
    command_type: int = 1,
    options: list[dict] | None = None,
    resolved: dict | None = None,
    target_id: int | None = None,
    guild_id: int | None = GUILD_ID,
    invoker: dict | None = None,
    nick: str | None = None,
    interaction_id: int = 1,
) -> dict:
    data = {"id": "900", "name": name, "type": command_type}
    if options is not None:
        data["options"] = options
    if resolved is not None:
        data["resolved"] = resolved
    if target_id is not None:
        data["target_id"] = str(target_id)
    payload = {
        "id": str(interaction_id),
        "application_id": str(APPLICATION_ID),
        "type": 2,
        "token": f"token-{interaction_id}",
        "data": data,
    }
    invoker = invoker or user(INVOKER_ID, "invoker")
    if guild_id is not None:
        payload["guild_id"] = str(guild_id)
        payload["member"] = {"user": invoker, "nick": nick, "roles": []}
    else:
        payload["user"] = invoker
    return payload


def to_interaction(payload: dict) -> Interaction:
    return Interaction.model_validate(payload)


def signed_request(signing_key: SigningKey, payload: dict | bytes) -> tuple[bytes, dict]:
    """Body bytes and the headers the platform would attach to them."""
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
    timestamp = "1700000000"
    signature = signing_key.sign(timestamp.encode() + body).signature.hex()
    return body, {
        SIGNATURE_HEADER: signature,
        TIMESTAMP_HEADER: timestamp,
        "content-type": "application/json",
    }
