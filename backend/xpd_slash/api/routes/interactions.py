"""Interactions Webhook — verify, decode, and acknowledge inbound interactions.

Invariants:
    - Signature verified on the raw bytes BEFORE any parsing (SignatureInvalidError → 401)
    - Undecodable payloads → MalformedPayloadError → 400, no follow-up attempted
    - Ping → Pong, synchronously, nothing scheduled
    - Every other kind → Deferred acknowledgement + exactly one background completion
    - The route never awaits the completion: it returns before processing starts

Design Decisions:
    - FastAPI BackgroundTasks: runs after the response is sent, in the same event loop,
      with no caller awaiting its result (ADR: detached work without a task registry)
    - Raw Request instead of a Pydantic body parameter: FastAPI would parse JSON before
      the signature could be checked
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from xpd_slash.core.domain_types import InteractionType
from xpd_slash.core.verify_signature import verify_signature
from xpd_slash.schemas.interaction import decode_interaction, deferred, pong
from xpd_slash.services.interaction_processor import complete_deferred
from xpd_slash.state import AppState, get_app_state

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/interactions", tags=["interactions"])


@router.post("")
async def receive_interaction(
    request: Request,
    background_tasks: BackgroundTasks,
    state: AppState = Depends(get_app_state),
):
    """Webhook endpoint registered as the application's Interactions Endpoint URL."""
    body = await request.body()
    verify_signature(request.headers, body, state.verify_key)
    interaction = decode_interaction(body)

    if interaction.type == InteractionType.PING:
        logger.debug("Answered ping")
        return pong().to_wire()

    background_tasks.add_task(complete_deferred, interaction, state)
    logger.info(
        f"Deferred interaction {interaction.id} (type {interaction.type.name})",
        extra={"interaction_id": interaction.id, "guild_id": interaction.guild_id},
    )
    return deferred().to_wire()
