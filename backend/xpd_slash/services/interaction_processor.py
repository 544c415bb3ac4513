"""Interaction Processor — the detached half of the deferred-response protocol.

Invariants:
    - complete_deferred never raises: every failure becomes an ephemeral error payload
    - Exactly one delivery attempt per interaction (success payload XOR error payload)
    - The id/token pair is read from the interaction once and used for that delivery only
    - Each run opens its own DB session: the request that scheduled it has already returned

Design Decisions:
    - XpdError → its user_message(); anything else → generic text + full traceback in logs
      (ADR: internal error text never leaves the process)
    - Fire-and-forget is acceptable: no retry, no dead-letter queue; the platform shows
      "interaction failed" if the follow-up never arrives
"""

import logging

from xpd_slash.core.domain_types import InteractionId
from xpd_slash.core.errors import XpdError
from xpd_slash.core.format_messages import format_error_message
from xpd_slash.schemas.interaction import (
    Interaction, InteractionResponse, message_response,
)
from xpd_slash.services.command_dispatch import CommandDispatch
from xpd_slash.state import AppState

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something went wrong while processing this command."


def error_response(text: str) -> InteractionResponse:
    """Ephemeral failure reply: only the invoker ever sees error text."""
    return message_response(format_error_message(text), ephemeral=True)


async def process_interaction(
    interaction: Interaction, state: AppState,
) -> InteractionResponse:
    async with state.db.session() as db:
        return await CommandDispatch(db).execute(interaction)


async def complete_deferred(interaction: Interaction, state: AppState) -> None:
    """Background task: compute the real answer, then deliver it once."""
    interaction_id = InteractionId(interaction.id)
    token = interaction.token
    try:
        response = await process_interaction(interaction, state)
    except XpdError as e:
        e.context.interaction_id = interaction_id
        e.context.guild_id = interaction.guild_id
        logger.warning(
            f"Command failed: {e.message}",
            extra={
                "interaction_id": interaction_id,
                "guild_id": interaction.guild_id,
                "error_code": e.code,
            },
        )
        response = error_response(e.user_message())
    except Exception as e:
        logger.error(
            f"Unhandled error processing interaction {interaction_id}: {e}",
            exc_info=True,
            extra={"interaction_id": interaction_id, "guild_id": interaction.guild_id},
        )
        response = error_response(GENERIC_FAILURE)
    try:
        await state.notifier.deliver(interaction_id, token, response)
    except Exception as e:
        # deliver() already absorbs transport errors; this is the last log line
        logger.error(
            f"Follow-up for interaction {interaction_id} crashed: {e}",
            exc_info=True, extra={"interaction_id": interaction_id},
        )
