"""Follow-up Notifier — delivers the deferred answer for an interaction.

Invariants:
    - Exactly one POST per call; never retried
    - Delivery failure (transport error or non-2xx) is logged and swallowed: deliver()
      returns False and never raises httpx errors
    - Only the message payload is sent; the interaction token authorizes the call

Design Decisions:
    - One shared httpx.AsyncClient created in the lifespan (connection reuse across requests)
    - Follow-up webhook endpoint (/webhooks/{application_id}/{token}) rather than the
      callback endpoint: the callback was already consumed by the deferred acknowledgement
    - No retry: by the time delivery fails the caller's HTTP request is long finished,
      and the token expires 15 minutes after the interaction anyway
"""

import logging

import httpx

from xpd_slash.core.domain_types import InteractionId
from xpd_slash.schemas.interaction import InteractionResponse

logger = logging.getLogger(__name__)


class FollowupNotifier:
    """Sends the single follow-up owed by a deferred interaction."""

    def __init__(
        self, client: httpx.AsyncClient, application_id: int,
        api_base: str = "https://discord.com/api/v10",
    ):
        self.client = client
        self.application_id = application_id
        self.api_base = api_base.rstrip("/")

    def followup_url(self, token: str) -> str:
        return f"{self.api_base}/webhooks/{self.application_id}/{token}"

    async def deliver(
        self, interaction_id: InteractionId, token: str,
        response: InteractionResponse,
    ) -> bool:
        """POST the response's message payload. True on 2xx, False otherwise."""
        payload = response.to_wire().get("data", {})
        try:
            resp = await self.client.post(self.followup_url(token), json=payload)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Follow-up rejected for interaction {interaction_id}: "
                f"{e.response.status_code} {e.response.text[:200]}",
                extra={
                    "interaction_id": interaction_id,
                    "status_code": e.response.status_code,
                },
            )
            return False
        except httpx.HTTPError as e:
            logger.warning(
                f"Follow-up delivery failed for interaction {interaction_id}: {e!r}",
                extra={"interaction_id": interaction_id},
            )
            return False
        logger.info(
            f"Follow-up delivered for interaction {interaction_id}",
            extra={"interaction_id": interaction_id, "status_code": resp.status_code},
        )
        return True
