"""Follow-up Notifier — one POST to the webhook endpoint, failures absorbed.

Tests cover:
    - URL built from api base, application id, and token
    - Body is the message payload only (no response type wrapper)
    - Non-2xx and transport errors return False instead of raising
"""

import json

import httpx

from xpd_slash.core.domain_types import InteractionId
from xpd_slash.infrastructure.discord_client import FollowupNotifier
from xpd_slash.schemas.interaction import message_response


def _notifier(handler) -> tuple[FollowupNotifier, httpx.AsyncClient]:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return FollowupNotifier(client, 1000, "https://discord.test/api/v10/"), client


async def test_posts_message_payload_to_webhook():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": "1"})

    notifier, client = _notifier(handler)
    async with client:
        ok = await notifier.deliver(
            InteractionId(5), "tok", message_response("hello"),
        )

    assert ok is True
    assert len(requests) == 1
    assert str(requests[0].url) == "https://discord.test/api/v10/webhooks/1000/tok"
    assert json.loads(requests[0].content) == {
        "content": "hello", "flags": 64, "allowed_mentions": {"parse": []},
    }


async def test_server_error_returns_false():
    notifier, client = _notifier(lambda request: httpx.Response(500, text="down"))
    async with client:
        assert await notifier.deliver(InteractionId(5), "tok", message_response("x")) is False


async def test_transport_error_returns_false():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    notifier, client = _notifier(handler)
    async with client:
        assert await notifier.deliver(InteractionId(5), "tok", message_response("x")) is False
