"""Test doubles for Discord webhooks."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from aiohttp.web_response import Response

WEBHOOK_PATH = "/api/webhooks/1234/secret-webhook-token"


@dataclass
class ReceivedRequest:
    """A request received by a mocked webhook."""

    content_type: str
    payload: dict[str, Any]


@dataclass
class WebhookMock:
    url: str
    requests: list[ReceivedRequest] = field(default_factory=list)


@dataclass
class ThreadedWebhook:
    """A webhook served from a background thread, for blocking clients."""

    url: str
    status: int = 204
    body: bytes = b""
    requests: list[ReceivedRequest] = field(default_factory=list)


WebhookMockFactory = Callable[[Callable[[], Response]], Awaitable[WebhookMock]]
