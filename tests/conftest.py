import http.server
import json
import threading
from collections.abc import Awaitable, Callable, Iterator
from typing import Any
from unittest import mock

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient, TestServer
from aiohttp.web_request import Request
from aiohttp.web_response import Response
from tests.helpers import (
    WEBHOOK_PATH,
    ReceivedRequest,
    ThreadedWebhook,
    WebhookMock,
    WebhookMockFactory,
)


@pytest.fixture()
def webhook_mock_factory(
    aiohttp_client: Callable[[TestServer], Awaitable[TestClient]],
    unused_tcp_port_factory: Callable[[], int],
) -> WebhookMockFactory:
    """Return a factory to create a webhook mock with a fixed response.

    :param aiohttp_client: Test client generator (fixture from 'pytest-aiohttp')
    :param unused_tcp_port_factory: Random port generator (fixture from 'pytest-asyncio')
    """

    async def create_webhook_mock(response_factory: Callable[[], Response]) -> WebhookMock:
        received: list[ReceivedRequest] = []

        async def handler(request: Request) -> Response:
            payload = json.loads(await request.text())
            received.append(ReceivedRequest(content_type=request.content_type, payload=payload))
            return response_factory()

        app = web.Application()
        app.router.add_post(WEBHOOK_PATH, handler)
        server = TestServer(app, port=unused_tcp_port_factory())
        client = await aiohttp_client(server)  # start server
        return WebhookMock(url=str(client.make_url(WEBHOOK_PATH)), requests=received)

    return create_webhook_mock


@pytest.fixture()
def client_session() -> mock.Mock:
    """Return an `aiohttp.ClientSession` mock."""
    session_cls = mock.create_autospec(spec=aiohttp.ClientSession, spec_set=True)
    return session_cls()


@pytest.fixture()
def threaded_webhook() -> Iterator[ThreadedWebhook]:
    """Serve a mocked webhook with `http.server` in a background thread."""
    webhook = ThreadedWebhook(url="")

    class WebhookHandler(http.server.BaseHTTPRequestHandler):
        def do_POST(self) -> None:  # noqa: N802 (name defined by http.server)
            length = int(self.headers["Content-Length"])
            payload = json.loads(self.rfile.read(length))
            webhook.requests.append(
                ReceivedRequest(content_type=self.headers["Content-Type"], payload=payload)
            )
            self.send_response(webhook.status)
            if webhook.body:
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(webhook.body)))
            self.end_headers()
            if webhook.body:
                self.wfile.write(webhook.body)

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
            """Keep the test output clean."""

    server = http.server.HTTPServer(("127.0.0.1", 0), WebhookHandler)
    host, port = server.server_address[:2]
    webhook.url = f"http://{host}:{port}{WEBHOOK_PATH}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield webhook
    finally:
        server.shutdown()
        server.server_close()
        thread.join()
