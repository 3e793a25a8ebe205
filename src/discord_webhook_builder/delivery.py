"""Deliver messages to Discord webhooks.

A message is delivered with a single POST request: there are no
retries, and the request uses the default timeout of the client
session. The webhook url contains a secret token, so it never ends up
in log records or exception messages.
"""

import asyncio
import logging
from http import HTTPStatus
from typing import Final

import aiohttp
import attrs
import yarl

from discord_webhook_builder import exceptions, models, serialization

_SUCCESS_STATUSES: Final = frozenset({HTTPStatus.OK, HTTPStatus.NO_CONTENT})
_JSON_HEADERS: Final = {"Content-Type": "application/json"}
_logger = logging.getLogger(f"webhook.{__name__}")


@attrs.define(slots=False)
class WebhookClient:
    """A client that executes Discord webhooks."""

    session: aiohttp.ClientSession = attrs.field(kw_only=True)

    async def execute_webhook(self, message: models.Message, *, url: str | yarl.URL) -> None:
        """Execute a Discord webhook.

        :param message: The message to send
        :param url: The url of the webhook
        :raises exceptions.EncodingError: If the message cannot be
          encoded
        :raises exceptions.TransportError: If no response was received
        :raises exceptions.RemoteRejectedError: If Discord responded
          with a status other than 200 or 204
        """
        payload = serialization.dumps(message)
        try:
            status, reason, body = await self._post(url, payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            _logger.warning("Posting to the webhook failed: %s", type(exc).__name__)
            raise exceptions.TransportError(reason=_describe(exc)) from exc

        if status not in _SUCCESS_STATUSES:
            _logger.warning("Webhook rejected the message with status %s", status)
            raise exceptions.RemoteRejectedError(status=status, reason=reason, body=body)
        _logger.info("Delivered webhook message (status %s)", status)

    async def _post(self, url: str | yarl.URL, payload: str) -> tuple[int, str | None, str | None]:
        """Post the payload and return the status, reason, and body."""
        async with self.session.post(url, data=payload, headers=_JSON_HEADERS) as response:
            if response.status in _SUCCESS_STATUSES:
                return response.status, response.reason, None
            return response.status, response.reason, await response.text(errors="replace")


def send(url: str | yarl.URL, message: models.Message) -> None:
    """Send a message to a Discord webhook, blocking until it is done.

    This starts an event loop for the request and can therefore not be
    called from a running event loop. Use `WebhookClient` there.

    :param url: The url of the webhook
    :param message: The message to send
    """
    asyncio.run(_send(url, message))


async def _send(url: str | yarl.URL, message: models.Message) -> None:
    async with aiohttp.ClientSession() as session:
        await WebhookClient(session=session).execute_webhook(message, url=url)


def _describe(exc: BaseException) -> str:
    """Describe a transport exception without leaking the request url.

    Connection errors only mention the host, but other client errors
    may include the full url with the webhook token.
    """
    if isinstance(exc, aiohttp.ClientConnectorError):
        return str(exc)
    return type(exc).__name__
