"""Exceptions raised while building and delivering webhook messages."""

import attrs


class WebhookError(Exception):
    """Base class for all webhook exceptions."""


@attrs.define
class ContentTooLongError(WebhookError, ValueError):
    """Raised when the message content exceeds the Discord limit."""

    length: int
    limit: int

    def __str__(self) -> str:
        return (
            f"the length of the content cannot exceed {self.limit} characters"
            f" (your length: {self.length})"
        )


class InvalidColorError(WebhookError, ValueError):
    """Base class for colors that cannot be converted to a color integer."""


@attrs.define
class HexColorFormatError(InvalidColorError):
    """The hex color does not have six digits."""

    value: str

    def __str__(self) -> str:
        return f"invalid hex color format {self.value!r}, expected 'RRGGBB' or '#RRGGBB'"


@attrs.define
class HexColorParseError(InvalidColorError):
    """The hex color contains characters that are not hex digits."""

    value: str

    def __str__(self) -> str:
        return f"error parsing hex color {self.value!r}: not a base-16 number"


@attrs.define
class ColorRangeError(InvalidColorError):
    """The integer color lies outside of the 24-bit range."""

    value: int
    minimum: int
    maximum: int

    def __str__(self) -> str:
        return f"color {self.value} is out of range, use numbers from {self.minimum} to {self.maximum}"


@attrs.define
class RGBChannelRangeError(InvalidColorError):
    """One of the RGB channels lies outside of [0, 255]."""

    channel: str
    value: int
    minimum: int
    maximum: int

    def __str__(self) -> str:
        return (
            f"rgb channel {self.channel!r} is {self.value},"
            f" rgb colors can only be from {self.minimum} to {self.maximum}"
        )


@attrs.define
class UnsupportedColorTypeError(InvalidColorError):
    """The color is neither a hex string, an integer, nor an RGB triple."""

    value: object

    def __str__(self) -> str:
        return f"unsupported color type {type(self.value).__name__!r}"


@attrs.define
class InvalidTimestampError(WebhookError, ValueError):
    """Raised when a timestamp is not an RFC 3339 date-time."""

    timestamp: object

    def __str__(self) -> str:
        return f"timestamp {self.timestamp!r} is not an RFC 3339 timestamp"


@attrs.define
class EncodingError(WebhookError):
    """Raised when a message cannot be encoded as JSON."""

    reason: str

    def __str__(self) -> str:
        return f"failed to encode the webhook payload: {self.reason}"


class DeliveryError(WebhookError):
    """Base class for failed deliveries.

    As the webhook url contains a secret token, delivery exceptions
    never contain the url.
    """


@attrs.define
class TransportError(DeliveryError):
    """Raised when the request did not get a response.

    The underlying transport exception is available as `__cause__`.
    """

    reason: str

    def __str__(self) -> str:
        return f"failed to post to Discord: {self.reason}"


@attrs.define
class RemoteRejectedError(DeliveryError):
    """Raised when Discord responds with a status other than 200 or 204."""

    status: int
    reason: str | None = None
    body: str | None = None

    def __str__(self) -> str:
        status = self.status
        reason = self.reason
        body = self.body
        return f"Discord webhook rejected the message ({status=}, {reason=}): {body!r}"


@attrs.define
class UnknownWebhookError(WebhookError, KeyError):
    """Raised when no url is configured for a webhook name."""

    webhook: str

    def __str__(self) -> str:
        return f"no url configured for webhook {self.webhook!r}"
