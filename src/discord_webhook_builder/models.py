"""Models to represent Discord webhook messages."""

import datetime
from collections.abc import Iterable
from typing import Any, Final

import arrow
import attrs
from attrs import validators

from discord_webhook_builder import colors, exceptions, timestamps

MAX_CONTENT_LENGTH: Final = 2000

_OPTIONAL_STR = validators.optional(validators.instance_of(str))
_OPTIONAL_INT = validators.optional(validators.instance_of(int))


def _validate_content(_instance: Any, _attribute: attrs.Attribute, value: str) -> None:
    """Validate that the content fits in a single message."""
    if len(value) > MAX_CONTENT_LENGTH:
        raise exceptions.ContentTooLongError(length=len(value), limit=MAX_CONTENT_LENGTH)


def _validate_color(_instance: Any, _attribute: attrs.Attribute, value: int | None) -> None:
    """Validate that the color is an integer in the 24-bit range."""
    if value is None:
        return
    if not isinstance(value, int):
        raise exceptions.UnsupportedColorTypeError(value=value)
    colors.resolve_color(value)


def _validate_timestamp(_instance: Any, _attribute: attrs.Attribute, value: str | None) -> None:
    """Validate that the timestamp is an RFC 3339 timestamp."""
    if value is not None and not timestamps.is_valid_timestamp(value):
        raise exceptions.InvalidTimestampError(timestamp=value)


@attrs.define(frozen=True)
class Field:
    """An embed field."""

    name: str = attrs.field(validator=validators.instance_of(str))
    value: str = attrs.field(validator=validators.instance_of(str))
    inline: bool = attrs.field(default=False, validator=validators.instance_of(bool))


@attrs.define(frozen=True)
class Footer:
    """The footer of a Discord embed."""

    text: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    icon_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    proxy_icon_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)


@attrs.define(frozen=True)
class Image:
    """The image of a Discord embed."""

    url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    proxy_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    height: int | None = attrs.field(default=None, validator=_OPTIONAL_INT)
    width: int | None = attrs.field(default=None, validator=_OPTIONAL_INT)


@attrs.define(frozen=True)
class Thumbnail:
    """The thumbnail of a Discord embed.

    Identical to `Image`, but placed in another key of the embed.
    """

    url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    proxy_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    height: int | None = attrs.field(default=None, validator=_OPTIONAL_INT)
    width: int | None = attrs.field(default=None, validator=_OPTIONAL_INT)


@attrs.define(frozen=True)
class Author:
    """The author of a Discord embed."""

    name: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    icon_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    proxy_icon_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)


@attrs.define
class Embed:
    """A Discord embed.

    Validators also run on assignment, so an invalid color or timestamp
    can never be stored on an embed.
    """

    title: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    description: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    color: int | None = attrs.field(default=None, validator=_validate_color)
    timestamp: str | None = attrs.field(default=None, validator=_validate_timestamp)
    footer: Footer | None = None
    image: Image | None = None
    thumbnail: Thumbnail | None = None
    author: Author | None = None
    fields: list[Field] = attrs.field(factory=list, converter=list)

    def set_color(self, color: colors.Color) -> "Embed":
        """Resolve and set the color of the embed.

        :param color: A hex string, an integer, or an `RGB` instance
        :return: This embed
        """
        self.color = colors.resolve_color(color)
        return self

    def set_timestamp(self, timestamp: str | datetime.datetime | arrow.Arrow) -> "Embed":
        """Validate and set the timestamp of the embed.

        If the timestamp is invalid, the current timestamp is kept.

        :param timestamp: An RFC 3339 string or a timezone-aware moment
        :return: This embed
        :raises exceptions.InvalidTimestampError: If the timestamp is
          not valid
        """
        if isinstance(timestamp, datetime.datetime | arrow.Arrow):
            timestamp = timestamps.format_timestamp(timestamp)
        self.timestamp = timestamp
        return self

    def set_footer(self, footer: Footer) -> "Embed":
        self.footer = footer
        return self

    def set_image(self, image: Image) -> "Embed":
        self.image = image
        return self

    def set_thumbnail(self, thumbnail: Thumbnail) -> "Embed":
        self.thumbnail = thumbnail
        return self

    def set_author(self, author: Author) -> "Embed":
        self.author = author
        return self

    def add_field(self, field: Field) -> "Embed":
        """Append a field, fields are rendered in the order they were added."""
        self.fields.append(field)
        return self

    def add_fields(self, fields: Iterable[Field]) -> "Embed":
        """Append multiple fields, keeping their order."""
        self.fields.extend(fields)
        return self


@attrs.define
class Message:
    """A message to send to a Discord webhook."""

    content: str = attrs.field(
        default="", validator=[validators.instance_of(str), _validate_content]
    )
    username: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    avatar_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    embeds: list[Embed] = attrs.field(factory=list, converter=list)

    def add_embed(self, embed: Embed) -> "Message":
        """Append an embed to the message."""
        self.embeds.append(embed)
        return self
