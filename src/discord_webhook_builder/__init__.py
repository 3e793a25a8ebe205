"""Build, validate, and send Discord webhook messages."""

from discord_webhook_builder.builder import (
    create_author,
    create_embed,
    create_field,
    create_footer,
    create_image,
    create_message,
    create_thumbnail,
)
from discord_webhook_builder.colors import RGB, resolve_color
from discord_webhook_builder.delivery import WebhookClient, send
from discord_webhook_builder.models import Author, Embed, Field, Footer, Image, Message, Thumbnail
from discord_webhook_builder.timestamps import is_valid_timestamp

__all__ = [
    "RGB",
    "Author",
    "Embed",
    "Field",
    "Footer",
    "Image",
    "Message",
    "Thumbnail",
    "WebhookClient",
    "create_author",
    "create_embed",
    "create_field",
    "create_footer",
    "create_image",
    "create_message",
    "create_thumbnail",
    "is_valid_timestamp",
    "resolve_color",
    "send",
]
