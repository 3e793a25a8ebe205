"""Send a message to a Discord webhook from the command line."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import arrow
from dotenv import load_dotenv

from discord_webhook_builder import builder, delivery, exceptions, models
from discord_webhook_builder.configuration import WebhookConfiguration

_SECRETS_FILE = Path(".secrets")
_EMBED_OPTIONS = ("title", "description", "url", "color", "timestamp", "footer")

_logger = logging.getLogger(f"webhook.{__name__}")


def _parse_field(raw_field: str) -> tuple[str, str]:
    name, separator, value = raw_field.partition("=")
    if not separator:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {raw_field!r}")
    return name, value


def _parse_color(raw_color: str) -> str | int:
    """Interpret digits-only colors as integers, everything else as hex."""
    return int(raw_color) if raw_color.isdecimal() else raw_color


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a message to a Discord webhook")
    parser.add_argument("--config-file", type=Path, help="Configuration file")
    parser.add_argument(
        "--webhook", required=True, help="Webhook name, read from DISCORD_WEBHOOK_<NAME>"
    )
    parser.add_argument("--content", default="", help="Message content")
    parser.add_argument("--username", help="Override the webhook username")
    parser.add_argument("--avatar-url", help="Override the webhook avatar")

    embed_group = parser.add_argument_group("embed")
    embed_group.add_argument("--title")
    embed_group.add_argument("--description")
    embed_group.add_argument("--url")
    embed_group.add_argument(
        "--color",
        type=_parse_color,
        help="Hex color like '#112233', or a decimal integer; digits without '#' are decimal",
    )
    embed_group.add_argument("--timestamp", help="RFC 3339 timestamp or 'now'")
    embed_group.add_argument("--footer", help="Footer text")
    embed_group.add_argument(
        "--field", type=_parse_field, action="append", default=[], metavar="NAME=VALUE"
    )
    embed_group.add_argument(
        "--inline-field", type=_parse_field, action="append", default=[], metavar="NAME=VALUE"
    )
    return parser


def build_message(args: argparse.Namespace, config: WebhookConfiguration) -> models.Message:
    """Build a message from the command line arguments.

    An embed is only added if at least one embed option is given.
    """
    message = builder.create_message(
        content=args.content,
        username=args.username or config.username,
        avatar_url=args.avatar_url or config.avatar_url,
    )
    has_fields = args.field or args.inline_field
    if not has_fields and all(getattr(args, option) is None for option in _EMBED_OPTIONS):
        return message

    embed = builder.create_embed(
        title=args.title, description=args.description, url=args.url, color=args.color
    )
    if args.timestamp is not None:
        timestamp = arrow.utcnow() if args.timestamp == "now" else args.timestamp
        embed.set_timestamp(timestamp)
    if args.footer is not None:
        embed.set_footer(builder.create_footer(text=args.footer))
    embed.add_fields(builder.create_field(name, value) for name, value in args.field)
    embed.add_fields(
        builder.create_field(name, value, inline=True) for name, value in args.inline_field
    )
    return message.add_embed(embed)


def main(argv: Sequence[str] | None = None) -> int:
    args = create_parser().parse_args(argv)

    load_dotenv(_SECRETS_FILE)
    config = WebhookConfiguration.from_file(args.config_file)

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stdout,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        url = config.get_webhook_url(args.webhook)
        message = build_message(args, config)
        delivery.send(url, message)
    except exceptions.WebhookError as exc:
        _logger.error("Sending the message failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
