"""Functions to build webhook messages and their embeds."""

from discord_webhook_builder import colors, models


def create_message(
    content: str = "", username: str | None = None, avatar_url: str | None = None
) -> models.Message:
    """Create a webhook message.

    :param content: The message text, at most 2000 characters
    :param username: Overrides the default username of the webhook
    :param avatar_url: Overrides the default avatar of the webhook
    :return: A message without embeds
    :raises exceptions.ContentTooLongError: If the content is too long
    """
    return models.Message(content=content, username=username, avatar_url=avatar_url)


def create_embed(
    title: str | None = None,
    description: str | None = None,
    url: str | None = None,
    color: colors.Color | None = None,
) -> models.Embed:
    """Create an embed.

    :param title: The title of the embed
    :param description: The description of the embed
    :param url: The url the title links to
    :param color: A hex string, an integer, or an `RGB` instance
    :return: An embed without fields
    :raises exceptions.InvalidColorError: If the color is invalid
    """
    color_value = None if color is None else colors.resolve_color(color)
    return models.Embed(title=title, description=description, url=url, color=color_value)


def create_footer(
    text: str | None = None, icon_url: str | None = None, proxy_icon_url: str | None = None
) -> models.Footer:
    return models.Footer(text=text, icon_url=icon_url, proxy_icon_url=proxy_icon_url)


def create_image(
    url: str | None = None,
    proxy_url: str | None = None,
    height: int | None = None,
    width: int | None = None,
) -> models.Image:
    return models.Image(url=url, proxy_url=proxy_url, height=height, width=width)


def create_thumbnail(
    url: str | None = None,
    proxy_url: str | None = None,
    height: int | None = None,
    width: int | None = None,
) -> models.Thumbnail:
    return models.Thumbnail(url=url, proxy_url=proxy_url, height=height, width=width)


def create_author(
    name: str | None = None,
    url: str | None = None,
    icon_url: str | None = None,
    proxy_icon_url: str | None = None,
) -> models.Author:
    return models.Author(name=name, url=url, icon_url=icon_url, proxy_icon_url=proxy_icon_url)


def create_field(name: str, value: str, inline: bool = False) -> models.Field:
    """Create an embed field, shown side by side with others if inline."""
    return models.Field(name=name, value=value, inline=inline)
