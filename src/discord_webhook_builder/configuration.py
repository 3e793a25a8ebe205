"""Webhook configuration.

Webhook urls contain a secret token, which is why they are only read
from environment variables, never from the configuration file. A
webhook named ``ANNOUNCEMENTS`` is configured with the environment
variable ``DISCORD_WEBHOOK_ANNOUNCEMENTS``.
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import attrs
import cattrs
import yarl
from attrs import validators

from discord_webhook_builder import exceptions

_WEBHOOK_ENVVAR_PREFIX: Final = "DISCORD_WEBHOOK_"
_LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_OPTIONAL_STR = validators.optional(validators.instance_of(str))
_URL_MAPPING = validators.deep_mapping(
    validators.instance_of(str), validators.instance_of(yarl.URL)
)
_logger = logging.getLogger(f"webhook.{__name__}")


@attrs.define(frozen=True)
class WebhookConfiguration:
    """Configuration for sending webhook messages."""

    webhooks: Mapping[str, yarl.URL] = attrs.field(
        factory=dict, repr=False, validator=_URL_MAPPING
    )
    username: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    avatar_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    log_level: str = attrs.field(default="INFO", validator=validators.in_(_LOG_LEVELS))

    def get_webhook_url(self, webhook: str) -> yarl.URL:
        """Get the url of a webhook by name.

        :param webhook: The name of the webhook
        :return: The url of the webhook
        :raises exceptions.UnknownWebhookError: If the webhook is not
          configured
        """
        try:
            return self.webhooks[webhook]
        except KeyError:
            raise exceptions.UnknownWebhookError(webhook=webhook) from None

    @classmethod
    def from_file(
        cls, config_path: Path | None, environ: Mapping[str, str] | None = None
    ) -> "WebhookConfiguration":
        """Create a configuration from a TOML file and the environment.

        :param config_path: A TOML file with a ``[webhook]`` table, or
          None to only use the environment
        :param environ: The environment, defaults to `os.environ`
        :return: The configuration
        """
        config: dict[str, Any] = {}
        if config_path is not None:
            with config_path.open("rb") as config_file:
                config = tomllib.load(config_file).get("webhook", {})
            _logger.debug("Loaded configuration from '%s'", config_path)

        environ = os.environ if environ is None else environ
        config["webhooks"] = {
            key.removeprefix(_WEBHOOK_ENVVAR_PREFIX): value
            for key, value in environ.items()
            if key.startswith(_WEBHOOK_ENVVAR_PREFIX)
        }
        return _converter().structure(config, cls)


def _converter() -> cattrs.Converter:
    converter = cattrs.Converter()
    converter.register_structure_hook(yarl.URL, lambda v, t: t(v))
    return converter
