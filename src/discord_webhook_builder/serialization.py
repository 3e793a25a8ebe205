"""Convert webhook messages to the Discord wire format.

Discord treats missing keys and empty values the same, so keys holding
an empty value are left out of the payload: ``None``, empty strings,
zero, ``False``, empty lists, and nested objects without any values.
The name and value of a field are always sent, even if empty.
"""

import functools
import json
from collections.abc import Callable
from typing import Any, Final

import attrs
import cattrs
from cattrs.gen import make_dict_unstructure_fn

from discord_webhook_builder import exceptions, models

_ALWAYS_PRESENT: Final[dict[type, frozenset[str]]] = {
    models.Field: frozenset({"name", "value"}),
}


def _make_omit_empty_hook(cls: type, converter: cattrs.Converter) -> Callable[[Any], dict[str, Any]]:
    """Create an unstructure hook that drops empty values."""
    unstructure_all = make_dict_unstructure_fn(cls, converter)
    always_present = _ALWAYS_PRESENT.get(cls, frozenset())

    def unstructure(instance: Any) -> dict[str, Any]:
        return {
            key: value
            for key, value in unstructure_all(instance).items()
            if key in always_present or value
        }

    return unstructure


@functools.cache
def _converter() -> cattrs.Converter:
    """Create and return the converter for webhook messages."""
    converter = cattrs.Converter()
    converter.register_unstructure_hook_factory(
        attrs.has, lambda cls: _make_omit_empty_hook(cls, converter)
    )
    return converter


def unstructure(message: models.Message) -> dict[str, Any]:
    """Convert a message to a JSON-compatible dictionary.

    :param message: The message to convert
    :return: The webhook payload
    """
    return _converter().unstructure(message)


def dumps(message: models.Message) -> str:
    """Encode a message as a JSON payload.

    :param message: The message to encode
    :return: The JSON text
    :raises exceptions.EncodingError: If the message cannot be encoded
    """
    try:
        return json.dumps(unstructure(message))
    except (TypeError, ValueError) as exc:
        raise exceptions.EncodingError(reason=str(exc)) from exc
