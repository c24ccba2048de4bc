"""Convert models to and from Discord's JSON wire format.

See https://discord.com/developers/docs/resources/webhook#execute-webhook
"""

from __future__ import annotations

import functools
from typing import Any, Final

import arrow
import cattrs
from cattrs.gen import make_dict_structure_fn, make_dict_unstructure_fn, override

from webhook_client.domain import discord, webhook

_ACTION_ROW_TYPE: Final = 1
_BUTTON_TYPE: Final = 2
_LINK_BUTTON_STYLE: Final = 5

# Unset optional values are left out of the payload
_OMITTED_WHEN_UNSET = (
    discord.PartialEmoji,
    discord.EmbedField,
    discord.EmbedFooter,
    discord.EmbedAuthor,
    discord.EmbedImage,
    discord.EmbedThumbnail,
    discord.EmbedVideo,
    discord.Embed,
)


def serialize_message(message: discord.Message) -> dict[str, Any]:
    """Convert a message to the JSON payload of the execute endpoint.

    :param message: The message to convert, it is not validated here
    :return: A JSON-serializable dictionary
    """
    return _converter().unstructure(message)


def structure_webhook(raw_webhook: dict[str, Any]) -> webhook.WebhookInfo:
    """Convert the JSON representation of a webhook.

    :param raw_webhook: The decoded response of the webhook endpoint
    :return: A `WebhookInfo` instance
    :raises cattrs.BaseValidationError: If the payload does not match
    """
    return _converter().structure(raw_webhook, webhook.WebhookInfo)


@functools.cache
def _converter() -> cattrs.Converter:
    """Create and return the wire format converter.

    Element hooks have to be registered before the hooks of the models
    containing them, as the generated functions look them up eagerly.
    """
    converter = cattrs.Converter()
    converter.register_unstructure_hook(arrow.Arrow, lambda timestamp: timestamp.isoformat())

    for cls in _OMITTED_WHEN_UNSET:
        converter.register_unstructure_hook(
            cls, make_dict_unstructure_fn(cls, converter, _cattrs_omit_if_default=True)
        )

    unstructure_link_button = make_dict_unstructure_fn(
        discord.LinkButton, converter, _cattrs_omit_if_default=True
    )
    unstructure_regular_button = make_dict_unstructure_fn(
        discord.RegularButton, converter, _cattrs_omit_if_default=True
    )
    converter.register_unstructure_hook(
        discord.LinkButton,
        lambda button: {
            "type": _BUTTON_TYPE,
            "style": _LINK_BUTTON_STYLE,
            **unstructure_link_button(button),
        },
    )
    converter.register_unstructure_hook(
        discord.RegularButton,
        lambda button: {"type": _BUTTON_TYPE, **unstructure_regular_button(button)},
    )
    converter.register_unstructure_hook(
        discord.ActionRow,
        lambda row: {
            "type": _ACTION_ROW_TYPE,
            "components": [converter.unstructure(component) for component in row.components],
        },
    )
    converter.register_unstructure_hook(
        discord.Message,
        make_dict_unstructure_fn(
            discord.Message,
            converter,
            _cattrs_omit_if_default=True,
            action_rows=override(rename="components"),
            allowed_mentions=override(omit_if_default=False),
        ),
    )

    converter.register_structure_hook(
        webhook.WebhookInfo,
        make_dict_structure_fn(webhook.WebhookInfo, converter, webhook_type=override(rename="type")),
    )
    return converter
