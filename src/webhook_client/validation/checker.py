"""Check messages against Discord's documented limits.

`check_compatibility` has one implementation per kind of model. Each
implementation checks the limits of its own model and then descends into
the children, in document order: embeds before action rows, and within
an embed the counts and texts before the author, footer and fields.

The first violation aborts the whole pass. This means that an invalid
message always yields exactly one error, and that error belongs to the
first invalid model encountered.
"""

from __future__ import annotations

import functools

from webhook_client import exceptions
from webhook_client.domain import discord
from webhook_client.validation import limits
from webhook_client.validation.context import ValidationContext


def validate(message: discord.Message) -> None:
    """Check that Discord will accept the message.

    :param message: The message to check
    :raises ValidationError: For the first limit the message breaks
    """
    check_compatibility(message, ValidationContext())


@functools.singledispatch
def check_compatibility(entity: object, context: ValidationContext) -> None:
    """Check an entity and its children, recording state in `context`.

    :param entity: A model from `webhook_client.domain.discord`
    :param context: The context of the current validation pass
    :raises ValidationError: For the first limit the entity breaks
    """
    del context  # unused
    msg = f"Cannot check objects of type {type(entity).__name__!r}"
    raise TypeError(msg)


@check_compatibility.register(discord.Message)
def _check_message(message: discord.Message, context: ValidationContext) -> None:
    limits.ensure_count(len(message.action_rows), limits.ACTION_ROW_COUNT)
    if message.content is not None:
        limits.ensure_length(message.content, limits.CONTENT)
    limits.ensure_count(len(message.embeds), limits.EMBED_COUNT)
    for embed in message.embeds:
        check_compatibility(embed, context)
    for action_row in message.action_rows:
        check_compatibility(action_row, context)


@check_compatibility.register(discord.Embed)
def _check_embed(embed: discord.Embed, context: ValidationContext) -> None:
    # Account for the text first, even if the embed turns out invalid
    context.register_embed(embed)
    limits.ensure_count(len(embed.fields), limits.FIELD_COUNT)
    if embed.title is not None:
        limits.ensure_length(embed.title, limits.EMBED_TITLE)
    if embed.description is not None:
        limits.ensure_length(embed.description, limits.EMBED_DESCRIPTION)
    if embed.author is not None:
        check_compatibility(embed.author, context)
    if embed.footer is not None:
        check_compatibility(embed.footer, context)
    for field in embed.fields:
        check_compatibility(field, context)


@check_compatibility.register(discord.EmbedAuthor)
def _check_author(author: discord.EmbedAuthor, context: ValidationContext) -> None:
    del context  # unused
    limits.ensure_length(author.name, limits.AUTHOR_NAME)


@check_compatibility.register(discord.EmbedFooter)
def _check_footer(footer: discord.EmbedFooter, context: ValidationContext) -> None:
    del context  # unused
    limits.ensure_length(footer.text, limits.FOOTER_TEXT)


@check_compatibility.register(discord.EmbedField)
def _check_field(field: discord.EmbedField, context: ValidationContext) -> None:
    del context  # unused
    limits.ensure_length(field.name, limits.FIELD_NAME)
    limits.ensure_length(field.value, limits.FIELD_VALUE)


@check_compatibility.register(discord.ActionRow)
def _check_action_row(action_row: discord.ActionRow, context: ValidationContext) -> None:
    context.begin_action_row()
    if not action_row.components:
        raise exceptions.EmptyComposite(field_name="action row")
    for component in action_row.components:
        check_compatibility(component, context)


@check_compatibility.register(discord.LinkButton)
def _check_link_button(button: discord.LinkButton, context: ValidationContext) -> None:
    # Link buttons have no custom id and do not count towards the row limit
    del context  # unused
    if button.label is not None:
        limits.ensure_length(button.label, limits.BUTTON_LABEL)
    if button.url is None:
        raise exceptions.MissingRequiredField(field_name="url")


@check_compatibility.register(discord.RegularButton)
def _check_regular_button(button: discord.RegularButton, context: ValidationContext) -> None:
    if button.label is not None:
        limits.ensure_length(button.label, limits.BUTTON_LABEL)
    if button.style is None:
        raise exceptions.MissingRequiredField(field_name="style")
    if button.custom_id is None:
        raise exceptions.MissingRequiredField(field_name="custom id")
    context.register_button(button.custom_id)
