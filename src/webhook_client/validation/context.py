"""State that is shared between the checks of a single validation pass."""

from __future__ import annotations

import logging

import attrs

from webhook_client import exceptions
from webhook_client.domain import discord
from webhook_client.validation import limits

_logger = logging.getLogger(__name__)


@attrs.define
class ValidationContext:
    """Accumulate message-wide state while a message is checked.

    Some of Discord's limits do not apply to a single component, but to
    the message as a whole: custom ids must be unique across all action
    rows and the text of all embeds combined is limited. The context
    keeps track of everything seen so far.

    A context belongs to exactly one validation pass. Counters are not
    rolled back when a check fails, so a context must never be reused.
    """

    seen_custom_ids: set[str] = attrs.field(factory=set)
    embed_char_total: int = 0
    buttons_in_current_row: int = 0

    def register_custom_id(self, custom_id: str) -> None:
        """Reserve a custom id for the rest of the validation pass.

        :param custom_id: The custom id of a component
        :raises LengthExceeded: If the custom id is empty or too long
        :raises DuplicateIdentifier: If the custom id was already used
          anywhere in the message
        """
        limits.ensure_length(custom_id, limits.CUSTOM_ID)
        if custom_id in self.seen_custom_ids:
            raise exceptions.DuplicateIdentifier(custom_id=custom_id)
        self.seen_custom_ids.add(custom_id)

    def register_button(self, custom_id: str) -> None:
        """Register a button of the current action row.

        :param custom_id: The custom id of the button
        :raises LimitExceeded: If the current row has too many buttons
        """
        self.register_custom_id(custom_id)
        self.buttons_in_current_row += 1
        limits.ensure_count(self.buttons_in_current_row, limits.BUTTONS_PER_ROW)

    def begin_action_row(self) -> None:
        """Start counting the buttons of a new action row."""
        self.buttons_in_current_row = 0

    def register_embed(self, embed: discord.Embed) -> None:
        """Add the text of the embed to the message-wide character count.

        The text is counted before the total is checked, so the count
        includes the embed even if this raises.

        :param embed: The embed to account for
        :raises LimitExceeded: If all embeds seen so far contain too
          many characters
        """
        self.embed_char_total += _count_characters(embed)
        _logger.debug("Embed characters so far: %d", self.embed_char_total)
        limits.ensure_count(self.embed_char_total, limits.EMBED_CHARACTERS)


def _count_characters(embed: discord.Embed) -> int:
    """Count the characters Discord includes in the embed total."""
    texts = [embed.title, embed.description]
    if embed.footer is not None:
        texts.append(embed.footer.text)
    if embed.author is not None:
        texts.append(embed.author.name)
    for field in embed.fields:
        texts.extend((field.name, field.value))
    return sum(len(text) for text in texts if text is not None)
