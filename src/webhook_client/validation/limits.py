"""Discord limits that cannot be exceeded.

See https://discord.com/developers/docs/resources/message#embed-object-embed-limits
and https://discord.com/developers/docs/interactions/message-components
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Final

from webhook_client import exceptions
from webhook_client.validation.interval import Interval, Limit

# Message
CONTENT: Final = Limit("content", Interval(0, 2000))
EMBED_COUNT: Final = Limit("embed", Interval(0, 10))
ACTION_ROW_COUNT: Final = Limit("action row", Interval(0, 5))

# Components
BUTTONS_PER_ROW: Final = Limit("button", Interval(0, 5))
BUTTON_LABEL: Final = Limit("label", Interval(0, 80))
CUSTOM_ID: Final = Limit("custom id", Interval(1, 100))

# Embeds
EMBED_TITLE: Final = Limit("title", Interval(0, 256))
EMBED_DESCRIPTION: Final = Limit("description", Interval(0, 4096))
FOOTER_TEXT: Final = Limit("footer text", Interval(0, 2048))
AUTHOR_NAME: Final = Limit("author name", Interval(0, 256))
FIELD_NAME: Final = Limit("field name", Interval(0, 256))
FIELD_VALUE: Final = Limit("field value", Interval(0, 1024))
FIELD_COUNT: Final = Limit("field", Interval(0, 25))
EMBED_CHARACTERS: Final = Limit("character count across all embeds", Interval(0, 6000))


def ensure_length(value: Sized, limit: Limit) -> None:
    """Raise `LengthExceeded` if the length of `value` is out of bounds."""
    length = len(value)
    if not limit.interval.contains(length):
        raise exceptions.LengthExceeded(field_name=limit.name, length=length, interval=limit.interval)


def ensure_count(count: int, limit: Limit) -> None:
    """Raise `LimitExceeded` if `count` is out of bounds."""
    if not limit.interval.contains(count):
        raise exceptions.LimitExceeded(field_name=limit.name, count=count, interval=limit.interval)
