"""Models to represent the webhook itself."""

from __future__ import annotations

import attrs
from attrs import validators

_optional_string = validators.optional(validators.instance_of(str))


@attrs.define(frozen=True)
class WebhookInfo:
    """Information about a webhook, as returned by Discord.

    See https://discord.com/developers/docs/resources/webhook#webhook-object
    """

    id: str = attrs.field(validator=validators.instance_of(str))
    webhook_type: int = attrs.field(validator=validators.instance_of(int))
    channel_id: str | None = attrs.field(default=None, validator=_optional_string)
    guild_id: str | None = attrs.field(default=None, validator=_optional_string)
    name: str | None = attrs.field(default=None, validator=_optional_string)
    avatar: str | None = attrs.field(default=None, validator=_optional_string)
    token: str | None = attrs.field(default=None, repr=False, validator=_optional_string)
    application_id: str | None = attrs.field(default=None, validator=_optional_string)
