"""Exceptions raised by the webhook client.

There are two disjoint families of errors:

- `ValidationError` and its subclasses are raised when a message breaks
  one of Discord's documented limits. They are deterministic: sending
  the same message again will fail in the same way.
- `TransportError` and its subclasses are raised when talking to the
  Discord API fails after a message has been validated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import attrs

if TYPE_CHECKING:
    from webhook_client.validation.interval import Interval


class WebhookClientError(Exception):
    """Base class for all webhook client exceptions."""


class ValidationError(WebhookClientError):
    """Base class for messages that violate a Discord limit.

    Every subclass carries the human-readable name of the offending
    field in `field_name`.
    """

    field_name: str


@attrs.define
class LengthExceeded(ValidationError):
    """Raised when the length of a string is out of bounds."""

    field_name: str
    length: int
    interval: Interval[int]

    def __str__(self) -> str:
        """Describe the violated length interval."""
        verb = "exceeds" if self.length > self.interval.maximum else "falls short of"
        return f"The length of the {self.field_name} ({self.length}) {verb} the allowed range {self.interval}"


@attrs.define
class LimitExceeded(ValidationError):
    """Raised when a count, e.g. the number of buttons in a row, is out of bounds."""

    field_name: str
    count: int
    interval: Interval[int]

    def __str__(self) -> str:
        """Describe the violated count interval."""
        return f"The {self.field_name} limit was exceeded: {self.count} is outside of {self.interval}"


@attrs.define
class DuplicateIdentifier(ValidationError):
    """Raised when a custom id is used more than once in a message."""

    custom_id: str
    field_name: str = attrs.field(default="custom id", init=False)

    def __str__(self) -> str:
        """Name the duplicated custom id."""
        return f"Attempt to use the same custom id {self.custom_id!r} twice"


@attrs.define
class MissingRequiredField(ValidationError):
    """Raised when a component lacks a field it cannot be sent without."""

    field_name: str

    def __str__(self) -> str:
        """Name the missing field."""
        return f"The {self.field_name} is required but was not set"


@attrs.define
class EmptyComposite(ValidationError):
    """Raised when a container component, like an action row, is empty."""

    field_name: str

    def __str__(self) -> str:
        """Name the empty container."""
        return f"The {self.field_name} must contain at least one component"


class ApiClientError(WebhookClientError):
    """Base class for all api client exceptions."""


@attrs.define
class InvalidMessageError(ApiClientError):
    """Raised by the client when it refuses to send an invalid message.

    The message of the underlying validation error is kept as-is.
    """

    error: ValidationError

    def __str__(self) -> str:
        """Provide the message of the validation error."""
        return str(self.error)


class TransportError(ApiClientError):
    """Base class for failures while talking to the Discord API.

    As the webhook url contains a secret token, these exceptions only
    ever refer to a webhook by name.
    """


@attrs.define
class WebhookDeliveryError(TransportError):
    """Raised when Discord responds with a non-success status."""

    webhook: str
    status: int
    message: str

    def __str__(self) -> str:
        """Provide the most important exception information."""
        webhook = self.webhook
        status = self.status
        message = self.message
        return f"Delivery to webhook {webhook!r} failed ({status=}): {message!r}"


@attrs.define
class WebhookConnectionError(TransportError):
    """Raised when no response could be received from Discord."""

    webhook: str
    reason: str

    def __str__(self) -> str:
        """Provide the webhook name and the kind of failure."""
        return f"Could not connect to webhook {self.webhook!r}: {self.reason}"


@attrs.define
class MalformedResponseError(TransportError):
    """Raised when a response body cannot be decoded."""

    webhook: str
    reason: str

    def __str__(self) -> str:
        """Provide the webhook name and what was wrong with the response."""
        return f"Malformed response from webhook {self.webhook!r}: {self.reason}"
