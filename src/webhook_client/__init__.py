"""Build, validate and send messages to Discord webhooks."""

from webhook_client.exceptions import (
    ApiClientError,
    InvalidMessageError,
    TransportError,
    ValidationError,
    WebhookClientError,
)
from webhook_client.services.api import WebhookClient
from webhook_client.validation import validate

__all__ = [
    "ApiClientError",
    "InvalidMessageError",
    "TransportError",
    "ValidationError",
    "WebhookClient",
    "WebhookClientError",
    "validate",
]
