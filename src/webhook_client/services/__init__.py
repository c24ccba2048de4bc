"""Application and infrastructure services."""

from webhook_client.services.api import WebhookClient
from webhook_client.services.serialization import serialize_message, structure_webhook

__all__ = ["WebhookClient", "serialize_message", "structure_webhook"]
