"""An API client to execute Discord webhooks.

Messages are validated before anything is sent: a message that breaks
one of Discord's limits never leaves the process.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import aiohttp
import attrs
import cattrs
import yarl

from webhook_client import exceptions, validation
from webhook_client.domain import discord, webhook
from webhook_client.services import serialization

if TYPE_CHECKING:
    from webhook_client import configuration

_logger = logging.getLogger(__name__)


@attrs.define(slots=False)
class WebhookClient:
    """A client for a single Discord webhook.

    The caller owns the session and is responsible for closing it.
    """

    session: aiohttp.ClientSession = attrs.field(kw_only=True)
    url: yarl.URL = attrs.field(kw_only=True, converter=yarl.URL, repr=False)
    name: str = attrs.field(kw_only=True, default="webhook")

    @classmethod
    def from_configuration(
        cls,
        session: aiohttp.ClientSession,
        config: configuration.ClientConfiguration,
        *,
        webhook: str,
    ) -> WebhookClient:
        """Create a client for a webhook from the configuration.

        :param session: The session to send requests with
        :param config: The client configuration
        :param webhook: The name of the webhook to execute
        :return: A client for that webhook
        """
        return cls(session=session, url=config.webhooks[webhook], name=webhook)

    async def send(self, build: Callable[[discord.Message], object]) -> None:
        """Send a message configured by `build`.

        Example::

            await client.send(lambda message: message.set_content("content").set_username("username"))

        :param build: A callable that receives a new, empty message
        """
        message = discord.Message()
        build(message)
        await self.send_message(message)

    async def send_message(self, message: discord.Message) -> None:
        """Execute the webhook with a message.

        :param message: The message to send
        :raises InvalidMessageError: If the message breaks a Discord
          limit; no request is made in that case
        :raises TransportError: If the message could not be delivered
        """
        try:
            validation.validate(message)
        except exceptions.ValidationError as exc:
            _logger.warning("Refusing to send an invalid message to webhook %r: %s", self.name, exc)
            raise exceptions.InvalidMessageError(error=exc) from exc

        message_data = serialization.serialize_message(message)
        try:
            async with self.session.post(url=self.url, json=message_data, raise_for_status=True):
                pass
        except aiohttp.ClientResponseError as exc:
            # Raise a new exception that does not contain the request
            # URL, as it contains a secret token that should never be
            # logged (without trusting the caller).
            raise exceptions.WebhookDeliveryError(webhook=self.name, status=exc.status, message=exc.message) from None
        except aiohttp.ClientError as exc:
            raise exceptions.WebhookConnectionError(webhook=self.name, reason=type(exc).__name__) from None
        except TimeoutError:
            raise exceptions.WebhookConnectionError(webhook=self.name, reason="timeout") from None
        _logger.info("Delivered webhook message to webhook %r", self.name)

    async def get_information(self) -> webhook.WebhookInfo:
        """Fetch information about the webhook.

        :return: The webhook, as described by Discord
        :raises TransportError: If the information could not be fetched
        """
        try:
            async with self.session.get(url=self.url, raise_for_status=True) as response:
                raw_webhook = await response.json()
        except aiohttp.ContentTypeError:
            raise exceptions.MalformedResponseError(webhook=self.name, reason="unexpected content type") from None
        except aiohttp.ClientResponseError as exc:
            raise exceptions.WebhookDeliveryError(webhook=self.name, status=exc.status, message=exc.message) from None
        except aiohttp.ClientError as exc:
            raise exceptions.WebhookConnectionError(webhook=self.name, reason=type(exc).__name__) from None
        except TimeoutError:
            raise exceptions.WebhookConnectionError(webhook=self.name, reason="timeout") from None
        except ValueError:
            raise exceptions.MalformedResponseError(webhook=self.name, reason="invalid JSON") from None

        if not isinstance(raw_webhook, dict):
            raise exceptions.MalformedResponseError(webhook=self.name, reason="expected a JSON object")
        try:
            webhook_info = serialization.structure_webhook(raw_webhook)
        except cattrs.BaseValidationError:
            _logger.exception("Failed to convert the response of webhook %r", self.name)
            raise exceptions.MalformedResponseError(webhook=self.name, reason="unexpected webhook object") from None
        _logger.info("Fetched information about webhook %r", self.name)
        return webhook_info
