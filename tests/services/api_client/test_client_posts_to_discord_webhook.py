import asyncio
from unittest import mock

import aiohttp
import pytest
import yarl
from aiohttp import client_reqrep

from tests import factories
from webhook_client import exceptions
from webhook_client.domain import discord
from webhook_client.services import api

_WEBHOOK_MESSAGE = discord.Message(
    content="Message content",
    embeds=[
        discord.Embed(
            title="Embed title",
            author=discord.EmbedAuthor(name="Embed Author", icon_url="https://icon.url/icon.jpg"),
            description="Embed description",
            fields=[discord.EmbedField(name="field name", value="field value", inline=True)],
            footer=discord.EmbedFooter(text="Embed Footer"),
            url="https://link.url/embed",
        )
    ],
)
_EXPECTED_PAYLOAD = {
    "content": "Message content",
    "embeds": [
        {
            "title": "Embed title",
            "author": {"name": "Embed Author", "icon_url": "https://icon.url/icon.jpg"},
            "description": "Embed description",
            "fields": [{"name": "field name", "value": "field value", "inline": True}],
            "footer": {"text": "Embed Footer"},
            "url": "https://link.url/embed",
        }
    ],
    "allowed_mentions": {"parse": []},
}


def _post_fails_with(client_session: mock.Mock, error: BaseException) -> None:
    """Make the `post` method of the session fail with `error`."""
    client_session.post = mock.MagicMock()
    client_session.post.return_value.__aenter__.side_effect = error


async def test_posts_message_to_discord_webhook(
    configuration_factory: factories.ConfigurationFactory,
    client_session: mock.Mock,
) -> None:
    """Delivers message to a single webhook selected by name."""
    # GIVEN a webhook message
    webhook_message = _WEBHOOK_MESSAGE
    # AND a configuration instance
    config = configuration_factory({"webhooks": {"webhook": "https://discord.org/1234"}})
    # AND a mocked client session with a post method
    client_session.post = mock.MagicMock()
    # AND an api client for that webhook
    client = api.WebhookClient.from_configuration(client_session, config, webhook="webhook")

    # WHEN that message is sent
    await client.send_message(webhook_message)

    # THEN the post method was called with the appropriate arguments
    client_session.post.assert_called_once_with(
        url=yarl.URL("https://discord.org/1234"), json=_EXPECTED_PAYLOAD, raise_for_status=True
    )


async def test_send_builds_a_new_message(client_session: mock.Mock) -> None:
    """The build callable receives an empty message to configure."""
    client_session.post = mock.MagicMock()
    client = api.WebhookClient(session=client_session, url="https://discord.org/1234")

    await client.send(lambda message: message.set_content("content").set_username("username"))

    client_session.post.assert_called_once_with(
        url=yarl.URL("https://discord.org/1234"),
        json={"content": "content", "username": "username", "allowed_mentions": {"parse": []}},
        raise_for_status=True,
    )


async def test_invalid_message_is_never_posted(client_session: mock.Mock) -> None:
    """Validation errors surface before any request is made."""
    # GIVEN a message with two buttons using the same custom id
    client_session.post = mock.MagicMock()
    client = api.WebhookClient(session=client_session, url="https://discord.org/1234")

    # WHEN the message is sent
    # THEN an InvalidMessageError is raised
    with pytest.raises(exceptions.InvalidMessageError, match="twice") as exc_info:
        await client.send(
            lambda message: message.action_row(
                lambda row: row.regular_button(
                    lambda button: button.set_custom_id("0").set_style(discord.NonLinkButtonStyle.PRIMARY)
                ).regular_button(
                    lambda button: button.set_custom_id("0").set_style(discord.NonLinkButtonStyle.PRIMARY)
                )
            )
        )

    # AND the validation error is available unchanged
    assert isinstance(exc_info.value.error, exceptions.DuplicateIdentifier)
    assert exc_info.value.__cause__ is exc_info.value.error
    assert str(exc_info.value) == str(exc_info.value.error)
    # AND nothing was posted
    client_session.post.assert_not_called()


async def test_failing_webhook_does_not_reveal_webhook_url(
    configuration_factory: factories.ConfigurationFactory,
    client_session: mock.Mock,
) -> None:
    """Exceptions should not contain URLs, as URLs contain tokens."""
    # GIVEN a webhook message
    webhook_message = _WEBHOOK_MESSAGE
    # AND a configuration instance
    config = configuration_factory({"webhooks": {"webhook": "https://discord.org/1234"}})
    # AND a mocked client session a failing post method
    _post_fails_with(
        client_session,
        aiohttp.ClientResponseError(
            request_info=mock.create_autospec(client_reqrep.RequestInfo),
            history=(),
            headers={},
            status=403,
            message="Permission denied!",
        ),
    )
    # AND an api client for that webhook
    client = api.WebhookClient.from_configuration(client_session, config, webhook="webhook")

    # WHEN that message is sent
    # THEN a WebhookDeliveryError is raised
    with pytest.raises(exceptions.WebhookDeliveryError) as exc_info:
        await client.send_message(webhook_message)

    # AND the exception has no "__cause__"
    assert exc_info.value.__cause__ is None
    # AND the exception context is suppressed
    assert exc_info.value.__suppress_context__
    # AND the raised exception contains the name of the failing webhook
    assert exc_info.value.webhook == "webhook"
    # AND the raised exception contains the response status
    assert exc_info.value.status == 403
    # AND the raised exception contains the response message
    assert exc_info.value.message == "Permission denied!"
    # AND the webhook url is not part of the message
    assert "discord.org" not in str(exc_info.value)


async def test_connection_failure_is_a_transport_error(client_session: mock.Mock) -> None:
    _post_fails_with(client_session, aiohttp.ServerDisconnectedError())
    client = api.WebhookClient(session=client_session, url="https://discord.org/1234", name="alerts")

    with pytest.raises(exceptions.WebhookConnectionError) as exc_info:
        await client.send_message(discord.Message(content="content"))

    assert isinstance(exc_info.value, exceptions.TransportError)
    assert not isinstance(exc_info.value, exceptions.InvalidMessageError)
    assert exc_info.value.reason == "ServerDisconnectedError"
    assert exc_info.value.__suppress_context__


async def test_timeout_is_a_transport_error(client_session: mock.Mock) -> None:
    # GIVEN a webhook that does not respond before the session times out
    _post_fails_with(client_session, asyncio.TimeoutError())
    client = api.WebhookClient(session=client_session, url="https://discord.org/1234", name="alerts")

    # WHEN a message is sent
    # THEN a WebhookConnectionError is raised
    with pytest.raises(exceptions.WebhookConnectionError) as exc_info:
        await client.send_message(discord.Message(content="content"))

    # AND it is a transport error with the timeout as its reason
    assert isinstance(exc_info.value, exceptions.TransportError)
    assert exc_info.value.reason == "timeout"
    assert "discord.org" not in str(exc_info.value)
