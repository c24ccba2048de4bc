from typing import Any
from unittest import mock

import aiohttp
import cattrs
import pytest
import yarl

from tests import factories
from webhook_client import configuration
from webhook_client.domain import discord


@pytest.fixture()
def client_session() -> mock.Mock:
    """Return a client session mock.

    :return: An `aiohttp.ClientSession` mock.
    """
    session_cls = mock.create_autospec(spec=aiohttp.ClientSession, spec_set=True)
    return session_cls()


@pytest.fixture()
def configuration_factory() -> factories.ConfigurationFactory:
    """Return a configuration factory with default values.

    :return: The configuration factory callable
    """
    return _configuration_factory


def _configuration_factory(config: dict[str, Any] | None = None) -> configuration.ClientConfiguration:
    """Create a stubbed configuration.

    :param config: The configuration values to override
    :return: A client configuration instance
    """
    _configuration_defaults = {
        "log_level": "DEBUG",
        "username": "Release Bot",
        "avatar_url": "https://avatars.example/release-bot.png",
        "timeout": 5.0,
        "webhooks": {
            "ANNOUNCEMENTS": "https://discord.com/api/webhooks/1234/secret-token",
            "ALERTS": "https://discord.com/api/webhooks/5678/other-secret",
        },
    }
    kwargs = _configuration_defaults | (config or {})
    converter = cattrs.Converter()
    converter.register_structure_hook(yarl.URL, lambda v, t: t(v))
    return converter.structure(kwargs, configuration.ClientConfiguration)


@pytest.fixture()
def regular_button_factory() -> factories.RegularButtonFactory:
    """Return a factory for valid regular buttons."""
    return _regular_button_factory


def _regular_button_factory(custom_id: str = "button") -> discord.RegularButton:
    return discord.RegularButton(style=discord.NonLinkButtonStyle.PRIMARY, custom_id=custom_id)
