"""Webhook client configuration."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Final

import attrs
import cattrs
import yarl
from attrs import validators

_WEBHOOK_ENVVAR_PREFIX: Final = "DISCORD_WEBHOOK_"
_CONFIG_SECTION: Final = "webhook_client"
_LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Simplified validators
_INSTANCE_OF_STR = validators.instance_of(str)
_OPTIONAL_STR = validators.optional(_INSTANCE_OF_STR)
_INSTANCE_OF_URL = validators.instance_of(yarl.URL)
_URL_MAPPING = validators.deep_mapping(_INSTANCE_OF_STR, _INSTANCE_OF_URL)
_POSITIVE_FLOAT = validators.and_(validators.instance_of(float), validators.gt(0))


@attrs.define(frozen=True)
class ClientConfiguration:
    """Configuration for the webhook client."""

    webhooks: Mapping[str, yarl.URL] = attrs.field(repr=False, validator=_URL_MAPPING, factory=dict)
    log_level: str = attrs.field(default="INFO", validator=validators.in_(_LOG_LEVELS))
    username: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    avatar_url: str | None = attrs.field(default=None, validator=_OPTIONAL_STR)
    timeout: float = attrs.field(default=10.0, validator=_POSITIVE_FLOAT)

    @classmethod
    def from_environment(
        cls,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ClientConfiguration:
        """Create a ClientConfiguration from the environment.

        Webhook URLs contain a secret token, so they are only read from
        environment variables: `DISCORD_WEBHOOK_ANNOUNCEMENTS` defines
        the webhook `ANNOUNCEMENTS`. Everything else is read from the
        `[webhook_client]` table of the optional TOML file.

        :param config_path: The path to a TOML configuration file
        :param environ: The environment, defaults to `os.environ`
        :return: The structured configuration
        """
        client_config = {}
        if config_path is not None:
            with config_path.open("rb") as config_file:
                client_config = dict(tomllib.load(config_file).get(_CONFIG_SECTION, {}))

        environ = os.environ if environ is None else environ
        client_config["webhooks"] = {
            key.removeprefix(_WEBHOOK_ENVVAR_PREFIX): value
            for key, value in environ.items()
            if key.startswith(_WEBHOOK_ENVVAR_PREFIX)
        }
        converter = cattrs.Converter()
        converter.register_structure_hook(yarl.URL, lambda v, t: t(v))
        return converter.structure(client_config, cls)
