"""Send a message to a Discord webhook from the command line."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import aiohttp
import yarl
from dotenv import load_dotenv

from webhook_client import exceptions
from webhook_client.configuration import ClientConfiguration
from webhook_client.domain import discord
from webhook_client.services.api import WebhookClient

_logger = logging.getLogger(__name__)


def build_message(args: argparse.Namespace, config: ClientConfiguration) -> discord.Message:
    """Create the message described by the command line arguments."""
    message = discord.Message(content=args.content, tts=args.tts)
    username = args.username or config.username
    if username is not None:
        message.set_username(username)
    avatar_url = args.avatar_url or config.avatar_url
    if avatar_url is not None:
        message.set_avatar_url(avatar_url)
    if args.embed_title is not None or args.embed_description is not None:
        message.add_embed(discord.Embed(title=args.embed_title, description=args.embed_description))
    return message


async def run(args: argparse.Namespace, config: ClientConfiguration, *, url: yarl.URL, name: str) -> None:
    timeout = aiohttp.ClientTimeout(total=config.timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        client = WebhookClient(session=session, url=url, name=name)
        if args.info:
            webhook_info = await client.get_information()
            print(webhook_info)  # noqa: T201
            return
        await client.send_message(build_message(args, config))


def _parse_args(argv: Sequence[str] | None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="webhook-client", description="Send a message to a Discord webhook")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--webhook", help="Name of a webhook defined as DISCORD_WEBHOOK_<NAME>")
    target.add_argument("--url", help="Webhook URL")
    parser.add_argument("--config-file", type=Path, help="TOML configuration file")
    parser.add_argument("--env-file", type=Path, default=Path(".env"), help="Environment file to load")

    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--info", action="store_true", help="Show information about the webhook")
    action.add_argument("--content", help="Text content of the message")
    parser.add_argument("--username", help="Override the username of the webhook")
    parser.add_argument("--avatar-url", help="Override the avatar of the webhook")
    parser.add_argument("--tts", action="store_true", help="Send as text-to-speech message")
    parser.add_argument("--embed-title", help="Title of an embed to attach")
    parser.add_argument("--embed-description", help="Description of an embed to attach")
    return parser, parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    parser, args = _parse_args(argv)

    load_dotenv(args.env_file)
    try:
        config = ClientConfiguration.from_environment(args.config_file)
    except FileNotFoundError:
        parser.error(f"configuration file not found: {args.config_file}")

    logging.basicConfig(
        level=config.log_level,
        stream=sys.stdout,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.webhook is not None:
        if args.webhook not in config.webhooks:
            parser.error(f"unknown webhook {args.webhook!r}, set DISCORD_WEBHOOK_{args.webhook}")
        url, name = config.webhooks[args.webhook], args.webhook
    else:
        url, name = yarl.URL(args.url), "command line"

    try:
        asyncio.run(run(args, config, url=url, name=name))
    except exceptions.WebhookClientError as exc:
        _logger.error("%s", exc)  # noqa: TRY400
        return 1
    except KeyboardInterrupt:
        _logger.info("Received KeyboardInterrupt, exiting...")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
