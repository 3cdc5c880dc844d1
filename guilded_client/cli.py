from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, Optional

import httpx

from . import __version__
from .client import GuildedClient
from .config import Settings
from .errors import GuildedError
from .ids import ChannelId, Identifier, MessageId, ServerId, UserId
from .logging_setup import setup_logging
from .util import parse_iso_utc

logger = logging.getLogger("guilded_client")


def _print_effective_config(settings: Settings) -> None:
    print("Guilded client config:")
    print(f"- version: {__version__}")
    print(f"- guilded_api_base: {settings.guilded_api_base}")
    print(f"- guilded_token_set: {bool(settings.guilded_token)}")
    print(f"- http_timeout: {settings.http_timeout if settings.http_timeout is not None else 'httpx default'}")
    print(f"- log_level: {settings.log_level}")


def _id_arg(kind: type[Identifier]):
    def parse(text: str) -> Identifier:
        try:
            return kind.parse(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    return parse


def _timestamp_arg(text: str):
    try:
        parsed = parse_iso_utc(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ISO timestamp: {text!r}") from exc
    if parsed is None:
        raise argparse.ArgumentTypeError("timestamp must not be empty")
    return parsed


def _emit(item: Any) -> None:
    print(json.dumps(item.to_wire(), ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="guilded-client")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--print-config", action="store_true", help="Print effective config and exit")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p = sub.add_parser("channel", help="Show one channel.")
    p.add_argument("channel", type=_id_arg(ChannelId))

    p = sub.add_parser("send", help="Post a chat message.")
    p.add_argument("channel", type=_id_arg(ChannelId))
    p.add_argument("content")
    p.add_argument("--private", action="store_true", help="Only visible to mentioned users.")
    p.add_argument("--silent", action="store_true", help="Do not notify mentioned users.")
    p.add_argument("--reply", type=_id_arg(MessageId), action="append", default=[], metavar="MESSAGE_ID")

    p = sub.add_parser("messages", help="List channel messages, newest first.")
    p.add_argument("channel", type=_id_arg(ChannelId))
    p.add_argument("--before", type=_timestamp_arg, help="ISO timestamp (for example: 2026-03-01T00:00:00Z).")
    p.add_argument("--after", type=_timestamp_arg, help="ISO timestamp.")
    p.add_argument("--limit", type=int)
    p.add_argument("--private", action="store_true", help="Include private messages.")
    p.add_argument("--all", action="store_true", help="Follow pages until the channel is exhausted.")

    p = sub.add_parser("docs", help="List docs in a docs channel.")
    p.add_argument("channel", type=_id_arg(ChannelId))
    p.add_argument("--before", type=_timestamp_arg)
    p.add_argument("--limit", type=int)
    p.add_argument("--all", action="store_true", help="Follow pages until the channel is exhausted.")

    p = sub.add_parser("members", help="List server members.")
    p.add_argument("server", type=_id_arg(ServerId))

    p = sub.add_parser("bans", help="List server bans.")
    p.add_argument("server", type=_id_arg(ServerId))

    p = sub.add_parser("ban", help="Ban a user from a server.")
    p.add_argument("server", type=_id_arg(ServerId))
    p.add_argument("user", type=_id_arg(UserId))
    p.add_argument("--reason", default="")

    return parser


async def _run(args: argparse.Namespace, client: GuildedClient) -> None:
    if args.command == "channel":
        _emit(await client.get_channel(args.channel).send())
        return

    if args.command == "send":
        request = client.send_message(args.channel, args.content)
        if args.private:
            request = request.private()
        if args.silent:
            request = request.silent()
        for reply in args.reply:
            request = request.add_reply(reply)
        _emit(await request.send())
        return

    if args.command in ("messages", "docs"):
        if args.command == "messages":
            request = client.get_messages(args.channel)
            if args.after is not None:
                request = request.after(args.after)
            if args.private:
                request = request.private()
        else:
            request = client.get_docs(args.channel)
        if args.before is not None:
            request = request.before(args.before)
        if args.limit is not None:
            request = request.limit(args.limit)
        if args.all:
            async for item in request.stream():
                _emit(item)
        else:
            for item in await request.send():
                _emit(item)
        return

    if args.command == "members":
        for member in await client.get_members(args.server).send():
            _emit(member)
        return

    if args.command == "bans":
        for ban in await client.get_bans(args.server).send():
            _emit(ban)
        return

    if args.command == "ban":
        request = client.ban_user(args.server, args.user)
        if args.reason:
            request = request.reason(args.reason)
        _emit(await request.send())
        return


async def _main_async(
    args: argparse.Namespace, settings: Settings, transport: Optional[httpx.AsyncBaseTransport]
) -> None:
    async with GuildedClient.from_settings(settings, transport=transport) as client:
        await _run(args, client)


def main(argv: list[str] | None = None, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.print_config and args.command is None:
        parser.error("a command is required")

    settings = Settings()
    setup_logging(settings.log_level)

    if args.print_config:
        _print_effective_config(settings)
        return

    logger.debug("Running %s against %s", args.command, settings.guilded_api_base)
    try:
        asyncio.run(_main_async(args, settings, transport))
    except GuildedError as exc:
        raise SystemExit(f"error: {exc}") from exc
