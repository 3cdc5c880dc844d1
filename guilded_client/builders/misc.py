"""Reactions, XP awards and group membership."""

from __future__ import annotations

from typing import Any

from pydantic import StrictInt

from ..ids import ChannelId, ContentId, EmoteId, GroupId, RoleId, ServerId, UserId
from ..transport import GuildedAPI
from .base import RequestBuilder, path, require


class AddReaction(RequestBuilder[None]):
    method = "PUT"

    def __init__(self, api: GuildedAPI, channel: ChannelId, content: ContentId, emote: EmoteId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._content = require(content, ContentId, "content")
        self._emote = require(emote, EmoteId, "emote")

    def path(self) -> str:
        return path("channels", self._channel, "content", self._content, "emotes", self._emote)


class AwardMember(RequestBuilder[int]):
    """Award XP to a member; ``send()`` returns the member's new XP total."""

    method = "POST"
    envelope = "total"
    result = StrictInt

    def __init__(self, api: GuildedAPI, server: ServerId, user: UserId, amount: int):
        super().__init__(api)
        self._server = require(server, ServerId, "server")
        self._user = require(user, UserId, "user")
        self._amount = require(amount, int, "amount")

    def path(self) -> str:
        return path("servers", self._server, "members", self._user, "xp")

    def body(self) -> dict[str, Any]:
        return {"amount": self._amount}


class AwardRole(RequestBuilder[None]):
    method = "POST"

    def __init__(self, api: GuildedAPI, server: ServerId, role: RoleId, amount: int):
        super().__init__(api)
        self._server = require(server, ServerId, "server")
        self._role = require(role, RoleId, "role")
        self._amount = require(amount, int, "amount")

    def path(self) -> str:
        return path("servers", self._server, "roles", self._role, "xp")

    def body(self) -> dict[str, Any]:
        return {"amount": self._amount}


class AddGroupMember(RequestBuilder[None]):
    method = "PUT"

    def __init__(self, api: GuildedAPI, group: GroupId, user: UserId):
        super().__init__(api)
        self._group = require(group, GroupId, "group")
        self._user = require(user, UserId, "user")

    def path(self) -> str:
        return path("groups", self._group, "members", self._user)


class DeleteGroupMember(AddGroupMember):
    method = "DELETE"
