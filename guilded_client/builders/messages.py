from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..ids import ChannelId, MessageId
from ..models import ChatEmbed, ChatMessage
from ..transport import GuildedAPI
from ..util import format_cursor
from .base import PageRequest, RequestBuilder, path, require


class CreateMessage(RequestBuilder[ChatMessage]):
    method = "POST"
    envelope = "message"
    result = ChatMessage

    def __init__(self, api: GuildedAPI, channel: ChannelId, content: str):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._content = require(content, str, "content")
        self._embeds: tuple[ChatEmbed, ...] = ()
        self._replies: tuple[MessageId, ...] = ()
        self._is_private: Optional[bool] = None
        self._is_silent: Optional[bool] = None

    def private(self, is_private: bool = True) -> CreateMessage:
        return self._with(is_private=bool(is_private))

    def silent(self, is_silent: bool = True) -> CreateMessage:
        return self._with(is_silent=bool(is_silent))

    def add_reply(self, message: MessageId) -> CreateMessage:
        require(message, MessageId, "message")
        return self._with(replies=self._replies + (message,))

    def add_embed(self, embed: ChatEmbed) -> CreateMessage:
        require(embed, ChatEmbed, "embed")
        return self._with(embeds=self._embeds + (embed,))

    def path(self) -> str:
        return path("channels", self._channel, "messages")

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"content": self._content}
        if self._embeds:
            body["embeds"] = [embed.to_wire() for embed in self._embeds]
        if self._is_private is not None:
            body["isPrivate"] = self._is_private
        if self._is_silent is not None:
            body["isSilent"] = self._is_silent
        if self._replies:
            body["replyMessageIds"] = [str(reply) for reply in self._replies]
        return body


class GetMessages(PageRequest[ChatMessage]):
    """
    One page of channel messages, newest first.

    ``stream()`` keeps ``after``, ``limit`` and ``private`` on every page and
    moves ``before`` back to the oldest message seen.
    """

    envelope = "messages"
    result = list[ChatMessage]

    def __init__(self, api: GuildedAPI, channel: ChannelId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._after: Optional[datetime] = None
        self._private: Optional[bool] = None

    def after(self, cursor: datetime) -> GetMessages:
        return self._with(after=require(cursor, datetime, "after"))

    def private(self, include_private: bool = True) -> GetMessages:
        return self._with(private=bool(include_private))

    def path(self) -> str:
        return path("channels", self._channel, "messages")

    def query(self) -> Optional[dict[str, Any]]:
        params = super().query() or {}
        if self._after is not None:
            params["after"] = format_cursor(self._after)
        if self._private is not None:
            params["private"] = self._private
        return params or None


class GetMessage(RequestBuilder[ChatMessage]):
    envelope = "message"
    result = ChatMessage

    def __init__(self, api: GuildedAPI, channel: ChannelId, message: MessageId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._message = require(message, MessageId, "message")

    def path(self) -> str:
        return path("channels", self._channel, "messages", self._message)


class UpdateMessage(GetMessage):
    method = "PUT"

    def __init__(self, api: GuildedAPI, channel: ChannelId, message: MessageId, content: str):
        super().__init__(api, channel, message)
        self._content = require(content, str, "content")
        self._embeds: tuple[ChatEmbed, ...] = ()

    def add_embed(self, embed: ChatEmbed) -> UpdateMessage:
        require(embed, ChatEmbed, "embed")
        return self._with(embeds=self._embeds + (embed,))

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"content": self._content}
        if self._embeds:
            body["embeds"] = [embed.to_wire() for embed in self._embeds]
        return body


class DeleteMessage(GetMessage):
    method = "DELETE"
    envelope = None
