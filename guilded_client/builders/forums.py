from __future__ import annotations

from typing import Any

from ..ids import ChannelId
from ..models import ForumThread
from ..transport import GuildedAPI
from .base import RequestBuilder, path, require


class CreateForumThread(RequestBuilder[ForumThread]):
    method = "POST"
    envelope = "forumThread"
    result = ForumThread

    def __init__(self, api: GuildedAPI, channel: ChannelId, title: str, content: str):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._title = require(title, str, "title")
        self._content = require(content, str, "content")

    def path(self) -> str:
        return path("channels", self._channel, "forum")

    def body(self) -> dict[str, Any]:
        return {"title": self._title, "content": self._content}
