from __future__ import annotations

from typing import Any

from ..ids import ChannelId, DocId
from ..models import Doc
from ..transport import GuildedAPI
from .base import PageRequest, RequestBuilder, path, require


class CreateDoc(RequestBuilder[Doc]):
    method = "POST"
    envelope = "doc"
    result = Doc

    def __init__(self, api: GuildedAPI, channel: ChannelId, title: str, content: str):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._title = require(title, str, "title")
        self._content = require(content, str, "content")

    def path(self) -> str:
        return path("channels", self._channel, "docs")

    def body(self) -> dict[str, Any]:
        return {"title": self._title, "content": self._content}


class GetDocs(PageRequest[Doc]):
    envelope = "docs"
    result = list[Doc]

    def __init__(self, api: GuildedAPI, channel: ChannelId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")

    def path(self) -> str:
        return path("channels", self._channel, "docs")


class GetDoc(RequestBuilder[Doc]):
    envelope = "doc"
    result = Doc

    def __init__(self, api: GuildedAPI, channel: ChannelId, doc: DocId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._doc = require(doc, DocId, "doc")

    def path(self) -> str:
        return path("channels", self._channel, "docs", self._doc)


class UpdateDoc(GetDoc):
    method = "PUT"

    def __init__(self, api: GuildedAPI, channel: ChannelId, doc: DocId, title: str, content: str):
        super().__init__(api, channel, doc)
        self._title = require(title, str, "title")
        self._content = require(content, str, "content")

    def body(self) -> dict[str, Any]:
        return {"title": self._title, "content": self._content}


class DeleteDoc(GetDoc):
    method = "DELETE"
    envelope = None
