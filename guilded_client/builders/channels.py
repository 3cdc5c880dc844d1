from __future__ import annotations

from typing import Any, Optional

from ..ids import CategoryId, ChannelId, GroupId, ServerId
from ..models import ChannelType, ServerChannel
from ..transport import GuildedAPI
from .base import RequestBuilder, path, require


class CreateChannel(RequestBuilder[ServerChannel]):
    method = "POST"
    envelope = "channel"
    result = ServerChannel

    def __init__(self, api: GuildedAPI, server: ServerId, name: str, channel_type: ChannelType):
        super().__init__(api)
        self._server = require(server, ServerId, "server")
        self._name = require(name, str, "name")
        self._channel_type = ChannelType(channel_type)
        self._topic: Optional[str] = None
        self._is_public: Optional[bool] = None
        self._group: Optional[GroupId] = None
        self._category: Optional[CategoryId] = None

    def topic(self, topic: str) -> CreateChannel:
        return self._with(topic=require(topic, str, "topic"))

    def public(self, is_public: bool = True) -> CreateChannel:
        return self._with(is_public=bool(is_public))

    def group(self, group: GroupId) -> CreateChannel:
        return self._with(group=require(group, GroupId, "group"))

    def category(self, category: CategoryId) -> CreateChannel:
        return self._with(category=require(category, CategoryId, "category"))

    def path(self) -> str:
        return path("channels")

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"name": self._name}
        if self._topic is not None:
            body["topic"] = self._topic
        if self._is_public is not None:
            body["isPublic"] = self._is_public
        body["type"] = self._channel_type.value
        body["serverId"] = self._server.value
        if self._group is not None:
            body["groupId"] = self._group.value
        if self._category is not None:
            body["categoryId"] = self._category.value
        return body


class GetChannel(RequestBuilder[ServerChannel]):
    envelope = "channel"
    result = ServerChannel

    def __init__(self, api: GuildedAPI, channel: ChannelId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")

    def path(self) -> str:
        return path("channels", self._channel)


class DeleteChannel(GetChannel):
    method = "DELETE"
    envelope = None
