from __future__ import annotations

from typing import Any, Optional

from ..ids import ChannelId, ListItemId
from ..models import ListItem, ListItemSummary
from ..transport import GuildedAPI
from .base import RequestBuilder, path, require


class CreateListItem(RequestBuilder[ListItem]):
    method = "POST"
    envelope = "listItem"
    result = ListItem

    def __init__(self, api: GuildedAPI, channel: ChannelId, message: str):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._message = require(message, str, "message")
        self._note: Optional[str] = None

    def note(self, content: str) -> CreateListItem:
        return self._with(note=require(content, str, "note"))

    def path(self) -> str:
        return path("channels", self._channel, "items")

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self._message}
        if self._note is not None:
            body["note"] = {"content": self._note}
        return body


class GetListItems(RequestBuilder[list[ListItemSummary]]):
    envelope = "listItems"
    result = list[ListItemSummary]

    def __init__(self, api: GuildedAPI, channel: ChannelId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")

    def path(self) -> str:
        return path("channels", self._channel, "items")


class GetListItem(RequestBuilder[ListItem]):
    envelope = "listItem"
    result = ListItem

    def __init__(self, api: GuildedAPI, channel: ChannelId, item: ListItemId):
        super().__init__(api)
        self._channel = require(channel, ChannelId, "channel")
        self._item = require(item, ListItemId, "item")

    def path(self) -> str:
        return path("channels", self._channel, "items", self._item)


class UpdateListItem(GetListItem):
    method = "PUT"

    def __init__(self, api: GuildedAPI, channel: ChannelId, item: ListItemId, message: str):
        super().__init__(api, channel, item)
        self._message = require(message, str, "message")
        self._note: Optional[str] = None

    def note(self, content: str) -> UpdateListItem:
        return self._with(note=require(content, str, "note"))

    def body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self._message}
        if self._note is not None:
            body["note"] = {"content": self._note}
        return body


class DeleteListItem(GetListItem):
    method = "DELETE"
    envelope = None


class CompleteListItem(GetListItem):
    method = "POST"
    envelope = None

    def path(self) -> str:
        return path("channels", self._channel, "items", self._item, "complete")


class UncompleteListItem(CompleteListItem):
    method = "DELETE"
