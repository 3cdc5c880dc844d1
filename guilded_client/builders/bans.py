from __future__ import annotations

from typing import Any, Optional

from ..ids import ServerId, UserId
from ..models import ServerMemberBan
from ..transport import GuildedAPI
from .base import RequestBuilder, path, require


class GetBan(RequestBuilder[ServerMemberBan]):
    """A single ban. A user who is not banned is a 404, raised as ``GuildedAPIError``."""

    envelope = "serverMemberBan"
    result = ServerMemberBan

    def __init__(self, api: GuildedAPI, server: ServerId, user: UserId):
        super().__init__(api)
        self._server = require(server, ServerId, "server")
        self._user = require(user, UserId, "user")

    def path(self) -> str:
        return path("servers", self._server, "bans", self._user)


class BanUser(GetBan):
    method = "POST"

    def __init__(self, api: GuildedAPI, server: ServerId, user: UserId):
        super().__init__(api, server, user)
        self._reason: Optional[str] = None

    def reason(self, reason: str) -> BanUser:
        return self._with(reason=require(reason, str, "reason"))

    def body(self) -> dict[str, Any]:
        # The endpoint always takes a JSON object, possibly empty.
        if self._reason is None:
            return {}
        return {"reason": self._reason}


class DeleteBan(GetBan):
    method = "DELETE"
    envelope = None


class GetBans(RequestBuilder[list[ServerMemberBan]]):
    envelope = "serverMemberBans"
    result = list[ServerMemberBan]

    def __init__(self, api: GuildedAPI, server: ServerId):
        super().__init__(api)
        self._server = require(server, ServerId, "server")

    def path(self) -> str:
        return path("servers", self._server, "bans")
