from __future__ import annotations

from typing import Any

from pydantic import StrictStr

from ..ids import RoleId, ServerId, UserId
from ..models import ServerMember, ServerMemberSummary, SocialLink, SocialMediaType
from ..transport import GuildedAPI
from .base import RequestBuilder, path, require


class _MemberRequest(RequestBuilder[Any]):
    def __init__(self, api: GuildedAPI, server: ServerId, user: UserId):
        super().__init__(api)
        self._server = require(server, ServerId, "server")
        self._user = require(user, UserId, "user")

    def path(self) -> str:
        return path("servers", self._server, "members", self._user)


class GetMember(_MemberRequest):
    envelope = "member"
    result = ServerMember


class KickMember(_MemberRequest):
    method = "DELETE"


class UpdateNickname(_MemberRequest):
    """Set a member's nickname; ``send()`` returns the nickname now in effect."""

    method = "PUT"
    envelope = "nickname"
    result = StrictStr

    def __init__(self, api: GuildedAPI, server: ServerId, user: UserId, nickname: str):
        super().__init__(api, server, user)
        self._nickname = require(nickname, str, "nickname")

    def path(self) -> str:
        return super().path() + path("nickname")

    def body(self) -> dict[str, Any]:
        return {"nickname": self._nickname}


class DeleteNickname(_MemberRequest):
    method = "DELETE"

    def path(self) -> str:
        return super().path() + path("nickname")


class GetMembers(RequestBuilder[list[ServerMemberSummary]]):
    envelope = "members"
    result = list[ServerMemberSummary]

    def __init__(self, api: GuildedAPI, server: ServerId):
        super().__init__(api)
        self._server = require(server, ServerId, "server")

    def path(self) -> str:
        return path("servers", self._server, "members")


class GetMemberRoles(_MemberRequest):
    envelope = "roleIds"
    result = list[RoleId]

    def path(self) -> str:
        return super().path() + path("roles")


class AssignRole(_MemberRequest):
    method = "PUT"

    def __init__(self, api: GuildedAPI, server: ServerId, user: UserId, role: RoleId):
        super().__init__(api, server, user)
        self._role = require(role, RoleId, "role")

    def path(self) -> str:
        return super().path() + path("roles", self._role)


class RemoveRole(AssignRole):
    method = "DELETE"


class GetSocialLink(_MemberRequest):
    envelope = "socialLink"
    result = SocialLink

    def __init__(self, api: GuildedAPI, server: ServerId, user: UserId, link_type: SocialMediaType):
        super().__init__(api, server, user)
        self._link_type = SocialMediaType(link_type)

    def path(self) -> str:
        return super().path() + path("social-links", self._link_type.value)
