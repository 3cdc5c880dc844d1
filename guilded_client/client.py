from __future__ import annotations

from typing import Optional

import httpx

from .builders import (
    AddGroupMember,
    AddReaction,
    AssignRole,
    AwardMember,
    AwardRole,
    BanUser,
    CompleteListItem,
    CreateChannel,
    CreateDoc,
    CreateForumThread,
    CreateListItem,
    CreateMessage,
    DeleteBan,
    DeleteChannel,
    DeleteDoc,
    DeleteGroupMember,
    DeleteListItem,
    DeleteMessage,
    DeleteNickname,
    GetBan,
    GetBans,
    GetChannel,
    GetDoc,
    GetDocs,
    GetListItem,
    GetListItems,
    GetMember,
    GetMemberRoles,
    GetMembers,
    GetMessage,
    GetMessages,
    GetSocialLink,
    KickMember,
    RemoveRole,
    UncompleteListItem,
    UpdateDoc,
    UpdateListItem,
    UpdateMessage,
    UpdateNickname,
)
from .config import DEFAULT_API_BASE, Settings
from .ids import (
    ChannelId,
    ContentId,
    DocId,
    EmoteId,
    GroupId,
    ListItemId,
    MessageId,
    RoleId,
    ServerId,
    UserId,
)
from .models import ChannelType, SocialMediaType
from .transport import GuildedAPI

API_BASE = DEFAULT_API_BASE


class GuildedClient:
    """
    Entry point for the Guilded REST API.

    Every operation method only builds a request; nothing touches the network
    until the returned builder's ``send()`` (or ``stream()``) is awaited::

        async with GuildedClient(token) as client:
            msg = await client.send_message(channel, "hello").silent().send()

    One client holds one HTTP connection pool and may have any number of
    requests in flight at once.
    """

    def __init__(
        self,
        token: str,
        *,
        api_base: str = API_BASE,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api = GuildedAPI(token=token, api_base=api_base, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> GuildedClient:
        return cls(
            settings.guilded_token,
            api_base=settings.guilded_api_base,
            timeout=settings.http_timeout,
            transport=transport,
        )

    @property
    def api(self) -> GuildedAPI:
        return self._api

    async def aclose(self) -> None:
        await self._api.aclose()

    async def __aenter__(self) -> GuildedClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # --- Channels -------------------------------------------------------------

    def create_channel(self, server: ServerId, name: str, channel_type: ChannelType) -> CreateChannel:
        return CreateChannel(self._api, server, name, channel_type)

    def get_channel(self, channel: ChannelId) -> GetChannel:
        return GetChannel(self._api, channel)

    def delete_channel(self, channel: ChannelId) -> DeleteChannel:
        return DeleteChannel(self._api, channel)

    # --- Messages -------------------------------------------------------------

    def send_message(self, channel: ChannelId, content: str) -> CreateMessage:
        return CreateMessage(self._api, channel, content)

    def get_messages(self, channel: ChannelId) -> GetMessages:
        return GetMessages(self._api, channel)

    def get_message(self, channel: ChannelId, message: MessageId) -> GetMessage:
        return GetMessage(self._api, channel, message)

    def update_message(self, channel: ChannelId, message: MessageId, content: str) -> UpdateMessage:
        return UpdateMessage(self._api, channel, message, content)

    def delete_message(self, channel: ChannelId, message: MessageId) -> DeleteMessage:
        return DeleteMessage(self._api, channel, message)

    # --- Members --------------------------------------------------------------

    def update_nickname(self, server: ServerId, user: UserId, nickname: str) -> UpdateNickname:
        return UpdateNickname(self._api, server, user, nickname)

    def delete_nickname(self, server: ServerId, user: UserId) -> DeleteNickname:
        return DeleteNickname(self._api, server, user)

    def get_member(self, server: ServerId, user: UserId) -> GetMember:
        return GetMember(self._api, server, user)

    def kick_member(self, server: ServerId, user: UserId) -> KickMember:
        return KickMember(self._api, server, user)

    def get_members(self, server: ServerId) -> GetMembers:
        return GetMembers(self._api, server)

    def get_social_link(self, server: ServerId, user: UserId, link_type: SocialMediaType) -> GetSocialLink:
        return GetSocialLink(self._api, server, user, link_type)

    # --- Bans -----------------------------------------------------------------

    def ban_user(self, server: ServerId, user: UserId) -> BanUser:
        return BanUser(self._api, server, user)

    def get_ban(self, server: ServerId, user: UserId) -> GetBan:
        return GetBan(self._api, server, user)

    def delete_ban(self, server: ServerId, user: UserId) -> DeleteBan:
        return DeleteBan(self._api, server, user)

    def get_bans(self, server: ServerId) -> GetBans:
        return GetBans(self._api, server)

    # --- Forums, lists, docs --------------------------------------------------

    def create_thread(self, channel: ChannelId, title: str, content: str) -> CreateForumThread:
        return CreateForumThread(self._api, channel, title, content)

    def create_list_item(self, channel: ChannelId, message: str) -> CreateListItem:
        return CreateListItem(self._api, channel, message)

    def get_list_items(self, channel: ChannelId) -> GetListItems:
        return GetListItems(self._api, channel)

    def get_list_item(self, channel: ChannelId, item: ListItemId) -> GetListItem:
        return GetListItem(self._api, channel, item)

    def update_list_item(self, channel: ChannelId, item: ListItemId, message: str) -> UpdateListItem:
        return UpdateListItem(self._api, channel, item, message)

    def delete_list_item(self, channel: ChannelId, item: ListItemId) -> DeleteListItem:
        return DeleteListItem(self._api, channel, item)

    def complete_list_item(self, channel: ChannelId, item: ListItemId) -> CompleteListItem:
        return CompleteListItem(self._api, channel, item)

    def uncomplete_list_item(self, channel: ChannelId, item: ListItemId) -> UncompleteListItem:
        return UncompleteListItem(self._api, channel, item)

    def create_doc(self, channel: ChannelId, title: str, content: str) -> CreateDoc:
        return CreateDoc(self._api, channel, title, content)

    def get_docs(self, channel: ChannelId) -> GetDocs:
        return GetDocs(self._api, channel)

    def get_doc(self, channel: ChannelId, doc: DocId) -> GetDoc:
        return GetDoc(self._api, channel, doc)

    def update_doc(self, channel: ChannelId, doc: DocId, title: str, content: str) -> UpdateDoc:
        return UpdateDoc(self._api, channel, doc, title, content)

    def delete_doc(self, channel: ChannelId, doc: DocId) -> DeleteDoc:
        return DeleteDoc(self._api, channel, doc)

    # --- Reactions, XP, groups, roles -----------------------------------------

    def add_reaction(self, channel: ChannelId, content: ContentId, emote: EmoteId) -> AddReaction:
        return AddReaction(self._api, channel, content, emote)

    def award_member(self, server: ServerId, user: UserId, amount: int) -> AwardMember:
        return AwardMember(self._api, server, user, amount)

    def award_role(self, server: ServerId, role: RoleId, amount: int) -> AwardRole:
        return AwardRole(self._api, server, role, amount)

    def add_group_member(self, group: GroupId, user: UserId) -> AddGroupMember:
        return AddGroupMember(self._api, group, user)

    def delete_group_member(self, group: GroupId, user: UserId) -> DeleteGroupMember:
        return DeleteGroupMember(self._api, group, user)

    def get_member_roles(self, server: ServerId, user: UserId) -> GetMemberRoles:
        return GetMemberRoles(self._api, server, user)

    def assign_role(self, server: ServerId, user: UserId, role: RoleId) -> AssignRole:
        return AssignRole(self._api, server, user, role)

    def remove_role(self, server: ServerId, user: UserId, role: RoleId) -> RemoveRole:
        return RemoveRole(self._api, server, user, role)
