from .bans import BanUser, DeleteBan, GetBan, GetBans
from .base import PageRequest, RequestBuilder
from .channels import CreateChannel, DeleteChannel, GetChannel
from .docs import CreateDoc, DeleteDoc, GetDoc, GetDocs, UpdateDoc
from .forums import CreateForumThread
from .lists import (
    CompleteListItem,
    CreateListItem,
    DeleteListItem,
    GetListItem,
    GetListItems,
    UncompleteListItem,
    UpdateListItem,
)
from .members import (
    AssignRole,
    DeleteNickname,
    GetMember,
    GetMemberRoles,
    GetMembers,
    GetSocialLink,
    KickMember,
    RemoveRole,
    UpdateNickname,
)
from .messages import CreateMessage, DeleteMessage, GetMessage, GetMessages, UpdateMessage
from .misc import AddGroupMember, AddReaction, AwardMember, AwardRole, DeleteGroupMember

__all__ = [
    "AddGroupMember",
    "AddReaction",
    "AssignRole",
    "AwardMember",
    "AwardRole",
    "BanUser",
    "CompleteListItem",
    "CreateChannel",
    "CreateDoc",
    "CreateForumThread",
    "CreateListItem",
    "CreateMessage",
    "DeleteBan",
    "DeleteChannel",
    "DeleteDoc",
    "DeleteGroupMember",
    "DeleteListItem",
    "DeleteMessage",
    "DeleteNickname",
    "GetBan",
    "GetBans",
    "GetChannel",
    "GetDoc",
    "GetDocs",
    "GetListItem",
    "GetListItems",
    "GetMember",
    "GetMemberRoles",
    "GetMembers",
    "GetMessage",
    "GetMessages",
    "GetSocialLink",
    "KickMember",
    "PageRequest",
    "RemoveRole",
    "RequestBuilder",
    "UncompleteListItem",
    "UpdateDoc",
    "UpdateListItem",
    "UpdateMessage",
    "UpdateNickname",
]
