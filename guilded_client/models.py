"""
Resource models.

Every model is strict: a field the API sends that is not declared here fails
decoding, so schema drift shows up as a ``GuildedDecodeError`` instead of
silently dropped data.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Any, List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, ValidationError, create_model, field_validator
from pydantic.alias_generators import to_camel

from .errors import GuildedDecodeError
from .ids import (
    CategoryId,
    ChannelId,
    DocId,
    EmoteId,
    ForumThreadId,
    GroupId,
    ListItemId,
    MessageId,
    RoleId,
    ServerId,
    UserId,
    WebhookId,
)
from .util import as_utc, is_http_url


class GuildedModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ChannelType(str, Enum):
    ANNOUNCEMENTS = "announcements"
    CHAT = "chat"
    CALENDAR = "calendar"
    FORUMS = "forums"
    MEDIA = "media"
    DOCS = "docs"
    VOICE = "voice"
    LIST = "list"
    SCHEDULING = "scheduling"
    STREAM = "stream"


class MessageType(str, Enum):
    DEFAULT = "default"
    SYSTEM = "system"


class UserType(str, Enum):
    BOT = "bot"
    USER = "user"


class SocialMediaType(str, Enum):
    ROBLOX = "roblox"
    TWITCH = "twitch"
    BLIZZARD = "bnet"
    STEAM = "steam"
    XBOX = "xbox"
    PSN = "psn"
    ORIGIN = "origin"
    NINTENDO = "switch"
    TWITTER = "twitter"
    YOUTUBE = "youtube"
    PATREON = "patreon"

    def __str__(self) -> str:
        return self.value


# --- Channels ---------------------------------------------------------------


class ServerChannel(GuildedModel):
    id: ChannelId
    # Decides which content routes apply (chat -> messages, docs -> docs, ...).
    channel_type: ChannelType = Field(alias="type")
    name: str
    topic: Optional[str] = None
    created_at: AwareDatetime
    created_by: UserId
    updated_at: Optional[AwareDatetime] = None
    server_id: ServerId
    parent_id: Optional[ChannelId] = None
    category_id: Optional[CategoryId] = None
    group_id: GroupId
    is_public: bool = False
    archived_by: Optional[UserId] = None
    archived_at: Optional[AwareDatetime] = None


# --- Embeds -----------------------------------------------------------------
# Embed keys are snake_case on the wire (``icon_url``), unlike everything else.


class _EmbedPart(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def _check_url(value: Optional[str]) -> Optional[str]:
    if value is not None and not is_http_url(value):
        raise ValueError(f"expected an absolute http(s) URL, got {value!r}")
    return value


class EmbedFooter(_EmbedPart):
    text: str
    icon_url: Optional[str] = None

    @field_validator("icon_url")
    @classmethod
    def _validate_icon_url(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)


class EmbedThumbnail(_EmbedPart):
    url: str

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)


class EmbedImage(_EmbedPart):
    url: str

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)


class EmbedAuthor(_EmbedPart):
    name: Optional[str] = None
    url: Optional[str] = None
    icon_url: Optional[str] = None

    @field_validator("url", "icon_url")
    @classmethod
    def _validate_urls(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)


class EmbedField(_EmbedPart):
    name: str
    value: str
    inline: bool = False


class ChatEmbed(_EmbedPart):
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    color: Optional[int] = Field(None, ge=0, le=0xFFFFFF)
    footer: Optional[EmbedFooter] = None
    timestamp: Optional[datetime] = None
    thumbnail: Optional[EmbedThumbnail] = None
    image: Optional[EmbedImage] = None
    author: Optional[EmbedAuthor] = None
    fields: List[EmbedField] = []

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: Optional[str]) -> Optional[str]:
        return _check_url(value)

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None

    def to_wire(self) -> dict[str, Any]:
        data = super().to_wire()
        if not data.get("fields"):
            data.pop("fields", None)
        return data


# --- Messages ---------------------------------------------------------------


class ChatMessage(GuildedModel):
    id: MessageId
    message_type: MessageType = Field(alias="type")
    server_id: Optional[ServerId] = None
    channel_id: Optional[ChannelId] = None
    content: str
    embeds: List[ChatEmbed] = []
    reply_message_ids: List[MessageId] = []
    is_private: bool = False
    is_silent: bool = False
    created_at: AwareDatetime
    # Absent when the message was posted through a webhook.
    created_by: Optional[UserId] = None
    created_by_webhook_id: Optional[WebhookId] = None
    updated_at: Optional[AwareDatetime] = None


# --- Docs and forums ----------------------------------------------------------


class Doc(GuildedModel):
    id: DocId
    server_id: ServerId
    channel_id: ChannelId
    title: str
    content: str
    created_at: AwareDatetime
    created_by: UserId
    updated_at: Optional[AwareDatetime] = None
    updated_by: Optional[UserId] = None


class ForumThread(GuildedModel):
    id: ForumThreadId
    server_id: ServerId
    channel_id: ChannelId
    title: Optional[str] = None
    content: Optional[str] = None
    created_at: AwareDatetime
    created_by: UserId
    created_by_webhook_id: Optional[WebhookId] = None
    updated_at: Optional[AwareDatetime] = None


# --- Lists ------------------------------------------------------------------


class ListItemNoteSummary(GuildedModel):
    created_at: AwareDatetime
    created_by: UserId
    updated_at: Optional[AwareDatetime] = None
    updated_by: Optional[UserId] = None


class ListItemNote(ListItemNoteSummary):
    content: str


class ListItemSummary(GuildedModel):
    """List item as returned by the collection endpoint (note content omitted)."""

    id: ListItemId
    server_id: ServerId
    channel_id: ChannelId
    message: str
    created_at: AwareDatetime
    created_by: UserId
    created_by_webhook_id: Optional[WebhookId] = None
    updated_at: Optional[AwareDatetime] = None
    updated_by: Optional[UserId] = None
    parent_list_item_id: Optional[ListItemId] = None
    completed_at: Optional[AwareDatetime] = None
    completed_by: Optional[UserId] = None
    note: Optional[ListItemNoteSummary] = None


class ListItem(ListItemSummary):
    note: Optional[ListItemNote] = None


# --- Users, members, bans ---------------------------------------------------


class UserSummary(GuildedModel):
    id: UserId
    user_type: UserType = Field(UserType.USER, alias="type")
    name: str
    avatar: Optional[str] = None


class User(UserSummary):
    banner: Optional[str] = None
    created_at: AwareDatetime


class ServerMemberSummary(GuildedModel):
    user: UserSummary
    role_ids: frozenset[RoleId]


class ServerMember(GuildedModel):
    user: User
    role_ids: frozenset[RoleId]
    nickname: Optional[str] = None
    joined_at: AwareDatetime


class ServerMemberBan(GuildedModel):
    user: UserSummary
    reason: Optional[str] = None
    created_by: UserId
    created_at: AwareDatetime


# --- Reactions and social links ---------------------------------------------


class Reaction(GuildedModel):
    id: EmoteId
    server_id: Optional[ServerId] = None
    created_at: AwareDatetime
    created_by: UserId
    created_by_webhook_id: Optional[WebhookId] = None


class SocialLink(GuildedModel):
    link_type: SocialMediaType = Field(alias="type")
    user_id: UserId
    handle: Optional[str] = None
    service_id: Optional[str] = None
    created_at: Optional[AwareDatetime] = None


# --- Envelopes --------------------------------------------------------------


@lru_cache(maxsize=None)
def _envelope_model(key: str, annotation: Any) -> type[BaseModel]:
    return create_model(
        f"{key[:1].upper()}{key[1:]}Envelope",
        __config__=ConfigDict(extra="forbid", frozen=True),
        inner=(annotation, Field(alias=key)),
    )


def unwrap(payload: Any, key: str, annotation: Any) -> Any:
    """
    Validate a single-key response envelope and return what it wraps.

    ``{"message": {...}}`` with ``key="message"`` yields a ``ChatMessage``; any
    other key next to it, or a missing key, is a decode failure.
    """
    try:
        envelope = _envelope_model(key, annotation).model_validate(payload)
    except ValidationError as exc:
        raise GuildedDecodeError(f"Unexpected {key!r} response: {exc}", payload=payload) from exc
    return envelope.inner
