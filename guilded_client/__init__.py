__version__ = "0.3.0"

from .client import API_BASE, GuildedClient
from .errors import (
    GuildedAPIError,
    GuildedDecodeError,
    GuildedError,
    IdentifierParseError,
    InvalidTokenError,
    RequestAlreadySentError,
)
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

__all__ = [
    "API_BASE",
    "CategoryId",
    "ChannelId",
    "DocId",
    "EmoteId",
    "ForumThreadId",
    "GroupId",
    "GuildedAPIError",
    "GuildedClient",
    "GuildedDecodeError",
    "GuildedError",
    "IdentifierParseError",
    "InvalidTokenError",
    "ListItemId",
    "MessageId",
    "RequestAlreadySentError",
    "RoleId",
    "ServerId",
    "UserId",
    "WebhookId",
    "__version__",
]
