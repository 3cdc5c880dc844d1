from __future__ import annotations

import copy
from datetime import datetime
from typing import Any, ClassVar, Generic, Optional, TypeVar

from ..errors import RequestAlreadySentError
from ..models import unwrap
from ..pagination import PaginatedStream
from ..transport import GuildedAPI
from ..util import format_cursor, path_segment

T = TypeVar("T")
B = TypeVar("B", bound="RequestBuilder[Any]")


def require(value: Any, expected: Any, name: str) -> Any:
    """Type-check one required argument; ``bool`` never passes as ``int``."""
    if isinstance(value, bool) and expected is int:
        ok = False
    else:
        ok = isinstance(value, expected)
    if not ok:
        expected_name = getattr(expected, "__name__", None) or str(expected)
        raise TypeError(f"{name} must be {expected_name}, got {type(value).__name__}")
    return value


def path(*segments: Any) -> str:
    """``path("channels", channel_id, "messages")`` -> ``/channels/<id>/messages``."""
    return "".join("/" + path_segment(segment) for segment in segments)


class RequestBuilder(Generic[T]):
    """
    One API operation.

    Required parameters are fixed at construction. Optional parameters are set
    with fluent setters, each of which returns a new builder and leaves the
    receiver untouched. ``send()`` performs the request exactly once; after
    that the builder is sealed and any further use raises
    ``RequestAlreadySentError``.

    Subclasses describe the request with ``method``, ``path()``, ``query()`` and
    ``body()``, and the response with ``envelope`` (the single key wrapping the
    result) and ``result`` (the type it decodes to). Without an ``envelope`` the
    operation is an acknowledgement and ``send()`` returns ``None``.
    """

    method: ClassVar[str] = "GET"
    envelope: ClassVar[Optional[str]] = None
    result: ClassVar[Any] = None

    def __init__(self, api: GuildedAPI):
        self._api = api
        self._sent = False

    def _ensure_unsent(self) -> None:
        if self._sent:
            raise RequestAlreadySentError(f"{type(self).__name__} has already been sent.")

    def _seal(self) -> None:
        self._ensure_unsent()
        self._sent = True

    def _with(self: B, **changes: Any) -> B:
        self._ensure_unsent()
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, f"_{name}", value)
        return clone

    def path(self) -> str:
        raise NotImplementedError

    def query(self) -> Optional[dict[str, Any]]:
        return None

    def body(self) -> Optional[dict[str, Any]]:
        return None

    def decode(self, payload: Any) -> T:
        if self.envelope is None:
            return None  # type: ignore[return-value]
        return unwrap(payload, self.envelope, self.result)

    async def send(self) -> T:
        self._seal()
        payload = await self._api.request(self.method, self.path(), params=self.query(), json=self.body())
        return self.decode(payload)

    def __repr__(self) -> str:
        state = "sent" if self._sent else "pending"
        return f"<{type(self).__name__} {self.method} {self.path()} {state}>"


class PageRequest(RequestBuilder[list[T]]):
    """
    A list operation that pages backwards in time with a ``before`` cursor.

    ``send()`` fetches one page; ``stream()`` walks every page.
    """

    def __init__(self, api: GuildedAPI):
        super().__init__(api)
        self._before: Optional[datetime] = None
        self._limit: Optional[int] = None

    def before(self: B, cursor: datetime) -> B:
        require(cursor, datetime, "before")
        return self._with(before=cursor)

    def limit(self: B, limit: int) -> B:
        require(limit, int, "limit")
        return self._with(limit=limit)

    def query(self) -> Optional[dict[str, Any]]:
        params: dict[str, Any] = {}
        if self._before is not None:
            params["before"] = format_cursor(self._before)
        if self._limit is not None:
            params["limit"] = self._limit
        return params or None

    def fresh(self: B) -> B:
        """An unsent copy carrying the same parameters."""
        clone = copy.copy(self)
        clone._sent = False
        return clone

    def stream(self) -> PaginatedStream[T]:
        self._seal()
        return PaginatedStream(self.fresh())
