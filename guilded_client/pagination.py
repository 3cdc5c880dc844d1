from __future__ import annotations

import enum
import logging
from collections import deque
from datetime import datetime
from typing import Any, Deque, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StreamState(enum.Enum):
    FETCHING = "fetching"
    TRANSITION = "transition"
    DRAINING = "draining"
    DONE = "done"


class PaginatedStream(Generic[T]):
    """
    Async iterator over every item of a paged list operation.

    Pages are fetched lazily. Each follow-up page is the first request with
    ``before`` set to the ``created_at`` of the last item seen; the stream ends
    on the first empty page. A failed fetch is raised to the consumer and ends
    the stream.

    The stream is forward-only and must be consumed by one task at a time.
    """

    def __init__(self, template: Any):
        # ``template`` is an unsent page request; it is never sent itself, only
        # copied for each page.
        self._template = template
        self._state = StreamState.FETCHING
        self._request: Any = template.fresh()
        self._page: Deque[T] = deque()
        self._cursor: Optional[datetime] = None
        self._pages = 0

    @property
    def state(self) -> StreamState:
        return self._state

    def __aiter__(self) -> "PaginatedStream[T]":
        return self

    async def __anext__(self) -> T:
        while True:
            if self._state is StreamState.TRANSITION:
                raise RuntimeError("PaginatedStream advanced while a page fetch is in flight.")
            if self._state is StreamState.DONE:
                raise StopAsyncIteration

            if self._state is StreamState.FETCHING:
                request, self._request = self._request, None
                self._state = StreamState.TRANSITION
                try:
                    page = await request.send()
                except BaseException:
                    self._state = StreamState.DONE
                    raise
                self._pages += 1
                logger.debug("Fetched page %s (%s items)", self._pages, len(page))
                self._page = deque(page)
                self._cursor = None
                self._state = StreamState.DRAINING
                continue

            if self._page:
                item = self._page.popleft()
                self._cursor = item.created_at
                return item

            if self._cursor is None:
                self._state = StreamState.DONE
                raise StopAsyncIteration
            self._request = self._template.before(self._cursor)
            self._state = StreamState.FETCHING

    async def collect(self) -> list[T]:
        return [item async for item in self]
