"""
Query Iterator.

Paginated iteration over a feed. Pages are fetched lazily through a
fetch function supplied by the owning facade, following the
continuation token returned with each page.

Author: Cosmoskit Team
Date: 2026-10-18
"""

import inspect
from collections import deque
from typing import Any, Awaitable, Callable, Deque, Dict, Generic, Optional, TypeVar

from ..constants import HttpHeaders
from ..request.options import FeedOptions
from ..request.response import DispatchResponse, FeedResponse

T = TypeVar("T")

FetchFunction = Callable[[FeedOptions], Awaitable[DispatchResponse]]


class QueryIterator(Generic[T]):
    """Lazily fetches feed pages and yields their resources.

    Attributes:
        query: Query text or spec (None for a plain read feed)
        options: Feed options the iterator was created with
    """

    def __init__(
        self,
        client_context: Any,
        query: Any,
        options: Optional[FeedOptions],
        fetch_function: FetchFunction,
    ) -> None:
        self.client_context = client_context
        self.query = query
        self.options = options or FeedOptions()
        self._fetch_function = fetch_function
        self.reset()

    def reset(self) -> None:
        """Rewind to the first page."""
        self._continuation: Optional[str] = self.options.continuation
        self._buffer: Deque[T] = deque()
        self._exhausted = False
        self._last_headers: Dict[str, str] = {}

    def has_more_results(self) -> bool:
        """Whether buffered resources or unfetched pages remain."""
        return bool(self._buffer) or not self._exhausted

    async def _fetch_page(self) -> FeedResponse[T]:
        inner_options = self.options.model_copy(update={"continuation": self._continuation})
        response = await self._fetch_function(inner_options)

        self._last_headers = response.headers
        self._continuation = response.headers.get(HttpHeaders.CONTINUATION) or None
        self._exhausted = self._continuation is None

        return FeedResponse(
            resources=list(response.result or []),
            headers=response.headers,
            continuation=self._continuation,
        )

    async def _fill_buffer(self) -> bool:
        while not self._buffer and not self._exhausted:
            page = await self._fetch_page()
            self._buffer.extend(page.resources)
        return bool(self._buffer)

    async def fetch_next(self) -> FeedResponse[T]:
        """Fetch the next page.

        Resources already buffered by next_item() or current() are returned
        first as a page of their own.

        Returns:
            FeedResponse for the page; empty once the feed is drained
        """
        if self._buffer:
            resources = list(self._buffer)
            self._buffer.clear()
            return FeedResponse(
                resources=resources,
                headers=self._last_headers,
                continuation=self._continuation,
            )
        if self._exhausted:
            return FeedResponse(resources=[], headers=self._last_headers, continuation=None)
        return await self._fetch_page()

    async def fetch_all(self) -> FeedResponse[T]:
        """Fetch every page from the start of the feed.

        Returns:
            FeedResponse holding all resources and the headers of the last page
        """
        self.reset()
        resources = []
        while not self._exhausted:
            page = await self._fetch_page()
            resources.extend(page.resources)
        return FeedResponse(resources=resources, headers=self._last_headers, continuation=None)

    async def next_item(self) -> Optional[T]:
        """Return the next resource, or None once the feed is drained."""
        if await self._fill_buffer():
            return self._buffer.popleft()
        return None

    async def current(self) -> Optional[T]:
        """Return the next resource without consuming it."""
        if await self._fill_buffer():
            return self._buffer[0]
        return None

    async def for_each(self, callback: Callable[[T, Dict[str, str]], Any]) -> None:
        """Call callback(resource, headers) for every resource from the start.

        Iteration stops early when the callback returns False. Coroutine
        callbacks are awaited.
        """
        self.reset()
        while await self._fill_buffer():
            result = callback(self._buffer.popleft(), self._last_headers)
            if inspect.isawaitable(result):
                result = await result
            if result is False:
                break

    async def __aiter__(self):
        """Yield every resource from the first page, like for_each."""
        self.reset()
        while await self._fill_buffer():
            yield self._buffer.popleft()
