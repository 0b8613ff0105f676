"""
Response wrappers.

`DispatchResponse` is what the dispatch layer hands back to the facades.
`ResourceResponse` and `FeedResponse` are what the facades hand back to
callers.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from ..constants import HttpHeaders

T = TypeVar("T")


def _request_charge(headers: Dict[str, str]) -> float:
    try:
        return float(headers.get(HttpHeaders.REQUEST_CHARGE, 0) or 0)
    except ValueError:
        return 0.0


@dataclass
class DispatchResponse:
    """Decoded result and headers of one HTTP exchange."""

    result: Any
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class ResourceResponse(Generic[T]):
    """Body, headers and handle of a single resource.

    Attributes:
        body: Parsed resource definition, or None after a delete
        headers: Response headers (lower-cased names)
        ref: Handle to the resource
    """

    body: Optional[T]
    headers: Dict[str, str] = field(default_factory=dict)
    ref: Any = None

    @property
    def etag(self) -> Optional[str]:
        return self.headers.get(HttpHeaders.ETAG)

    @property
    def request_charge(self) -> float:
        return _request_charge(self.headers)

    @property
    def activity_id(self) -> Optional[str]:
        return self.headers.get(HttpHeaders.ACTIVITY_ID)

    @property
    def session_token(self) -> Optional[str]:
        return self.headers.get(HttpHeaders.SESSION_TOKEN)


@dataclass
class FeedResponse(Generic[T]):
    """One page (or a drained set of pages) of a feed.

    Attributes:
        resources: Resources in the page
        headers: Headers of the last page fetched
        continuation: Token for the next page, None when the feed is drained
    """

    resources: List[T] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)
    continuation: Optional[str] = None

    @property
    def has_more_results(self) -> bool:
        return self.continuation is not None

    @property
    def request_charge(self) -> float:
        return _request_charge(self.headers)

    def __len__(self) -> int:
        return len(self.resources)

    def __iter__(self):
        return iter(self.resources)
