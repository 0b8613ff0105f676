"""Request options, responses and the dispatch component."""

from .options import AccessCondition, AccessConditionType, FeedOptions, RequestOptions
from .response import DispatchResponse, FeedResponse, ResourceResponse
from .client_context import ClientContext, NULL_PARTITION_KEY, UNDEFINED_PARTITION_KEY

__all__ = [
    "AccessCondition",
    "AccessConditionType",
    "ClientContext",
    "DispatchResponse",
    "FeedOptions",
    "FeedResponse",
    "RequestOptions",
    "ResourceResponse",
    "NULL_PARTITION_KEY",
    "UNDEFINED_PARTITION_KEY",
]
