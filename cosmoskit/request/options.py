"""
Request and feed options.

Pydantic models for per-call options. The dispatch layer turns each set
field into the matching x-ms-* request header.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..core.config_manager import ConsistencyLevel


class AccessConditionType(str, Enum):
    """Optimistic concurrency check applied to a write or read."""
    IF_MATCH = "IfMatch"
    IF_NONE_MATCH = "IfNoneMatch"


class AccessCondition(BaseModel):
    """ETag condition sent as If-Match or If-None-Match.

    Attributes:
        type: Condition type
        condition: ETag value
    """

    type: AccessConditionType = AccessConditionType.IF_MATCH
    condition: str

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class RequestOptions(BaseModel):
    """Options for single-resource operations.

    Attributes:
        partition_key: Partition key value of the target item
        access_condition: ETag precondition
        consistency_level: Consistency override for this request
        session_token: Session token for session consistency
        offer_throughput: Provisioned RU/s for database and container creation
        pre_trigger_include: Pre-triggers to run
        post_trigger_include: Post-triggers to run
        disable_automatic_id_generation: Reject items without an id
        enable_script_logging: Capture console output of stored procedures
    """

    partition_key: Optional[Any] = None
    access_condition: Optional[AccessCondition] = None
    consistency_level: Optional[ConsistencyLevel] = None
    session_token: Optional[str] = None
    offer_throughput: Optional[int] = Field(default=None, ge=400)
    pre_trigger_include: Optional[Union[str, List[str]]] = None
    post_trigger_include: Optional[Union[str, List[str]]] = None
    disable_automatic_id_generation: bool = False
    enable_script_logging: bool = False

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class FeedOptions(BaseModel):
    """Options for read-feed and query operations.

    Attributes:
        max_item_count: Page size
        continuation: Continuation token to resume from
        enable_cross_partition_query: Allow fan-out across partitions
        partition_key: Restrict the feed to a single partition
        session_token: Session token for session consistency
        consistency_level: Consistency override for this request
        populate_query_metrics: Ask the service for query metrics headers
    """

    max_item_count: Optional[int] = Field(default=None, ge=-1)
    continuation: Optional[str] = None
    enable_cross_partition_query: bool = False
    partition_key: Optional[Any] = None
    session_token: Optional[str] = None
    consistency_level: Optional[ConsistencyLevel] = None
    populate_query_metrics: bool = False

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)
