"""
Container Models.

Pydantic models for container definitions, partition key and indexing
configuration, and the response wrapper returned by container operations.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..resource import Resource
from ...request.client_context import NULL_PARTITION_KEY, UNDEFINED_PARTITION_KEY
from ...request.response import ResourceResponse

if TYPE_CHECKING:
    from .container import Container


class PartitionKeyDefinition(BaseModel):
    """Partition key definition for container.

    Attributes:
        paths: List of partition key paths (e.g., ["/userId"])
        kind: Partition key kind (Hash or Range)
        version: Partition key version (1 or 2)
    """

    paths: List[str]
    kind: str = "Hash"
    version: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("paths", mode="before")
    @classmethod
    def validate_paths(cls, v: List[str]) -> List[str]:
        """Validate partition key paths.

        Args:
            v: Partition key paths

        Returns:
            Validated paths

        Raises:
            ValueError: If paths are invalid
        """
        if not v:
            raise ValueError("Partition key paths cannot be empty")

        for path in v:
            if not isinstance(path, str) or not path.startswith("/"):
                raise ValueError(f"Partition key path must start with '/': {path}")

        return v

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        """Validate partition key kind."""
        if v not in ["Hash", "Range", "MultiHash"]:
            raise ValueError(f"Partition key kind must be 'Hash', 'Range' or 'MultiHash': {v}")
        return v


class IndexingPath(BaseModel):
    """Included or excluded indexing path."""

    path: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class IndexingPolicy(BaseModel):
    """Indexing policy.

    Attributes:
        automatic: Whether indexing is automatic
        indexing_mode: Indexing mode (consistent, lazy, none)
        included_paths: Paths to index
        excluded_paths: Paths to leave out of the index
    """

    automatic: bool = True
    indexing_mode: str = Field(default="consistent", alias="indexingMode")
    included_paths: Optional[List[IndexingPath]] = Field(default=None, alias="includedPaths")
    excluded_paths: Optional[List[IndexingPath]] = Field(default=None, alias="excludedPaths")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("indexing_mode")
    @classmethod
    def validate_indexing_mode(cls, v: str) -> str:
        if v.lower() not in ["consistent", "lazy", "none"]:
            raise ValueError(f"Indexing mode must be 'consistent', 'lazy' or 'none': {v}")
        return v


class UniqueKey(BaseModel):
    paths: List[str]


class UniqueKeyPolicy(BaseModel):
    unique_keys: List[UniqueKey] = Field(default_factory=list, alias="uniqueKeys")

    model_config = ConfigDict(populate_by_name=True)


class ContainerDefinition(Resource):
    """Container definition.

    Attributes:
        id: Container identifier
        partition_key: Partition key definition
        indexing_policy: Indexing policy
        default_ttl: Default time-to-live of items in seconds (-1 for no expiry)
        unique_key_policy: Unique key constraints
    """

    partition_key: Optional[PartitionKeyDefinition] = Field(default=None, alias="partitionKey")
    indexing_policy: Optional[IndexingPolicy] = Field(default=None, alias="indexingPolicy")
    default_ttl: Optional[int] = Field(default=None, alias="defaultTtl")
    unique_key_policy: Optional[UniqueKeyPolicy] = Field(default=None, alias="uniqueKeyPolicy")

    @field_validator("default_ttl")
    @classmethod
    def validate_default_ttl(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and (v == 0 or v < -1):
            raise ValueError("Default TTL must be -1 or a positive number of seconds")
        return v


@dataclass
class ContainerResponse(ResourceResponse[ContainerDefinition]):
    """Response to a container operation; ref is the Container handle."""

    @property
    def container(self) -> "Container":
        return self.ref


def extract_partition_key(document: Dict[str, Any], definition: PartitionKeyDefinition) -> Any:
    """Read the partition key value of a document.

    Args:
        document: Item body
        definition: Partition key definition of the container

    Returns:
        The value at the first partition key path; UNDEFINED_PARTITION_KEY
        when the item does not carry the path, NULL_PARTITION_KEY when the
        path holds null
    """
    value: Any = document
    for segment in definition.paths[0].strip("/").split("/"):
        if not isinstance(value, dict) or segment not in value:
            return UNDEFINED_PARTITION_KEY
        value = value[segment]
    return NULL_PARTITION_KEY if value is None else value
