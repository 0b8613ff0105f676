"""Container resources."""

from .models import (
    ContainerDefinition,
    ContainerResponse,
    IndexingPolicy,
    PartitionKeyDefinition,
    UniqueKeyPolicy,
)
from .container import Container
from .containers import Containers

__all__ = [
    "Container",
    "ContainerDefinition",
    "ContainerResponse",
    "Containers",
    "IndexingPolicy",
    "PartitionKeyDefinition",
    "UniqueKeyPolicy",
]
