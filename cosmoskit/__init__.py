"""
cosmoskit: asynchronous client for a Cosmos-style document database.

CRUD and query operations on databases, containers, items, user-defined
functions, stored procedures and triggers over the REST API.
"""

__version__ = "0.1.0"

from .client import (
    Container,
    ContainerDefinition,
    CosmosClient,
    Database,
    DatabaseDefinition,
    Item,
    ItemDefinition,
    PartitionKeyDefinition,
    StoredProcedure,
    StoredProcedureDefinition,
    Trigger,
    TriggerDefinition,
    TriggerOperation,
    TriggerType,
    UserDefinedFunction,
    UserDefinedFunctionDefinition,
)
from .core.config_manager import ClientConfig, ConfigManager, ConsistencyLevel
from .exceptions import (
    CosmosClientError,
    CosmosHttpError,
    InvalidResourceError,
    ResourceNotFoundError,
)
from .query import QueryIterator, SqlQuerySpec
from .request import AccessCondition, FeedOptions, RequestOptions

__all__ = [
    "__version__",
    "AccessCondition",
    "ClientConfig",
    "ConfigManager",
    "ConsistencyLevel",
    "Container",
    "ContainerDefinition",
    "CosmosClient",
    "CosmosClientError",
    "CosmosHttpError",
    "Database",
    "DatabaseDefinition",
    "FeedOptions",
    "InvalidResourceError",
    "Item",
    "ItemDefinition",
    "PartitionKeyDefinition",
    "QueryIterator",
    "RequestOptions",
    "ResourceNotFoundError",
    "SqlQuerySpec",
    "StoredProcedure",
    "StoredProcedureDefinition",
    "Trigger",
    "TriggerDefinition",
    "TriggerOperation",
    "TriggerType",
    "UserDefinedFunction",
    "UserDefinedFunctionDefinition",
]
