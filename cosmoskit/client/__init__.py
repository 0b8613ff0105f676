"""Resource facades and the client entry point."""

from .resource import Resource
from .cosmos_client import CosmosClient, DatabaseAccount
from .database import Database, DatabaseDefinition, DatabaseResponse, Databases
from .container import (
    Container,
    ContainerDefinition,
    ContainerResponse,
    Containers,
    IndexingPolicy,
    PartitionKeyDefinition,
    UniqueKeyPolicy,
)
from .item import Item, ItemDefinition, ItemResponse, Items
from .user_defined_function import (
    UserDefinedFunction,
    UserDefinedFunctionDefinition,
    UserDefinedFunctionResponse,
    UserDefinedFunctions,
)
from .stored_procedure import (
    StoredProcedure,
    StoredProcedureDefinition,
    StoredProcedureExecuteResponse,
    StoredProcedureResponse,
    StoredProcedures,
)
from .trigger import (
    Trigger,
    TriggerDefinition,
    TriggerOperation,
    TriggerResponse,
    TriggerType,
    Triggers,
)
