"""
Container.

Handle to a single container: read, replace or delete it, and reach its
items and server-side scripts.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ...common.helper import get_id_from_link, get_path_from_link, validate_resource
from ...constants import ResourceType
from ...exceptions import InvalidResourceError
from ...request.client_context import ClientContext
from ...request.options import RequestOptions
from ..item.item import Item
from ..item.items import Items
from ..resource import from_result, to_definition
from ..stored_procedure.stored_procedure import StoredProcedure
from ..stored_procedure.stored_procedures import StoredProcedures
from ..trigger.trigger import Trigger
from ..trigger.triggers import Triggers
from ..user_defined_function.user_defined_function import UserDefinedFunction
from ..user_defined_function.user_defined_functions import UserDefinedFunctions
from .models import (
    ContainerDefinition,
    ContainerResponse,
    PartitionKeyDefinition,
    extract_partition_key,
)

if TYPE_CHECKING:
    from ..database.database import Database


class Container:
    """Read, replace or delete an existing container by id.

    Attributes:
        database: Parent Database handle
        id: Container identifier
        items: Items facade
        user_defined_functions: User-defined functions facade
        stored_procedures: Stored procedures facade
        triggers: Triggers facade
    """

    def __init__(self, database: "Database", id: str, client_context: ClientContext) -> None:
        self.database = database
        self.id = id
        self.client_context = client_context
        self._partition_key_definition: Optional[PartitionKeyDefinition] = None
        self._partition_key_loaded = False

        self.items = Items(self, client_context)
        self.user_defined_functions = UserDefinedFunctions(self, client_context)
        self.stored_procedures = StoredProcedures(self, client_context)
        self.triggers = Triggers(self, client_context)

    @property
    def url(self) -> str:
        """Name-based link, e.g. "dbs/db1/colls/c1"."""
        return f"{self.database.url}/{ResourceType.CONTAINER}/{self.id}"

    def item(self, id: str, partition_key: Any = None) -> Item:
        """Return a handle to an item. No request is sent."""
        return Item(self, id, partition_key, self.client_context)

    def user_defined_function(self, id: str) -> UserDefinedFunction:
        return UserDefinedFunction(self, id, self.client_context)

    def stored_procedure(self, id: str) -> StoredProcedure:
        return StoredProcedure(self, id, self.client_context)

    def trigger(self, id: str) -> Trigger:
        return Trigger(self, id, self.client_context)

    async def read(self, options: Optional[RequestOptions] = None) -> ContainerResponse:
        response = await self.client_context.read(
            get_path_from_link(self.url), ResourceType.CONTAINER, get_id_from_link(self.url), options
        )
        definition = from_result(response.result, ContainerDefinition)
        if definition is not None:
            self._cache_partition_key(definition.partition_key)
        return ContainerResponse(body=definition, headers=response.headers, ref=self)

    async def replace(
        self,
        body: Union[ContainerDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> ContainerResponse:
        """Replace the container definition (indexing policy, TTL).

        Raises:
            InvalidResourceError: If the definition is invalid or names
                another container
        """
        definition = to_definition(body, ContainerDefinition)
        validate_resource(definition)
        if definition.id != self.id:
            raise InvalidResourceError(
                f"Definition id '{definition.id}' does not match container '{self.id}'.",
                resource_id=definition.id,
            )

        response = await self.client_context.replace(
            definition.to_request_body(),
            get_path_from_link(self.url),
            ResourceType.CONTAINER,
            get_id_from_link(self.url),
            options,
        )
        return ContainerResponse(
            body=from_result(response.result, ContainerDefinition),
            headers=response.headers,
            ref=self,
        )

    async def delete(self, options: Optional[RequestOptions] = None) -> ContainerResponse:
        response = await self.client_context.delete(
            get_path_from_link(self.url), ResourceType.CONTAINER, get_id_from_link(self.url), options
        )
        return ContainerResponse(
            body=from_result(response.result, ContainerDefinition),
            headers=response.headers,
            ref=self,
        )

    def _cache_partition_key(self, definition: Optional[PartitionKeyDefinition]) -> None:
        self._partition_key_definition = definition
        self._partition_key_loaded = True

    async def get_partition_key_definition(self) -> Optional[PartitionKeyDefinition]:
        """Return the partition key definition, reading the container once.

        Returns:
            The definition, or None for a non-partitioned container
        """
        if not self._partition_key_loaded:
            await self.read()
        return self._partition_key_definition

    async def extract_partition_key(self, document: Mapping[str, Any]) -> Any:
        """Partition key value of document, or None for a non-partitioned container."""
        definition = await self.get_partition_key_definition()
        if definition is None:
            return None
        return extract_partition_key(dict(document), definition)

    def __repr__(self) -> str:
        return f"Container(database={self.database.id!r}, id={self.id!r})"
