"""
Database.

Handle to a single database: read or delete it, and reach its containers.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Optional

from ...common.helper import get_id_from_link, get_path_from_link
from ...constants import ResourceType
from ...request.client_context import ClientContext
from ...request.options import RequestOptions
from ..container.containers import Containers
from ..resource import from_result
from .models import DatabaseDefinition, DatabaseResponse

if TYPE_CHECKING:
    from ..container.container import Container
    from ..cosmos_client import CosmosClient


class Database:
    """Read or delete an existing database by id.

    Attributes:
        client: Owning CosmosClient
        id: Database identifier
        containers: Containers facade of this database
    """

    def __init__(self, client: "CosmosClient", id: str, client_context: ClientContext) -> None:
        self.client = client
        self.id = id
        self.client_context = client_context
        self.containers = Containers(self, client_context)

    @property
    def url(self) -> str:
        """Name-based link, e.g. "dbs/db1"."""
        return f"{ResourceType.DATABASE}/{self.id}"

    def container(self, id: str) -> "Container":
        """Return a handle to a container in this database. No request is sent."""
        return self.containers.get_container(id)

    async def read(self, options: Optional[RequestOptions] = None) -> DatabaseResponse:
        path = get_path_from_link(self.url)
        response = await self.client_context.read(
            path, ResourceType.DATABASE, get_id_from_link(self.url), options
        )
        return DatabaseResponse(
            body=from_result(response.result, DatabaseDefinition),
            headers=response.headers,
            ref=self,
        )

    async def delete(self, options: Optional[RequestOptions] = None) -> DatabaseResponse:
        path = get_path_from_link(self.url)
        response = await self.client_context.delete(
            path, ResourceType.DATABASE, get_id_from_link(self.url), options
        )
        return DatabaseResponse(
            body=from_result(response.result, DatabaseDefinition),
            headers=response.headers,
            ref=self,
        )

    def __repr__(self) -> str:
        return f"Database(id={self.id!r})"
