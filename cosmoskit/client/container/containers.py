"""
Containers.

Used to create, query, or read all containers of a database.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ...common.helper import get_id_from_link, get_path_from_link, validate_resource
from ...constants import FEED_ENVELOPE_KEYS, ResourceType
from ...core.logging_config import get_logger
from ...exceptions import InvalidResourceError, ResourceNotFoundError
from ...query.query_iterator import QueryIterator
from ...query.sql_query_spec import QueryType
from ...request.client_context import ClientContext
from ...request.options import FeedOptions, RequestOptions
from ..resource import from_result, to_definition
from .container import Container
from .models import ContainerDefinition, ContainerResponse

if TYPE_CHECKING:
    from ..database.database import Database

logger = get_logger(__name__)


class Containers:
    """Operations for creating, querying and listing containers.

    See Container to read, replace or delete a given container by id.
    """

    def __init__(self, database: "Database", client_context: ClientContext) -> None:
        self.database = database
        self.client_context = client_context

    def get_container(self, id: str) -> Container:
        """Return a handle to a container. No request is sent."""
        return Container(self.database, id, self.client_context)

    def query(
        self,
        query: Optional[QueryType],
        options: Optional[FeedOptions] = None,
    ) -> QueryIterator[dict]:
        """Query all containers of the database.

        Args:
            query: Query text or SqlQuerySpec; None reads the whole feed
            options: Feed options
        """
        path = get_path_from_link(self.database.url, ResourceType.CONTAINER)
        id = get_id_from_link(self.database.url)
        envelope = FEED_ENVELOPE_KEYS[ResourceType.CONTAINER]

        async def fetch(inner_options: FeedOptions):
            return await self.client_context.query_feed(
                path,
                ResourceType.CONTAINER,
                id,
                lambda result: result.get(envelope, []),
                query,
                inner_options,
            )

        return QueryIterator(self.client_context, query, options, fetch)

    def read_all(self, options: Optional[FeedOptions] = None) -> QueryIterator[dict]:
        """Read all containers of the database."""
        return self.query(None, options)

    async def create(
        self,
        body: Union[ContainerDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> ContainerResponse:
        """Create a container.

        Args:
            body: Container definition; "id" and "partitionKey" are required
            options: Request options; offer_throughput provisions RU/s

        Raises:
            InvalidResourceError: If the definition is invalid
        """
        definition = to_definition(body, ContainerDefinition)
        validate_resource(definition)
        if definition.partition_key is None:
            raise InvalidResourceError("Partition key is required.", resource_id=definition.id)

        path = get_path_from_link(self.database.url, ResourceType.CONTAINER)
        id = get_id_from_link(self.database.url)

        response = await self.client_context.create(
            definition.to_request_body(), path, ResourceType.CONTAINER, id, options
        )
        created = from_result(response.result, ContainerDefinition)
        logger.info(f"Created container '{created.id}' in database '{self.database.id}'")
        ref = Container(self.database, created.id, self.client_context)
        ref._cache_partition_key(created.partition_key)
        return ContainerResponse(body=created, headers=response.headers, ref=ref)

    async def create_if_not_exists(
        self,
        body: Union[ContainerDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> ContainerResponse:
        """Read a container, creating it when the read returns 404."""
        definition = to_definition(body, ContainerDefinition)
        validate_resource(definition)

        try:
            return await self.get_container(definition.id).read(options)
        except ResourceNotFoundError:
            return await self.create(definition, options)
