"""
Databases.

Used to create, query, or read all databases of an account.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ...common.helper import validate_resource
from ...constants import FEED_ENVELOPE_KEYS, ResourceType
from ...core.logging_config import get_logger
from ...exceptions import ResourceNotFoundError
from ...query.query_iterator import QueryIterator
from ...query.sql_query_spec import QueryType
from ...request.client_context import ClientContext
from ...request.options import FeedOptions, RequestOptions
from ..resource import from_result, to_definition
from .database import Database
from .models import DatabaseDefinition, DatabaseResponse

if TYPE_CHECKING:
    from ..cosmos_client import CosmosClient

logger = get_logger(__name__)

DATABASES_PATH = "/" + ResourceType.DATABASE


class Databases:
    """Operations for creating, querying and listing databases.

    See Database to read or delete a given database by id.
    """

    def __init__(self, client: "CosmosClient", client_context: ClientContext) -> None:
        self.client = client
        self.client_context = client_context

    def get_database(self, id: str) -> Database:
        """Return a handle to a database. No request is sent."""
        return Database(self.client, id, self.client_context)

    def query(
        self,
        query: Optional[QueryType],
        options: Optional[FeedOptions] = None,
    ) -> QueryIterator[dict]:
        """Query all databases.

        Args:
            query: Query text or SqlQuerySpec; None reads the whole feed
            options: Feed options
        """
        envelope = FEED_ENVELOPE_KEYS[ResourceType.DATABASE]

        async def fetch(inner_options: FeedOptions):
            return await self.client_context.query_feed(
                DATABASES_PATH,
                ResourceType.DATABASE,
                "",
                lambda result: result.get(envelope, []),
                query,
                inner_options,
            )

        return QueryIterator(self.client_context, query, options, fetch)

    def read_all(self, options: Optional[FeedOptions] = None) -> QueryIterator[dict]:
        """Read all databases."""
        return self.query(None, options)

    async def create(
        self,
        body: Union[DatabaseDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> DatabaseResponse:
        """Create a database.

        Args:
            body: Database definition; "id" is required
            options: Request options; offer_throughput provisions RU/s

        Raises:
            InvalidResourceError: If the definition is invalid
        """
        definition = to_definition(body, DatabaseDefinition)
        validate_resource(definition)

        response = await self.client_context.create(
            definition.to_request_body(),
            DATABASES_PATH,
            ResourceType.DATABASE,
            "",
            options,
        )
        created = from_result(response.result, DatabaseDefinition)
        logger.info(f"Created database '{created.id}'")
        ref = Database(self.client, created.id, self.client_context)
        return DatabaseResponse(body=created, headers=response.headers, ref=ref)

    async def create_if_not_exists(
        self,
        body: Union[DatabaseDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> DatabaseResponse:
        """Read a database, creating it when the read returns 404."""
        definition = to_definition(body, DatabaseDefinition)
        validate_resource(definition)

        try:
            return await self.get_database(definition.id).read(options)
        except ResourceNotFoundError:
            return await self.create(definition, options)
