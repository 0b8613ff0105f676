"""
Stored Procedures.

Used to create, upsert, query, or read all stored procedures of a container.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ...common.helper import get_id_from_link, get_path_from_link, validate_resource
from ...constants import FEED_ENVELOPE_KEYS, ResourceType
from ...query.query_iterator import QueryIterator
from ...query.sql_query_spec import QueryType
from ...request.client_context import ClientContext
from ...request.options import FeedOptions, RequestOptions
from ..resource import from_result, to_definition
from .models import StoredProcedureDefinition, StoredProcedureResponse
from .stored_procedure import StoredProcedure

if TYPE_CHECKING:
    from ..container.container import Container

SprocBody = Union[StoredProcedureDefinition, Mapping[str, Any]]


class StoredProcedures:
    """Operations for creating, upserting, querying and listing stored procedures.

    See StoredProcedure to read, replace, delete or execute a given
    procedure by id.
    """

    def __init__(self, container: "Container", client_context: ClientContext) -> None:
        self.container = container
        self.client_context = client_context

    def query(
        self,
        query: Optional[QueryType],
        options: Optional[FeedOptions] = None,
    ) -> QueryIterator[dict]:
        """Query all stored procedures."""
        path = get_path_from_link(self.container.url, ResourceType.STORED_PROCEDURE)
        id = get_id_from_link(self.container.url)
        envelope = FEED_ENVELOPE_KEYS[ResourceType.STORED_PROCEDURE]

        async def fetch(inner_options: FeedOptions):
            return await self.client_context.query_feed(
                path,
                ResourceType.STORED_PROCEDURE,
                id,
                lambda result: result.get(envelope, []),
                query,
                inner_options,
            )

        return QueryIterator(self.client_context, query, options, fetch)

    def read_all(self, options: Optional[FeedOptions] = None) -> QueryIterator[dict]:
        return self.query(None, options)

    def _prepare(self, body: SprocBody) -> StoredProcedureDefinition:
        definition = to_definition(body, StoredProcedureDefinition)
        if definition.body is not None and not isinstance(definition.body, str):
            definition.body = str(definition.body)
        validate_resource(definition, require_body=True)
        return definition

    async def create(
        self,
        body: SprocBody,
        options: Optional[RequestOptions] = None,
    ) -> StoredProcedureResponse:
        """Create a stored procedure.

        Args:
            body: Definition with "id" and "body" (JavaScript source)
            options: Request options

        Raises:
            InvalidResourceError: If id or body is missing or the id is invalid
        """
        definition = self._prepare(body)

        path = get_path_from_link(self.container.url, ResourceType.STORED_PROCEDURE)
        id = get_id_from_link(self.container.url)

        response = await self.client_context.create(
            definition.to_request_body(), path, ResourceType.STORED_PROCEDURE, id, options
        )
        created = from_result(response.result, StoredProcedureDefinition)
        ref = StoredProcedure(self.container, created.id, self.client_context)
        return StoredProcedureResponse(body=created, headers=response.headers, ref=ref)

    async def upsert(
        self,
        body: SprocBody,
        options: Optional[RequestOptions] = None,
    ) -> StoredProcedureResponse:
        """Create a stored procedure, or replace the one with the same id."""
        definition = self._prepare(body)

        path = get_path_from_link(self.container.url, ResourceType.STORED_PROCEDURE)
        id = get_id_from_link(self.container.url)

        response = await self.client_context.upsert(
            definition.to_request_body(), path, ResourceType.STORED_PROCEDURE, id, options
        )
        upserted = from_result(response.result, StoredProcedureDefinition)
        ref = StoredProcedure(self.container, upserted.id, self.client_context)
        return StoredProcedureResponse(body=upserted, headers=response.headers, ref=ref)
