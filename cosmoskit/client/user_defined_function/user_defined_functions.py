"""
User-Defined Functions.

Used to create, upsert, query, or read all user-defined functions of a
container.

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
from .models import UserDefinedFunctionDefinition, UserDefinedFunctionResponse
from .user_defined_function import UserDefinedFunction

if TYPE_CHECKING:
    from ..container.container import Container

UdfBody = Union[UserDefinedFunctionDefinition, Mapping[str, Any]]


class UserDefinedFunctions:
    """Operations for creating, upserting, querying and listing user-defined functions.

    User-defined functions are JavaScript functions stored in a container
    and callable from queries. See UserDefinedFunction to read, replace or
    delete a given function by id.
    """

    def __init__(self, container: "Container", client_context: ClientContext) -> None:
        """
        Args:
            container: Parent container
            client_context: Shared dispatch component
        """
        self.container = container
        self.client_context = client_context

    def query(
        self,
        query: Optional[QueryType],
        options: Optional[FeedOptions] = None,
    ) -> QueryIterator[dict]:
        """Query all user-defined functions.

        Args:
            query: Query text or SqlQuerySpec; None reads the whole feed
            options: Feed options

        Returns:
            QueryIterator over function definitions
        """
        path = get_path_from_link(self.container.url, ResourceType.USER_DEFINED_FUNCTION)
        id = get_id_from_link(self.container.url)
        envelope = FEED_ENVELOPE_KEYS[ResourceType.USER_DEFINED_FUNCTION]

        async def fetch(inner_options: FeedOptions):
            return await self.client_context.query_feed(
                path,
                ResourceType.USER_DEFINED_FUNCTION,
                id,
                lambda result: result.get(envelope, []),
                query,
                inner_options,
            )

        return QueryIterator(self.client_context, query, options, fetch)

    def read_all(self, options: Optional[FeedOptions] = None) -> QueryIterator[dict]:
        """Read all user-defined functions.

        Example:
            udfs = (await container.user_defined_functions.read_all().fetch_all()).resources
        """
        return self.query(None, options)

    def _prepare(self, body: UdfBody) -> UserDefinedFunctionDefinition:
        definition = to_definition(body, UserDefinedFunctionDefinition)
        if definition.body is not None and not isinstance(definition.body, str):
            definition.body = str(definition.body)
        validate_resource(definition, require_body=True)
        return definition

    async def create(
        self,
        body: UdfBody,
        options: Optional[RequestOptions] = None,
    ) -> UserDefinedFunctionResponse:
        """Create a user-defined function.

        Args:
            body: Definition with "id" and "body" (JavaScript source)
            options: Request options

        Raises:
            InvalidResourceError: If id or body is missing or the id is invalid
        """
        definition = self._prepare(body)

        path = get_path_from_link(self.container.url, ResourceType.USER_DEFINED_FUNCTION)
        id = get_id_from_link(self.container.url)

        response = await self.client_context.create(
            definition.to_request_body(), path, ResourceType.USER_DEFINED_FUNCTION, id, options
        )
        created = from_result(response.result, UserDefinedFunctionDefinition)
        ref = UserDefinedFunction(self.container, created.id, self.client_context)
        return UserDefinedFunctionResponse(body=created, headers=response.headers, ref=ref)

    async def upsert(
        self,
        body: UdfBody,
        options: Optional[RequestOptions] = None,
    ) -> UserDefinedFunctionResponse:
        """Create a user-defined function, or replace the one with the same id.

        Raises:
            InvalidResourceError: If id or body is missing or the id is invalid
        """
        definition = self._prepare(body)

        path = get_path_from_link(self.container.url, ResourceType.USER_DEFINED_FUNCTION)
        id = get_id_from_link(self.container.url)

        response = await self.client_context.upsert(
            definition.to_request_body(), path, ResourceType.USER_DEFINED_FUNCTION, id, options
        )
        upserted = from_result(response.result, UserDefinedFunctionDefinition)
        ref = UserDefinedFunction(self.container, upserted.id, self.client_context)
        return UserDefinedFunctionResponse(body=upserted, headers=response.headers, ref=ref)
