"""
Triggers.

Used to create, upsert, query, or read all triggers of a container.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ...common.helper import get_id_from_link, get_path_from_link
from ...constants import FEED_ENVELOPE_KEYS, ResourceType
from ...query.query_iterator import QueryIterator
from ...query.sql_query_spec import QueryType
from ...request.client_context import ClientContext
from ...request.options import FeedOptions, RequestOptions
from ..resource import from_result
from .models import TriggerDefinition, TriggerResponse, prepare_trigger
from .trigger import Trigger

if TYPE_CHECKING:
    from ..container.container import Container

TriggerBody = Union[TriggerDefinition, Mapping[str, Any]]


class Triggers:
    """Operations for creating, upserting, querying and listing triggers.

    See Trigger to read, replace or delete a given trigger by id.
    """

    def __init__(self, container: "Container", client_context: ClientContext) -> None:
        self.container = container
        self.client_context = client_context

    def query(
        self,
        query: Optional[QueryType],
        options: Optional[FeedOptions] = None,
    ) -> QueryIterator[dict]:
        """Query all triggers."""
        path = get_path_from_link(self.container.url, ResourceType.TRIGGER)
        id = get_id_from_link(self.container.url)
        envelope = FEED_ENVELOPE_KEYS[ResourceType.TRIGGER]

        async def fetch(inner_options: FeedOptions):
            return await self.client_context.query_feed(
                path,
                ResourceType.TRIGGER,
                id,
                lambda result: result.get(envelope, []),
                query,
                inner_options,
            )

        return QueryIterator(self.client_context, query, options, fetch)

    def read_all(self, options: Optional[FeedOptions] = None) -> QueryIterator[dict]:
        return self.query(None, options)

    async def create(
        self,
        body: TriggerBody,
        options: Optional[RequestOptions] = None,
    ) -> TriggerResponse:
        """Create a trigger.

        Triggers only run when named in pre_trigger_include or
        post_trigger_include of an item operation.

        Raises:
            InvalidResourceError: If the definition is invalid
        """
        definition = prepare_trigger(body)

        path = get_path_from_link(self.container.url, ResourceType.TRIGGER)
        id = get_id_from_link(self.container.url)

        response = await self.client_context.create(
            definition.to_request_body(), path, ResourceType.TRIGGER, id, options
        )
        created = from_result(response.result, TriggerDefinition)
        ref = Trigger(self.container, created.id, self.client_context)
        return TriggerResponse(body=created, headers=response.headers, ref=ref)

    async def upsert(
        self,
        body: TriggerBody,
        options: Optional[RequestOptions] = None,
    ) -> TriggerResponse:
        """Create a trigger, or replace the one with the same id."""
        definition = prepare_trigger(body)

        path = get_path_from_link(self.container.url, ResourceType.TRIGGER)
        id = get_id_from_link(self.container.url)

        response = await self.client_context.upsert(
            definition.to_request_body(), path, ResourceType.TRIGGER, id, options
        )
        upserted = from_result(response.result, TriggerDefinition)
        ref = Trigger(self.container, upserted.id, self.client_context)
        return TriggerResponse(body=upserted, headers=response.headers, ref=ref)
