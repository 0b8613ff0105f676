"""
Items.

Used to create, upsert, query, or read all items of a container.

Author: Cosmoskit Team
Date: 2026-10-18
"""

import uuid
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from ...common.helper import get_id_from_link, get_path_from_link, validate_resource
from ...constants import FEED_ENVELOPE_KEYS, ResourceType
from ...exceptions import InvalidResourceError
from ...query.query_iterator import QueryIterator
from ...query.sql_query_spec import QueryType
from ...request.client_context import ClientContext
from ...request.options import FeedOptions, RequestOptions
from ..resource import from_result
from .item import Item
from .models import ItemDefinition, ItemResponse

if TYPE_CHECKING:
    from ..container.container import Container


class Items:
    """Operations for creating, upserting, querying and listing items.

    See Item to read, replace or delete a given item by id.
    """

    def __init__(self, container: "Container", client_context: ClientContext) -> None:
        self.container = container
        self.client_context = client_context

    def query(
        self,
        query: Optional[QueryType],
        options: Optional[FeedOptions] = None,
    ) -> QueryIterator[Any]:
        """Query items of the container.

        Query results may be projections, so resources are returned as
        decoded JSON values rather than ItemDefinition models.

        Args:
            query: Query text or SqlQuerySpec; None reads the whole feed
            options: Feed options; set partition_key or
                enable_cross_partition_query for partitioned containers
        """
        path = get_path_from_link(self.container.url, ResourceType.ITEM)
        id = get_id_from_link(self.container.url)
        envelope = FEED_ENVELOPE_KEYS[ResourceType.ITEM]

        async def fetch(inner_options: FeedOptions):
            return await self.client_context.query_feed(
                path,
                ResourceType.ITEM,
                id,
                lambda result: result.get(envelope, []),
                query,
                inner_options,
            )

        return QueryIterator(self.client_context, query, options, fetch)

    def read_all(self, options: Optional[FeedOptions] = None) -> QueryIterator[Any]:
        """Read all items of the container."""
        return self.query(None, options)

    def _prepare(
        self,
        body: Union[ItemDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions],
    ) -> Dict[str, Any]:
        if isinstance(body, BaseModel):
            document = body.model_dump(by_alias=True, exclude_none=True)
        elif isinstance(body, Mapping):
            document = dict(body)
        else:
            raise InvalidResourceError(
                f"Item must be a mapping or a model, got {type(body).__name__}."
            )

        if not document.get("id"):
            if options is not None and options.disable_automatic_id_generation:
                raise InvalidResourceError("Id is required.")
            document["id"] = str(uuid.uuid4())

        validate_resource(document)
        return document

    async def _partition_key_for(
        self,
        document: Dict[str, Any],
        options: Optional[RequestOptions],
    ) -> Any:
        if options is not None and options.partition_key is not None:
            return options.partition_key
        return await self.container.extract_partition_key(document)

    async def create(
        self,
        body: Union[ItemDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> ItemResponse:
        """Create an item.

        A missing id is filled with a UUID4 unless
        options.disable_automatic_id_generation is set. The partition key
        is read from the item when options.partition_key is not given.

        Raises:
            InvalidResourceError: If the item is invalid
        """
        document = self._prepare(body, options)
        partition_key = await self._partition_key_for(document, options)

        response = await self.client_context.create(
            document,
            get_path_from_link(self.container.url, ResourceType.ITEM),
            ResourceType.ITEM,
            get_id_from_link(self.container.url),
            options,
            partition_key,
        )
        created = from_result(response.result, ItemDefinition)
        ref = Item(self.container, created.id, partition_key, self.client_context)
        return ItemResponse(body=created, headers=response.headers, ref=ref)

    async def upsert(
        self,
        body: Union[ItemDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> ItemResponse:
        """Create an item, or replace it if an item with the same id exists.

        Raises:
            InvalidResourceError: If the item is invalid
        """
        document = self._prepare(body, options)
        partition_key = await self._partition_key_for(document, options)

        response = await self.client_context.upsert(
            document,
            get_path_from_link(self.container.url, ResourceType.ITEM),
            ResourceType.ITEM,
            get_id_from_link(self.container.url),
            options,
            partition_key,
        )
        upserted = from_result(response.result, ItemDefinition)
        ref = Item(self.container, upserted.id, partition_key, self.client_context)
        return ItemResponse(body=upserted, headers=response.headers, ref=ref)
