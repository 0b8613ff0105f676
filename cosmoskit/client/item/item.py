"""
Item.

Handle to a single item: read, replace or delete it.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from pydantic import BaseModel

from ...common.helper import get_id_from_link, get_path_from_link, validate_resource
from ...constants import ResourceType
from ...request.client_context import ClientContext
from ...request.options import RequestOptions
from ..resource import from_result
from .models import ItemDefinition, ItemResponse

if TYPE_CHECKING:
    from ..container.container import Container


class Item:
    """Read, replace or delete an existing item by id.

    Attributes:
        container: Parent Container handle
        id: Item identifier
        partition_key: Partition key value of the item
    """

    def __init__(
        self,
        container: "Container",
        id: str,
        partition_key: Any,
        client_context: ClientContext,
    ) -> None:
        self.container = container
        self.id = id
        self.partition_key = partition_key
        self.client_context = client_context

    @property
    def url(self) -> str:
        """Name-based link, e.g. "dbs/db1/colls/c1/docs/i1"."""
        return f"{self.container.url}/{ResourceType.ITEM}/{self.id}"

    async def read(self, options: Optional[RequestOptions] = None) -> ItemResponse:
        response = await self.client_context.read(
            get_path_from_link(self.url),
            ResourceType.ITEM,
            get_id_from_link(self.url),
            options,
            self.partition_key,
        )
        return ItemResponse(
            body=from_result(response.result, ItemDefinition),
            headers=response.headers,
            ref=self,
        )

    async def replace(
        self,
        body: Union[ItemDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> ItemResponse:
        """Replace the item; the body's id defaults to this item's id."""
        if isinstance(body, BaseModel):
            document = body.model_dump(by_alias=True, exclude_none=True)
        else:
            document = dict(body)
        document.setdefault("id", self.id)
        validate_resource(document)

        response = await self.client_context.replace(
            document,
            get_path_from_link(self.url),
            ResourceType.ITEM,
            get_id_from_link(self.url),
            options,
            self.partition_key,
        )
        return ItemResponse(
            body=from_result(response.result, ItemDefinition),
            headers=response.headers,
            ref=self,
        )

    async def delete(self, options: Optional[RequestOptions] = None) -> ItemResponse:
        response = await self.client_context.delete(
            get_path_from_link(self.url),
            ResourceType.ITEM,
            get_id_from_link(self.url),
            options,
            self.partition_key,
        )
        return ItemResponse(
            body=from_result(response.result, ItemDefinition),
            headers=response.headers,
            ref=self,
        )

    def __repr__(self) -> str:
        return f"Item(container={self.container.id!r}, id={self.id!r})"
