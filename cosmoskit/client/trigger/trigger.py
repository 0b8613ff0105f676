"""
Trigger.

Handle to a single trigger: read, replace or delete it.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ...common.helper import get_id_from_link, get_path_from_link
from ...constants import ResourceType
from ...request.client_context import ClientContext
from ...request.options import RequestOptions
from ..resource import from_result
from .models import TriggerDefinition, TriggerResponse, prepare_trigger

if TYPE_CHECKING:
    from ..container.container import Container


class Trigger:
    """Read, replace or delete an existing trigger by id."""

    def __init__(self, container: "Container", id: str, client_context: ClientContext) -> None:
        self.container = container
        self.id = id
        self.client_context = client_context

    @property
    def url(self) -> str:
        """Name-based link, e.g. "dbs/db1/colls/c1/triggers/t1"."""
        return f"{self.container.url}/{ResourceType.TRIGGER}/{self.id}"

    async def read(self, options: Optional[RequestOptions] = None) -> TriggerResponse:
        response = await self.client_context.read(
            get_path_from_link(self.url), ResourceType.TRIGGER, get_id_from_link(self.url), options
        )
        return TriggerResponse(
            body=from_result(response.result, TriggerDefinition),
            headers=response.headers,
            ref=self,
        )

    async def replace(
        self,
        body: Union[TriggerDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> TriggerResponse:
        if isinstance(body, TriggerDefinition) and body.id is None:
            body = body.model_copy(update={"id": self.id})
        elif isinstance(body, Mapping) and "id" not in body:
            body = {**body, "id": self.id}
        definition = prepare_trigger(body)

        response = await self.client_context.replace(
            definition.to_request_body(),
            get_path_from_link(self.url),
            ResourceType.TRIGGER,
            get_id_from_link(self.url),
            options,
        )
        return TriggerResponse(
            body=from_result(response.result, TriggerDefinition),
            headers=response.headers,
            ref=self,
        )

    async def delete(self, options: Optional[RequestOptions] = None) -> TriggerResponse:
        response = await self.client_context.delete(
            get_path_from_link(self.url), ResourceType.TRIGGER, get_id_from_link(self.url), options
        )
        return TriggerResponse(
            body=from_result(response.result, TriggerDefinition),
            headers=response.headers,
            ref=self,
        )

    def __repr__(self) -> str:
        return f"Trigger(container={self.container.id!r}, id={self.id!r})"
