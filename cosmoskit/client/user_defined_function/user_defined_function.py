"""
User-Defined Function.

Handle to a single user-defined function: read, replace or delete it.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ...common.helper import get_id_from_link, get_path_from_link, validate_resource
from ...constants import ResourceType
from ...request.client_context import ClientContext
from ...request.options import RequestOptions
from ..resource import from_result, to_definition
from .models import UserDefinedFunctionDefinition, UserDefinedFunctionResponse

if TYPE_CHECKING:
    from ..container.container import Container


class UserDefinedFunction:
    """Read, replace or delete an existing user-defined function by id."""

    def __init__(self, container: "Container", id: str, client_context: ClientContext) -> None:
        self.container = container
        self.id = id
        self.client_context = client_context

    @property
    def url(self) -> str:
        """Name-based link, e.g. "dbs/db1/colls/c1/udfs/f1"."""
        return f"{self.container.url}/{ResourceType.USER_DEFINED_FUNCTION}/{self.id}"

    async def read(self, options: Optional[RequestOptions] = None) -> UserDefinedFunctionResponse:
        response = await self.client_context.read(
            get_path_from_link(self.url),
            ResourceType.USER_DEFINED_FUNCTION,
            get_id_from_link(self.url),
            options,
        )
        return UserDefinedFunctionResponse(
            body=from_result(response.result, UserDefinedFunctionDefinition),
            headers=response.headers,
            ref=self,
        )

    async def replace(
        self,
        body: Union[UserDefinedFunctionDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> UserDefinedFunctionResponse:
        definition = to_definition(body, UserDefinedFunctionDefinition)
        if definition.id is None:
            definition.id = self.id
        if definition.body is not None and not isinstance(definition.body, str):
            definition.body = str(definition.body)
        validate_resource(definition, require_body=True)

        response = await self.client_context.replace(
            definition.to_request_body(),
            get_path_from_link(self.url),
            ResourceType.USER_DEFINED_FUNCTION,
            get_id_from_link(self.url),
            options,
        )
        return UserDefinedFunctionResponse(
            body=from_result(response.result, UserDefinedFunctionDefinition),
            headers=response.headers,
            ref=self,
        )

    async def delete(self, options: Optional[RequestOptions] = None) -> UserDefinedFunctionResponse:
        response = await self.client_context.delete(
            get_path_from_link(self.url),
            ResourceType.USER_DEFINED_FUNCTION,
            get_id_from_link(self.url),
            options,
        )
        return UserDefinedFunctionResponse(
            body=from_result(response.result, UserDefinedFunctionDefinition),
            headers=response.headers,
            ref=self,
        )

    def __repr__(self) -> str:
        return f"UserDefinedFunction(container={self.container.id!r}, id={self.id!r})"
