"""
Stored Procedure.

Handle to a single stored procedure: read, replace, delete or execute it.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Union

from ...common.helper import get_id_from_link, get_path_from_link, validate_resource
from ...constants import ResourceType
from ...core.logging_config import get_logger
from ...request.client_context import ClientContext
from ...request.options import RequestOptions
from ..resource import from_result, to_definition
from .models import (
    StoredProcedureDefinition,
    StoredProcedureExecuteResponse,
    StoredProcedureResponse,
)

if TYPE_CHECKING:
    from ..container.container import Container

logger = get_logger(__name__)


class StoredProcedure:
    """Read, replace, delete or execute an existing stored procedure by id."""

    def __init__(self, container: "Container", id: str, client_context: ClientContext) -> None:
        self.container = container
        self.id = id
        self.client_context = client_context

    @property
    def url(self) -> str:
        """Name-based link, e.g. "dbs/db1/colls/c1/sprocs/p1"."""
        return f"{self.container.url}/{ResourceType.STORED_PROCEDURE}/{self.id}"

    async def read(self, options: Optional[RequestOptions] = None) -> StoredProcedureResponse:
        response = await self.client_context.read(
            get_path_from_link(self.url),
            ResourceType.STORED_PROCEDURE,
            get_id_from_link(self.url),
            options,
        )
        return StoredProcedureResponse(
            body=from_result(response.result, StoredProcedureDefinition),
            headers=response.headers,
            ref=self,
        )

    async def replace(
        self,
        body: Union[StoredProcedureDefinition, Mapping[str, Any]],
        options: Optional[RequestOptions] = None,
    ) -> StoredProcedureResponse:
        definition = to_definition(body, StoredProcedureDefinition)
        if definition.id is None:
            definition.id = self.id
        if definition.body is not None and not isinstance(definition.body, str):
            definition.body = str(definition.body)
        validate_resource(definition, require_body=True)

        response = await self.client_context.replace(
            definition.to_request_body(),
            get_path_from_link(self.url),
            ResourceType.STORED_PROCEDURE,
            get_id_from_link(self.url),
            options,
        )
        return StoredProcedureResponse(
            body=from_result(response.result, StoredProcedureDefinition),
            headers=response.headers,
            ref=self,
        )

    async def delete(self, options: Optional[RequestOptions] = None) -> StoredProcedureResponse:
        response = await self.client_context.delete(
            get_path_from_link(self.url),
            ResourceType.STORED_PROCEDURE,
            get_id_from_link(self.url),
            options,
        )
        return StoredProcedureResponse(
            body=from_result(response.result, StoredProcedureDefinition),
            headers=response.headers,
            ref=self,
        )

    async def execute(
        self,
        params: Optional[List[Any]] = None,
        partition_key: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> StoredProcedureExecuteResponse:
        """Run the stored procedure.

        Args:
            params: Positional arguments passed to the procedure
            partition_key: Partition the procedure runs in
            options: Request options

        Returns:
            StoredProcedureExecuteResponse with the procedure's result
        """
        response = await self.client_context.execute_stored_procedure(
            get_path_from_link(self.url),
            get_id_from_link(self.url),
            params,
            options,
            partition_key,
        )
        logger.debug(f"Executed stored procedure '{self.id}' in container '{self.container.id}'")
        return StoredProcedureExecuteResponse(result=response.result, headers=response.headers)

    def __repr__(self) -> str:
        return f"StoredProcedure(container={self.container.id!r}, id={self.id!r})"
