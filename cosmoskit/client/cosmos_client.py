"""
Cosmos Client.

Entry point of the library. Owns the configuration and the shared
ClientContext, and hands out database handles.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..core.config_manager import ClientConfig, ConfigManager
from ..core.logging_config import get_logger
from ..request.client_context import ClientContext
from ..request.options import RequestOptions
from .database.database import Database
from .database.databases import Databases

logger = get_logger(__name__)


class DatabaseAccountLocation(BaseModel):
    name: str
    database_account_endpoint: str = Field(alias="databaseAccountEndpoint")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class DatabaseAccount(BaseModel):
    """Account metadata returned by a GET on the endpoint root.

    Attributes:
        id: Account name
        writable_locations: Regions that accept writes
        readable_locations: Regions that serve reads
        consistency_policy: Default consistency policy of the account
    """

    id: Optional[str] = None
    writable_locations: List[DatabaseAccountLocation] = Field(
        default_factory=list, alias="writableLocations"
    )
    readable_locations: List[DatabaseAccountLocation] = Field(
        default_factory=list, alias="readableLocations"
    )
    consistency_policy: Optional[Dict[str, Any]] = Field(default=None, alias="userConsistencyPolicy")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def default_consistency_level(self) -> Optional[str]:
        if self.consistency_policy:
            return self.consistency_policy.get("defaultConsistencyLevel")
        return None


class CosmosClient:
    """Asynchronous client for the document-database service.

    Example:
        async with CosmosClient("https://localhost:8081/", auth_token=token) as client:
            await client.databases.create({"id": "db1"})

    Attributes:
        config: Active client configuration
        client_context: Shared dispatch component
        databases: Databases facade
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        auth_token: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize client.

        Args:
            endpoint: Account endpoint; overrides the configured one
            auth_token: Authorization token; overrides the configured one
            config: Explicit configuration; loaded through ConfigManager
                (file-less, environment and defaults) when omitted
            http_client: Pre-built httpx client, e.g. with a custom transport
        """
        overrides: Dict[str, Any] = {}
        if endpoint:
            overrides["endpoint"] = endpoint
        if auth_token:
            overrides["auth_token"] = auth_token

        if config is None:
            config = ConfigManager().load(overrides=overrides)
        elif overrides:
            config = ClientConfig(**{**config.model_dump(), **overrides})

        self.config = config
        self.client_context = ClientContext(config, http_client)
        self.databases = Databases(self, self.client_context)
        logger.debug(f"Client created for endpoint {config.endpoint}")

    def database(self, id: str) -> Database:
        """Return a handle to a database. No request is sent."""
        return Database(self, id, self.client_context)

    def get_database(self, id: str) -> Database:
        return self.databases.get_database(id)

    async def get_database_account(self, options: Optional[RequestOptions] = None) -> DatabaseAccount:
        """Read account metadata (regions, default consistency)."""
        response = await self.client_context.get_database_account(options)
        return DatabaseAccount.model_validate(response.result or {})

    async def close(self) -> None:
        await self.client_context.close()

    async def __aenter__(self) -> "CosmosClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
