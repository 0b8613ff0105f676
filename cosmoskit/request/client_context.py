"""
Client Context.

Shared request-dispatch component. Every resource facade funnels its
calls through one ClientContext, which builds headers, issues the HTTP
request with httpx and maps error responses to exceptions.

Author: Cosmoskit Team
Date: 2026-10-18
"""

import json
import logging
import platform
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import httpx

from ..constants import API_VERSION, SDK_NAME, SDK_VERSION, HttpHeaders, MediaTypes
from ..core.config_manager import ClientConfig
from ..core.logging_config import clear_activity_id, get_logger, log_with_context, set_activity_id
from ..exceptions import ServiceRequestError, error_from_response
from ..query.sql_query_spec import QueryType, to_query_spec
from .options import FeedOptions, RequestOptions
from .response import DispatchResponse

logger = get_logger(__name__)

# Partition key value for items that do not carry the partition key path
UNDEFINED_PARTITION_KEY: Dict[str, Any] = {}

# Partition key value for items whose partition key path holds null
NULL_PARTITION_KEY: List[Any] = [None]


def _rfc1123_now() -> str:
    return datetime.now(timezone.utc).strftime("%a, %d %b %Y %H:%M:%S GMT")


def _serialize_partition_key(partition_key: Any) -> str:
    if isinstance(partition_key, (list, tuple)):
        return json.dumps(list(partition_key))
    return json.dumps([partition_key])


def _join_triggers(triggers: Any) -> str:
    if isinstance(triggers, str):
        return triggers
    return ",".join(triggers)


class ClientContext:
    """Dispatches resource operations to the service over HTTP.

    Attributes:
        config: Active client configuration
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize client context.

        Args:
            config: Client configuration
            http_client: Pre-built httpx client; one is created from the
                connection policy when omitted
        """
        self.config = config
        self._owns_http_client = http_client is None
        self._http = http_client or self._build_http_client(config)
        self._user_agent = self._build_user_agent(config)

    @staticmethod
    def _build_http_client(config: ClientConfig) -> httpx.AsyncClient:
        policy = config.connection
        return httpx.AsyncClient(
            timeout=httpx.Timeout(policy.request_timeout, connect=policy.connect_timeout),
            limits=httpx.Limits(max_connections=policy.max_connections),
            verify=policy.verify_ssl,
        )

    @staticmethod
    def _build_user_agent(config: ClientConfig) -> str:
        agent = f"{SDK_NAME}/{SDK_VERSION} python/{platform.python_version()}"
        if config.connection.user_agent_suffix:
            agent = f"{agent} {config.connection.user_agent_suffix}"
        return agent

    async def close(self) -> None:
        """Close the underlying HTTP client if this context created it."""
        if self._owns_http_client:
            await self._http.aclose()

    # Header construction

    def _base_headers(self) -> Dict[str, str]:
        headers = dict(self.config.default_headers)
        headers.update({
            HttpHeaders.ACCEPT: MediaTypes.JSON,
            HttpHeaders.USER_AGENT: self._user_agent,
            HttpHeaders.VERSION: API_VERSION,
            HttpHeaders.DATE: _rfc1123_now(),
        })
        if self.config.auth_token:
            headers[HttpHeaders.AUTHORIZATION] = self.config.auth_token
        if self.config.consistency_level:
            headers[HttpHeaders.CONSISTENCY_LEVEL] = self.config.consistency_level
        return headers

    def _request_headers(
        self,
        options: Optional[RequestOptions],
        partition_key: Any = None,
    ) -> Dict[str, str]:
        headers = self._base_headers()
        options = options or RequestOptions()

        if partition_key is None:
            partition_key = options.partition_key
        if partition_key is not None:
            headers[HttpHeaders.PARTITION_KEY] = _serialize_partition_key(partition_key)

        if options.access_condition is not None:
            condition = options.access_condition
            header = HttpHeaders.IF_MATCH if condition.type == "IfMatch" else HttpHeaders.IF_NONE_MATCH
            headers[header] = condition.condition
        if options.consistency_level:
            headers[HttpHeaders.CONSISTENCY_LEVEL] = options.consistency_level
        if options.session_token:
            headers[HttpHeaders.SESSION_TOKEN] = options.session_token
        if options.offer_throughput is not None:
            headers[HttpHeaders.OFFER_THROUGHPUT] = str(options.offer_throughput)
        if options.pre_trigger_include:
            headers[HttpHeaders.PRE_TRIGGER_INCLUDE] = _join_triggers(options.pre_trigger_include)
        if options.post_trigger_include:
            headers[HttpHeaders.POST_TRIGGER_INCLUDE] = _join_triggers(options.post_trigger_include)
        if options.enable_script_logging:
            headers[HttpHeaders.ENABLE_SCRIPT_LOGGING] = "true"
        return headers

    def _feed_headers(
        self,
        options: Optional[FeedOptions],
        partition_key: Any = None,
    ) -> Dict[str, str]:
        headers = self._base_headers()
        options = options or FeedOptions()

        if partition_key is None:
            partition_key = options.partition_key
        if partition_key is not None:
            headers[HttpHeaders.PARTITION_KEY] = _serialize_partition_key(partition_key)

        if options.max_item_count is not None:
            headers[HttpHeaders.MAX_ITEM_COUNT] = str(options.max_item_count)
        if options.continuation:
            headers[HttpHeaders.CONTINUATION] = options.continuation
        if options.enable_cross_partition_query:
            headers[HttpHeaders.ENABLE_CROSS_PARTITION_QUERY] = "True"
        if options.populate_query_metrics:
            headers[HttpHeaders.POPULATE_QUERY_METRICS] = "True"
        if options.session_token:
            headers[HttpHeaders.SESSION_TOKEN] = options.session_token
        if options.consistency_level:
            headers[HttpHeaders.CONSISTENCY_LEVEL] = options.consistency_level
        return headers

    # Transport

    def _url(self, path: str) -> str:
        return self.config.endpoint.rstrip("/") + "/" + path.lstrip("/")

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def _request(
        self,
        method: str,
        path: str,
        resource_type: str,
        resource_id: str,
        headers: Dict[str, str],
        body: Any = None,
        content_type: str = MediaTypes.JSON,
    ) -> DispatchResponse:
        """Send one request and decode the response.

        Raises:
            CosmosHttpError: If the service answers with a non-2xx status
            ServiceRequestError: If the request could not be sent
        """
        act_id = str(uuid.uuid4())
        headers[HttpHeaders.ACTIVITY_ID] = act_id
        token = set_activity_id(act_id)

        content = None
        if body is not None:
            content = json.dumps(body).encode("utf-8")
            headers[HttpHeaders.CONTENT_TYPE] = content_type

        url = self._url(path)
        start = time.perf_counter()
        try:
            try:
                response = await self._http.request(method, url, headers=headers, content=content)
            except httpx.HTTPError as e:
                logger.warning(f"{method} {path} failed before a response was received: {e}")
                raise ServiceRequestError(
                    f"{method} {path} failed: {e}", method=method, url=url
                ) from e

            duration_ms = (time.perf_counter() - start) * 1000
            response_headers = {key.lower(): value for key, value in response.headers.items()}
            payload = self._decode(response)

            log_with_context(
                logger,
                logging.DEBUG,
                f"{method} {path} -> {response.status_code}",
                resource_type=resource_type,
                resource_id=resource_id,
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
                request_charge=response_headers.get(HttpHeaders.REQUEST_CHARGE),
            )

            if response.status_code >= 400:
                error = error_from_response(response.status_code, payload, response_headers)
                logger.warning(f"{method} {path} failed: {error}")
                raise error

            return DispatchResponse(result=payload, headers=response_headers)
        finally:
            clear_activity_id(token)

    # Resource operations

    async def read(
        self,
        path: str,
        resource_type: str,
        resource_id: str,
        options: Optional[RequestOptions] = None,
        partition_key: Any = None,
    ) -> DispatchResponse:
        headers = self._request_headers(options, partition_key)
        return await self._request("GET", path, resource_type, resource_id, headers)

    async def create(
        self,
        body: Dict[str, Any],
        path: str,
        resource_type: str,
        resource_id: str,
        options: Optional[RequestOptions] = None,
        partition_key: Any = None,
    ) -> DispatchResponse:
        headers = self._request_headers(options, partition_key)
        return await self._request("POST", path, resource_type, resource_id, headers, body=body)

    async def upsert(
        self,
        body: Dict[str, Any],
        path: str,
        resource_type: str,
        resource_id: str,
        options: Optional[RequestOptions] = None,
        partition_key: Any = None,
    ) -> DispatchResponse:
        headers = self._request_headers(options, partition_key)
        headers[HttpHeaders.IS_UPSERT] = "True"
        return await self._request("POST", path, resource_type, resource_id, headers, body=body)

    async def replace(
        self,
        body: Dict[str, Any],
        path: str,
        resource_type: str,
        resource_id: str,
        options: Optional[RequestOptions] = None,
        partition_key: Any = None,
    ) -> DispatchResponse:
        headers = self._request_headers(options, partition_key)
        return await self._request("PUT", path, resource_type, resource_id, headers, body=body)

    async def delete(
        self,
        path: str,
        resource_type: str,
        resource_id: str,
        options: Optional[RequestOptions] = None,
        partition_key: Any = None,
    ) -> DispatchResponse:
        headers = self._request_headers(options, partition_key)
        return await self._request("DELETE", path, resource_type, resource_id, headers)

    async def query_feed(
        self,
        path: str,
        resource_type: str,
        resource_id: str,
        result_fn: Callable[[Dict[str, Any]], List[Any]],
        query: Optional[QueryType],
        options: Optional[FeedOptions] = None,
        partition_key: Any = None,
    ) -> DispatchResponse:
        """Fetch one page of a feed.

        Reads the feed with GET when no query is given, otherwise POSTs the
        query spec.

        Args:
            path: Feed path (e.g. "/dbs/db1/colls/c1/udfs")
            resource_type: Resource kind of the feed
            resource_id: Link of the parent resource
            result_fn: Picks the resource list out of the response envelope
            query: Query text or spec, or None for a plain read feed
            options: Feed options for this page
            partition_key: Partition to scope the feed to

        Returns:
            DispatchResponse whose result is the resource list of the page
        """
        headers = self._feed_headers(options, partition_key)
        query_spec = to_query_spec(query)

        if query_spec is None:
            response = await self._request("GET", path, resource_type, resource_id, headers)
        else:
            headers[HttpHeaders.IS_QUERY] = "True"
            response = await self._request(
                "POST",
                path,
                resource_type,
                resource_id,
                headers,
                body=query_spec.model_dump(),
                content_type=MediaTypes.QUERY_JSON,
            )

        resources = result_fn(response.result or {})
        return DispatchResponse(result=resources or [], headers=response.headers)

    async def execute_stored_procedure(
        self,
        path: str,
        resource_id: str,
        params: Optional[List[Any]] = None,
        options: Optional[RequestOptions] = None,
        partition_key: Any = None,
    ) -> DispatchResponse:
        headers = self._request_headers(options, partition_key)
        return await self._request(
            "POST", path, "sprocs", resource_id, headers, body=list(params or [])
        )

    async def get_database_account(
        self,
        options: Optional[RequestOptions] = None,
    ) -> DispatchResponse:
        headers = self._request_headers(options)
        return await self._request("GET", "/", "", "", headers)
