"""
Shared fixtures.

FakeCosmosService is an in-memory stand-in for the document-database REST
API, mounted on httpx.MockTransport so the client runs its real request
path without a network.
"""

import json
import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from cosmoskit.client.cosmos_client import CosmosClient
from cosmoskit.constants import FEED_ENVELOPE_KEYS
from cosmoskit.core.config_manager import ClientConfig

ENDPOINT = "https://fake.documents.local/"


class FakeCosmosService:
    """In-memory document-database service.

    Attributes:
        collections: Resources by collection link, e.g. {"dbs/db1/udfs": {id: body}}
        requests: Every request received, in order
        sproc_results: Canned results of stored procedures by link
    """

    def __init__(self) -> None:
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.requests: List[httpx.Request] = []
        self.sproc_results: Dict[str, Any] = {}
        self._failures: List[Tuple[int, Dict[str, Any], Dict[str, str]]] = []

    def fail_next(self, status_code: int, code: str, message: str = "", headers: Optional[Dict[str, str]] = None) -> None:
        """Answer the next request with an error response."""
        self._failures.append((status_code, {"code": code, "message": message}, headers or {}))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def _respond(self, request: httpx.Request, status_code: int, body: Any = None, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        response_headers = {
            "x-ms-activity-id": request.headers.get("x-ms-activity-id", ""),
            "x-ms-request-charge": "1.5",
        }
        response_headers.update(headers or {})
        if body is None:
            return httpx.Response(status_code, headers=response_headers)
        return httpx.Response(status_code, json=body, headers=response_headers)

    def _error(self, request: httpx.Request, status_code: int, code: str, message: str) -> httpx.Response:
        return self._respond(request, status_code, {"code": code, "message": message})

    def _parent_exists(self, collection_link: str) -> bool:
        segments = collection_link.split("/")
        if len(segments) == 1:
            return True
        parent_collection = "/".join(segments[:-2])
        return segments[-2] in self.collections.get(parent_collection, {})

    def _stamp(self, link: str, body: Dict[str, Any]) -> Dict[str, Any]:
        stamped = dict(body)
        stamped["_rid"] = uuid.uuid4().hex[:8]
        stamped["_ts"] = 1700000000
        stamped["_self"] = link
        stamped["_etag"] = f'"{uuid.uuid4()}"'
        return stamped

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self._failures:
            status_code, body, headers = self._failures.pop(0)
            return self._respond(request, status_code, body, headers)

        link = request.url.path.strip("/")
        if not link:
            return self._respond(request, 200, {
                "id": "fakeaccount",
                "writableLocations": [{"name": "Local", "databaseAccountEndpoint": ENDPOINT}],
                "readableLocations": [{"name": "Local", "databaseAccountEndpoint": ENDPOINT}],
                "userConsistencyPolicy": {"defaultConsistencyLevel": "Session"},
            })

        segments = link.split("/")
        if len(segments) % 2 == 1:
            return self._handle_collection(request, link)
        return self._handle_resource(request, link)

    def _handle_collection(self, request: httpx.Request, link: str) -> httpx.Response:
        if not self._parent_exists(link):
            return self._error(request, 404, "NotFound", f"Parent of '{link}' not found")

        resources = self.collections.setdefault(link, {})
        kind = link.split("/")[-1]

        if request.method == "GET":
            return self._feed_page(request, kind, list(resources.values()))

        if request.method != "POST":
            return self._error(request, 405, "MethodNotAllowed", request.method)

        body = json.loads(request.content)
        if request.headers.get("x-ms-documentdb-isquery") == "True":
            matches = list(resources.values())
            for parameter in body.get("parameters", []):
                field = parameter["name"].lstrip("@")
                matches = [r for r in matches if r.get(field) == parameter["value"]]
            return self._feed_page(request, kind, matches)

        resource_id = body.get("id")
        exists = resource_id in resources
        is_upsert = request.headers.get("x-ms-documentdb-is-upsert") == "True"
        if exists and not is_upsert:
            return self._error(request, 409, "Conflict", f"Resource '{resource_id}' already exists")

        stamped = self._stamp(f"{link}/{resource_id}", body)
        resources[resource_id] = stamped
        return self._respond(request, 200 if exists else 201, stamped, {"etag": stamped["_etag"]})

    def _feed_page(self, request: httpx.Request, kind: str, resources: List[Dict[str, Any]]) -> httpx.Response:
        start = int(request.headers.get("x-ms-continuation") or 0)
        page_size = int(request.headers.get("x-ms-max-item-count") or 100)
        if page_size < 0:
            page_size = len(resources) or 1
        page = resources[start:start + page_size]

        headers = {}
        if start + page_size < len(resources):
            headers["x-ms-continuation"] = str(start + page_size)

        envelope = {"_rid": "", FEED_ENVELOPE_KEYS[kind]: page, "_count": len(page)}
        return self._respond(request, 200, envelope, headers)

    def _handle_resource(self, request: httpx.Request, link: str) -> httpx.Response:
        collection_link, resource_id = link.rsplit("/", 1)
        resources = self.collections.get(collection_link, {})
        if not self._parent_exists(collection_link) or resource_id not in resources:
            return self._error(request, 404, "NotFound", f"Resource '{link}' not found")
        current = resources[resource_id]

        if request.method == "GET":
            return self._respond(request, 200, current, {"etag": current["_etag"]})

        if request.method == "DELETE":
            del resources[resource_id]
            for key in [k for k in self.collections if k.startswith(link + "/")]:
                del self.collections[key]
            return self._respond(request, 204)

        if request.method == "PUT":
            if_match = request.headers.get("If-Match")
            if if_match and if_match != current["_etag"]:
                return self._error(request, 412, "PreconditionFailed", "ETag mismatch")
            stamped = self._stamp(link, json.loads(request.content))
            resources[resource_id] = stamped
            return self._respond(request, 200, stamped, {"etag": stamped["_etag"]})

        if request.method == "POST" and collection_link.endswith("/sprocs"):
            params = json.loads(request.content)
            result = self.sproc_results.get(link, {"params": params})
            return self._respond(request, 200, result)

        return self._error(request, 405, "MethodNotAllowed", request.method)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo global logging configuration made by a test."""
    root_logger = logging.getLogger()
    saved_root = (root_logger.level, list(root_logger.handlers))
    saved_levels = {
        name: logger.level
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    root_logger.setLevel(saved_root[0])
    root_logger.handlers[:] = saved_root[1]
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger):
            logger.setLevel(saved_levels.get(name, logging.NOTSET))


@pytest.fixture
def service():
    """Fresh in-memory service for each test."""
    return FakeCosmosService()


@pytest.fixture
async def client(service):
    """Client wired to the in-memory service."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(service.handler))
    cosmos_client = CosmosClient(config=ClientConfig(endpoint=ENDPOINT), http_client=http_client)
    yield cosmos_client
    await http_client.aclose()


@pytest.fixture
async def database(client):
    """Database "db1"."""
    response = await client.databases.create({"id": "db1"})
    return response.database


@pytest.fixture
async def container(database):
    """Container "c1" in "db1", partitioned on /pk."""
    response = await database.containers.create(
        {"id": "c1", "partitionKey": {"paths": ["/pk"], "kind": "Hash"}}
    )
    return response.container
