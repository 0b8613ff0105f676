"""
Unit tests for the shared dispatch component.
"""

import json

import httpx
import pytest

from cosmoskit.core.config_manager import ClientConfig
from cosmoskit.core.logging_config import activity_id
from cosmoskit.exceptions import (
    ConflictError,
    PreconditionFailedError,
    ResourceNotFoundError,
    ServiceRequestError,
    TooManyRequestsError,
)
from cosmoskit.query.sql_query_spec import SqlParameter, SqlQuerySpec
from cosmoskit.request.client_context import NULL_PARTITION_KEY, UNDEFINED_PARTITION_KEY, ClientContext
from cosmoskit.request.options import AccessCondition, FeedOptions, RequestOptions

ENDPOINT = "https://fake.documents.local/"


def make_context(service, **config):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(service.handler))
    return ClientContext(ClientConfig(endpoint=ENDPOINT, **config), http_client)


class TestHeaders:
    """Test request header construction."""

    async def test_base_headers(self, service):
        """Test version, date, activity id and user agent are always sent."""
        ctx = make_context(service)

        await ctx.get_database_account()

        headers = service.last_request.headers
        assert headers["x-ms-version"] == "2018-12-31"
        assert headers["x-ms-date"].endswith("GMT")
        assert headers["x-ms-activity-id"]
        assert headers["user-agent"].startswith("cosmoskit/")
        assert "authorization" not in headers

    async def test_auth_token_forwarded_verbatim(self, service):
        """Test the configured token is sent unchanged."""
        ctx = make_context(service, auth_token="type=master&ver=1.0&sig=abc")

        await ctx.get_database_account()

        assert service.last_request.headers["authorization"] == "type=master&ver=1.0&sig=abc"

    async def test_default_headers_and_consistency(self, service):
        """Test configured default headers and consistency level are sent."""
        ctx = make_context(service, default_headers={"x-custom": "1"}, consistency_level="Eventual")

        await ctx.get_database_account()

        headers = service.last_request.headers
        assert headers["x-custom"] == "1"
        assert headers["x-ms-consistency-level"] == "Eventual"

    async def test_request_options_headers(self, service):
        """Test request options become x-ms-* headers."""
        ctx = make_context(service)
        options = RequestOptions(
            consistency_level="Strong",
            session_token="0:1",
            offer_throughput=400,
            pre_trigger_include=["t1", "t2"],
            post_trigger_include="t3",
        )

        await ctx.create({"id": "db1"}, "/dbs", "dbs", "", options)

        headers = service.last_request.headers
        assert headers["x-ms-consistency-level"] == "Strong"
        assert headers["x-ms-session-token"] == "0:1"
        assert headers["x-ms-offer-throughput"] == "400"
        assert headers["x-ms-documentdb-pre-trigger-include"] == "t1,t2"
        assert headers["x-ms-documentdb-post-trigger-include"] == "t3"

    @pytest.mark.parametrize("partition_key,expected", [
        ("a", '["a"]'),
        (5, "[5]"),
        (["a", 1], '["a", 1]'),
        (UNDEFINED_PARTITION_KEY, "[{}]"),
        (NULL_PARTITION_KEY, "[null]"),
    ])
    async def test_partition_key_header(self, service, partition_key, expected):
        """Test partition key values are sent as a JSON array."""
        ctx = make_context(service)

        await ctx.read("/", "", "", partition_key=partition_key)

        assert service.last_request.headers["x-ms-documentdb-partitionkey"] == expected

    async def test_partition_key_from_options(self, service):
        """Test options.partition_key is used when no explicit key is given."""
        ctx = make_context(service)

        await ctx.read("/", "", "", RequestOptions(partition_key="p"))

        assert service.last_request.headers["x-ms-documentdb-partitionkey"] == '["p"]'

    async def test_feed_headers(self, service):
        """Test feed options become feed headers."""
        ctx = make_context(service)
        options = FeedOptions(
            max_item_count=10,
            enable_cross_partition_query=True,
            populate_query_metrics=True,
        )

        await ctx.query_feed("/dbs", "dbs", "", lambda r: r.get("Databases"), None, options)

        headers = service.last_request.headers
        assert service.last_request.method == "GET"
        assert headers["x-ms-max-item-count"] == "10"
        assert headers["x-ms-documentdb-query-enablecrosspartition"] == "True"
        assert headers["x-ms-documentdb-populatequerymetrics"] == "True"
        assert "x-ms-documentdb-isquery" not in headers


class TestDispatch:
    """Test the request path and response decoding."""

    async def test_create_and_read(self, service):
        """Test a created resource can be read back."""
        ctx = make_context(service)

        created = await ctx.create({"id": "db1"}, "/dbs", "dbs", "")
        read = await ctx.read("/dbs/db1", "dbs", "dbs/db1")

        assert created.result["id"] == "db1"
        assert read.result["_rid"] == created.result["_rid"]
        assert read.headers["x-ms-request-charge"] == "1.5"
        assert service.last_request.url == httpx.URL(ENDPOINT + "dbs/db1")

    async def test_upsert_header(self, service):
        """Test upsert posts with the is-upsert header."""
        ctx = make_context(service)

        await ctx.upsert({"id": "db1"}, "/dbs", "dbs", "")
        response = await ctx.upsert({"id": "db1", "x": 1}, "/dbs", "dbs", "")

        assert service.last_request.method == "POST"
        assert service.last_request.headers["x-ms-documentdb-is-upsert"] == "True"
        assert response.result["x"] == 1

    async def test_delete_returns_no_body(self, service):
        """Test 204 responses decode to None."""
        ctx = make_context(service)
        await ctx.create({"id": "db1"}, "/dbs", "dbs", "")

        response = await ctx.delete("/dbs/db1", "dbs", "dbs/db1")

        assert response.result is None

    async def test_query_posts_query_spec(self, service):
        """Test queries are POSTed as application/query+json."""
        ctx = make_context(service)
        await ctx.create({"id": "db1"}, "/dbs", "dbs", "")
        await ctx.create({"id": "db2"}, "/dbs", "dbs", "")
        spec = SqlQuerySpec(
            query="SELECT * FROM root r WHERE r.id = @id",
            parameters=[SqlParameter(name="@id", value="db2")],
        )

        response = await ctx.query_feed("/dbs", "dbs", "", lambda r: r.get("Databases"), spec)

        request = service.last_request
        assert request.method == "POST"
        assert request.headers["x-ms-documentdb-isquery"] == "True"
        assert request.headers["content-type"] == "application/query+json"
        assert json.loads(request.content)["parameters"] == [{"name": "@id", "value": "db2"}]
        assert [r["id"] for r in response.result] == ["db2"]

    async def test_if_match(self, service):
        """Test access conditions are sent as If-Match."""
        ctx = make_context(service)
        created = await ctx.create({"id": "db1"}, "/dbs", "dbs", "")
        stale = RequestOptions(access_condition=AccessCondition(condition='"stale"'))

        with pytest.raises(PreconditionFailedError):
            await ctx.replace({"id": "db1"}, "/dbs/db1", "dbs", "dbs/db1", stale)

        fresh = RequestOptions(access_condition=AccessCondition(condition=created.result["_etag"]))
        await ctx.replace({"id": "db1"}, "/dbs/db1", "dbs", "dbs/db1", fresh)
        assert service.last_request.headers["if-match"] == created.result["_etag"]

    async def test_activity_id_context_is_reset(self, service):
        """Test the activity id is only set while a request is in flight."""
        ctx = make_context(service)

        await ctx.get_database_account()

        assert activity_id.get() is None

    async def test_execute_stored_procedure(self, service):
        """Test parameters are posted as a JSON array."""
        ctx = make_context(service)
        service.collections["dbs"] = {"db1": {}}
        service.collections["dbs/db1/colls"] = {"c1": {}}
        service.collections["dbs/db1/colls/c1/sprocs"] = {"p1": {}}

        response = await ctx.execute_stored_procedure(
            "/dbs/db1/colls/c1/sprocs/p1", "dbs/db1/colls/c1/sprocs/p1", ["a", 1], partition_key="a"
        )

        assert json.loads(service.last_request.content) == ["a", 1]
        assert response.result == {"params": ["a", 1]}


class TestErrors:
    """Test error mapping."""

    async def test_not_found(self, service):
        """Test 404 raises ResourceNotFoundError."""
        ctx = make_context(service)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await ctx.read("/dbs/missing", "dbs", "dbs/missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.activity_id == service.last_request.headers["x-ms-activity-id"]

    async def test_conflict(self, service):
        """Test 409 raises ConflictError."""
        ctx = make_context(service)
        await ctx.create({"id": "db1"}, "/dbs", "dbs", "")

        with pytest.raises(ConflictError):
            await ctx.create({"id": "db1"}, "/dbs", "dbs", "")

    async def test_throttled(self, service):
        """Test 429 carries the retry hint and is not retried."""
        ctx = make_context(service)
        service.fail_next(429, "TooManyRequests", "slow down", {"x-ms-retry-after-ms": "100"})

        with pytest.raises(TooManyRequestsError) as exc_info:
            await ctx.get_database_account()

        assert exc_info.value.retry_after_ms == 100.0
        assert len(service.requests) == 1

    async def test_transport_error(self):
        """Test connection failures raise ServiceRequestError."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        ctx = ClientContext(ClientConfig(endpoint=ENDPOINT), http_client)

        with pytest.raises(ServiceRequestError) as exc_info:
            await ctx.read("/dbs/db1", "dbs", "dbs/db1")

        assert exc_info.value.method == "GET"
        assert exc_info.value.url == ENDPOINT + "dbs/db1"


class TestLifecycle:
    """Test ownership of the HTTP client."""

    async def test_close_keeps_injected_client_open(self, service):
        """Test an injected client is left for its owner to close."""
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(service.handler))
        ctx = ClientContext(ClientConfig(endpoint=ENDPOINT), http_client)

        await ctx.close()

        assert not http_client.is_closed
        await http_client.aclose()

    async def test_close_owned_client(self):
        """Test a self-built client is closed."""
        ctx = ClientContext(ClientConfig(endpoint=ENDPOINT))

        await ctx.close()

        assert ctx._http.is_closed
