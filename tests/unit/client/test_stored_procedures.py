"""
Unit tests for stored procedures.
"""

import json

import pytest

from cosmoskit.client.stored_procedure import StoredProcedure
from cosmoskit.exceptions import InvalidResourceError, ResourceNotFoundError
from cosmoskit.request.options import RequestOptions

SPROC_BODY = "function hello(name) { getContext().getResponse().setBody('hi ' + name); }"


class TestStoredProcedures:
    """Test creating, upserting and listing stored procedures."""

    async def test_create(self, container, service):
        """Test creating a stored procedure."""
        response = await container.stored_procedures.create({"id": "hello", "body": SPROC_BODY})

        assert response.body.body == SPROC_BODY
        assert isinstance(response.sproc, StoredProcedure)
        assert response.sproc is response.stored_procedure
        assert response.sproc.url == "dbs/db1/colls/c1/sprocs/hello"
        assert service.last_request.url.path == "/dbs/db1/colls/c1/sprocs"

    async def test_create_requires_body(self, container, service):
        """Test procedures without a body are rejected locally."""
        sent = len(service.requests)

        with pytest.raises(InvalidResourceError, match="Body is required"):
            await container.stored_procedures.create({"id": "hello"})

        assert len(service.requests) == sent

    async def test_upsert_and_read_all(self, container):
        """Test upsert and listing."""
        await container.stored_procedures.upsert({"id": "hello", "body": SPROC_BODY})
        await container.stored_procedures.upsert({"id": "hello", "body": "function () {}"})

        listed = await container.stored_procedures.read_all().fetch_all()

        assert [(p["id"], p["body"]) for p in listed.resources] == [("hello", "function () {}")]


class TestStoredProcedure:
    """Test the StoredProcedure handle."""

    async def test_execute(self, container, service):
        """Test parameters and partition key are sent to the procedure."""
        await container.stored_procedures.create({"id": "hello", "body": SPROC_BODY})
        service.sproc_results["dbs/db1/colls/c1/sprocs/hello"] = "hi bob"

        response = await container.stored_procedure("hello").execute(["bob"], partition_key="a")

        request = service.last_request
        assert response.result == "hi bob"
        assert response.request_charge == 1.5
        assert json.loads(request.content) == ["bob"]
        assert request.headers["x-ms-documentdb-partitionkey"] == '["a"]'

    async def test_execute_without_params(self, container, service):
        """Test a missing parameter list is sent as an empty array."""
        await container.stored_procedures.create({"id": "hello", "body": SPROC_BODY})

        response = await container.stored_procedure("hello").execute()

        assert response.result == {"params": []}

    async def test_execute_with_script_logging(self, container, service):
        """Test script logging is requested by header."""
        await container.stored_procedures.create({"id": "hello", "body": SPROC_BODY})

        await container.stored_procedure("hello").execute(
            [], options=RequestOptions(enable_script_logging=True)
        )

        assert service.last_request.headers["x-ms-documentdb-script-enable-logging"] == "true"

    async def test_execute_missing(self, container):
        """Test executing a missing procedure raises ResourceNotFoundError."""
        with pytest.raises(ResourceNotFoundError):
            await container.stored_procedure("nope").execute()

    async def test_replace_and_delete(self, container):
        """Test replacing and deleting a procedure."""
        created = await container.stored_procedures.create({"id": "hello", "body": SPROC_BODY})

        replaced = await created.sproc.replace({"body": "function () {}"})
        await created.sproc.delete()

        assert replaced.body.body == "function () {}"
        with pytest.raises(ResourceNotFoundError):
            await created.sproc.read()
