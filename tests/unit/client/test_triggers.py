"""
Unit tests for triggers.
"""

import json

import pytest

from cosmoskit.client.trigger import TriggerDefinition, TriggerOperation, TriggerType
from cosmoskit.exceptions import InvalidResourceError, ResourceNotFoundError
from cosmoskit.request.options import RequestOptions

TRIGGER_BODY = "function stamp() { var item = getContext().getRequest().getBody(); }"


def trigger_definition(**overrides):
    definition = {
        "id": "stamp",
        "body": TRIGGER_BODY,
        "triggerType": "Pre",
        "triggerOperation": "Create",
    }
    definition.update(overrides)
    return definition


class TestTriggers:
    """Test creating, upserting and listing triggers."""

    async def test_create(self, container, service):
        """Test creating a trigger sends type and operation."""
        response = await container.triggers.create(trigger_definition())

        sent = json.loads(service.last_request.content)
        assert sent["triggerType"] == "Pre"
        assert sent["triggerOperation"] == "Create"
        assert response.body.trigger_type == "Pre"
        assert response.trigger.url == "dbs/db1/colls/c1/triggers/stamp"

    async def test_create_from_model(self, container):
        """Test triggers may be given as models with enum members."""
        definition = TriggerDefinition(
            id="audit",
            body=TRIGGER_BODY,
            trigger_type=TriggerType.POST,
            trigger_operation=TriggerOperation.ALL,
        )

        response = await container.triggers.create(definition)

        assert response.body.trigger_operation == "All"

    @pytest.mark.parametrize("overrides,message", [
        ({"triggerType": None}, "Trigger type is required"),
        ({"triggerOperation": None}, "Trigger operation is required"),
        ({"body": None}, "Body is required"),
        ({"id": None}, "Id is required"),
    ])
    async def test_invalid_definitions(self, container, service, overrides, message):
        """Test incomplete triggers fail before any request."""
        sent = len(service.requests)

        with pytest.raises(InvalidResourceError, match=message):
            await container.triggers.create(trigger_definition(**overrides))

        assert len(service.requests) == sent

    async def test_unknown_trigger_type(self, container):
        """Test unknown trigger types are rejected."""
        with pytest.raises(InvalidResourceError):
            await container.triggers.create(trigger_definition(triggerType="During"))

    async def test_upsert_and_query(self, container):
        """Test upsert and parameterised query."""
        await container.triggers.upsert(trigger_definition())
        await container.triggers.upsert(trigger_definition(id="audit", triggerType="Post"))

        response = await container.triggers.query({
            "query": "SELECT * FROM root r WHERE r.triggerType = @triggerType",
            "parameters": [{"name": "@triggerType", "value": "Post"}],
        }).fetch_all()

        assert [t["id"] for t in response.resources] == ["audit"]

    async def test_triggers_included_on_item_write(self, container, service):
        """Test item writes name the triggers to run."""
        await container.triggers.create(trigger_definition())

        await container.items.create(
            {"id": "i1", "pk": "a"}, RequestOptions(pre_trigger_include="stamp")
        )

        assert service.last_request.headers["x-ms-documentdb-pre-trigger-include"] == "stamp"


class TestTrigger:
    """Test the Trigger handle."""

    async def test_replace_defaults_id(self, container):
        """Test replace fills in the handle's id."""
        created = await container.triggers.create(trigger_definition())

        response = await created.trigger.replace({
            "body": TRIGGER_BODY,
            "triggerType": "Post",
            "triggerOperation": "Delete",
        })

        assert response.body.id == "stamp"
        assert response.body.trigger_operation == "Delete"

    async def test_read_and_delete(self, container):
        """Test reading and deleting a trigger."""
        await container.triggers.create(trigger_definition())
        handle = container.trigger("stamp")

        read = await handle.read()
        await handle.delete()

        assert read.body.trigger_type == "Pre"
        with pytest.raises(ResourceNotFoundError):
            await handle.read()
