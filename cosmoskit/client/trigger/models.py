"""
Trigger Models.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from pydantic import ConfigDict, Field

from ...common.helper import validate_resource
from ...exceptions import InvalidResourceError
from ..resource import Resource, to_definition
from ...request.response import ResourceResponse

if TYPE_CHECKING:
    from .trigger import Trigger


class TriggerType(str, Enum):
    """When the trigger runs relative to the operation."""
    PRE = "Pre"
    POST = "Post"


class TriggerOperation(str, Enum):
    """Operation the trigger is attached to."""
    ALL = "All"
    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"
    REPLACE = "Replace"


class TriggerDefinition(Resource):
    """Trigger.

    Attributes:
        id: Trigger identifier
        body: JavaScript source of the trigger
        trigger_type: Pre or Post
        trigger_operation: Operation that fires the trigger
    """

    body: Optional[Any] = None
    trigger_type: Optional[TriggerType] = Field(default=None, alias="triggerType")
    trigger_operation: Optional[TriggerOperation] = Field(default=None, alias="triggerOperation")

    model_config = ConfigDict(use_enum_values=True)


@dataclass
class TriggerResponse(ResourceResponse[TriggerDefinition]):
    """Response to a trigger operation; ref and trigger are the Trigger handle."""

    @property
    def trigger(self) -> "Trigger":
        return self.ref


def prepare_trigger(body: Union[TriggerDefinition, Mapping[str, Any]]) -> TriggerDefinition:
    """Coerce and validate a trigger definition.

    Raises:
        InvalidResourceError: If id, body, type or operation is missing or invalid
    """
    definition = to_definition(body, TriggerDefinition)
    if definition.body is not None and not isinstance(definition.body, str):
        definition.body = str(definition.body)
    validate_resource(definition, require_body=True)
    if definition.trigger_type is None:
        raise InvalidResourceError("Trigger type is required.", resource_id=definition.id)
    if definition.trigger_operation is None:
        raise InvalidResourceError("Trigger operation is required.", resource_id=definition.id)
    return definition
