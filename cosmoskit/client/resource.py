"""
Base resource model.

Every persisted definition carries the system properties the service
stamps on it. User fields and unknown server fields are kept as extras.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import InvalidResourceError

R = TypeVar("R", bound="Resource")


class Resource(BaseModel):
    """Common resource properties.

    Attributes:
        id: Resource identifier
        _rid: Resource ID (system-generated)
        _ts: Timestamp (system-generated)
        _self: Self link (system-generated)
        _etag: ETag for optimistic concurrency (system-generated)
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = None
    rid: Optional[str] = Field(default=None, alias="_rid")
    ts: Optional[int] = Field(default=None, alias="_ts")
    self_link: Optional[str] = Field(default=None, alias="_self")
    etag: Optional[str] = Field(default=None, alias="_etag")

    def to_request_body(self) -> Dict[str, Any]:
        """Serialize for the wire, using service field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


def to_definition(body: Union[R, Mapping[str, Any]], model: Type[R]) -> R:
    """Coerce a caller-supplied definition into its model.

    Args:
        body: Model instance or mapping
        model: Definition model class

    Returns:
        A fresh model instance; the caller's object is never mutated

    Raises:
        InvalidResourceError: If the mapping does not fit the model
    """
    if isinstance(body, model):
        return body.model_copy(deep=True)
    if isinstance(body, BaseModel):
        body = body.model_dump(by_alias=True)
    if not isinstance(body, Mapping):
        raise InvalidResourceError(
            f"{model.__name__} must be a mapping or a model, got {type(body).__name__}."
        )
    try:
        return model.model_validate(dict(body))
    except ValidationError as e:
        raise InvalidResourceError(f"Invalid {model.__name__}: {e}", resource_id=body.get("id")) from e


def from_result(result: Any, model: Type[R]) -> Optional[R]:
    """Parse a response body into its model, or None for an empty body."""
    if result is None:
        return None
    return model.model_validate(result)
