"""
Link and resource helpers.

Builds name-based resource paths and validates resource definitions
before they are handed to the dispatch layer.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel

from ..exceptions import InvalidResourceError

ILLEGAL_ID_CHARACTERS = ("/", "\\", "?", "#")


def trim_slashes(link: str) -> str:
    """Strip leading and trailing slashes from a link."""
    return link.strip("/")


def get_path_from_link(link: str, resource_type: Optional[str] = None) -> str:
    """Build the request path for a link.

    Args:
        link: Name-based resource link (e.g. "dbs/db1/colls/c1")
        resource_type: Child resource kind to append (e.g. "udfs")

    Returns:
        Absolute path such as "/dbs/db1/colls/c1/udfs"
    """
    path = "/" + trim_slashes(link)
    if resource_type:
        path = path.rstrip("/") + "/" + resource_type
    return path


def get_id_from_link(link: str) -> str:
    """Return the resource id for a name-based link.

    Name-based links identify themselves, so the id is the trimmed link.
    """
    return trim_slashes(link)


def validate_item_id(resource_id: Any) -> None:
    """Validate a resource id.

    Args:
        resource_id: Id to check

    Raises:
        InvalidResourceError: If the id is not a string, holds an illegal
            character, or ends with a space
    """
    if not isinstance(resource_id, str):
        raise InvalidResourceError("Id must be a string.", resource_id=resource_id)

    if any(char in resource_id for char in ILLEGAL_ID_CHARACTERS):
        raise InvalidResourceError("Id contains illegal chars.", resource_id=resource_id)

    if resource_id.endswith(" "):
        raise InvalidResourceError("Id ends with a space.", resource_id=resource_id)


def validate_resource(resource: Any, require_body: bool = False) -> None:
    """Validate a resource definition before it is sent.

    Args:
        resource: Definition model or mapping
        require_body: Whether a non-empty "body" (script source) is required

    Raises:
        InvalidResourceError: If the definition is rejected
    """
    if isinstance(resource, BaseModel):
        data: Mapping[str, Any] = resource.model_dump(by_alias=True)
    elif isinstance(resource, Mapping):
        data = resource
    else:
        raise InvalidResourceError(
            f"Resource must be a mapping or a model, got {type(resource).__name__}."
        )

    resource_id = data.get("id")
    if resource_id is None or resource_id == "":
        raise InvalidResourceError("Id is required.")
    validate_item_id(resource_id)

    if require_body and not data.get("body"):
        raise InvalidResourceError("Body is required.", resource_id=resource_id)
