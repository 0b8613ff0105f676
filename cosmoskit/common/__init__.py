"""Common helpers."""

from .helper import (
    get_id_from_link,
    get_path_from_link,
    trim_slashes,
    validate_item_id,
    validate_resource,
)

__all__ = [
    "get_id_from_link",
    "get_path_from_link",
    "trim_slashes",
    "validate_item_id",
    "validate_resource",
]
