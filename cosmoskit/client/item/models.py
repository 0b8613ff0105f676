"""
Item Models.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ConfigDict

from ..resource import Resource
from ...request.response import ResourceResponse

if TYPE_CHECKING:
    from .item import Item


class ItemDefinition(Resource):
    """Item (document) with user data and system-generated properties.

    Any field other than the system properties is user data and is kept
    as a model extra. System properties are only populated from their
    service names (_rid, _ts, _self, _etag), so user fields named rid, ts,
    self_link or etag stay in model_extra and do not shadow them.
    """

    model_config = ConfigDict(populate_by_name=False)


@dataclass
class ItemResponse(ResourceResponse[ItemDefinition]):
    """Response to an item operation; ref is the Item handle."""

    @property
    def item(self) -> "Item":
        return self.ref
