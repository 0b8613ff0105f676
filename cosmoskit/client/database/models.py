"""
Database Models.

Pydantic models for database definitions and the response wrapper
returned by database operations.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..resource import Resource
from ...request.response import ResourceResponse

if TYPE_CHECKING:
    from .database import Database


class DatabaseDefinition(Resource):
    """Database definition.

    Attributes:
        id: Database identifier
        _colls: Containers feed link (system-generated)
        _users: Users feed link (system-generated)
    """


@dataclass
class DatabaseResponse(ResourceResponse[DatabaseDefinition]):
    """Response to a database operation; ref is the Database handle."""

    @property
    def database(self) -> "Database":
        return self.ref
