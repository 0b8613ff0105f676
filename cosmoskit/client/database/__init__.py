"""Database resources."""

from .models import DatabaseDefinition, DatabaseResponse
from .database import Database
from .databases import Databases

__all__ = ["Database", "DatabaseDefinition", "DatabaseResponse", "Databases"]
