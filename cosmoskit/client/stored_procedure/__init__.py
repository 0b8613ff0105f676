"""Stored procedure resources."""

from .models import (
    StoredProcedureDefinition,
    StoredProcedureExecuteResponse,
    StoredProcedureResponse,
)
from .stored_procedure import StoredProcedure
from .stored_procedures import StoredProcedures

__all__ = [
    "StoredProcedure",
    "StoredProcedureDefinition",
    "StoredProcedureExecuteResponse",
    "StoredProcedureResponse",
    "StoredProcedures",
]
