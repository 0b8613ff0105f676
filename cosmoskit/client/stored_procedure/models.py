"""
Stored Procedure Models.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..resource import Resource
from ...constants import HttpHeaders
from ...request.response import ResourceResponse

if TYPE_CHECKING:
    from .stored_procedure import StoredProcedure


class StoredProcedureDefinition(Resource):
    """Stored procedure.

    Attributes:
        id: Stored procedure identifier
        body: JavaScript source of the procedure
    """

    body: Optional[Any] = None


@dataclass
class StoredProcedureResponse(ResourceResponse[StoredProcedureDefinition]):
    """Response to a stored procedure operation.

    ref, stored_procedure and sproc are the same StoredProcedure handle.
    """

    @property
    def stored_procedure(self) -> "StoredProcedure":
        return self.ref

    @property
    def sproc(self) -> "StoredProcedure":
        return self.ref


@dataclass
class StoredProcedureExecuteResponse:
    """Value returned by a stored procedure run.

    Attributes:
        result: Whatever the procedure passed to setBody()
        headers: Response headers
    """

    result: Any
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def script_log(self) -> Optional[str]:
        return self.headers.get("x-ms-documentdb-script-log-results")

    @property
    def request_charge(self) -> float:
        try:
            return float(self.headers.get(HttpHeaders.REQUEST_CHARGE, 0) or 0)
        except ValueError:
            return 0.0
