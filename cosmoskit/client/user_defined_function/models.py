"""
User-Defined Function Models.

Author: Cosmoskit Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ..resource import Resource
from ...request.response import ResourceResponse

if TYPE_CHECKING:
    from .user_defined_function import UserDefinedFunction


class UserDefinedFunctionDefinition(Resource):
    """User-defined function.

    Attributes:
        id: Function identifier, used to call it from queries as udf.<id>
        body: JavaScript source of the function
    """

    body: Optional[Any] = None


@dataclass
class UserDefinedFunctionResponse(ResourceResponse[UserDefinedFunctionDefinition]):
    """Response to a user-defined function operation.

    ref, user_defined_function and udf are the same UserDefinedFunction handle.
    """

    @property
    def user_defined_function(self) -> "UserDefinedFunction":
        return self.ref

    @property
    def udf(self) -> "UserDefinedFunction":
        return self.ref
