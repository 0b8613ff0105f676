"""User-defined function resources."""

from .models import UserDefinedFunctionDefinition, UserDefinedFunctionResponse
from .user_defined_function import UserDefinedFunction
from .user_defined_functions import UserDefinedFunctions

__all__ = [
    "UserDefinedFunction",
    "UserDefinedFunctionDefinition",
    "UserDefinedFunctionResponse",
    "UserDefinedFunctions",
]
