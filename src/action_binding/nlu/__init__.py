"""
NLU service interface, LUIS HTTP client and built-in entity types.
"""
from .service import NLUService
from .builtin_types import BUILTIN_PREFIX, BuiltInTypes, is_builtin_type, get_datetime_values
from .luis_client import LuisHttpService

__all__ = [
    "NLUService",
    "LuisHttpService",
    "BUILTIN_PREFIX",
    "BuiltInTypes",
    "is_builtin_type",
    "get_datetime_values",
]
