"""
Action schemas, value types, instances, registry and factory.
"""
from .value_types import (
    ValueType,
    ScalarKind,
    ScalarType,
    EnumType,
    ArrayType,
    NullableType,
    unwrap_nullable,
    STRING,
    INTEGER,
    FLOAT,
    DECIMAL,
    BOOLEAN,
    DATE,
    DATETIME,
    TIME,
)
from .action_schema import ActionSchema, ParameterSchema
from .action_instance import ActionInstance
from .registry import SchemaRegistry, build_registry
from .factory import ActionFactory

__all__ = [
    "ValueType",
    "ScalarKind",
    "ScalarType",
    "EnumType",
    "ArrayType",
    "NullableType",
    "unwrap_nullable",
    "STRING",
    "INTEGER",
    "FLOAT",
    "DECIMAL",
    "BOOLEAN",
    "DATE",
    "DATETIME",
    "TIME",
    "ActionSchema",
    "ParameterSchema",
    "ActionInstance",
    "SchemaRegistry",
    "build_registry",
    "ActionFactory",
]
