"""
Declared parameter types.

A small tagged union that drives coercion: scalars, enums, arrays and a
nullable wrapper. Every variant is an immutable value object so schemas built
from them can be shared freely between resolution calls.
"""
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Iterable, Tuple, Type


class ScalarKind(str, Enum):
    """Primitive kinds a scalar parameter can declare."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"


_PYTHON_TYPES = {
    ScalarKind.STRING: str,
    ScalarKind.INTEGER: int,
    ScalarKind.FLOAT: float,
    ScalarKind.DECIMAL: Decimal,
    ScalarKind.BOOLEAN: bool,
    ScalarKind.DATE: date,
    ScalarKind.DATETIME: datetime,
    ScalarKind.TIME: time,
}


class ValueType:
    """Base of all declared value types."""

    @property
    def is_array(self) -> bool:
        return False


@dataclass(frozen=True)
class ScalarType(ValueType):
    kind: ScalarKind

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self.kind]

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class EnumType(ValueType):
    """Enumeration matched by exact, case-sensitive member name."""
    enum_cls: Type[Enum]

    @property
    def member_names(self) -> Tuple[str, ...]:
        return tuple(self.enum_cls.__members__)

    @classmethod
    def from_names(cls, name: str, members: Iterable[str]) -> "EnumType":
        """Build an enum type from a plain set of symbol names."""
        return cls(Enum(name, [(member, member) for member in members]))

    def __str__(self) -> str:
        return self.enum_cls.__name__


@dataclass(frozen=True)
class ArrayType(ValueType):
    element_type: ValueType

    @property
    def is_array(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.element_type}[]"


@dataclass(frozen=True)
class NullableType(ValueType):
    inner: ValueType

    @property
    def is_array(self) -> bool:
        return self.inner.is_array

    def __str__(self) -> str:
        return f"{self.inner}?"


def unwrap_nullable(value_type: ValueType) -> ValueType:
    """Strip any number of nullable wrappers."""
    while isinstance(value_type, NullableType):
        value_type = value_type.inner
    return value_type


STRING = ScalarType(ScalarKind.STRING)
INTEGER = ScalarType(ScalarKind.INTEGER)
FLOAT = ScalarType(ScalarKind.FLOAT)
DECIMAL = ScalarType(ScalarKind.DECIMAL)
BOOLEAN = ScalarType(ScalarKind.BOOLEAN)
DATE = ScalarType(ScalarKind.DATE)
DATETIME = ScalarType(ScalarKind.DATETIME)
TIME = ScalarType(ScalarKind.TIME)
