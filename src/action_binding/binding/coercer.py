"""
Value coercion from loosely-typed NLU values to declared parameter types.
"""
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from ..exceptions import FormatError, InvalidArgumentError
from ..schema.value_types import (
    ArrayType,
    EnumType,
    ScalarKind,
    ScalarType,
    ValueType,
    unwrap_nullable,
)


class ValueCoercer:
    """
    Converts raw recognized values into typed field values.

    Scalars go through pydantic's lax-mode parsing (``"42"`` -> 42,
    ``"2024-05-01"`` -> date, ``"yes"`` -> True). Arrays accept either a list
    or a comma separated string. Enums match member names exactly.

    Every failure surfaces as FormatError; callers decide whether that is
    fatal (it never is for the binder).
    """

    def __init__(self):
        self._adapters: Dict[ScalarKind, TypeAdapter] = {}

    def coerce(self, value_type: ValueType, raw_value: Any) -> Any:
        """
        Coerce ``raw_value`` to ``value_type``.

        :param value_type: Declared type of the target parameter
        :param raw_value: Untyped value (text, number, list, ...)
        :return: Coerced value, or None for an empty array
        :raises InvalidArgumentError: If raw_value is None
        :raises FormatError: If the value does not fit the type
        """
        if raw_value is None:
            raise InvalidArgumentError("raw_value is required")

        target = unwrap_nullable(value_type)

        if isinstance(target, ArrayType):
            return self._coerce_array(target, raw_value)

        return self._coerce_single(target, self._single_value(raw_value))

    def _single_value(self, raw_value: Any) -> Any:
        # NLU services return lists of alternatives; a single field takes one
        if isinstance(raw_value, (list, tuple)):
            if len(raw_value) > 1:
                raise FormatError("Cannot assign multiple values to a single field")
            if not raw_value:
                raise FormatError("Cannot assign an empty list to a single field")
            return raw_value[0]
        return raw_value

    def _coerce_array(self, target: ArrayType, raw_value: Any) -> Optional[List[Any]]:
        if isinstance(raw_value, Mapping):
            raise FormatError(f"Cannot convert a structured value to {target}")

        if isinstance(raw_value, (list, tuple)):
            values = list(raw_value)
        else:
            values = [token.strip() for token in str(raw_value).split(",")]
            values = [token for token in values if token]

        if not values:
            return None

        element_type = unwrap_nullable(target.element_type)
        return [self._coerce_single(element_type, value) for value in values]

    def _coerce_single(self, target: ValueType, value: Any) -> Any:
        if isinstance(target, EnumType):
            return self._coerce_enum(target, value)
        if isinstance(target, ScalarType):
            return self._coerce_scalar(target, value)
        if isinstance(target, ArrayType):
            raise FormatError(f"Nested arrays are not supported: {target}")
        raise FormatError(f"Unsupported value type: {target!r}")

    def _coerce_enum(self, target: EnumType, value: Any) -> Enum:
        if isinstance(value, target.enum_cls):
            return value
        try:
            return target.enum_cls[str(value)]
        except KeyError:
            raise FormatError(
                f"'{value}' is not a valid {target}; "
                f"expected one of {', '.join(target.member_names)}"
            )

    def _coerce_scalar(self, target: ScalarType, value: Any) -> Any:
        if isinstance(value, (Mapping, list, tuple)):
            raise FormatError(f"Cannot convert a structured value to {target}")

        if target.kind is ScalarKind.STRING:
            return str(value)

        try:
            return self._adapter(target.kind).validate_python(value)
        except ValidationError as e:
            raise FormatError(f"Cannot convert '{value}' to {target}: {e.errors()[0]['msg']}")

    def _adapter(self, kind: ScalarKind) -> TypeAdapter:
        if kind not in self._adapters:
            self._adapters[kind] = TypeAdapter(ScalarType(kind).python_type)
        return self._adapters[kind]
