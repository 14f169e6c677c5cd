"""
Mutable action instances produced by the resolver.
"""
from typing import Any, Dict, List, Optional

from ..exceptions import InvalidArgumentError
from .action_schema import ActionSchema


class ActionInstance:
    """
    Current field values of one action, plus an optional parent action.

    Unset parameters are simply absent from ``values``. Instances are owned by
    the caller and threaded through successive resolution calls.
    """

    def __init__(self, schema: ActionSchema):
        if schema is None:
            raise InvalidArgumentError("schema is required")
        self.schema = schema
        self._values: Dict[str, Any] = {}
        self._context: Optional["ActionInstance"] = None

    @property
    def intent_name(self) -> str:
        return self.schema.intent_name

    @property
    def values(self) -> Dict[str, Any]:
        """Copy of the bound values."""
        return dict(self._values)

    @property
    def context(self) -> Optional["ActionInstance"]:
        return self._context

    def attach_context(self, parent: "ActionInstance") -> None:
        self._context = parent

    def set(self, name: str, value: Any) -> None:
        self._require_parameter(name)
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        self._require_parameter(name)
        return self._values.get(name, default)

    def is_set(self, name: str) -> bool:
        return name in self._values

    def clear(self, name: str) -> None:
        self._require_parameter(name)
        self._values.pop(name, None)

    def unset_parameters(self) -> List[str]:
        """Names of parameters still waiting for a value, in schema order."""
        return [name for name in self.schema.parameter_names if name not in self._values]

    def is_complete(self) -> bool:
        return not self.unset_parameters()

    def to_dict(self) -> dict:
        """Convert to dictionary for logging and debugging."""
        result = {
            "intent": self.intent_name,
            "values": dict(self._values),
        }
        if self._context is not None:
            result[self.schema.context_parameter_name] = self._context.to_dict()
        return result

    def _require_parameter(self, name: str) -> None:
        if not name or not name.strip():
            raise InvalidArgumentError("parameter name is required")
        if self.schema.parameter(name) is None:
            raise InvalidArgumentError(
                f"'{name}' is not a parameter of action '{self.intent_name}'"
            )

    def __repr__(self) -> str:
        return f"ActionInstance(intent={self.intent_name!r}, values={self._values!r})"
