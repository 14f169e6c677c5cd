"""
Static action and parameter schemas.

Schemas are declared once at startup and never mutated; they are plain
frozen dataclasses so they can be shared between concurrent resolutions.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .value_types import ValueType


@dataclass(frozen=True)
class ParameterSchema:
    """
    One bindable parameter of an action.
    
    Attributes:
        name: Parameter name; also matched against entity types
        value_type: Declared type driving coercion
        custom_type: Domain entity type preferred over every other match
        builtin_type: Built-in NLU entity type used as last resort
    """
    name: str
    value_type: ValueType
    custom_type: Optional[str] = None
    builtin_type: Optional[str] = None

    @property
    def is_array(self) -> bool:
        return self.value_type.is_array


@dataclass(frozen=True)
class ActionSchema:
    """
    Schema of an action bound to an NLU intent.
    
    A schema with a ``parent_schema`` is contextual: its instances only make
    sense chained onto a live instance of that parent.
    """
    intent_name: str
    parameters: Tuple[ParameterSchema, ...] = ()
    parent_schema: Optional["ActionSchema"] = None
    can_execute_with_no_context: bool = False
    context_parameter_name: str = "context"
    friendly_name: Optional[str] = None
    description: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.intent_name or not self.intent_name.strip():
            raise ValueError("intent_name is required")
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "parameters", tuple(self.parameters))
        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in schema '{self.intent_name}'")

    @property
    def is_contextual(self) -> bool:
        return self.parent_schema is not None

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    def parameter(self, name: str) -> Optional[ParameterSchema]:
        """Look up a parameter by exact name."""
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None

