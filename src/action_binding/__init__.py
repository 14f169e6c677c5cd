"""
Intent-to-action resolution and entity binding.

Given an NLU result (top intent plus loosely-typed entities) this package
selects the registered action schema, binds entities onto its typed
parameters and chains contextual actions onto their parents.
"""
from .models import EntityRecommendation, IntentRecommendation, NLUResult
from .schema import (
    ActionSchema,
    ParameterSchema,
    ActionInstance,
    SchemaRegistry,
    build_registry,
    ActionFactory,
)
from .binding import EntityBinder, BindingResult, EntityMatcher, ValueCoercer
from .context import ContextualResolver
from .resolver import ActionResolver, ResolutionOutcome
from .nlu import NLUService, LuisHttpService
from .exceptions import (
    ActionBindingError,
    InvalidArgumentError,
    FormatError,
    ConfigurationError,
    NLUServiceError,
)

__all__ = [
    "EntityRecommendation",
    "IntentRecommendation",
    "NLUResult",
    "ActionSchema",
    "ParameterSchema",
    "ActionInstance",
    "SchemaRegistry",
    "build_registry",
    "ActionFactory",
    "EntityBinder",
    "BindingResult",
    "EntityMatcher",
    "ValueCoercer",
    "ContextualResolver",
    "ActionResolver",
    "ResolutionOutcome",
    "NLUService",
    "LuisHttpService",
    "ActionBindingError",
    "InvalidArgumentError",
    "FormatError",
    "ConfigurationError",
    "NLUServiceError",
]
