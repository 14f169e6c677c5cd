"""
Entity binding layer.

Turns loosely-typed NLU entities into typed action parameter values.

Key components:
- ValueCoercer: raw value -> declared ValueType
- EntityMatcher: three-tier entity lookup per parameter
- EntityBinder: resolution propagation plus per-parameter binding
- Disambiguation helpers for multi-candidate parameters
"""
from .coercer import ValueCoercer
from .entity_matcher import EntityMatcher, EntityMatch, MatchTier, Disambiguator
from .entity_binder import EntityBinder, BindingResult
from .disambiguation import highest_score, FuzzyTextDisambiguator

__all__ = [
    "ValueCoercer",
    "EntityMatcher",
    "EntityMatch",
    "MatchTier",
    "Disambiguator",
    "EntityBinder",
    "BindingResult",
    "highest_score",
    "FuzzyTextDisambiguator",
]
