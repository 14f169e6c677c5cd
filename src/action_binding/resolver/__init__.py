"""
Top-level intent-to-action resolution.
"""
from .action_resolver import (
    ActionResolver,
    Resolution,
    ResolutionOutcome,
    ResolverState,
    NONE_INTENT,
)

__all__ = [
    "ActionResolver",
    "Resolution",
    "ResolutionOutcome",
    "ResolverState",
    "NONE_INTENT",
]
