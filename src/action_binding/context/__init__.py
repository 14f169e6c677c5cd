"""
Contextual action chaining.
"""
from .contextual_resolver import ContextualResolver

__all__ = ["ContextualResolver"]
