"""
Schema registry mapping intent names to action schemas.

Populated once at startup and frozen; lookups afterwards are read-only and
safe to share between concurrent resolution calls.
"""
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from ..exceptions import DuplicateIntentError, InvalidArgumentError, RegistryFrozenError
from .action_schema import ActionSchema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Intent name -> ActionSchema lookup table."""

    def __init__(self):
        self._schemas: Dict[str, ActionSchema] = {}
        self._frozen = False

    def register(self, schema: ActionSchema, intent_name: Optional[str] = None) -> None:
        """
        Register a schema under its own intent name or an alias.

        :param schema: Schema to register
        :param intent_name: Optional alias; one schema may serve several intents
        :raises RegistryFrozenError: If the registry was already frozen
        :raises DuplicateIntentError: If the intent name is taken by another schema
        """
        if schema is None:
            raise InvalidArgumentError("schema is required")
        if self._frozen:
            raise RegistryFrozenError("Schema registry is frozen")

        name = intent_name or schema.intent_name
        existing = self._schemas.get(name)
        if existing is not None and existing != schema:
            raise DuplicateIntentError(
                f"Intent '{name}' is already bound to another schema"
            )

        self._schemas[name] = schema
        logger.debug(f"Registered action schema for intent '{name}'")

    def lookup(self, intent_name: str) -> Optional[ActionSchema]:
        if not intent_name:
            return None
        return self._schemas.get(intent_name)

    def freeze(self) -> "SchemaRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def intent_names(self) -> List[str]:
        return list(self._schemas)

    def __contains__(self, intent_name: str) -> bool:
        return intent_name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[ActionSchema]:
        return iter(self._schemas.values())


def build_registry(schemas: Iterable[ActionSchema]) -> SchemaRegistry:
    """
    Startup step: register every schema and freeze the registry.

    :param schemas: Declared action schemas
    :return: Frozen SchemaRegistry
    """
    registry = SchemaRegistry()
    for schema in schemas:
        registry.register(schema)
    logger.info(f"Schema registry built with {len(registry)} intents")
    return registry.freeze()
