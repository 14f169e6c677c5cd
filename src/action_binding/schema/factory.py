"""
Factory creating action instances from schemas.
"""
from typing import Callable, Dict

from ..exceptions import InvalidArgumentError
from .action_instance import ActionInstance
from .action_schema import ActionSchema

ActionConstructor = Callable[[ActionSchema], ActionInstance]


class ActionFactory:
    """
    Creates empty ActionInstances.

    Schemas without a registered constructor get a plain ActionInstance; a
    constructor lets callers plug in ActionInstance subclasses per intent.
    """

    def __init__(self):
        self._constructors: Dict[str, ActionConstructor] = {}

    def register_constructor(self, intent_name: str, constructor: ActionConstructor) -> None:
        if not intent_name:
            raise InvalidArgumentError("intent_name is required")
        self._constructors[intent_name] = constructor

    def create(self, schema: ActionSchema) -> ActionInstance:
        """
        Create an instance of ``schema`` with every field unset.

        :param schema: Schema to instantiate
        :return: New ActionInstance
        """
        if schema is None:
            raise InvalidArgumentError("schema is required")
        constructor = self._constructors.get(schema.intent_name, ActionInstance)
        return constructor(schema)
