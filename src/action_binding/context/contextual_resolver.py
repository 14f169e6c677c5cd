"""
Contextual action chaining.

A contextual action declares the schema of the parent action it belongs to
(e.g. "change the date" only makes sense inside an open "book a flight").
This module validates child/parent pairings, attaches parents, and builds
default parents when a contextual action arrives on its own.
"""
import logging
from typing import Optional, Tuple, Union

from ..exceptions import InvalidArgumentError
from ..schema.action_instance import ActionInstance
from ..schema.action_schema import ActionSchema
from ..schema.factory import ActionFactory

logger = logging.getLogger(__name__)

SchemaOrAction = Union[ActionSchema, ActionInstance]


def _schema_of(target: SchemaOrAction) -> ActionSchema:
    if target is None:
        raise InvalidArgumentError("action or schema is required")
    if isinstance(target, ActionInstance):
        return target.schema
    return target


class ContextualResolver:
    """
    Validates and builds parent chains for contextual actions.
    
    Pairing is an exact schema match: a child declaring parent schema P
    accepts an instance of P and nothing else.
    """

    def __init__(self, factory: Optional[ActionFactory] = None):
        """
        :param factory: Factory used to synthesize missing parents
        """
        self._factory = factory or ActionFactory()

    def is_contextual(self, target: SchemaOrAction) -> bool:
        """Check if a schema (or an instance's schema) requires a parent."""
        return _schema_of(target).is_contextual

    def can_start_without_context(self, target: SchemaOrAction) -> bool:
        """
        Check if an action can be started with no parent in hand.

        Non-contextual actions always can; contextual ones only when declared
        with ``can_execute_with_no_context``.
        """
        schema = _schema_of(target)
        if not schema.is_contextual:
            return True
        return schema.can_execute_with_no_context

    def is_valid_contextual_pairing(self, child: ActionInstance, parent: ActionInstance) -> bool:
        """
        Check that ``parent`` is the declared parent of ``child`` and attach it.

        A child already chained onto a different parent instance is never
        re-parented.

        :param child: Contextual action
        :param parent: Candidate parent action
        :return: True if paired (parent attached), False otherwise
        """
        if child is None:
            raise InvalidArgumentError("child action is required")
        if parent is None:
            raise InvalidArgumentError("parent action is required")

        if not child.schema.is_contextual:
            return False

        if child.schema.parent_schema != parent.schema:
            return False

        if child.context is not None and child.context is not parent:
            logger.debug(
                f"'{child.intent_name}' is already chained onto another "
                f"'{child.context.intent_name}' instance"
            )
            return False

        child.attach_context(parent)
        return True

    def build_synthetic_parent(
        self,
        child: ActionInstance,
    ) -> Tuple[Optional[ActionInstance], Optional[str]]:
        """
        Build the parent chain of a contextual action that arrived alone.

        Parents that are themselves contextual get their own default parent,
        up to the first non-contextual ancestor.

        :param child: Contextual action without a live parent
        :return: (parent instance, parent intent name), or (None, None) when
            ``child`` is not contextual
        """
        if child is None:
            raise InvalidArgumentError("child action is required")

        if not child.schema.is_contextual:
            return None, None

        if child.context is not None:
            return child.context, child.context.intent_name

        parent = self._factory.create(child.schema.parent_schema)
        self.is_valid_contextual_pairing(child, parent)

        if parent.schema.is_contextual:
            self.build_synthetic_parent(parent)

        logger.debug(f"Synthesized parent '{parent.intent_name}' for '{child.intent_name}'")
        return parent, parent.intent_name

    def update_if_valid_contextual_action(
        self,
        child: ActionInstance,
        existing_parent: ActionInstance,
    ) -> Tuple[bool, bool]:
        """
        Re-validate ``child`` against the parent of the current action.

        Used when the current action is itself contextual and the user starts
        a sibling contextual action: the sibling must chain onto the same
        grandparent.

        :param child: Newly resolved action
        :param existing_parent: Action currently in progress
        :return: (accepted, is_contextual)
        """
        if child is None:
            raise InvalidArgumentError("child action is required")
        if existing_parent is None:
            raise InvalidArgumentError("existing parent action is required")

        if not existing_parent.schema.is_contextual:
            return True, False

        is_contextual = child.schema.is_contextual
        grandparent = existing_parent.context
        if grandparent is None:
            return False, is_contextual

        return self.is_valid_contextual_pairing(child, grandparent), is_contextual
