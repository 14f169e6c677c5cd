"""
Top-level action resolution.

Maps an NLU result onto a registered action schema, instantiates it and binds
its parameters. During multi-turn slot filling it also re-interprets a user's
answer to detect a switch to a different intent.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

from ..binding.coercer import ValueCoercer
from ..binding.entity_binder import BindingResult, EntityBinder
from ..binding.entity_matcher import Disambiguator
from ..config import ActionBindingConfig
from ..exceptions import FormatError, InvalidArgumentError
from ..models import EntityRecommendation, NLUResult
from ..nlu.service import NLUService
from ..schema.action_instance import ActionInstance
from ..schema.action_schema import ActionSchema, ParameterSchema
from ..schema.factory import ActionFactory
from ..schema.registry import SchemaRegistry, build_registry

logger = logging.getLogger(__name__)

NONE_INTENT = "None"


class ResolverState(str, Enum):
    IDLE = "idle"
    RESOLVING_INTENT = "resolving_intent"
    BINDING = "binding"
    BOUND = "bound"
    CONTEXT_SWITCH_DETECTED = "context_switch_detected"
    UNRESOLVED = "unresolved"


@dataclass
class Resolution:
    """An action resolved from an NLU result, with what was used to bind it."""
    action: Optional[ActionInstance]
    intent_name: Optional[str] = None
    entities: List[EntityRecommendation] = field(default_factory=list)
    binding: Optional[BindingResult] = None


@dataclass
class ResolutionOutcome:
    """
    Result of re-querying a single parameter value.

    Attributes:
        bound: True if the parameter was assigned
        new_schema: Schema of the intent the user switched to, if any
        new_intent_name: Name of that intent
        new_action: Freshly resolved instance of the new intent
    """
    bound: bool
    new_schema: Optional[ActionSchema] = None
    new_intent_name: Optional[str] = None
    new_action: Optional[ActionInstance] = None

    @property
    def is_context_switch(self) -> bool:
        return self.new_schema is not None


class ActionResolver:
    """
    Resolves NLU results into bound action instances.

    Usage:
        resolver = ActionResolver(build_registry([book_flight, find_hotel]))
        action = resolver.resolve_from_intent(nlu_result)
        if action and not action.is_complete():
            prompt_for(action.unset_parameters())
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        factory: Optional[ActionFactory] = None,
        binder: Optional[EntityBinder] = None,
        coercer: Optional[ValueCoercer] = None,
        none_intent_name: str = NONE_INTENT,
    ):
        """
        Initialize action resolver.

        :param registry: Registry mapping intent names to schemas
        :param factory: Factory creating action instances
        :param binder: Entity binder (built around ``coercer`` if omitted)
        :param coercer: Value coercer used for direct assignments
        :param none_intent_name: Intent the NLU service reports for "no intent"
        """
        if registry is None:
            raise InvalidArgumentError("registry is required")

        self._registry = registry
        self._factory = factory or ActionFactory()
        self._coercer = coercer or ValueCoercer()
        self._binder = binder or EntityBinder(coercer=self._coercer)
        self._none_intent_name = none_intent_name

    @classmethod
    def from_schemas(cls, schemas: Iterable[ActionSchema], **kwargs) -> "ActionResolver":
        return cls(build_registry(schemas), **kwargs)

    @classmethod
    def from_config(
        cls,
        registry: SchemaRegistry,
        config: ActionBindingConfig,
        factory: Optional[ActionFactory] = None,
    ) -> "ActionResolver":
        """Build a resolver honouring the configured intent and entity conventions."""
        coercer = ValueCoercer()
        return cls(
            registry,
            factory=factory,
            binder=EntityBinder(coercer=coercer, builtin_prefix=config.builtin_type_prefix),
            coercer=coercer,
            none_intent_name=config.none_intent_name,
        )

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    def resolve_from_intent(
        self,
        nlu_result: NLUResult,
        disambiguate: Optional[Disambiguator] = None,
    ) -> Optional[ActionInstance]:
        """
        Resolve the action matching the top intent of ``nlu_result``.

        :param nlu_result: NLU result with intents and entities
        :param disambiguate: Optional callback for multi-candidate parameters
        :return: The action, bound as far as the entities allow, or None if
            no intent or no registered schema matched
        """
        return self.resolve_with_details(nlu_result, disambiguate).action

    def resolve_with_details(
        self,
        nlu_result: NLUResult,
        disambiguate: Optional[Disambiguator] = None,
    ) -> Resolution:
        """Like resolve_from_intent, also returning intent name, entities and binding."""
        if nlu_result is None:
            raise InvalidArgumentError("nlu_result is required")

        self._log_state(ResolverState.RESOLVING_INTENT)
        intent_name = nlu_result.top_intent_name()
        if intent_name is None:
            self._log_state(ResolverState.UNRESOLVED, "no intent")
            return Resolution(action=None)

        entities = list(nlu_result.entities)
        schema = self._registry.lookup(intent_name)
        if schema is None:
            logger.info(f"No action registered for intent '{intent_name}'")
            self._log_state(ResolverState.UNRESOLVED, intent_name)
            return Resolution(action=None, intent_name=intent_name, entities=entities)

        action = self._factory.create(schema)

        self._log_state(ResolverState.BINDING, intent_name)
        binding = self._binder.bind(action, schema.parameters, entities, disambiguate)
        self._log_state(ResolverState.BOUND, f"{intent_name} complete={binding.success}")

        return Resolution(
            action=action,
            intent_name=intent_name,
            entities=entities,
            binding=binding,
        )

    def assign_value(self, action: ActionInstance, param_name: str, value: Any) -> bool:
        """
        Coerce ``value`` and assign it to ``param_name`` of ``action``.

        :return: True if assigned, False if the value does not fit the type
        :raises InvalidArgumentError: On missing arguments or unknown parameter
        """
        parameter = self.get_parameter_definition(action, param_name)
        if value is None:
            raise InvalidArgumentError("value is required")

        try:
            coerced = self._coercer.coerce(parameter.value_type, value)
        except FormatError as e:
            logger.debug(f"Rejected value for '{param_name}': {e}")
            return False

        if coerced is None:
            return False

        action.set(param_name, coerced)
        return True

    async def query_value_from_service(
        self,
        service: NLUService,
        action: ActionInstance,
        param_name: str,
        raw_value: Any,
        disambiguate: Optional[Disambiguator] = None,
    ) -> ResolutionOutcome:
        """
        Re-interpret a slot-filling answer, detecting intent switches.

        The answer is sent to the NLU service as a fresh utterance. When it
        resolves to a different registered action the outcome reports the
        switch and ``action`` is left untouched. Otherwise only ``param_name``
        is bound from the new entities, falling back to the raw answer.

        :param service: NLU service to query
        :param action: Action being filled
        :param param_name: Parameter the answer is for
        :param raw_value: The user's answer
        :param disambiguate: Optional callback for multi-candidate parameters
        :return: ResolutionOutcome
        """
        if service is None:
            raise InvalidArgumentError("service is required")
        parameter = self.get_parameter_definition(action, param_name)
        if raw_value is None:
            raise InvalidArgumentError("raw_value is required")

        # Nothing is mutated before this await; cancellation leaves action as-is
        result = await service.query(str(raw_value))

        top_intent = result.top_intent_name()
        if top_intent is not None and top_intent.lower() != self._none_intent_name.lower():
            resolution = self.resolve_with_details(result, disambiguate)
            new_action = resolution.action
            if new_action is not None and new_action.schema != action.schema:
                self._log_state(
                    ResolverState.CONTEXT_SWITCH_DETECTED,
                    f"{action.intent_name} -> {resolution.intent_name}",
                )
                return ResolutionOutcome(
                    bound=False,
                    new_schema=new_action.schema,
                    new_intent_name=resolution.intent_name,
                    new_action=new_action,
                )

        binding = self._binder.bind(action, [parameter], result.entities, disambiguate)
        if binding.success:
            return ResolutionOutcome(bound=True)

        return ResolutionOutcome(bound=self.assign_value(action, param_name, raw_value))

    @staticmethod
    def get_action_definition(action: ActionInstance) -> ActionSchema:
        if action is None:
            raise InvalidArgumentError("action is required")
        return action.schema

    @staticmethod
    def get_parameter_definition(action: ActionInstance, param_name: str) -> ParameterSchema:
        if action is None:
            raise InvalidArgumentError("action is required")
        if not param_name or not param_name.strip():
            raise InvalidArgumentError("param_name is required")

        parameter = action.schema.parameter(param_name)
        if parameter is None:
            raise InvalidArgumentError(
                f"'{param_name}' is not a parameter of action '{action.intent_name}'"
            )
        return parameter

    def _log_state(self, state: ResolverState, detail: str = "") -> None:
        logger.debug(f"Resolver state: {state.value} {detail}".rstrip())
