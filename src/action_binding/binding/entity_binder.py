"""
Entity binding onto action parameters.

Binds every parameter of an action from an NLU entity set, best effort:
each parameter is visited exactly once, failures only flip the aggregate
success flag and never stop the pass.
"""
import logging
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..exceptions import FormatError, InvalidArgumentError
from ..models import EntityRecommendation
from ..nlu.builtin_types import BUILTIN_PREFIX, get_datetime_values, is_builtin_type
from ..schema.action_instance import ActionInstance
from ..schema.action_schema import ParameterSchema
from .coercer import ValueCoercer
from .entity_matcher import Disambiguator, EntityMatcher

logger = logging.getLogger(__name__)


@dataclass
class BindingResult:
    """Whether every parameter was bound, plus which ones were and weren't."""
    success: bool
    bound: List[str] = field(default_factory=list)
    unbound: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.success


class EntityBinder:
    """
    Binds NLU entities onto an ActionInstance.

    Per parameter the raw value is taken from, in order of preference:
    1. The designated ``value`` of a list-shaped first resolution (datetimeV2)
    2. The first resolution value
    3. The entity text
    """

    def __init__(
        self,
        matcher: Optional[EntityMatcher] = None,
        coercer: Optional[ValueCoercer] = None,
        builtin_prefix: str = BUILTIN_PREFIX,
    ):
        self._matcher = matcher or EntityMatcher()
        self._coercer = coercer or ValueCoercer()
        self._builtin_prefix = builtin_prefix

    def bind(
        self,
        action: ActionInstance,
        parameters: Sequence[ParameterSchema],
        entities: Sequence[EntityRecommendation],
        disambiguate: Optional[Disambiguator] = None,
    ) -> BindingResult:
        """
        Bind ``entities`` onto ``parameters`` of ``action``.

        :param action: Instance receiving the values
        :param parameters: Parameters to bind, in schema order
        :param entities: Entity set of the NLU result
        :param disambiguate: Optional callback for multi-candidate parameters
        :return: BindingResult; success only when every parameter was bound
        """
        if action is None:
            raise InvalidArgumentError("action is required")
        if parameters is None:
            raise InvalidArgumentError("parameters are required")
        if entities is None:
            raise InvalidArgumentError("entities are required")

        parameters = list(parameters)
        entities = list(entities)

        if not entities:
            return BindingResult(success=False, unbound=[p.name for p in parameters])

        self.propagate_resolutions(entities)

        result = BindingResult(success=True)
        for parameter in parameters:
            if self._bind_parameter(action, parameter, entities, disambiguate):
                result.bound.append(parameter.name)
            else:
                result.unbound.append(parameter.name)
                result.success = False

        logger.debug(
            f"Bound {len(result.bound)}/{len(parameters)} parameters of "
            f"'{action.intent_name}' (unbound: {result.unbound})"
        )
        return result

    def propagate_resolutions(self, entities: Sequence[EntityRecommendation]) -> None:
        """
        Copy resolutions onto unresolved custom entities from resolved siblings.

        Siblings are entities sharing a type, or sharing the same mention text
        (a raw domain mention next to the built-in entity that resolved it).
        Only custom entities with an empty resolution are updated.
        """
        by_type: Dict[str, List[EntityRecommendation]] = defaultdict(list)
        by_text: Dict[str, List[EntityRecommendation]] = defaultdict(list)
        for entity in entities:
            by_type[entity.type].append(entity)
            if entity.text:
                by_text[entity.text].append(entity)

        for groups in (by_type, by_text):
            for group in groups.values():
                if len(group) > 1:
                    self._propagate_within(group)

    def _propagate_within(self, group: List[EntityRecommendation]) -> None:
        to_update = next(
            (e for e in group
             if not is_builtin_type(e.type, self._builtin_prefix) and not e.has_resolution),
            None,
        )
        with_value = next((e for e in group if e.has_resolution), None)
        if to_update is not None and with_value is not None:
            to_update.resolution = dict(with_value.resolution)

    def _bind_parameter(
        self,
        action: ActionInstance,
        parameter: ParameterSchema,
        entities: List[EntityRecommendation],
        disambiguate: Optional[Disambiguator],
    ) -> bool:
        match = self._matcher.match(parameter, entities, disambiguate)

        if match.entity is not None:
            return self._assign(action, parameter, self._raw_value(match.entity))

        if match.candidates and all(
            isinstance(c.first_resolution_value, list) for c in match.candidates
        ):
            if not parameter.is_array:
                logger.debug(
                    f"Not merging {len(match.candidates)} list resolutions into "
                    f"single-valued parameter '{parameter.name}'"
                )
                return False
            merged: List[Any] = []
            for candidate in match.candidates:
                merged.extend(_flatten_values(candidate.first_resolution_value))
            return self._assign(action, parameter, merged)

        return False

    def _raw_value(self, entity: EntityRecommendation) -> Any:
        datetime_values = get_datetime_values(entity)
        if datetime_values is not None:
            designated = _designated_value(datetime_values)
            if designated is not None:
                return designated

        if entity.has_resolution:
            value = entity.first_resolution_value
            if isinstance(value, list) and value and isinstance(value[0], Mapping):
                designated = _designated_value(value[0])
                if designated is not None:
                    return designated
            if value is not None:
                return value
        return entity.text

    def _assign(self, action: ActionInstance, parameter: ParameterSchema, raw_value: Any) -> bool:
        try:
            value = self._coercer.coerce(parameter.value_type, raw_value)
        except FormatError as e:
            logger.debug(f"Could not bind '{parameter.name}': {e}")
            return False

        if value is None:
            return False

        action.set(parameter.name, value)
        return True


def _designated_value(resolution_value: Mapping) -> Any:
    """
    Extract the designated value of one resolution mapping.

    DatetimeV2 mappings carry a ``value``; ranges yield their ``[start, end]`` pair.
    """
    if resolution_value.get("value") is not None:
        return resolution_value["value"]
    if resolution_value.get("start") is not None and resolution_value.get("end") is not None:
        return [resolution_value["start"], resolution_value["end"]]
    return None


def _flatten_values(values: List[Any]) -> List[Any]:
    flattened: List[Any] = []
    for value in values:
        if isinstance(value, Mapping):
            designated = _designated_value(value)
            if isinstance(designated, list):
                flattened.extend(designated)
            elif designated is not None:
                flattened.append(designated)
        else:
            flattened.append(value)
    return flattened
