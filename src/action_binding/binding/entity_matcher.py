"""
Entity matching for a single parameter.

Escalates through three lookup tiers: custom entity type, then parameter
name, then built-in entity type. The first tier with any candidate wins.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from ..models import EntityRecommendation
from ..schema.action_schema import ParameterSchema

logger = logging.getLogger(__name__)

Disambiguator = Callable[[ParameterSchema, Sequence[EntityRecommendation]], Optional[EntityRecommendation]]


class MatchTier(str, Enum):
    CUSTOM_TYPE = "custom_type"
    PARAMETER_NAME = "parameter_name"
    BUILTIN_TYPE = "builtin_type"


_TIERS = (
    (MatchTier.CUSTOM_TYPE, lambda parameter: parameter.custom_type),
    (MatchTier.PARAMETER_NAME, lambda parameter: parameter.name),
    (MatchTier.BUILTIN_TYPE, lambda parameter: parameter.builtin_type),
)


@dataclass(frozen=True)
class EntityMatch:
    """
    Outcome of matching one parameter.
    
    Attributes:
        entity: The single selected entity, or None
        candidates: Every entity of the winning tier
        tier: Tier that produced the candidates, or None when nothing matched
    """
    entity: Optional[EntityRecommendation]
    candidates: Tuple[EntityRecommendation, ...]
    tier: Optional[MatchTier]

    @property
    def is_ambiguous(self) -> bool:
        return self.entity is None and len(self.candidates) > 1


class EntityMatcher:
    """Selects the best entity (or entities) for a parameter."""

    def match(
        self,
        parameter: ParameterSchema,
        entities: Sequence[EntityRecommendation],
        disambiguate: Optional[Disambiguator] = None,
    ) -> EntityMatch:
        """
        Match ``parameter`` against ``entities``.

        With several candidates the disambiguation callback picks one; without
        a callback no single entity is selected and the caller sees every
        candidate.

        :param parameter: Target parameter
        :param entities: Full entity set of the NLU result
        :param disambiguate: Optional callback choosing among candidates
        :return: EntityMatch
        """
        candidates: Tuple[EntityRecommendation, ...] = ()
        tier = None

        for tier_name, key in _TIERS:
            entity_type = key(parameter)
            if not entity_type:
                continue
            candidates = tuple(e for e in entities if e.type == entity_type)
            if candidates:
                tier = tier_name
                break

        if not candidates:
            return EntityMatch(entity=None, candidates=(), tier=None)

        if len(candidates) == 1:
            return EntityMatch(entity=candidates[0], candidates=candidates, tier=tier)

        entity = None
        if disambiguate is not None:
            entity = disambiguate(parameter, candidates)
            logger.debug(
                f"Disambiguated {len(candidates)} candidates for '{parameter.name}': "
                f"{entity.text if entity is not None else None!r}"
            )
        else:
            logger.debug(
                f"{len(candidates)} candidates for '{parameter.name}' and no disambiguation callback"
            )

        return EntityMatch(entity=entity, candidates=candidates, tier=tier)
