"""
Ready-made disambiguation callbacks.

Any callable ``(parameter, candidates) -> entity`` works; these cover the
common cases of trusting the NLU score or a known expected text.
"""
from typing import Mapping, Optional, Sequence, Union

from rapidfuzz import fuzz, process

from ..models import EntityRecommendation
from ..schema.action_schema import ParameterSchema


def highest_score(
    parameter: ParameterSchema,
    candidates: Sequence[EntityRecommendation],
) -> Optional[EntityRecommendation]:
    """Pick the candidate with the best NLU score (first one on ties)."""
    if not candidates:
        return None
    return max(candidates, key=lambda e: e.score or 0.0)


class FuzzyTextDisambiguator:
    """
    Picks the candidate whose text best matches a reference text.
    
    Handles typos and partial mentions ("Pari" -> "Paris") via rapidfuzz.
    The reference is either one string for every parameter or a mapping of
    parameter name to expected text.
    """

    def __init__(
        self,
        reference: Union[str, Mapping[str, str]],
        threshold: float = 0.75,
        scorer: str = "ratio",
    ):
        """
        Initialize fuzzy disambiguator.
        
        :param reference: Expected text, or parameter name -> expected text
        :param threshold: Minimum similarity (0.0-1.0) to accept a candidate
        :param scorer: rapidfuzz scorer ("ratio", "partial_ratio", "token_sort_ratio", "token_set_ratio")
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")
        
        self._scorer_map = {
            "ratio": fuzz.ratio,
            "partial_ratio": fuzz.partial_ratio,
            "token_sort_ratio": fuzz.token_sort_ratio,
            "token_set_ratio": fuzz.token_set_ratio,
        }
        if scorer not in self._scorer_map:
            raise ValueError(
                f"Unknown scorer '{scorer}'. "
                f"Must be one of: {list(self._scorer_map.keys())}"
            )
        
        self.reference = reference
        self.threshold = threshold
        self.scorer = scorer

    def __call__(
        self,
        parameter: ParameterSchema,
        candidates: Sequence[EntityRecommendation],
    ) -> Optional[EntityRecommendation]:
        if isinstance(self.reference, str):
            reference = self.reference
        else:
            reference = self.reference.get(parameter.name)
        
        if not reference or not candidates:
            return None
        
        result = process.extractOne(
            reference,
            [candidate.text for candidate in candidates],
            scorer=self._scorer_map[self.scorer],
        )
        if result is None:
            return None
        
        _, score, index = result
        # rapidfuzz scores are 0-100
        if score / 100.0 < self.threshold:
            return None
        return candidates[index]
