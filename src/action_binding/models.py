"""
NLU result models.

Parsed from LUIS-style JSON payloads with pydantic. Field aliases follow the
wire format (``entity``, ``topScoringIntent``, ``startIndex``) while Python code
uses snake_case names.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntityRecommendation(BaseModel):
    """
    One entity recognized by the NLU service.

    ``resolution`` keeps the service's key order; the binder only ever looks at
    its first value. It is the one field the binder may overwrite (resolution
    propagation between sibling entities).
    """
    model_config = ConfigDict(populate_by_name=True)

    type: str
    text: str = Field(default="", alias="entity")
    resolution: Dict[str, Any] = Field(default_factory=dict)
    score: Optional[float] = None
    start_index: Optional[int] = Field(default=None, alias="startIndex")
    end_index: Optional[int] = Field(default=None, alias="endIndex")
    role: Optional[str] = None

    @field_validator("resolution", mode="before")
    @classmethod
    def _none_resolution_is_empty(cls, value):
        return {} if value is None else value

    @property
    def has_resolution(self) -> bool:
        return bool(self.resolution)

    @property
    def first_resolution_value(self) -> Any:
        """First resolution value, or None when the entity is unresolved."""
        return next(iter(self.resolution.values()), None)


class IntentRecommendation(BaseModel):
    """An intent name with its confidence score."""
    intent: str
    score: Optional[float] = None


class NLUResult(BaseModel):
    """Full response of one NLU query."""
    model_config = ConfigDict(populate_by_name=True)

    query: str = ""
    top_scoring_intent: Optional[IntentRecommendation] = Field(
        default=None, alias="topScoringIntent"
    )
    intents: List[IntentRecommendation] = Field(default_factory=list)
    entities: List[EntityRecommendation] = Field(default_factory=list)

    def top_intent(self) -> Optional[IntentRecommendation]:
        """
        Best intent of the result.

        The explicit ``topScoringIntent`` wins; otherwise the highest scoring
        entry of ``intents`` (missing scores count as 0).
        """
        if self.top_scoring_intent is not None:
            return self.top_scoring_intent
        if not self.intents:
            return None
        return max(self.intents, key=lambda i: i.score or 0.0)

    def top_intent_name(self) -> Optional[str]:
        top = self.top_intent()
        if top is None or not top.intent or not top.intent.strip():
            return None
        return top.intent
