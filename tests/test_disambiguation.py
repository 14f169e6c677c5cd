"""
Tests for ready-made disambiguation callbacks.
"""
import pytest

from action_binding.binding import FuzzyTextDisambiguator, highest_score
from action_binding.models import EntityRecommendation
from action_binding.schema import ParameterSchema, STRING


@pytest.fixture
def parameter():
    return ParameterSchema("Destination", STRING, custom_type="City.Destination")


@pytest.fixture
def candidates():
    return [
        EntityRecommendation(type="City.Destination", text="Paris", score=0.6),
        EntityRecommendation(type="City.Destination", text="Rome", score=0.9),
    ]


class TestHighestScore:
    """Tests for highest_score."""

    def test_picks_best_score(self, parameter, candidates):
        """Test that the highest scoring candidate wins."""
        assert highest_score(parameter, candidates).text == "Rome"

    def test_missing_scores_count_as_zero(self, parameter):
        """Test that unscored candidates lose to scored ones."""
        entities = [
            EntityRecommendation(type="City.Destination", text="Paris"),
            EntityRecommendation(type="City.Destination", text="Rome", score=0.1),
        ]
        
        assert highest_score(parameter, entities).text == "Rome"


class TestFuzzyTextDisambiguator:
    """Tests for FuzzyTextDisambiguator."""

    def test_typo_matches_candidate(self, parameter, candidates):
        """Test that a near-miss reference selects the right candidate."""
        disambiguate = FuzzyTextDisambiguator("Pariss")
        
        assert disambiguate(parameter, candidates).text == "Paris"

    def test_per_parameter_reference(self, parameter, candidates):
        """Test mapping references by parameter name."""
        disambiguate = FuzzyTextDisambiguator({"Destination": "Rome"})
        
        assert disambiguate(parameter, candidates).text == "Rome"

    def test_no_reference_for_parameter(self, parameter, candidates):
        """Test that parameters without a reference get no pick."""
        disambiguate = FuzzyTextDisambiguator({"Origin": "Rome"})
        
        assert disambiguate(parameter, candidates) is None

    def test_below_threshold(self, parameter, candidates):
        """Test that dissimilar references pick nothing."""
        disambiguate = FuzzyTextDisambiguator("Copenhagen", threshold=0.9)
        
        assert disambiguate(parameter, candidates) is None

    def test_invalid_scorer(self):
        """Test that unknown scorers are rejected."""
        with pytest.raises(ValueError):
            FuzzyTextDisambiguator("Paris", scorer="nope")
