"""
Shared schemas and fixtures for action binding tests.
"""
import pytest

from action_binding.models import EntityRecommendation, IntentRecommendation, NLUResult
from action_binding.schema import (
    ActionSchema,
    ParameterSchema,
    ArrayType,
    EnumType,
    DATE,
    INTEGER,
    STRING,
    build_registry,
)
from action_binding.resolver import ActionResolver


@pytest.fixture
def time_of_day():
    """Enum type for preferred check-in time."""
    return EnumType.from_names("TimeOfDay", ["Morning", "Evening"])


@pytest.fixture
def book_flight():
    """Non-contextual flight booking schema."""
    return ActionSchema(
        intent_name="BookFlight",
        parameters=[
            ParameterSchema("Destination", STRING, custom_type="City.Destination"),
            ParameterSchema("Date", DATE, builtin_type="builtin.datetimeV2.date"),
        ],
        friendly_name="Book a flight",
    )


@pytest.fixture
def change_date(book_flight):
    """Contextual action that only makes sense inside BookFlight."""
    return ActionSchema(
        intent_name="ChangeFlightDate",
        parameters=[
            ParameterSchema("Date", DATE, builtin_type="builtin.datetimeV2.date"),
        ],
        parent_schema=book_flight,
        can_execute_with_no_context=True,
    )


@pytest.fixture
def change_destination(book_flight):
    return ActionSchema(
        intent_name="ChangeFlightDestination",
        parameters=[
            ParameterSchema("Destination", STRING, custom_type="City.Destination"),
        ],
        parent_schema=book_flight,
    )


@pytest.fixture
def find_hotel(time_of_day):
    return ActionSchema(
        intent_name="FindHotel",
        parameters=[
            ParameterSchema("Place", STRING, builtin_type="builtin.geography.city"),
            ParameterSchema("Nights", INTEGER, builtin_type="builtin.number"),
            ParameterSchema("Amenities", ArrayType(STRING)),
            ParameterSchema("CheckIn", time_of_day),
        ],
    )


@pytest.fixture
def registry(book_flight, change_date, change_destination, find_hotel):
    return build_registry([book_flight, change_date, change_destination, find_hotel])


@pytest.fixture
def resolver(registry):
    return ActionResolver(registry)


@pytest.fixture
def destination_entity():
    return EntityRecommendation(type="City.Destination", text="Paris")


@pytest.fixture
def date_entity():
    return EntityRecommendation(
        type="builtin.datetimeV2.date",
        text="may 1st",
        resolution={"values": [{"timex": "2024-05-01", "type": "date", "value": "2024-05-01"}]},
    )


@pytest.fixture
def make_result():
    """Factory for NLUResults with a single top scoring intent."""
    def _make(intent, entities=(), score=0.95):
        return NLUResult(
            query="test",
            top_scoring_intent=IntentRecommendation(intent=intent, score=score),
            intents=[IntentRecommendation(intent=intent, score=score)],
            entities=list(entities),
        )
    return _make
