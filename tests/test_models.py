"""
Tests for NLU result models.
"""
from action_binding.models import EntityRecommendation, NLUResult
from action_binding.nlu import BuiltInTypes, get_datetime_values, is_builtin_type


LUIS_PAYLOAD = {
    "query": "book a flight to Paris on may 1st",
    "topScoringIntent": {"intent": "BookFlight", "score": 0.97},
    "intents": [
        {"intent": "BookFlight", "score": 0.97},
        {"intent": "None", "score": 0.02},
    ],
    "entities": [
        {
            "entity": "paris",
            "type": "City.Destination",
            "startIndex": 17,
            "endIndex": 21,
            "score": 0.92,
        },
        {
            "entity": "may 1st",
            "type": "builtin.datetimeV2.date",
            "startIndex": 26,
            "endIndex": 32,
            "resolution": {
                "values": [
                    {"timex": "XXXX-05-01", "type": "date", "value": "2024-05-01"},
                    {"timex": "XXXX-05-01", "type": "date", "value": "2025-05-01"},
                ]
            },
        },
        {"entity": "paris", "type": "builtin.geography.city", "resolution": None},
    ],
}


def test_parse_luis_payload():
    result = NLUResult.model_validate(LUIS_PAYLOAD)

    assert result.top_intent_name() == "BookFlight"
    assert len(result.intents) == 2
    destination = result.entities[0]
    assert destination.text == "paris"
    assert destination.start_index == 17
    assert destination.score == 0.92
    assert not destination.has_resolution
    assert result.entities[2].resolution == {}


def test_first_resolution_value():
    entity = EntityRecommendation(type="builtin.number", text="3", resolution={"value": "3", "subtype": "integer"})

    assert entity.first_resolution_value == "3"
    assert EntityRecommendation(type="City", text="x").first_resolution_value is None


def test_top_intent_prefers_explicit_top_scoring():
    result = NLUResult.model_validate({
        "topScoringIntent": {"intent": "FindHotel", "score": 0.4},
        "intents": [{"intent": "BookFlight", "score": 0.9}],
    })

    assert result.top_intent_name() == "FindHotel"


def test_builtin_type_detection():
    assert is_builtin_type(BuiltInTypes.NUMBER)
    assert is_builtin_type("builtin.datetimeV2.daterange")
    assert not is_builtin_type("City.Destination")
    assert not is_builtin_type(None)


def test_get_datetime_values():
    result = NLUResult.model_validate(LUIS_PAYLOAD)

    values = get_datetime_values(result.entities[1])

    assert values["value"] == "2024-05-01"
    assert get_datetime_values(result.entities[0]) is None
