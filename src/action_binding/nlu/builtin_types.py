"""
Built-in NLU entity types.

Anything under the ``builtin.`` namespace is produced by the NLU service's
prebuilt recognizers; everything else is a custom (domain) entity.
"""
from collections.abc import Mapping
from typing import Any, Dict, Optional

from ..models import EntityRecommendation

BUILTIN_PREFIX = "builtin."


class BuiltInTypes:
    """Well-known built-in entity type names."""
    AGE = "builtin.age"
    DIMENSION = "builtin.dimension"
    EMAIL = "builtin.email"
    MONEY = "builtin.currency"
    NUMBER = "builtin.number"
    ORDINAL = "builtin.ordinal"
    PERCENTAGE = "builtin.percentage"
    PHONE_NUMBER = "builtin.phonenumber"
    TEMPERATURE = "builtin.temperature"
    URL = "builtin.url"
    KEY_PHRASE = "builtin.keyPhrase"
    GEOGRAPHY_CITY = "builtin.geography.city"
    GEOGRAPHY_COUNTRY = "builtin.geography.country"

    DATETIME_V2 = "builtin.datetimeV2"
    DATETIME_V2_DATE = "builtin.datetimeV2.date"
    DATETIME_V2_TIME = "builtin.datetimeV2.time"
    DATETIME_V2_DATETIME = "builtin.datetimeV2.datetime"
    DATETIME_V2_DATERANGE = "builtin.datetimeV2.daterange"
    DATETIME_V2_TIMERANGE = "builtin.datetimeV2.timerange"
    DATETIME_V2_DATETIMERANGE = "builtin.datetimeV2.datetimerange"
    DATETIME_V2_DURATION = "builtin.datetimeV2.duration"
    DATETIME_V2_SET = "builtin.datetimeV2.set"


def is_builtin_type(entity_type: Optional[str], prefix: str = BUILTIN_PREFIX) -> bool:
    """Check if an entity type comes from a prebuilt recognizer."""
    return bool(entity_type) and entity_type.startswith(prefix)


def get_datetime_values(entity: EntityRecommendation) -> Optional[Dict[str, Any]]:
    """
    Get the first datetimeV2 resolution value.

    :param entity: Recognized entity
    :return: First resolution mapping (``timex``, ``type``, ``value`` ...) or None
    """
    if entity is None or not entity.type.startswith(BuiltInTypes.DATETIME_V2):
        return None

    values = entity.resolution.get("values")
    if not isinstance(values, list) or not values or not isinstance(values[0], Mapping):
        return None

    return dict(values[0])
