"""Static weather and humidity readings for a handful of cities.

The tables stand in for a real weather service. Keys are lowercased city names.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

UNKNOWN = "Unknown"


class LookupKind(str, Enum):
    """The readings the lookup table can answer."""

    WEATHER = "weather"
    HUMIDITY = "humidity"


WEATHER: Mapping[str, str] = MappingProxyType(
    {
        "patiala": "10°C",
        "delhi": "14°C",
        "nainital": "5°C",
        "dehradun": "12°C",
    }
)

HUMIDITY: Mapping[str, str] = MappingProxyType(
    {
        "patiala": "40%",
        "delhi": "55%",
        "nainital": "70%",
        "dehradun": "60%",
    }
)

_TABLES: Mapping[LookupKind, Mapping[str, str]] = MappingProxyType(
    {
        LookupKind.WEATHER: WEATHER,
        LookupKind.HUMIDITY: HUMIDITY,
    }
)


def lookup(kind: Union[LookupKind, str], location: str) -> str:
    """Return the reading of ``kind`` for ``location``, or ``"Unknown"``.

    City names match case-insensitively and exactly otherwise, so surrounding
    whitespace makes a name unknown. An unknown city is not an error.

    Args:
        kind: Which reading to look up.
        location: City name as the user or the model spelled it.

    Raises:
        ValueError: If ``kind`` is not a supported reading.
    """
    table = _TABLES[LookupKind(kind)]
    return table.get(location.lower(), UNKNOWN)
