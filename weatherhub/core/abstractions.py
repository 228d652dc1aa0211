"""Core abstractions for the weather domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol


ACCUWEATHER = "accuweather"
OPENWEATHERMAP = "openweathermap"


@dataclass(frozen=True)
class WeatherRecord:
    """Normalized weather reading produced by a single backend.

    A record either carries temperatures or an ``error`` message.  When the
    error is set the numeric fields stay at zero and must be ignored.
    Temperatures are in Celsius.
    """

    source: str = ""
    temperature: float = 0.0
    temperature_min: float = 0.0
    temperature_max: float = 0.0
    main_description: str = ""
    detailed_description: str = ""
    error: str = ""

    @classmethod
    def failure(cls, message: str, source: str = "") -> "WeatherRecord":
        return cls(source=source, error=message)

    @property
    def ok(self) -> bool:
        return not self.error

    def as_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "source": self.source,
            "temperature": self.temperature,
            "temperature_min": self.temperature_min,
            "temperature_max": self.temperature_max,
        }
        for key in ("main_description", "detailed_description", "error"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        return payload


@dataclass
class WeatherResponse:
    """Aggregated answer for one city across the requested backends."""

    city: str
    data: List[WeatherRecord] = field(default_factory=list)
    error: str = ""

    @property
    def is_valid(self) -> bool:
        return not self.error

    def as_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "city": self.city,
            "data": [record.as_dict() for record in self.data],
        }
        if self.error:
            payload["error"] = self.error
        return payload


class WeatherBackend(Protocol):
    """A data source capable of returning weather for a city."""

    name: str

    def get_weather(self, city: str) -> WeatherRecord:
        """Return a record for ``city``; failures are reported in ``error``."""
        ...


__all__ = [
    "ACCUWEATHER",
    "OPENWEATHERMAP",
    "WeatherBackend",
    "WeatherRecord",
    "WeatherResponse",
]
