"""OpenWeatherMap weather provider."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter

from .base import BackendDecodeError, WeatherProvider
from ..abstractions import OPENWEATHERMAP, WeatherRecord


class _Conditions(BaseModel):
    main: Optional[str] = None
    description: Optional[str] = None


class _MainDetails(BaseModel):
    temp: float
    temp_min: float
    temp_max: float


class _CityWeather(BaseModel):
    weather: List[_Conditions] = Field(default_factory=list)
    main: _MainDetails


_CITY_WEATHER = TypeAdapter(_CityWeather)


class OpenWeatherMapProvider(WeatherProvider):
    """Integration with the OpenWeatherMap current weather endpoint."""

    name = OPENWEATHERMAP
    base_url = "https://api.openweathermap.org/data/2.5/weather"

    def _fetch(self, city: str) -> WeatherRecord:
        params = {"q": city, "units": "metric", "APPID": self.api_key}
        response = self._request("GET", self.base_url, step="current weather", params=params)
        payload = self._decode(response, _CITY_WEATHER, step="current weather")
        if not payload.weather:
            self._log.error("openweathermap returned no weather conditions for %r", city)
            raise BackendDecodeError()
        return to_record(payload)


def to_record(payload: _CityWeather) -> WeatherRecord:
    conditions = payload.weather[0]
    return WeatherRecord(
        source=OPENWEATHERMAP,
        temperature=payload.main.temp,
        temperature_min=payload.main.temp_min,
        temperature_max=payload.main.temp_max,
        main_description=conditions.main or "",
        detailed_description=conditions.description or "",
    )


__all__ = ["OpenWeatherMapProvider"]
