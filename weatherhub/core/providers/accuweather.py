from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field, TypeAdapter

from .base import BackendDecodeError, WeatherProvider
from ..abstractions import ACCUWEATHER, WeatherRecord


LOCATION_ERROR = "Unable to determine location for provided city"


class _Value(BaseModel):
    value: float = Field(alias="Value")


class _CityMatch(BaseModel):
    key: str = Field(default="", alias="Key")


class _MetricTemperature(BaseModel):
    metric: _Value = Field(alias="Metric")


class _CurrentConditions(BaseModel):
    weather_text: Optional[str] = Field(default=None, alias="WeatherText")
    temperature: _MetricTemperature = Field(alias="Temperature")


class _ForecastTemperature(BaseModel):
    minimum: _Value = Field(alias="Minimum")
    maximum: _Value = Field(alias="Maximum")


class _DailyForecast(BaseModel):
    temperature: _ForecastTemperature = Field(alias="Temperature")


class _OneDayForecast(BaseModel):
    daily_forecasts: List[_DailyForecast] = Field(default_factory=list, alias="DailyForecasts")


_CITY_SEARCH = TypeAdapter(List[_CityMatch])
_CURRENT_CONDITIONS = TypeAdapter(List[_CurrentConditions])
_ONE_DAY_FORECAST = TypeAdapter(_OneDayForecast)


class AccuweatherProvider(WeatherProvider):
    """AccuWeather needs three calls: city search, current conditions, forecast."""

    name = ACCUWEATHER
    base_url = "https://dataservice.accuweather.com"

    def _fetch(self, city: str) -> WeatherRecord:
        location_key = self.location_key(city)
        current = self.current_conditions(location_key)
        forecast = self.one_day_forecast(location_key)
        return to_record(current, forecast)

    # Pipeline steps -----------------------------------------------------
    def location_key(self, city: str) -> str:
        response = self._request(
            "GET",
            f"{self.base_url}/locations/v1/cities/search",
            step="city search",
            params={"q": city, "apikey": self.api_key},
        )
        matches = self._decode(response, _CITY_SEARCH, step="city search", message=LOCATION_ERROR)
        if not matches or not matches[0].key:
            raise BackendDecodeError(LOCATION_ERROR)
        return matches[0].key

    def current_conditions(self, location_key: str) -> _CurrentConditions:
        response = self._request(
            "GET",
            f"{self.base_url}/currentconditions/v1/{quote(location_key, safe='')}",
            step="current weather",
            params={"apikey": self.api_key},
        )
        conditions = self._decode(response, _CURRENT_CONDITIONS, step="current weather")
        if not conditions:
            raise BackendDecodeError()
        return conditions[0]

    def one_day_forecast(self, location_key: str) -> _DailyForecast:
        response = self._request(
            "GET",
            f"{self.base_url}/forecasts/v1/daily/1day/{quote(location_key, safe='')}",
            step="1dayforecast",
            params={"apikey": self.api_key, "metric": "true"},
        )
        forecast = self._decode(response, _ONE_DAY_FORECAST, step="1dayforecast")
        if not forecast.daily_forecasts:
            raise BackendDecodeError()
        return forecast.daily_forecasts[0]


def to_record(current: _CurrentConditions, forecast: _DailyForecast) -> WeatherRecord:
    return WeatherRecord(
        source=ACCUWEATHER,
        temperature=current.temperature.metric.value,
        temperature_min=forecast.temperature.minimum.value,
        temperature_max=forecast.temperature.maximum.value,
        main_description=current.weather_text or "",
    )


__all__ = ["AccuweatherProvider", "LOCATION_ERROR"]
