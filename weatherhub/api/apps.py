from __future__ import annotations

from django.apps import AppConfig


class WeatherApiConfig(AppConfig):
    name = "weatherhub.api"
    label = "weather_api"

    def ready(self) -> None:
        # Fail at startup rather than on the first request when no backend has a key.
        from weatherhub.api.views import get_weather_aggregator

        get_weather_aggregator()
