"""API URL configuration."""
from __future__ import annotations

from django.urls import path, re_path

from weatherhub.api.views import BackendsView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    # An empty city segment still reaches the view so it gets the JSON 400.
    re_path(r"^weather/(?P<city>[^/]*)$", WeatherView.as_view(), name="weather-city"),
    path("backends", BackendsView.as_view(), name="backends"),
]
