from __future__ import annotations

import threading
from typing import List

import pytest
from requests_mock import Mocker

from weatherhub.core.abstractions import WeatherRecord


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


class SpyBackend:
    """Backend stub that records every city it is asked about."""

    def __init__(self, name: str, temperature: float = 10.0, error: str = "") -> None:
        self.name = name
        self.temperature = temperature
        self.error = error
        self.cities: List[str] = []
        self._lock = threading.Lock()

    @property
    def calls(self) -> int:
        return len(self.cities)

    def get_weather(self, city: str) -> WeatherRecord:
        with self._lock:
            self.cities.append(city)
        if self.error:
            return WeatherRecord.failure(self.error, source=self.name)
        return WeatherRecord(
            source=self.name,
            temperature=self.temperature,
            temperature_min=self.temperature - 1,
            temperature_max=self.temperature + 1,
            main_description="Clear",
        )


@pytest.fixture
def spy_factory():
    return SpyBackend
