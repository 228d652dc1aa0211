"""Fan a city lookup out to the requested backends."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..abstractions import WeatherBackend, WeatherRecord, WeatherResponse
from ..registry import BackendRegistry


NO_CITY_ERROR = "No city specified. Please provide a city query parameter."
INVALID_BACKEND_ERROR = "Backend specified is invalid or inactive: {name}"


def parse_backend_param(value: Optional[str]) -> List[str]:
    """Split a ``backend=a,b`` parameter into names."""

    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


class WeatherAggregator:
    """Resolve weather for a city against one or more registered backends.

    Requests are validated before any backend is called.  Backend failures
    do not fail the request; they show up as error records in ``data``.
    """

    def __init__(self, registry: BackendRegistry, *, max_workers: int = 1) -> None:
        self.registry = registry
        self.max_workers = max(1, int(max_workers))
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def resolve(self, city: str, backends: Optional[Sequence[str]] = None) -> WeatherResponse:
        city = (city or "").strip()
        if not city:
            return WeatherResponse(city="", error=NO_CITY_ERROR)

        names = [name.strip() for name in backends or () if name and name.strip()]
        if not names:
            names = list(self.registry.default_names)

        selected: List[WeatherBackend] = []
        for name in names:
            backend = self.registry.lookup(name)
            if backend is None:
                self._log.info("Rejected request for unknown backend %r", name)
                return WeatherResponse(city=city, error=INVALID_BACKEND_ERROR.format(name=name))
            selected.append(backend)

        return WeatherResponse(city=city, data=self._collect(city, selected))

    # Helpers ------------------------------------------------------------
    def _collect(self, city: str, backends: List[WeatherBackend]) -> List[WeatherRecord]:
        if self.max_workers == 1 or len(backends) < 2:
            return [backend.get_weather(city) for backend in backends]
        workers = min(self.max_workers, len(backends))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="weather-backend") as pool:
            # map() yields in submission order, not completion order
            return list(pool.map(lambda backend: backend.get_weather(city), backends))


__all__ = ["INVALID_BACKEND_ERROR", "NO_CITY_ERROR", "WeatherAggregator", "parse_backend_param"]
