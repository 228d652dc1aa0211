"""Process-wide registry of the active weather backends."""
from __future__ import annotations

import logging
from functools import cached_property
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple

import requests
from django.core.exceptions import ImproperlyConfigured

from .abstractions import ACCUWEATHER, OPENWEATHERMAP, WeatherBackend
from .config import BackendConfig
from .providers.accuweather import AccuweatherProvider
from .providers.base import RequestConfig, WeatherProvider
from .providers.openweathermap import OpenWeatherMapProvider


logger = logging.getLogger(__name__)

ProviderFactory = Callable[..., WeatherProvider]

PROVIDER_FACTORIES: Mapping[str, ProviderFactory] = MappingProxyType(
    {
        ACCUWEATHER: AccuweatherProvider,
        OPENWEATHERMAP: OpenWeatherMapProvider,
    }
)


class NoBackendsConfigured(ImproperlyConfigured):
    """Raised when no backend has a credential."""

    def __init__(self, message: str = "No weather backends configured") -> None:
        super().__init__(message)


class BackendRegistry:
    """Immutable mapping from backend name to an active backend."""

    def __init__(self, providers: Mapping[str, WeatherBackend]) -> None:
        if not providers:
            raise NoBackendsConfigured()
        self._providers: Mapping[str, WeatherBackend] = MappingProxyType(dict(providers))
        # Sorted so default responses do not depend on configuration order.
        self._default_names: Tuple[str, ...] = tuple(sorted(self._providers))

    @classmethod
    def configure(
        cls,
        config: Mapping[str, BackendConfig],
        *,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> "BackendRegistry":
        providers: Dict[str, WeatherBackend] = {}
        for name, factory in PROVIDER_FACTORIES.items():
            backend_config = config.get(name)
            if backend_config is None or not backend_config.configured:
                logger.warning("Backend %s has no apiKey, skipping", name)
                continue
            providers[name] = factory(
                backend_config.api_key,
                session=session,
                request_config=request_config,
            )
        for name in config:
            if name not in PROVIDER_FACTORIES:
                logger.warning("Ignoring configuration for unknown backend %s", name)
        registry = cls(providers)
        logger.info("Configured weather backends: %s", ", ".join(registry.default_names))
        return registry

    @property
    def default_names(self) -> Tuple[str, ...]:
        return self._default_names

    @cached_property
    def names(self) -> Tuple[str, ...]:
        """Listing served to clients; computed on first access."""
        return tuple(self._default_names)

    def lookup(self, name: str) -> Optional[WeatherBackend]:
        return self._providers.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._default_names)

    def __len__(self) -> int:
        return len(self._providers)


__all__ = ["BackendRegistry", "NoBackendsConfigured", "PROVIDER_FACTORIES"]
