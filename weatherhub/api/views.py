"""REST API views for weather information."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherhub.core.config import parse_backends
from weatherhub.core.providers.base import RequestConfig
from weatherhub.core.registry import BackendRegistry
from weatherhub.core.services.aggregator import WeatherAggregator, parse_backend_param


@lru_cache(maxsize=1)
def get_weather_aggregator() -> WeatherAggregator:
    registry = BackendRegistry.configure(
        parse_backends(settings.WEATHER_BACKENDS),
        request_config=RequestConfig(timeout=settings.WEATHER_REQUEST_TIMEOUT),
    )
    return WeatherAggregator(registry, max_workers=settings.WEATHER_MAX_WORKERS)


class WeatherView(APIView):
    """Return weather for a city from one or more backends."""

    permission_classes = [AllowAny]

    def get(self, request, city: str | None = None, *args, **kwargs):  # noqa: D401
        """Resolve ``city`` against the backends listed in ``?backend=a,b``."""
        if city is None:
            city = request.query_params.get("city", "")
        backends = parse_backend_param(request.query_params.get("backend"))
        result = get_weather_aggregator().resolve(city, backends)
        code = status.HTTP_200_OK if result.is_valid else status.HTTP_400_BAD_REQUEST
        return Response(result.as_dict(), status=code)

    def options(self, request, *args, **kwargs):
        response = Response(status=status.HTTP_200_OK)
        response["Accept"] = "GET, OPTIONS"
        return response


class BackendsView(APIView):
    """List the backends that are configured and active."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        registry = get_weather_aggregator().registry
        return Response({"backends": list(registry.names)}, status=status.HTTP_200_OK)
