"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherhub.api.views import get_weather_aggregator
from weatherhub.core.services.aggregator import parse_backend_param


class Command(BaseCommand):
    help = "Fetch current weather for a city from the configured backends"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name")
        parser.add_argument(
            "--backend",
            type=str,
            default="",
            help="Comma separated backend names (defaults to every configured backend)",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        backends = parse_backend_param(options.get("backend"))
        result = get_weather_aggregator().resolve(options["city"], backends)
        if not result.is_valid:
            raise CommandError(result.error)
        self.stdout.write(json.dumps(result.as_dict(), indent=2))
