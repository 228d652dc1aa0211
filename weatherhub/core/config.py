"""Backend credential loading.

Credentials come from an optional JSON file shaped like::

    {"backends": {"accuweather": {"apiKey": "..."}, "openweathermap": {"apiKey": "..."}}}

and from ``<NAME>_API_KEY`` environment variables, which take precedence.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union

from django.core.exceptions import ImproperlyConfigured

from .abstractions import ACCUWEATHER, OPENWEATHERMAP


logger = logging.getLogger(__name__)

KNOWN_BACKENDS = (ACCUWEATHER, OPENWEATHERMAP)


@dataclass(frozen=True)
class BackendConfig:
    api_key: str = ""

    @property
    def configured(self) -> bool:
        return bool(self.api_key.strip())


def load_config_file(path: Union[str, Path, None]) -> Dict[str, Dict[str, str]]:
    """Return the ``backends`` section of the config file, or ``{}`` if absent."""

    if not path:
        return {}
    path = Path(path)
    if not path.exists():
        logger.info("Weather config file %s not found, relying on environment", path)
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ImproperlyConfigured(f"Weather config file {path} is not valid JSON") from exc
    if not isinstance(data, dict):
        raise ImproperlyConfigured(f"Weather config file {path} must contain a JSON object")
    backends = data.get("backends") or {}
    if not isinstance(backends, dict):
        raise ImproperlyConfigured(f"'backends' in {path} must be an object")
    parsed: Dict[str, Dict[str, str]] = {}
    for name, value in backends.items():
        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise ImproperlyConfigured(f"Configuration for backend {name!r} in {path} must be an object")
        parsed[name] = dict(value)
    return parsed


def load_backend_settings(
    path: Union[str, Path, None],
    environ: Mapping[str, str],
    names: Iterable[str] = KNOWN_BACKENDS,
) -> Dict[str, Dict[str, str]]:
    """Merge file credentials with ``<NAME>_API_KEY`` environment overrides."""

    backends = load_config_file(path)
    for name in names:
        override: Optional[str] = environ.get(f"{name.upper()}_API_KEY")
        if override is not None:
            backends.setdefault(name, {})["apiKey"] = override
    return backends


def parse_backends(raw: Mapping[str, Mapping[str, str]]) -> Dict[str, BackendConfig]:
    parsed: Dict[str, BackendConfig] = {}
    for name, options in raw.items():
        if not isinstance(options, Mapping):
            raise ImproperlyConfigured(f"Configuration for backend {name!r} must be an object")
        api_key = options.get("apiKey") or ""
        if not isinstance(api_key, str):
            raise ImproperlyConfigured(f"apiKey for backend {name!r} must be a string")
        parsed[name] = BackendConfig(api_key=api_key.strip())
    return parsed


__all__ = ["BackendConfig", "KNOWN_BACKENDS", "load_backend_settings", "load_config_file", "parse_backends"]
