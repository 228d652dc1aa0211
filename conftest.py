from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherhub.settings")
# Tests expect both backends configured with these keys and no config file.
os.environ["WEATHER_CONFIG_FILE"] = ""
os.environ["ACCUWEATHER_API_KEY"] = "acc-test-key"
os.environ["OPENWEATHERMAP_API_KEY"] = "owm-test-key"
os.environ["WEATHER_MAX_WORKERS"] = "1"

django.setup()
