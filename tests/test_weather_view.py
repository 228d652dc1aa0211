from __future__ import annotations

import pytest
from django.test import Client


SEARCH_URL = "https://dataservice.accuweather.com/locations/v1/cities/search"
CURRENT_URL = "https://dataservice.accuweather.com/currentconditions/v1/1234"
FORECAST_URL = "https://dataservice.accuweather.com/forecasts/v1/daily/1day/1234"
OWM_URL = "https://api.openweathermap.org/data/2.5/weather"

OWM_PAYLOAD = {
    "weather": [{"main": "Clouds", "description": "broken clouds"}],
    "main": {"temp": 11.0, "temp_min": 9.5, "temp_max": 12.5},
}


@pytest.fixture
def client() -> Client:
    return Client()


def test_weather_endpoint_returns_payload(client, requests_mock) -> None:
    requests_mock.get(OWM_URL, json=OWM_PAYLOAD)

    response = client.get("/v1/weather/paris", {"backend": "openweathermap"})

    assert response.status_code == 200
    assert response.json() == {
        "city": "paris",
        "data": [
            {
                "source": "openweathermap",
                "temperature": 11.0,
                "temperature_min": 9.5,
                "temperature_max": 12.5,
                "main_description": "Clouds",
                "detailed_description": "broken clouds",
            }
        ],
    }
    assert requests_mock.last_request.qs["appid"] == ["owm-test-key"]


def test_weather_endpoint_queries_all_backends_by_default(client, requests_mock) -> None:
    requests_mock.get(SEARCH_URL, json=[{"Key": "1234"}])
    requests_mock.get(CURRENT_URL, json=[{"Temperature": {"Metric": {"Value": 20}}, "WeatherText": "Sunny"}])
    requests_mock.get(
        FORECAST_URL,
        json={"DailyForecasts": [{"Temperature": {"Minimum": {"Value": 15}, "Maximum": {"Value": 22}}}]},
    )
    requests_mock.get(OWM_URL, status_code=500)

    response = client.get("/v1/weather/paris")

    assert response.status_code == 200
    payload = response.json()
    assert [item["source"] for item in payload["data"]] == ["accuweather", "openweathermap"]
    assert payload["data"][0]["temperature"] == 20
    assert payload["data"][1]["error"] == "Error communicating to backend"
    assert "error" not in payload


def test_weather_endpoint_rejects_unknown_backend(client, requests_mock) -> None:
    response = client.get("/v1/weather/paris", {"backend": "accuweather,unknown"})

    assert response.status_code == 400
    assert response.json()["error"] == "Backend specified is invalid or inactive: unknown"
    assert requests_mock.call_count == 0


@pytest.mark.parametrize("params", [{}, {"city": "   "}])
def test_weather_endpoint_requires_city(client, requests_mock, params) -> None:
    response = client.get("/v1/weather", params)

    assert response.status_code == 400
    payload = response.json()
    assert payload["error"].startswith("No city specified")
    assert payload["data"] == []
    assert requests_mock.call_count == 0


def test_weather_endpoint_accepts_city_query_parameter(client, requests_mock) -> None:
    requests_mock.get(OWM_URL, json=OWM_PAYLOAD)

    response = client.get("/v1/weather", {"city": " new york ", "backend": "openweathermap"})

    assert response.status_code == 200
    assert response.json()["city"] == "new york"


def test_weather_options(client) -> None:
    response = client.options("/v1/weather")

    assert response.status_code == 200
    assert response["Accept"] == "GET, OPTIONS"
    assert response.content == b""


def test_backends_endpoint_lists_configured_backends(client) -> None:
    first = client.get("/v1/backends")
    second = client.get("/v1/backends")

    assert first.status_code == 200
    assert first.json() == {"backends": ["accuweather", "openweathermap"]}
    assert second.json() == first.json()


@pytest.mark.parametrize("path", ["/v1/weather/", "/v1/weather/%20%20"])
def test_weather_endpoint_empty_path_city(client, requests_mock, path) -> None:
    response = client.get(path)

    assert response.status_code == 400
    assert response.json()["error"].startswith("No city specified")
    assert requests_mock.call_count == 0
