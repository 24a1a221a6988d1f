from __future__ import annotations

import logging
from datetime import date

import pytest
import requests

from api.client import OpenMeteoClient
from api.errors import DecodeError, OpenMeteoError, RequestBuildError, ServerError, TransportError
from models import Metric, OptionsBuilder, WeatherData

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


def hourly_options():
    return (
        OptionsBuilder()
        .latitude(52.52)
        .longitude(13.41)
        .hourly_metrics([Metric.TEMPERATURE_2M])
        .build()
    )


def test_get_decodes_single_hourly_step(client, requests_mock):
    requests_mock.get(
        FORECAST_URL,
        json={
            "latitude": 52.52,
            "longitude": 13.41,
            "elevation": 38.0,
            "timezone": "GMT",
            "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
            "hourly": {"time": ["2025-01-01T00:00"], "temperature_2m": [3.4]},
        },
    )

    data = client.get(hourly_options())

    assert isinstance(data, WeatherData)
    assert data.latitude == 52.52
    assert data.elevation == 38.0
    assert data.hourly_units.temperature_2m == "°C"
    assert len(data.hourly.temperature_2m) == 1
    assert data.hourly.temperature_2m[0] == 3.4
    assert data.daily is None


def test_get_sends_user_agent_and_query(requests_mock):
    requests_mock.get(FORECAST_URL, json={"latitude": 52.52, "longitude": 13.41})
    client = OpenMeteoClient(user_agent="test-agent/1.0")

    client.get(hourly_options())

    request = requests_mock.last_request
    assert request.headers["User-Agent"] == "test-agent/1.0"
    assert request.url == f"{FORECAST_URL}?hourly=temperature_2m&latitude=52.52&longitude=13.41"


def test_get_with_api_key_uses_customer_host(requests_mock):
    requests_mock.get(
        "https://customer-api.open-meteo.com/v1/forecast",
        json={"latitude": 1.0, "longitude": 2.0},
    )
    client = OpenMeteoClient(api_key="secret")

    client.get(OptionsBuilder().latitude(1.0).longitude(2.0).build())

    assert requests_mock.last_request.qs["apikey"] == ["secret"]


def test_get_marine(client, requests_mock):
    requests_mock.get(
        "https://marine-api.open-meteo.com/v1/marine",
        json={
            "latitude": 52.52,
            "longitude": 13.41,
            "hourly_units": {"time": "iso8601", "wave_height": "m"},
            "hourly": {"time": ["2025-01-01T00:00"], "wave_height": [2.5]},
        },
    )
    options = OptionsBuilder().marine().latitude(52.52).longitude(13.41).hourly_metrics([Metric.WAVE_HEIGHT]).build()

    data = client.get(options)

    assert data.hourly_units.wave_height == "m"
    assert data.hourly.time == ["2025-01-01T00:00"]
    assert data.hourly.wave_height == [2.5]


def test_get_seasonal_weekly_and_monthly(client, requests_mock):
    requests_mock.get(
        "https://seasonal-api.open-meteo.com/v1/seasonal",
        json={
            "latitude": 10.0,
            "longitude": 20.0,
            "generationtime_ms": 1.23,
            "utc_offset_seconds": 0,
            "timezone": "GMT",
            "timezone_abbreviation": "GMT",
            "elevation": 100.0,
            "weekly_units": {"time": "iso8601", "temperature_2m_mean": "°C"},
            "weekly": {
                "time": ["2025-01-01", "2025-01-08"],
                "temperature_2m_mean": [10.0, 12.0],
                "temperature_2m_anomaly": [1.0, 0.5],
            },
            "monthly_units": {"time": "iso8601", "temperature_2m_mean": "°C"},
            "monthly": {"time": ["2025-01-01"], "temperature_2m_mean": [11.0]},
        },
    )
    options = (
        OptionsBuilder()
        .seasonal()
        .latitude(10.0)
        .longitude(20.0)
        .weekly_metrics([Metric.TEMPERATURE_2M_MEAN, Metric.TEMPERATURE_2M_ANOMALY])
        .monthly_metrics([Metric.TEMPERATURE_2M_MEAN])
        .build()
    )

    data = client.get(options)

    assert data.weekly.temperature_2m_mean[1] == 12.0
    assert data.weekly.temperature_2m_anomaly[0] == 1.0
    assert data.monthly.temperature_2m_mean == [11.0]
    assert data.weekly_units.temperature_2m_mean == "°C"


def test_get_archive_for_old_start(client, requests_mock):
    requests_mock.get(
        "https://archive-api.open-meteo.com/v1/archive",
        json={
            "latitude": 37.77,
            "longitude": -122.42,
            "daily_units": {"time": "iso8601", "weather_code": "wmo code"},
            "daily": {"time": ["2020-07-15"], "weather_code": [3]},
        },
    )
    options = (
        OptionsBuilder()
        .latitude(37.7749)
        .longitude(-122.4194)
        .start(date(2020, 7, 15))
        .end(date(2020, 7, 15))
        .daily_metrics([Metric.WEATHER_CODE])
        .build()
    )

    data = client.get(options)

    assert data.daily.weather_code == [3]
    assert "start_date=2020-07-15" in requests_mock.last_request.url


def test_unknown_metrics_are_kept(client, requests_mock):
    requests_mock.get(
        FORECAST_URL,
        json={
            "latitude": 1.0,
            "longitude": 2.0,
            "hourly": {"time": ["2025-01-01T00:00"], "shortwave_radiation": [120.5]},
        },
    )

    data = client.get(OptionsBuilder().latitude(1.0).longitude(2.0).hourly_metrics(["shortwave_radiation"]).build())

    assert data.hourly.get("shortwave_radiation") == [120.5]


def test_non_2xx_raises_server_error(client, requests_mock):
    requests_mock.get(FORECAST_URL, status_code=400, json={"error": True, "reason": "bad latitude"})

    with pytest.raises(ServerError) as excinfo:
        client.get(hourly_options())

    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "server http error: 400"


def test_server_error_on_5xx(client, requests_mock):
    requests_mock.get(FORECAST_URL, status_code=503, text="unavailable")

    with pytest.raises(ServerError) as excinfo:
        client.get(hourly_options())

    assert excinfo.value.status_code == 503


def test_invalid_json_raises_decode_error(client, requests_mock):
    requests_mock.get(FORECAST_URL, text="not json")

    with pytest.raises(DecodeError):
        client.get(hourly_options())


def test_schema_mismatch_raises_decode_error(client, requests_mock):
    requests_mock.get(FORECAST_URL, json={"latitude": "north", "longitude": 1.0})

    with pytest.raises(DecodeError) as excinfo:
        client.get(hourly_options())

    assert isinstance(excinfo.value, ValueError)


def test_connection_error_raises_transport_error(client, requests_mock):
    requests_mock.get(FORECAST_URL, exc=requests.exceptions.ConnectionError("no route"))

    with pytest.raises(TransportError) as excinfo:
        client.get(hourly_options())

    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


def test_malformed_host_raises_request_build_error():
    client = OpenMeteoClient(scheme="", host="")

    with pytest.raises(RequestBuildError) as excinfo:
        client.get(hourly_options())

    assert not isinstance(excinfo.value, TransportError)
    assert isinstance(excinfo.value.__cause__, requests.exceptions.InvalidSchema)


def test_get_logs_url_at_debug(client, requests_mock, caplog):
    requests_mock.get(FORECAST_URL, json={"latitude": 52.52, "longitude": 13.41})
    caplog.set_level(logging.DEBUG, logger="api.client")

    client.get(hourly_options())

    records = [r for r in caplog.records if r.name == "api.client"]
    assert [r.levelno for r in records] == [logging.DEBUG]
    assert records[0].getMessage() == (
        f"GET {FORECAST_URL}?hourly=temperature_2m&latitude=52.52&longitude=13.41"
    )


def test_get_redacts_encoded_api_key_in_log(requests_mock, caplog):
    requests_mock.get("https://customer-api.open-meteo.com/v1/forecast", json={"latitude": 1.0, "longitude": 2.0})
    caplog.set_level(logging.DEBUG, logger="api.client")
    client = OpenMeteoClient(api_key="a/b+c")

    client.get(OptionsBuilder().latitude(1.0).longitude(2.0).build())

    assert requests_mock.last_request.qs["apikey"] == ["a/b+c"]
    assert "apikey=***" in caplog.text
    assert "a%2Fb%2Bc" not in caplog.text
    assert "a/b+c" not in caplog.text


def test_transport_error_redacts_api_key(requests_mock, caplog):
    requests_mock.get(
        "https://customer-api.open-meteo.com/v1/forecast",
        exc=requests.exceptions.ConnectionError("failed for /v1/forecast?apikey=topsecret"),
    )
    caplog.set_level(logging.DEBUG, logger="api.client")
    client = OpenMeteoClient(api_key="topsecret")

    with pytest.raises(TransportError) as excinfo:
        client.get(OptionsBuilder().latitude(1.0).longitude(2.0).build())

    assert "topsecret" not in str(excinfo.value)
    assert "apikey=***" in str(excinfo.value)
    assert "topsecret" not in caplog.text


def test_server_error_is_logged_before_raising(client, requests_mock, caplog):
    requests_mock.get(FORECAST_URL, status_code=500, text="boom")
    caplog.set_level(logging.DEBUG, logger="api.client")

    with pytest.raises(ServerError):
        client.get(hourly_options())

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "500" in errors[0].getMessage()


def test_decode_error_is_logged(client, requests_mock, caplog):
    requests_mock.get(FORECAST_URL, text="not json")

    with pytest.raises(DecodeError):
        client.get(hourly_options())

    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_get_applies_environment_ca_bundle(client, requests_mock, monkeypatch):
    monkeypatch.setenv("REQUESTS_CA_BUNDLE", "/etc/ssl/custom-ca.pem")
    requests_mock.get(FORECAST_URL, json={"latitude": 52.52, "longitude": 13.41})

    client.get(hourly_options())

    assert requests_mock.last_request.verify == "/etc/ssl/custom-ca.pem"


def test_errors_share_base_class():
    for error in (RequestBuildError, TransportError, ServerError, DecodeError):
        assert issubclass(error, OpenMeteoError)


def test_session_can_be_swapped(requests_mock):
    client = OpenMeteoClient()
    session = requests.Session()
    session.headers["X-Test"] = "1"
    client.session = session
    requests_mock.get(FORECAST_URL, json={"latitude": 52.52, "longitude": 13.41})

    client.get(hourly_options())

    assert requests_mock.last_request.headers["X-Test"] == "1"


def test_api_key_and_user_agent_are_read_only():
    client = OpenMeteoClient(api_key="secret")

    with pytest.raises(AttributeError):
        client.api_key = "other"
    with pytest.raises(AttributeError):
        client.user_agent = "other"


def test_from_env(monkeypatch):
    monkeypatch.setenv("OPEN_METEO_API_KEY", "envkey")
    monkeypatch.setenv("OPEN_METEO_USER_AGENT", "env-agent")
    monkeypatch.delenv("OPEN_METEO_HOST", raising=False)

    client = OpenMeteoClient.from_env()

    assert client.api_key == "envkey"
    assert client.user_agent == "env-agent"
    assert client.url(OptionsBuilder().build()).startswith("https://customer-api.open-meteo.com/v1/forecast?")


def test_from_env_without_key(monkeypatch):
    monkeypatch.delenv("OPEN_METEO_API_KEY", raising=False)
    monkeypatch.delenv("OPEN_METEO_USER_AGENT", raising=False)

    client = OpenMeteoClient.from_env()

    assert client.api_key is None
    assert client.user_agent == "OpenMeteoPy-Client"
