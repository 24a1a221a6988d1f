"""
weather forecast and historical weather entry points
"""

from datetime import date
from typing import Iterable, Optional

from models import Metric, MetricName, OptionsBuilder, TemperatureUnit, WeatherData, WindSpeedUnit

from .client import OpenMeteoClient

DEFAULT_HOURLY = (
    Metric.TEMPERATURE_2M,
    Metric.WIND_SPEED_10M,
    Metric.WIND_DIRECTION_10M,
    Metric.WIND_GUSTS_10M,
)

DEFAULT_DAILY = (
    Metric.WEATHER_CODE,
    Metric.TEMPERATURE_2M_MAX,
    Metric.TEMPERATURE_2M_MIN,
    Metric.WIND_SPEED_10M_MAX,
    Metric.WIND_DIRECTION_10M_DOMINANT,
)


def weather_forecast(
    latitude: float,
    longitude: float,
    hourly: Iterable[MetricName] = DEFAULT_HOURLY,
    daily: Iterable[MetricName] = DEFAULT_DAILY,
    current: Iterable[MetricName] = (),
    forecast_days: int = 7,
    timezone: str = "auto",
    temperature_unit: Optional[TemperatureUnit] = None,
    windspeed_unit: Optional[WindSpeedUnit] = None,
    client: Optional[OpenMeteoClient] = None,
) -> WeatherData:
    """
    fetch a weather forecast from the open-meteo forecast api

    args:
        latitude: latitude coordinate
        longitude: longitude coordinate
        hourly: hourly metrics to request
        daily: daily metrics to request
        current: current metrics to request
        forecast_days: number of forecast days
        timezone: timezone for the returned timestamps
        temperature_unit: optional temperature unit
        windspeed_unit: optional wind speed unit
        client: client to use, one is built from the environment if omitted

    returns:
        decoded weather data

    raises:
        OpenMeteoError: if the request or decoding fails
    """
    builder = (
        OptionsBuilder()
        .latitude(latitude)
        .longitude(longitude)
        .hourly_metrics(hourly)
        .daily_metrics(daily)
        .current_metrics(current)
        .forecast_days(forecast_days)
        .timezone(timezone)
    )
    if temperature_unit is not None:
        builder.temperature_unit(temperature_unit)
    if windspeed_unit is not None:
        builder.windspeed_unit(windspeed_unit)

    client = client or OpenMeteoClient.from_env()
    return client.get(builder.build())


def historical_weather(
    latitude: float,
    longitude: float,
    start: date,
    end: date,
    daily: Iterable[MetricName] = DEFAULT_DAILY,
    hourly: Iterable[MetricName] = (),
    timezone: str = "auto",
    client: Optional[OpenMeteoClient] = None,
) -> WeatherData:
    """
    fetch weather for a date range

    ranges starting more than 90 days ago are served by the archive api,
    anything more recent by the forecast api
    """
    options = (
        OptionsBuilder()
        .latitude(latitude)
        .longitude(longitude)
        .start(start)
        .end(end)
        .daily_metrics(daily)
        .hourly_metrics(hourly)
        .timezone(timezone)
        .build()
    )
    client = client or OpenMeteoClient.from_env()
    return client.get(options)


if __name__ == "__main__":
    import logging
    import sys

    import config
    from services import describe_code, format_direction

    logging.basicConfig(level=config.LOG_LEVEL)

    latitude = float(sys.argv[1])
    longitude = float(sys.argv[2])
    weather = weather_forecast(
        latitude,
        longitude,
        current=(Metric.TEMPERATURE_2M, Metric.WEATHER_CODE, Metric.WIND_DIRECTION_10M),
        forecast_days=1,
    )
    print(f"Weather at ({weather.latitude:.2f}, {weather.longitude:.2f}) {weather.timezone}")
    if weather.current is not None:
        print(f"Time: {weather.current.time}")
        print(f"Temperature: {weather.current.temperature_2m}{weather.current_units.temperature_2m}")
        print(f"Wind from: {format_direction(weather.current.wind_direction_10m)}")
        print(f"Weather: {describe_code(weather.current.weather_code)}")
    if weather.daily is not None and weather.daily.time:
        print(f"Forecast for {weather.daily.time[0]}:")
        print(f"  Max: {weather.daily.temperature_2m_max[0]}{weather.daily_units.temperature_2m_max}")
        print(f"  Min: {weather.daily.temperature_2m_min[0]}{weather.daily_units.temperature_2m_min}")
        print(f"  Weather: {describe_code(weather.daily.weather_code[0])}")
