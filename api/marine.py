"""
marine weather api client
"""

from typing import Iterable, Optional

from models import MARINE_DAILY_METRICS, Metric, MetricName, OptionsBuilder, WeatherData

from .client import OpenMeteoClient

DEFAULT_HOURLY = (
    Metric.WAVE_HEIGHT,
    Metric.WAVE_DIRECTION,
    Metric.WAVE_PERIOD,
    Metric.WIND_WAVE_HEIGHT,
    Metric.WIND_WAVE_DIRECTION,
    Metric.WIND_WAVE_PERIOD,
    Metric.SWELL_WAVE_HEIGHT,
    Metric.SWELL_WAVE_DIRECTION,
    Metric.SWELL_WAVE_PERIOD,
)


def marine_forecast(
    latitude: float,
    longitude: float,
    hourly: Iterable[MetricName] = DEFAULT_HOURLY,
    daily: Iterable[MetricName] = MARINE_DAILY_METRICS,
    forecast_days: int = 7,
    timezone: str = "auto",
    client: Optional[OpenMeteoClient] = None,
) -> WeatherData:
    """
    fetch marine forecast data from the open-meteo marine api

    args:
        latitude: latitude coordinate
        longitude: longitude coordinate
        hourly: hourly marine metrics to request
        daily: daily marine metrics to request
        forecast_days: number of forecast days
        timezone: timezone for the returned timestamps
        client: client to use, one is built from the environment if omitted

    returns:
        decoded weather data with marine hourly/daily blocks

    raises:
        OpenMeteoError: if the request or decoding fails
    """
    options = (
        OptionsBuilder()
        .marine()
        .latitude(latitude)
        .longitude(longitude)
        .hourly_metrics(hourly)
        .daily_metrics(daily)
        .forecast_days(forecast_days)
        .timezone(timezone)
        .build()
    )
    client = client or OpenMeteoClient.from_env()
    return client.get(options)


if __name__ == "__main__":
    import logging
    import sys

    import config
    from services import format_direction

    logging.basicConfig(level=config.LOG_LEVEL)

    city_lat = float(sys.argv[1])
    city_lon = float(sys.argv[2])
    marine = marine_forecast(city_lat, city_lon, forecast_days=1)
    hourly = marine.hourly
    if hourly is None or not hourly.time:
        print("no marine data for this location")
        sys.exit(1)
    for i, ts in enumerate(hourly.time[:6]):
        print(
            f"{ts}: {hourly.wave_height[i]}m waves ({hourly.wave_period[i]}s) "
            f"swell from {format_direction(hourly.swell_wave_direction[i])}"
        )
