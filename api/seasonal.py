"""
seasonal forecast api client
"""

from typing import Iterable, Optional

from models import Metric, MetricName, OptionsBuilder, WeatherData

from .client import OpenMeteoClient

DEFAULT_WEEKLY = (
    Metric.TEMPERATURE_2M_MEAN,
    Metric.TEMPERATURE_2M_ANOMALY,
    Metric.PRECIPITATION_MEAN,
    Metric.PRECIPITATION_ANOMALY,
)


def seasonal_forecast(
    latitude: float,
    longitude: float,
    weekly: Iterable[MetricName] = DEFAULT_WEEKLY,
    monthly: Iterable[MetricName] = (),
    models: Iterable[str] = (),
    client: Optional[OpenMeteoClient] = None,
) -> WeatherData:
    """
    fetch weekly and monthly outlooks from the open-meteo seasonal api

    args:
        latitude: latitude coordinate
        longitude: longitude coordinate
        weekly: weekly metrics to request
        monthly: monthly metrics to request
        models: seasonal model identifiers, e.g. ecmwf_seas5
        client: client to use, one is built from the environment if omitted

    returns:
        decoded weather data with weekly/monthly blocks
    """
    options = (
        OptionsBuilder()
        .seasonal()
        .latitude(latitude)
        .longitude(longitude)
        .weekly_metrics(weekly)
        .monthly_metrics(monthly)
        .models(models)
        .build()
    )
    client = client or OpenMeteoClient.from_env()
    return client.get(options)


if __name__ == "__main__":
    import logging
    import sys

    import config

    logging.basicConfig(level=config.LOG_LEVEL)

    outlook = seasonal_forecast(float(sys.argv[1]), float(sys.argv[2]))
    if outlook.weekly is not None and outlook.weekly.time:
        unit = outlook.weekly_units.temperature_2m_mean if outlook.weekly_units else ""
        for week, temp in zip(outlook.weekly.time, outlook.weekly.temperature_2m_mean or []):
            print(f"{week}: {temp}{unit}")
