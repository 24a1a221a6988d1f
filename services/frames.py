"""
tabular views of decoded responses
"""

import pandas as pd

from models import WeatherData


def to_dataframe(data: WeatherData, interval: str = "hourly") -> pd.DataFrame:
    """
    convert one interval block into a dataframe

    args:
        data: decoded response
        interval: hourly, daily, weekly or monthly

    returns:
        dataframe with one column per metric and `time` parsed to datetimes

    raises:
        ValueError: if the interval is unknown or missing from the response
    """
    if interval == "current":
        raise ValueError("current conditions are a single row, use data.current instead")

    _, values = data.interval(interval)
    if values is None:
        raise ValueError(f"response has no {interval} data")

    df = pd.DataFrame(values.metrics())
    if "time" in df.columns:
        df["time"] = pd.to_datetime(df["time"])
    return df
