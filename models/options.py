"""
request options for the open-meteo api: units, metric names and the fluent builder
"""

from datetime import date, datetime
from enum import Enum
from typing import Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TemperatureUnit(str, Enum):
    """unit for temperature values, api default is celsius"""
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WindSpeedUnit(str, Enum):
    """unit for wind speed values, api default is km/h"""
    KMH = "kmh"
    MS = "ms"
    MPH = "mph"
    KN = "kn"


class PrecipitationUnit(str, Enum):
    """unit for precipitation values, api default is millimeters"""
    MM = "mm"
    INCH = "inch"


class Metric(str, Enum):
    """upstream variable names"""
    # weather
    TEMPERATURE_2M = "temperature_2m"
    RELATIVE_HUMIDITY_2M = "relative_humidity_2m"
    DEW_POINT_2M = "dew_point_2m"
    APPARENT_TEMPERATURE = "apparent_temperature"
    PRECIPITATION_PROBABILITY = "precipitation_probability"
    PRECIPITATION = "precipitation"
    RAIN = "rain"
    SHOWERS = "showers"
    SNOWFALL = "snowfall"
    SNOW_DEPTH = "snow_depth"
    WEATHER_CODE = "weather_code"
    PRESSURE_MSL = "pressure_msl"
    SURFACE_PRESSURE = "surface_pressure"
    CLOUD_COVER = "cloud_cover"
    CLOUD_COVER_LOW = "cloud_cover_low"
    CLOUD_COVER_MID = "cloud_cover_mid"
    CLOUD_COVER_HIGH = "cloud_cover_high"
    EVAPOTRANSPIRATION = "evapotranspiration"
    VISIBILITY = "visibility"
    ET0_FAO_EVAPOTRANSPIRATION = "et0_fao_evapotranspiration"
    VAPOUR_PRESSURE_DEFICIT = "vapour_pressure_deficit"
    WIND_SPEED_10M = "wind_speed_10m"
    WIND_SPEED_80M = "wind_speed_80m"
    WIND_SPEED_120M = "wind_speed_120m"
    WIND_SPEED_180M = "wind_speed_180m"
    WIND_DIRECTION_10M = "wind_direction_10m"
    WIND_DIRECTION_80M = "wind_direction_80m"
    WIND_DIRECTION_120M = "wind_direction_120m"
    WIND_DIRECTION_180M = "wind_direction_180m"
    WIND_GUSTS_10M = "wind_gusts_10m"
    TEMPERATURE_80M = "temperature_80m"
    TEMPERATURE_120M = "temperature_120m"
    TEMPERATURE_180M = "temperature_180m"
    SOIL_TEMPERATURE_0CM = "soil_temperature_0cm"
    SOIL_TEMPERATURE_6CM = "soil_temperature_6cm"
    SOIL_TEMPERATURE_18CM = "soil_temperature_18cm"
    SOIL_TEMPERATURE_54CM = "soil_temperature_54cm"
    SOIL_MOISTURE_0_TO_1CM = "soil_moisture_0_to_1cm"
    SOIL_MOISTURE_1_TO_3CM = "soil_moisture_1_to_3cm"
    SOIL_MOISTURE_3_TO_9CM = "soil_moisture_3_to_9cm"
    SOIL_MOISTURE_9_TO_27CM = "soil_moisture_9_to_27cm"
    IS_DAY = "is_day"
    TEMPERATURE_2M_MAX = "temperature_2m_max"
    TEMPERATURE_2M_MIN = "temperature_2m_min"
    APPARENT_TEMPERATURE_MAX = "apparent_temperature_max"
    APPARENT_TEMPERATURE_MIN = "apparent_temperature_min"
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    SUNSHINE_DURATION = "sunshine_duration"
    DAYLIGHT_DURATION = "daylight_duration"
    UV_INDEX_MAX = "uv_index_max"
    UV_INDEX_CLEAR_SKY_MAX = "uv_index_clear_sky_max"
    RAIN_SUM = "rain_sum"
    SHOWERS_SUM = "showers_sum"
    SNOWFALL_SUM = "snowfall_sum"
    PRECIPITATION_SUM = "precipitation_sum"
    PRECIPITATION_HOURS = "precipitation_hours"
    PRECIPITATION_PROBABILITY_MAX = "precipitation_probability_max"
    WIND_SPEED_10M_MAX = "wind_speed_10m_max"
    WIND_GUSTS_10M_MAX = "wind_gusts_10m_max"
    WIND_DIRECTION_10M_DOMINANT = "wind_direction_10m_dominant"
    SHORTWAVE_RADIATION_SUM = "shortwave_radiation_sum"

    # marine
    WAVE_HEIGHT = "wave_height"
    WAVE_DIRECTION = "wave_direction"
    WAVE_PERIOD = "wave_period"
    WIND_WAVE_HEIGHT = "wind_wave_height"
    WIND_WAVE_DIRECTION = "wind_wave_direction"
    WIND_WAVE_PERIOD = "wind_wave_period"
    WIND_WAVE_PEAK_PERIOD = "wind_wave_peak_period"
    SWELL_WAVE_HEIGHT = "swell_wave_height"
    SWELL_WAVE_DIRECTION = "swell_wave_direction"
    SWELL_WAVE_PERIOD = "swell_wave_period"
    SWELL_WAVE_PEAK_PERIOD = "swell_wave_peak_period"
    SEA_SURFACE_TEMPERATURE = "sea_surface_temperature"
    OCEAN_CURRENT_VELOCITY = "ocean_current_velocity"
    OCEAN_CURRENT_DIRECTION = "ocean_current_direction"
    WAVE_HEIGHT_MAX = "wave_height_max"
    WAVE_DIRECTION_DOMINANT = "wave_direction_dominant"
    WAVE_PERIOD_MAX = "wave_period_max"
    WIND_WAVE_HEIGHT_MAX = "wind_wave_height_max"
    WIND_WAVE_DIRECTION_DOMINANT = "wind_wave_direction_dominant"
    WIND_WAVE_PERIOD_MAX = "wind_wave_period_max"
    SWELL_WAVE_HEIGHT_MAX = "swell_wave_height_max"
    SWELL_WAVE_DIRECTION_DOMINANT = "swell_wave_direction_dominant"
    SWELL_WAVE_PERIOD_MAX = "swell_wave_period_max"

    # seasonal (weekly and monthly)
    TEMPERATURE_2M_MEAN = "temperature_2m_mean"
    TEMPERATURE_2M_ANOMALY = "temperature_2m_anomaly"
    TEMPERATURE_2M_MAX_MEAN = "temperature_2m_max_mean"
    TEMPERATURE_2M_MIN_MEAN = "temperature_2m_min_mean"
    DEW_POINT_2M_MEAN = "dew_point_2m_mean"
    PRECIPITATION_MEAN = "precipitation_mean"
    PRECIPITATION_ANOMALY = "precipitation_anomaly"
    PRESSURE_MSL_MEAN = "pressure_msl_mean"
    PRESSURE_MSL_ANOMALY = "pressure_msl_anomaly"
    SOIL_MOISTURE_0_TO_10CM_MEAN = "soil_moisture_0_to_10cm_mean"
    SOIL_MOISTURE_0_TO_10CM_ANOMALY = "soil_moisture_0_to_10cm_anomaly"


MetricName = Union[Metric, str]

MARINE_HOURLY_METRICS = (
    Metric.WAVE_HEIGHT,
    Metric.WAVE_DIRECTION,
    Metric.WAVE_PERIOD,
    Metric.WIND_WAVE_HEIGHT,
    Metric.WIND_WAVE_DIRECTION,
    Metric.WIND_WAVE_PERIOD,
    Metric.WIND_WAVE_PEAK_PERIOD,
    Metric.SWELL_WAVE_HEIGHT,
    Metric.SWELL_WAVE_DIRECTION,
    Metric.SWELL_WAVE_PERIOD,
    Metric.SWELL_WAVE_PEAK_PERIOD,
    Metric.SEA_SURFACE_TEMPERATURE,
    Metric.OCEAN_CURRENT_VELOCITY,
    Metric.OCEAN_CURRENT_DIRECTION,
)

MARINE_DAILY_METRICS = (
    Metric.WAVE_HEIGHT_MAX,
    Metric.WAVE_DIRECTION_DOMINANT,
    Metric.WAVE_PERIOD_MAX,
    Metric.WIND_WAVE_HEIGHT_MAX,
    Metric.WIND_WAVE_DIRECTION_DOMINANT,
    Metric.WIND_WAVE_PERIOD_MAX,
    Metric.SWELL_WAVE_HEIGHT_MAX,
    Metric.SWELL_WAVE_DIRECTION_DOMINANT,
    Metric.SWELL_WAVE_PERIOD_MAX,
)

HOURLY_METRICS = (
    Metric.TEMPERATURE_2M,
    Metric.RELATIVE_HUMIDITY_2M,
    Metric.DEW_POINT_2M,
    Metric.APPARENT_TEMPERATURE,
    Metric.PRECIPITATION_PROBABILITY,
    Metric.PRECIPITATION,
    Metric.RAIN,
    Metric.SHOWERS,
    Metric.SNOWFALL,
    Metric.SNOW_DEPTH,
    Metric.WEATHER_CODE,
    Metric.PRESSURE_MSL,
    Metric.SURFACE_PRESSURE,
    Metric.CLOUD_COVER,
    Metric.CLOUD_COVER_LOW,
    Metric.CLOUD_COVER_MID,
    Metric.CLOUD_COVER_HIGH,
    Metric.EVAPOTRANSPIRATION,
    Metric.VISIBILITY,
    Metric.ET0_FAO_EVAPOTRANSPIRATION,
    Metric.VAPOUR_PRESSURE_DEFICIT,
    Metric.WIND_SPEED_10M,
    Metric.WIND_SPEED_80M,
    Metric.WIND_SPEED_120M,
    Metric.WIND_SPEED_180M,
    Metric.WIND_DIRECTION_10M,
    Metric.WIND_DIRECTION_80M,
    Metric.WIND_DIRECTION_120M,
    Metric.WIND_DIRECTION_180M,
    Metric.WIND_GUSTS_10M,
    Metric.TEMPERATURE_80M,
    Metric.TEMPERATURE_120M,
    Metric.TEMPERATURE_180M,
    Metric.SOIL_TEMPERATURE_0CM,
    Metric.SOIL_TEMPERATURE_6CM,
    Metric.SOIL_TEMPERATURE_18CM,
    Metric.SOIL_TEMPERATURE_54CM,
    Metric.SOIL_MOISTURE_0_TO_1CM,
    Metric.SOIL_MOISTURE_1_TO_3CM,
    Metric.SOIL_MOISTURE_3_TO_9CM,
    Metric.SOIL_MOISTURE_9_TO_27CM,
) + MARINE_HOURLY_METRICS

DAILY_METRICS = (
    Metric.WEATHER_CODE,
    Metric.TEMPERATURE_2M_MAX,
    Metric.TEMPERATURE_2M_MIN,
    Metric.APPARENT_TEMPERATURE_MAX,
    Metric.APPARENT_TEMPERATURE_MIN,
    Metric.SUNRISE,
    Metric.SUNSET,
    Metric.SUNSHINE_DURATION,
    Metric.DAYLIGHT_DURATION,
    Metric.UV_INDEX_MAX,
    Metric.UV_INDEX_CLEAR_SKY_MAX,
    Metric.RAIN_SUM,
    Metric.SHOWERS_SUM,
    Metric.SNOWFALL_SUM,
    Metric.PRECIPITATION_SUM,
    Metric.PRECIPITATION_HOURS,
    Metric.PRECIPITATION_PROBABILITY_MAX,
    Metric.WIND_SPEED_10M_MAX,
    Metric.WIND_GUSTS_10M_MAX,
    Metric.WIND_DIRECTION_10M_DOMINANT,
    Metric.SHORTWAVE_RADIATION_SUM,
    Metric.ET0_FAO_EVAPOTRANSPIRATION,
) + MARINE_DAILY_METRICS

CURRENT_METRICS = (
    Metric.TEMPERATURE_2M,
    Metric.RELATIVE_HUMIDITY_2M,
    Metric.IS_DAY,
    Metric.APPARENT_TEMPERATURE,
    Metric.PRECIPITATION,
    Metric.RAIN,
    Metric.SHOWERS,
    Metric.SNOWFALL,
    Metric.WEATHER_CODE,
    Metric.CLOUD_COVER,
    Metric.PRESSURE_MSL,
    Metric.SURFACE_PRESSURE,
    Metric.WIND_SPEED_10M,
    Metric.WIND_DIRECTION_10M,
    Metric.WIND_GUSTS_10M,
) + MARINE_HOURLY_METRICS

_ALLOWED_METRICS = {
    "hourly": HOURLY_METRICS,
    "daily": DAILY_METRICS,
    "current": CURRENT_METRICS,
    "weekly": None,
    "monthly": None,
}


def metric_name(metric: MetricName) -> str:
    """return the wire name of a metric, accepting enum members or plain strings"""
    if isinstance(metric, Enum):
        return metric.value
    return str(metric)


def new_metrics(interval: str, *metrics: MetricName) -> list[MetricName]:
    """
    build a metric set for an interval, rejecting metrics the api does not offer there

    args:
        interval: one of hourly, daily, current, weekly, monthly
        metrics: metric names in the order they should be requested

    returns:
        list of metrics in the given order

    raises:
        ValueError: if the interval is unknown or a metric is not valid for it
    """
    if interval not in _ALLOWED_METRICS:
        raise ValueError(f"unknown interval: {interval}")

    allowed = _ALLOWED_METRICS[interval]
    # weekly and monthly come from the seasonal api and are not restricted
    if allowed is None:
        return list(metrics)

    allowed_names = {m.value for m in allowed}
    for metric in metrics:
        if metric_name(metric) not in allowed_names:
            raise ValueError(f"invalid for {interval} metrics: {metric_name(metric)}")
    return list(metrics)


class Options(BaseModel):
    """parameters for a single weather data request"""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(default=0.0, ge=-90, le=90, description="latitude coordinate")
    longitude: float = Field(default=0.0, ge=-180, le=180, description="longitude coordinate")
    temperature_unit: Optional[TemperatureUnit] = None
    windspeed_unit: Optional[WindSpeedUnit] = None
    precipitation_unit: Optional[PrecipitationUnit] = None
    timezone: Optional[str] = Field(default=None, description="iana timezone name or 'auto'")
    past_days: int = Field(default=0, ge=0)
    forecast_days: int = Field(default=0, ge=0)
    start: Optional[Union[datetime, date]] = Field(default=None, description="first day of a time-range query")
    end: Optional[Union[datetime, date]] = Field(default=None, description="last day of a time-range query")
    models: list[str] = Field(default_factory=list, description="weather model identifiers")
    hourly_metrics: Optional[list[MetricName]] = None
    daily_metrics: Optional[list[MetricName]] = None
    weekly_metrics: Optional[list[MetricName]] = None
    monthly_metrics: Optional[list[MetricName]] = None
    current_metrics: Optional[list[MetricName]] = None
    seasonal: bool = Field(default=False, description="force the seasonal api")
    marine: bool = Field(default=False, description="force the marine api")


class OptionsBuilder:
    """fluent builder for Options"""

    def __init__(self):
        self._values: dict = {}

    def _set(self, key: str, value) -> "OptionsBuilder":
        self._values[key] = value
        return self

    def latitude(self, lat: float) -> "OptionsBuilder":
        return self._set("latitude", lat)

    def longitude(self, lon: float) -> "OptionsBuilder":
        return self._set("longitude", lon)

    def temperature_unit(self, unit: TemperatureUnit) -> "OptionsBuilder":
        return self._set("temperature_unit", unit)

    def windspeed_unit(self, unit: WindSpeedUnit) -> "OptionsBuilder":
        return self._set("windspeed_unit", unit)

    def precipitation_unit(self, unit: PrecipitationUnit) -> "OptionsBuilder":
        return self._set("precipitation_unit", unit)

    def timezone(self, tz: str) -> "OptionsBuilder":
        return self._set("timezone", tz)

    def past_days(self, days: int) -> "OptionsBuilder":
        return self._set("past_days", days)

    def forecast_days(self, days: int) -> "OptionsBuilder":
        return self._set("forecast_days", days)

    def start(self, start: date) -> "OptionsBuilder":
        return self._set("start", start)

    def end(self, end: date) -> "OptionsBuilder":
        return self._set("end", end)

    def models(self, models: Iterable[str]) -> "OptionsBuilder":
        return self._set("models", list(models))

    def hourly_metrics(self, metrics: Iterable[MetricName]) -> "OptionsBuilder":
        return self._set("hourly_metrics", list(metrics))

    def daily_metrics(self, metrics: Iterable[MetricName]) -> "OptionsBuilder":
        return self._set("daily_metrics", list(metrics))

    def weekly_metrics(self, metrics: Iterable[MetricName]) -> "OptionsBuilder":
        return self._set("weekly_metrics", list(metrics))

    def monthly_metrics(self, metrics: Iterable[MetricName]) -> "OptionsBuilder":
        return self._set("monthly_metrics", list(metrics))

    def current_metrics(self, metrics: Iterable[MetricName]) -> "OptionsBuilder":
        return self._set("current_metrics", list(metrics))

    def seasonal(self, seasonal: bool = True) -> "OptionsBuilder":
        return self._set("seasonal", seasonal)

    def marine(self, marine: bool = True) -> "OptionsBuilder":
        return self._set("marine", marine)

    def build(self) -> Options:
        """
        validate and return the configured options

        raises:
            ValidationError: if a value is out of range (e.g. latitude > 90)
        """
        return Options(**self._values)
