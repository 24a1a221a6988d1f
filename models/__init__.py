"""
pydantic models mirroring the open-meteo response schema
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from .options import (
    CURRENT_METRICS,
    DAILY_METRICS,
    HOURLY_METRICS,
    MARINE_DAILY_METRICS,
    MARINE_HOURLY_METRICS,
    Metric,
    MetricName,
    Options,
    OptionsBuilder,
    PrecipitationUnit,
    TemperatureUnit,
    WindSpeedUnit,
    metric_name,
    new_metrics,
)


class _Block(BaseModel):
    """
    one interval block of a response

    known variables are declared as fields, anything else the api returns is
    kept as an extra field so newer variables still decode
    """
    model_config = ConfigDict(extra="allow")

    def get(self, metric: MetricName, default: Any = None) -> Any:
        """return the entry for a metric by its wire name"""
        name = metric_name(metric)
        if name in type(self).model_fields:
            value = getattr(self, name)
        else:
            value = (self.model_extra or {}).get(name)
        return default if value is None else value

    def metrics(self) -> dict[str, Any]:
        """return every populated entry keyed by wire name"""
        return self.model_dump(exclude_none=True)


# current -------------------------------------------------------------------

class CurrentUnits(_Block):
    """units for the current conditions block"""
    time: Optional[str] = None
    interval: Optional[str] = None
    temperature_2m: Optional[str] = None
    relative_humidity_2m: Optional[str] = None
    is_day: Optional[str] = None
    apparent_temperature: Optional[str] = None
    precipitation: Optional[str] = None
    rain: Optional[str] = None
    showers: Optional[str] = None
    snowfall: Optional[str] = None
    weather_code: Optional[str] = None
    cloud_cover: Optional[str] = None
    pressure_msl: Optional[str] = None
    surface_pressure: Optional[str] = None
    wind_speed_10m: Optional[str] = None
    wind_direction_10m: Optional[str] = None
    wind_gusts_10m: Optional[str] = None
    wave_height: Optional[str] = None
    wave_direction: Optional[str] = None
    wave_period: Optional[str] = None
    sea_surface_temperature: Optional[str] = None


class Current(_Block):
    """current conditions values"""
    time: Optional[str] = None
    interval: Optional[int] = None
    temperature_2m: Optional[float] = None
    relative_humidity_2m: Optional[int] = None
    is_day: Optional[int] = None
    apparent_temperature: Optional[float] = None
    precipitation: Optional[float] = None
    rain: Optional[float] = None
    showers: Optional[float] = None
    snowfall: Optional[float] = None
    weather_code: Optional[int] = None
    cloud_cover: Optional[int] = None
    pressure_msl: Optional[float] = None
    surface_pressure: Optional[float] = None
    wind_speed_10m: Optional[float] = None
    wind_direction_10m: Optional[int] = None
    wind_gusts_10m: Optional[float] = None
    wave_height: Optional[float] = None
    wave_direction: Optional[float] = None
    wave_period: Optional[float] = None
    sea_surface_temperature: Optional[float] = None


# hourly --------------------------------------------------------------------

class HourlyUnits(_Block):
    """units for the hourly block"""
    time: Optional[str] = None
    temperature_2m: Optional[str] = None
    relative_humidity_2m: Optional[str] = None
    dew_point_2m: Optional[str] = None
    apparent_temperature: Optional[str] = None
    precipitation_probability: Optional[str] = None
    precipitation: Optional[str] = None
    rain: Optional[str] = None
    showers: Optional[str] = None
    snowfall: Optional[str] = None
    snow_depth: Optional[str] = None
    weather_code: Optional[str] = None
    pressure_msl: Optional[str] = None
    surface_pressure: Optional[str] = None
    cloud_cover: Optional[str] = None
    cloud_cover_low: Optional[str] = None
    cloud_cover_mid: Optional[str] = None
    cloud_cover_high: Optional[str] = None
    evapotranspiration: Optional[str] = None
    visibility: Optional[str] = None
    et0_fao_evapotranspiration: Optional[str] = None
    vapour_pressure_deficit: Optional[str] = None
    wind_speed_10m: Optional[str] = None
    wind_speed_80m: Optional[str] = None
    wind_speed_120m: Optional[str] = None
    wind_speed_180m: Optional[str] = None
    wind_direction_10m: Optional[str] = None
    wind_direction_80m: Optional[str] = None
    wind_direction_120m: Optional[str] = None
    wind_direction_180m: Optional[str] = None
    wind_gusts_10m: Optional[str] = None
    temperature_80m: Optional[str] = None
    temperature_120m: Optional[str] = None
    temperature_180m: Optional[str] = None
    soil_temperature_0cm: Optional[str] = None
    soil_temperature_6cm: Optional[str] = None
    soil_temperature_18cm: Optional[str] = None
    soil_temperature_54cm: Optional[str] = None
    soil_moisture_0_to_1cm: Optional[str] = None
    soil_moisture_1_to_3cm: Optional[str] = None
    soil_moisture_3_to_9cm: Optional[str] = None
    soil_moisture_9_to_27cm: Optional[str] = None
    # marine
    wave_height: Optional[str] = None
    wave_direction: Optional[str] = None
    wave_period: Optional[str] = None
    wind_wave_height: Optional[str] = None
    wind_wave_direction: Optional[str] = None
    wind_wave_period: Optional[str] = None
    wind_wave_peak_period: Optional[str] = None
    swell_wave_height: Optional[str] = None
    swell_wave_direction: Optional[str] = None
    swell_wave_period: Optional[str] = None
    swell_wave_peak_period: Optional[str] = None
    sea_surface_temperature: Optional[str] = None
    ocean_current_velocity: Optional[str] = None
    ocean_current_direction: Optional[str] = None


class Hourly(_Block):
    """hourly values, one entry per hour"""
    time: Optional[list[str]] = None
    temperature_2m: Optional[list[Optional[float]]] = None
    relative_humidity_2m: Optional[list[Optional[int]]] = None
    dew_point_2m: Optional[list[Optional[float]]] = None
    apparent_temperature: Optional[list[Optional[float]]] = None
    precipitation_probability: Optional[list[Optional[int]]] = None
    precipitation: Optional[list[Optional[float]]] = None
    rain: Optional[list[Optional[float]]] = None
    showers: Optional[list[Optional[float]]] = None
    snowfall: Optional[list[Optional[float]]] = None
    snow_depth: Optional[list[Optional[float]]] = None
    weather_code: Optional[list[Optional[int]]] = None
    pressure_msl: Optional[list[Optional[float]]] = None
    surface_pressure: Optional[list[Optional[float]]] = None
    cloud_cover: Optional[list[Optional[int]]] = None
    cloud_cover_low: Optional[list[Optional[int]]] = None
    cloud_cover_mid: Optional[list[Optional[int]]] = None
    cloud_cover_high: Optional[list[Optional[int]]] = None
    evapotranspiration: Optional[list[Optional[float]]] = None
    visibility: Optional[list[Optional[float]]] = None
    et0_fao_evapotranspiration: Optional[list[Optional[float]]] = None
    vapour_pressure_deficit: Optional[list[Optional[float]]] = None
    wind_speed_10m: Optional[list[Optional[float]]] = None
    wind_speed_80m: Optional[list[Optional[float]]] = None
    wind_speed_120m: Optional[list[Optional[float]]] = None
    wind_speed_180m: Optional[list[Optional[float]]] = None
    wind_direction_10m: Optional[list[Optional[int]]] = None
    wind_direction_80m: Optional[list[Optional[int]]] = None
    wind_direction_120m: Optional[list[Optional[int]]] = None
    wind_direction_180m: Optional[list[Optional[int]]] = None
    wind_gusts_10m: Optional[list[Optional[float]]] = None
    temperature_80m: Optional[list[Optional[float]]] = None
    temperature_120m: Optional[list[Optional[float]]] = None
    temperature_180m: Optional[list[Optional[float]]] = None
    soil_temperature_0cm: Optional[list[Optional[float]]] = None
    soil_temperature_6cm: Optional[list[Optional[float]]] = None
    soil_temperature_18cm: Optional[list[Optional[float]]] = None
    soil_temperature_54cm: Optional[list[Optional[float]]] = None
    soil_moisture_0_to_1cm: Optional[list[Optional[float]]] = None
    soil_moisture_1_to_3cm: Optional[list[Optional[float]]] = None
    soil_moisture_3_to_9cm: Optional[list[Optional[float]]] = None
    soil_moisture_9_to_27cm: Optional[list[Optional[float]]] = None
    # marine
    wave_height: Optional[list[Optional[float]]] = None
    wave_direction: Optional[list[Optional[float]]] = None
    wave_period: Optional[list[Optional[float]]] = None
    wind_wave_height: Optional[list[Optional[float]]] = None
    wind_wave_direction: Optional[list[Optional[float]]] = None
    wind_wave_period: Optional[list[Optional[float]]] = None
    wind_wave_peak_period: Optional[list[Optional[float]]] = None
    swell_wave_height: Optional[list[Optional[float]]] = None
    swell_wave_direction: Optional[list[Optional[float]]] = None
    swell_wave_period: Optional[list[Optional[float]]] = None
    swell_wave_peak_period: Optional[list[Optional[float]]] = None
    sea_surface_temperature: Optional[list[Optional[float]]] = None
    ocean_current_velocity: Optional[list[Optional[float]]] = None
    ocean_current_direction: Optional[list[Optional[float]]] = None


# daily ---------------------------------------------------------------------

class DailyUnits(_Block):
    """units for the daily block"""
    time: Optional[str] = None
    weather_code: Optional[str] = None
    temperature_2m_max: Optional[str] = None
    temperature_2m_min: Optional[str] = None
    apparent_temperature_max: Optional[str] = None
    apparent_temperature_min: Optional[str] = None
    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    sunshine_duration: Optional[str] = None
    daylight_duration: Optional[str] = None
    uv_index_max: Optional[str] = None
    uv_index_clear_sky_max: Optional[str] = None
    rain_sum: Optional[str] = None
    showers_sum: Optional[str] = None
    snowfall_sum: Optional[str] = None
    precipitation_sum: Optional[str] = None
    precipitation_hours: Optional[str] = None
    precipitation_probability_max: Optional[str] = None
    wind_speed_10m_max: Optional[str] = None
    wind_gusts_10m_max: Optional[str] = None
    wind_direction_10m_dominant: Optional[str] = None
    shortwave_radiation_sum: Optional[str] = None
    et0_fao_evapotranspiration: Optional[str] = None
    # marine
    wave_height_max: Optional[str] = None
    wave_direction_dominant: Optional[str] = None
    wave_period_max: Optional[str] = None
    wind_wave_height_max: Optional[str] = None
    wind_wave_direction_dominant: Optional[str] = None
    wind_wave_period_max: Optional[str] = None
    swell_wave_height_max: Optional[str] = None
    swell_wave_direction_dominant: Optional[str] = None
    swell_wave_period_max: Optional[str] = None


class Daily(_Block):
    """daily values, one entry per day"""
    time: Optional[list[str]] = None
    weather_code: Optional[list[Optional[int]]] = None
    temperature_2m_max: Optional[list[Optional[float]]] = None
    temperature_2m_min: Optional[list[Optional[float]]] = None
    apparent_temperature_max: Optional[list[Optional[float]]] = None
    apparent_temperature_min: Optional[list[Optional[float]]] = None
    sunrise: Optional[list[Optional[str]]] = None
    sunset: Optional[list[Optional[str]]] = None
    sunshine_duration: Optional[list[Optional[float]]] = None
    daylight_duration: Optional[list[Optional[float]]] = None
    uv_index_max: Optional[list[Optional[float]]] = None
    uv_index_clear_sky_max: Optional[list[Optional[float]]] = None
    rain_sum: Optional[list[Optional[float]]] = None
    showers_sum: Optional[list[Optional[float]]] = None
    snowfall_sum: Optional[list[Optional[float]]] = None
    precipitation_sum: Optional[list[Optional[float]]] = None
    precipitation_hours: Optional[list[Optional[float]]] = None
    precipitation_probability_max: Optional[list[Optional[int]]] = None
    wind_speed_10m_max: Optional[list[Optional[float]]] = None
    wind_gusts_10m_max: Optional[list[Optional[float]]] = None
    wind_direction_10m_dominant: Optional[list[Optional[int]]] = None
    shortwave_radiation_sum: Optional[list[Optional[float]]] = None
    et0_fao_evapotranspiration: Optional[list[Optional[float]]] = None
    # marine
    wave_height_max: Optional[list[Optional[float]]] = None
    wave_direction_dominant: Optional[list[Optional[float]]] = None
    wave_period_max: Optional[list[Optional[float]]] = None
    wind_wave_height_max: Optional[list[Optional[float]]] = None
    wind_wave_direction_dominant: Optional[list[Optional[float]]] = None
    wind_wave_period_max: Optional[list[Optional[float]]] = None
    swell_wave_height_max: Optional[list[Optional[float]]] = None
    swell_wave_direction_dominant: Optional[list[Optional[float]]] = None
    swell_wave_period_max: Optional[list[Optional[float]]] = None


# seasonal ------------------------------------------------------------------

class SeasonalUnits(_Block):
    """units for the weekly and monthly blocks of the seasonal api"""
    time: Optional[str] = None
    temperature_2m_mean: Optional[str] = None
    temperature_2m_anomaly: Optional[str] = None
    temperature_2m_max_mean: Optional[str] = None
    temperature_2m_min_mean: Optional[str] = None
    dew_point_2m_mean: Optional[str] = None
    precipitation_mean: Optional[str] = None
    precipitation_anomaly: Optional[str] = None
    pressure_msl_mean: Optional[str] = None
    pressure_msl_anomaly: Optional[str] = None
    soil_moisture_0_to_10cm_mean: Optional[str] = None
    soil_moisture_0_to_10cm_anomaly: Optional[str] = None


class Seasonal(_Block):
    """weekly or monthly values of the seasonal api"""
    time: Optional[list[str]] = None
    temperature_2m_mean: Optional[list[Optional[float]]] = None
    temperature_2m_anomaly: Optional[list[Optional[float]]] = None
    temperature_2m_max_mean: Optional[list[Optional[float]]] = None
    temperature_2m_min_mean: Optional[list[Optional[float]]] = None
    dew_point_2m_mean: Optional[list[Optional[float]]] = None
    precipitation_mean: Optional[list[Optional[float]]] = None
    precipitation_anomaly: Optional[list[Optional[float]]] = None
    pressure_msl_mean: Optional[list[Optional[float]]] = None
    pressure_msl_anomaly: Optional[list[Optional[float]]] = None
    soil_moisture_0_to_10cm_mean: Optional[list[Optional[float]]] = None
    soil_moisture_0_to_10cm_anomaly: Optional[list[Optional[float]]] = None


INTERVALS = ("current", "hourly", "daily", "weekly", "monthly")


class WeatherData(BaseModel):
    """decoded api response for any product line"""
    model_config = ConfigDict(extra="allow")

    latitude: float
    longitude: float
    generationtime_ms: Optional[float] = None
    utc_offset_seconds: Optional[int] = None
    timezone: Optional[str] = None
    timezone_abbreviation: Optional[str] = None
    elevation: Optional[float] = None
    current_units: Optional[CurrentUnits] = None
    current: Optional[Current] = None
    hourly_units: Optional[HourlyUnits] = None
    hourly: Optional[Hourly] = None
    daily_units: Optional[DailyUnits] = None
    daily: Optional[Daily] = None
    weekly_units: Optional[SeasonalUnits] = None
    weekly: Optional[Seasonal] = None
    monthly_units: Optional[SeasonalUnits] = None
    monthly: Optional[Seasonal] = None

    def interval(self, name: str) -> tuple[Optional[_Block], Optional[_Block]]:
        """
        return the (units, values) pair for an interval

        raises:
            ValueError: if name is not one of current, hourly, daily, weekly, monthly
        """
        if name not in INTERVALS:
            raise ValueError(f"unknown interval: {name}")
        return getattr(self, f"{name}_units"), getattr(self, name)


__all__ = [
    "CURRENT_METRICS",
    "DAILY_METRICS",
    "HOURLY_METRICS",
    "INTERVALS",
    "MARINE_DAILY_METRICS",
    "MARINE_HOURLY_METRICS",
    "Current",
    "CurrentUnits",
    "Daily",
    "DailyUnits",
    "Hourly",
    "HourlyUnits",
    "Metric",
    "MetricName",
    "Options",
    "OptionsBuilder",
    "PrecipitationUnit",
    "Seasonal",
    "SeasonalUnits",
    "TemperatureUnit",
    "WeatherData",
    "WindSpeedUnit",
    "metric_name",
    "new_metrics",
]
