"""
helpers built on top of decoded responses
"""

from .frames import to_dataframe
from .helpers import degrees_to_compass, format_direction
from .weather_codes import WEATHER_CODES, describe_code

__all__ = ["WEATHER_CODES", "degrees_to_compass", "describe_code", "format_direction", "to_dataframe"]
