"""
open-meteo api clients

the per-product entry points live in api.weather, api.marine and
api.seasonal so each can run with python -m
"""

from .client import OpenMeteoClient
from .errors import DecodeError, OpenMeteoError, RequestBuildError, ServerError, TransportError

__all__ = [
    "OpenMeteoClient",
    "OpenMeteoError",
    "RequestBuildError",
    "TransportError",
    "ServerError",
    "DecodeError",
]
