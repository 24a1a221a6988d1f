"""
errors raised by the open-meteo client
"""

from typing import Optional


class OpenMeteoError(RuntimeError):
    """base client error"""


class RequestBuildError(OpenMeteoError):
    """raised when a request cannot be built from the given options"""


class TransportError(OpenMeteoError):
    """raised when the request never got a response (dns, connection, timeout)"""


class ServerError(OpenMeteoError):
    """raised for any non-2xx response"""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        super().__init__(f"server http error: {status_code}")
        self.status_code = status_code
        self.reason = reason


class DecodeError(OpenMeteoError, ValueError):
    """raised when the body is not json or does not match the response schema"""


__all__ = [
    "OpenMeteoError",
    "RequestBuildError",
    "TransportError",
    "ServerError",
    "DecodeError",
]
