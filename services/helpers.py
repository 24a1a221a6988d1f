"""
small formatting helpers for direction metrics
"""

from typing import Optional

COMPASS_POINTS = (
    "n", "nne", "ne", "ene", "e", "ese", "se", "sse",
    "s", "ssw", "sw", "wsw", "w", "wnw", "nw", "nnw",
)


def degrees_to_compass(degrees: float) -> str:
    """
    convert a bearing in degrees to a 16-point compass label

    args:
        degrees: bearing in degrees, any value (wrapped to 0-360)

    returns:
        lowercase compass label, e.g. "nne"
    """
    index = int((degrees % 360) / 22.5 + 0.5) % 16
    return COMPASS_POINTS[index]


def format_direction(degrees: Optional[float]) -> str:
    """format a bearing as 'NNE (22°)', or 'n/a' when missing"""
    if degrees is None:
        return "n/a"
    return f"{degrees_to_compass(degrees).upper()} ({degrees:.0f}°)"
