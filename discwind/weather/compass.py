# ABOUTME: Compass heading conversion into throw directions
# ABOUTME: Also computes the wind angle relative to the throw for the wind arrow

import math

from discwind.weather.models import CompassDirection

DIRECTIONS = list(CompassDirection)


def heading_to_throw_direction(degrees: float) -> str:
    """
    Convert a compass heading to one of the eight throw directions.

    Args:
        degrees: Heading in degrees, 0 = North, clockwise

    Returns:
        Direction label, e.g. "Northeast"
    """
    # Half degrees round up, so 22.5 lands in Northeast
    heading = math.floor(degrees + 0.5) % 360
    index = int((heading + 22.5) / 45.0) % 8
    return DIRECTIONS[index].value


def relative_wind_angle(wind_direction: str, throw_direction: str) -> float:
    """
    Angle of the wind relative to the throw, in degrees clockwise.

    Labels that are not compass directions count as North (0°).
    """
    wind = CompassDirection.from_label(wind_direction)
    throw = CompassDirection.from_label(throw_direction)
    wind_angle = wind.degrees if wind is not None else 0.0
    throw_angle = throw.degrees if throw is not None else 0.0
    return (wind_angle - throw_angle + 360) % 360
