# ABOUTME: Data models for flight conditions, directions, and weather readings
# ABOUTME: Provides structured representation of wind, temperature, and elevation data

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RelativeWind(str, Enum):
    """Wind direction expressed relative to the throw direction"""
    HEADWIND = "Headwind"
    TAILWIND = "Tailwind"
    CROSSWIND_LEFT = "Crosswind Left"
    CROSSWIND_RIGHT = "Crosswind Right"
    CALM = "Calm"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> Optional["RelativeWind"]:
        """Look up a category by its label, None when the label is not one."""
        try:
            return cls(label)
        except ValueError:
            return None


class CompassDirection(str, Enum):
    """Absolute compass direction, ordered clockwise from North"""
    NORTH = "North"
    NORTHEAST = "Northeast"
    EAST = "East"
    SOUTHEAST = "Southeast"
    SOUTH = "South"
    SOUTHWEST = "Southwest"
    WEST = "West"
    NORTHWEST = "Northwest"

    def __str__(self) -> str:
        return self.value

    @property
    def degrees(self) -> float:
        return list(CompassDirection).index(self) * 45.0

    @classmethod
    def from_label(cls, label: str) -> Optional["CompassDirection"]:
        """Look up a direction by its label, None when the label is not one."""
        try:
            return cls(label)
        except ValueError:
            return None


@dataclass(frozen=True)
class FlightCondition:
    """
    Environmental snapshot a disc is thrown into.

    Replaced wholesale whenever conditions change. Fields are not validated:
    wind_direction is expected to be a RelativeWind label and every number
    finite, as supplied by the weather, preset, or manual-entry collaborators.
    """
    wind_speed: float     # mph, non-negative
    wind_direction: str   # "Headwind", "Tailwind", "Crosswind Left", ...
    temperature: float    # °F
    elevation: float      # feet, may be negative
    humidity: float       # 0-100 %

    def __str__(self) -> str:
        return (
            f"{int(self.wind_speed)} mph {self.wind_direction} • "
            f"{int(self.temperature)}°F"
        )

    def to_dict(self) -> dict:
        return {
            "windSpeed": self.wind_speed,
            "windDirection": str(self.wind_direction),
            "temperature": self.temperature,
            "elevation": self.elevation,
            "humidity": self.humidity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FlightCondition":
        return cls(
            wind_speed=float(data["windSpeed"]),
            wind_direction=str(data["windDirection"]),
            temperature=float(data["temperature"]),
            elevation=float(data["elevation"]),
            humidity=float(data["humidity"]),
        )


@dataclass(frozen=True)
class WeatherReading:
    """Current weather as reported by the weather provider"""
    temperature: float             # °F
    wind_speed: float              # mph
    wind_degrees: Optional[float]  # direction the wind blows from, may be missing
    humidity: float                # %
    condition: str                 # e.g. "Clouds", "Partly Cloudy"
    location_name: str

    def __str__(self) -> str:
        return (
            f"{self.location_name}: {self.temperature_formatted}, "
            f"{self.wind_speed_formatted}, {self.condition}"
        )

    @property
    def temperature_formatted(self) -> str:
        return f"{int(self.temperature)}°F"

    @property
    def wind_speed_formatted(self) -> str:
        return f"{int(self.wind_speed)} mph"

    @property
    def humidity_formatted(self) -> str:
        return f"{int(self.humidity)}%"
