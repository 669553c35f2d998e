# ABOUTME: Condition impact rating, density altitude, and manual-entry presets
# ABOUTME: Summarizes how hard the current conditions are on disc flight

import logging
from dataclasses import replace

from discwind.config import Config
from discwind.scoring.models import ConditionImpact
from discwind.weather.models import FlightCondition, RelativeWind

log = logging.getLogger(__name__)

# Temperature the flight numbers are rated at
BASELINE_TEMPERATURE_F = 70.0

# (upper bound exclusive, label, color); anything above the last bound is extreme
IMPACT_LEVELS = (
    (5.0, "Ideal Conditions", "green"),
    (10.0, "Moderate Impact", "yellow"),
    (15.0, "Challenging Conditions", "orange"),
)
EXTREME_IMPACT = ("Extreme Impact", "red")

WIND_SEVERITY_COLORS = (
    (5.0, "green"),
    (10.0, "yellow"),
    (15.0, "orange"),
)

QUICK_PRESETS = ("ideal", "windy", "mountain", "cold", "defaults")


class ConditionCalculator:
    """Rates conditions and applies the manual-entry presets"""

    def impact(self, conditions: FlightCondition) -> ConditionImpact:
        """
        Rate the overall impact of the conditions.

        Score is wind speed plus one point per 10°F away from 70°F plus one
        point per 1000 ft of elevation.

        Args:
            conditions: Current flight conditions

        Returns:
            ConditionImpact with label and display color
        """
        score = (
            conditions.wind_speed
            + abs(conditions.temperature - BASELINE_TEMPERATURE_F) / 10
            + abs(conditions.elevation) / 1000
        )

        for upper, label, color in IMPACT_LEVELS:
            if score < upper:
                return ConditionImpact(label=label, color=color, score=score)

        label, color = EXTREME_IMPACT
        return ConditionImpact(label=label, color=color, score=score)

    def density_altitude(self, conditions: FlightCondition) -> float:
        """Simplified density altitude in feet: 100 ft per °F above 70°F."""
        return conditions.elevation + (conditions.temperature - BASELINE_TEMPERATURE_F) * 100

    def wind_severity_color(self, wind_speed: float) -> str:
        for upper, color in WIND_SEVERITY_COLORS:
            if wind_speed < upper:
                return color
        return "red"

    def apply_preset(self, conditions: FlightCondition, preset: str) -> FlightCondition:
        """
        Apply one of the manual-entry shortcuts.

        Presets only overwrite the fields they care about; everything else is
        carried over from the current conditions.

        Args:
            conditions: Current flight conditions
            preset: One of QUICK_PRESETS

        Returns:
            New FlightCondition

        Raises:
            ValueError: Unknown preset name
        """
        if preset == "ideal":
            return FlightCondition(
                wind_speed=3,
                wind_direction=RelativeWind.CALM.value,
                temperature=75,
                elevation=500,
                humidity=50,
            )
        if preset == "windy":
            return replace(
                conditions,
                wind_speed=18,
                wind_direction=RelativeWind.HEADWIND.value,
                temperature=65,
                humidity=40,
            )
        if preset == "mountain":
            return replace(conditions, elevation=3500, temperature=60, humidity=30, wind_speed=8)
        if preset == "cold":
            return replace(conditions, temperature=35, humidity=70, wind_speed=5)
        if preset == "defaults":
            return default_conditions()

        log.error(f"Unknown conditions preset: {preset}")
        raise ValueError(f"Unknown preset '{preset}', expected one of {', '.join(QUICK_PRESETS)}")


def default_conditions() -> FlightCondition:
    """Starting conditions from config."""
    return FlightCondition(
        wind_speed=Config.DEFAULT_WIND_SPEED,
        wind_direction=Config.DEFAULT_WIND_DIRECTION,
        temperature=Config.DEFAULT_TEMPERATURE,
        elevation=Config.DEFAULT_ELEVATION,
        humidity=Config.DEFAULT_HUMIDITY,
    )
