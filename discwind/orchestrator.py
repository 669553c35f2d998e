# ABOUTME: Main application orchestrator coordinating all components
# ABOUTME: Handles weather fetch, caching, presets, the disc bag, and recommendations

import logging
from typing import Optional

from discwind.cache.manager import CacheManager
from discwind.config import Config
from discwind.courses.presets import CoursePreset, CoursePresetManager, preset_from_conditions
from discwind.debug import debug_log
from discwind.discs.inventory import DiscInventory
from discwind.scoring.calculator import ConditionCalculator, default_conditions
from discwind.scoring.models import ScoringPolicy
from discwind.scoring.recommender import DiscRecommender
from discwind.scoring.wind_analyzer import analyze_wind_effect, explain_wind_effect
from discwind.storage.store import JsonStore
from discwind.weather.compass import heading_to_throw_direction
from discwind.weather.location import LocationFix
from discwind.weather.models import FlightCondition, WeatherReading
from discwind.weather.sources import OpenWeatherClient, to_flight_condition

log = logging.getLogger(__name__)


class AppOrchestrator:
    """Orchestrates all app components to produce disc recommendations"""

    def __init__(self, api_key: str, data_dir: Optional[str] = None):
        self.weather_client = OpenWeatherClient(
            api_key=api_key,
            base_url=Config.OPENWEATHER_BASE_URL,
            timeout=Config.WEATHER_TIMEOUT_SECONDS
        )
        self.cache = CacheManager(weather_ttl_seconds=Config.WEATHER_CACHE_TTL_SECONDS)
        store = JsonStore(data_dir or Config.DATA_DIR)
        self.presets = CoursePresetManager(store)
        self.inventory = DiscInventory(store)
        self.recommender = DiscRecommender()
        self.calculator = ConditionCalculator()

        self.conditions: FlightCondition = default_conditions()
        self.throw_direction: str = Config.DEFAULT_THROW_DIRECTION
        self.location: LocationFix = LocationFix.unavailable("Location Unknown")
        self.is_using_live_data = False

    # ==================== Inputs ====================

    def set_conditions(self, conditions: FlightCondition) -> None:
        """Replace the current conditions (manual entry)."""
        self.conditions = conditions
        self.is_using_live_data = False

    def apply_quick_preset(self, preset: str) -> FlightCondition:
        self.set_conditions(self.calculator.apply_preset(self.conditions, preset))
        return self.conditions

    def apply_course_preset(self, course: CoursePreset) -> FlightCondition:
        self.set_conditions(self.presets.apply(course))
        return self.conditions

    def save_current_as_course(self, name: str) -> CoursePreset:
        course = preset_from_conditions(name, self.conditions)
        self.presets.save_course(course)
        return course

    def set_throw_direction(self, throw_direction: str) -> None:
        self.throw_direction = throw_direction

    def set_heading(self, degrees: float) -> str:
        """Update the throw direction from a compass heading."""
        self.throw_direction = heading_to_throw_direction(degrees)
        debug_log(f"Heading {degrees:.0f}° -> throwing {self.throw_direction}", "COMPASS")
        return self.throw_direction

    def set_location(self, location: LocationFix) -> None:
        self.location = location

    # ==================== Weather ====================

    def refresh_weather(self, force: bool = False) -> Optional[WeatherReading]:
        """
        Fetch live weather for the current location and apply it.

        Uses the cached reading while it is fresh. Manual or unavailable
        locations never hit the network.

        Returns:
            The reading that was applied, or None when weather is unavailable.
        """
        if not self.location.is_available:
            debug_log(f"Skipping weather fetch - {self.location.label}", "WEATHER")
            return None

        if not force and not self.cache.is_weather_stale(self.location.label):
            return self.cache.get_reading()

        reading = self.weather_client.fetch(self.location.latitude, self.location.longitude)

        if reading is None:
            log.warning("Weather fetch failed - keeping current conditions")
            self.cache.set_offline(
                "Failed to fetch weather",
                self.cache.get_last_known_reading()
            )
            return None

        self.cache.set_weather(reading, self.location.label)
        self.apply_weather(reading)
        return reading

    def use_coordinates(self, latitude: float, longitude: float) -> Optional[WeatherReading]:
        """
        Switch to a device location and pull live weather for it.

        The coordinates become the location label, so moving to another spot
        invalidates the cached reading while revisiting the same one reuses it.
        """
        self.location = LocationFix(
            lat=latitude,
            lon=longitude,
            label=f"{latitude:.3f}, {longitude:.3f}"
        )
        return self.refresh_weather()

    def simulate_weather_for_city(self, city: str) -> WeatherReading:
        """Manual city entry: no geocoding, so apply a canned reading."""
        self.location = LocationFix.manual(city)
        reading = self.weather_client.simulate_for_city(city)
        self.cache.set_weather(reading, city)
        self.apply_weather(reading)
        return reading

    def apply_weather(self, reading: WeatherReading) -> None:
        """Overwrite wind, temperature and humidity; elevation stays as entered."""
        self.conditions = to_flight_condition(reading, elevation=self.conditions.elevation)
        self.is_using_live_data = True
        debug_log(f"Applied live weather: {self.conditions}", "WEATHER")

    # ==================== Output ====================

    def get_dashboard(self) -> dict:
        """
        Everything the UI needs for the current conditions.

        Returns:
            {
                "conditions": FlightCondition,
                "throw_direction": str,
                "wind": WindAnalysis,
                "explanation": str,
                "recommendations": [ScoredDisc, ...],
                "top_pick": str,
                "impact": ConditionImpact,
                "density_altitude": float,
                "is_using_live_data": bool,
                "is_offline": bool,
                "error": str or None,
                "reading": WeatherReading or None,
                "location": str
            }
        """
        conditions = self.conditions
        discs = self.inventory.discs

        return {
            "conditions": conditions,
            "throw_direction": self.throw_direction,
            "wind": analyze_wind_effect(
                conditions.wind_speed, conditions.wind_direction, self.throw_direction
            ),
            "explanation": explain_wind_effect(
                conditions.wind_direction, conditions.wind_speed, self.throw_direction
            ),
            "recommendations": self.recommender.score_all(
                discs, conditions, self.throw_direction, ScoringPolicy.PRIMARY
            ),
            "top_pick": self.recommender.top_pick(discs, conditions, self.throw_direction),
            "impact": self.calculator.impact(conditions),
            "density_altitude": self.calculator.density_altitude(conditions),
            "is_using_live_data": self.is_using_live_data,
            "is_offline": self.cache.is_offline(),
            "error": self.cache.get_last_error(),
            "reading": self.cache.get_reading() or self.cache.get_last_known_reading(),
            "location": self.location.label,
        }
