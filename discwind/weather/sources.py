# ABOUTME: OpenWeatherMap client and conversion of readings into flight conditions
# ABOUTME: Handles current-weather API calls with error handling and direction bucketing

import logging
from typing import Optional

import requests

from discwind.weather.models import FlightCondition, RelativeWind, WeatherReading

log = logging.getLogger(__name__)

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

# Sixteen-point label -> wind category used by the conditions model.
# The diagonal points (NE, SE, SW, NW) are not listed and default to Headwind.
COMPASS_POINT_CATEGORIES = {
    "N": RelativeWind.HEADWIND, "NNE": RelativeWind.HEADWIND, "NNW": RelativeWind.HEADWIND,
    "S": RelativeWind.TAILWIND, "SSE": RelativeWind.TAILWIND, "SSW": RelativeWind.TAILWIND,
    "E": RelativeWind.CROSSWIND_RIGHT, "ENE": RelativeWind.CROSSWIND_RIGHT, "ESE": RelativeWind.CROSSWIND_RIGHT,
    "W": RelativeWind.CROSSWIND_LEFT, "WNW": RelativeWind.CROSSWIND_LEFT, "WSW": RelativeWind.CROSSWIND_LEFT,
}
DEFAULT_WIND_CATEGORY = RelativeWind.HEADWIND


def degrees_to_compass_point(degrees: float) -> str:
    """Convert a bearing in degrees to a sixteen-point label like "NNE"."""
    index = int((degrees + 11.25) / 22.5) % 16
    return COMPASS_POINTS[index]


def compass_point_to_wind_category(point: str) -> str:
    return COMPASS_POINT_CATEGORIES.get(point, DEFAULT_WIND_CATEGORY).value


def wind_degrees_to_category(degrees: Optional[float]) -> str:
    """Bucket a wind bearing into a wind category; missing bearings count as Headwind."""
    if degrees is None:
        return DEFAULT_WIND_CATEGORY.value
    return compass_point_to_wind_category(degrees_to_compass_point(degrees))


def to_flight_condition(reading: WeatherReading, elevation: float = 0.0) -> FlightCondition:
    """
    Build flight conditions from a live weather reading.

    The provider has no elevation, so it is supplied by the caller (manual
    entry or a course preset).
    """
    return FlightCondition(
        wind_speed=reading.wind_speed,
        wind_direction=wind_degrees_to_category(reading.wind_degrees),
        temperature=reading.temperature,
        elevation=elevation,
        humidity=reading.humidity,
    )


class OpenWeatherClient:
    """Client for fetching current weather from the OpenWeatherMap API"""

    DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, api_key: str, base_url: Optional[str] = None, timeout: int = 10):
        self.api_key = api_key
        self.base_url = base_url or self.DEFAULT_BASE_URL
        self.timeout = timeout

    def fetch(self, latitude: float, longitude: float) -> Optional[WeatherReading]:
        """
        Fetch current conditions for the given coordinates.

        Args:
            latitude: Latitude
            longitude: Longitude

        Returns:
            WeatherReading on success, None on any error.
        """
        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self.api_key,
            "units": "imperial",
        }

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)

            if response.status_code != 200:
                log.error(f"OpenWeatherMap HTTP error: {response.status_code} - {response.text}")
                return None

            data = response.json()

        except (requests.RequestException, ValueError) as e:
            log.error(f"OpenWeatherMap request failed: {e}")
            return None

        reading = self._parse_response(data)
        if reading is not None:
            log.info(f"Weather fetched: {reading}")
        return reading

    def simulate_for_city(self, city: str) -> WeatherReading:
        """Canned reading for a manually entered city (no geocoding)."""
        return WeatherReading(
            temperature=72.0,
            wind_speed=8.0,
            wind_degrees=180.0,
            humidity=65.0,
            condition="Partly Cloudy",
            location_name=city,
        )

    def _parse_response(self, data: dict) -> Optional[WeatherReading]:
        """Parse OpenWeatherMap response into WeatherReading."""
        try:
            main = data["main"]
            wind = data["wind"]
            weather = data.get("weather") or []
            degrees = wind.get("deg")

            return WeatherReading(
                temperature=float(main["temp"]),
                wind_speed=float(wind["speed"]),
                wind_degrees=float(degrees) if degrees is not None else None,
                humidity=float(main["humidity"]),
                condition=weather[0].get("main", "Unknown") if weather else "Unknown",
                location_name=data["name"],
            )

        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            log.error(f"OpenWeatherMap response parsing failed: {e} - Response: {data}")
            return None
