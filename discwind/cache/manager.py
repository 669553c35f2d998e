# ABOUTME: Cache manager for live weather readings and offline state
# ABOUTME: Readings have a TTL; the last good reading survives fetch failures

from datetime import datetime, timezone
from typing import Optional

from discwind.weather.models import WeatherReading


class CacheManager:
    """
    Weather cache with offline tracking.

    Weather: TTL (default 10 minutes), refreshed on demand
    Offline: set when a fetch fails, keeps the last known reading and the error
    """

    def __init__(self, weather_ttl_seconds: int = 600):
        self.weather_ttl_seconds = weather_ttl_seconds

        # Weather cache: stores reading, the location it was fetched for, and fetch timestamp
        self._weather_cache: Optional[dict] = None

        # Offline state
        self._is_offline: bool = False
        self._last_error: Optional[str] = None
        self._last_known_reading: Optional[WeatherReading] = None

    # ==================== Weather Cache ====================

    def set_weather(self, reading: WeatherReading, location_label: str = "") -> None:
        """
        Store a fresh weather reading.

        Args:
            reading: Fresh weather reading
            location_label: Location the reading was fetched for
        """
        self._weather_cache = {
            "reading": reading,
            "location": location_label,
            "fetched_at": datetime.now(timezone.utc)
        }
        self._is_offline = False
        self._last_error = None
        self._last_known_reading = reading

    def get_weather(self) -> Optional[dict]:
        """
        Get weather cache if fresh.

        Returns:
            {"reading": WeatherReading, "location": str, "fetched_at": datetime}
            or None if stale/empty
        """
        if self.is_weather_stale():
            return None
        return self._weather_cache

    def get_reading(self) -> Optional[WeatherReading]:
        """Current reading from the cache, fresh or not."""
        if self._weather_cache:
            return self._weather_cache.get("reading")
        return None

    def is_weather_stale(self, location_label: Optional[str] = None) -> bool:
        """
        Check if weather cache needs refresh.

        A reading fetched for a different location is treated as stale.
        """
        if self._weather_cache is None:
            return True

        if location_label is not None and self._weather_cache.get("location") != location_label:
            return True

        fetched_at = self._weather_cache.get("fetched_at")
        if fetched_at is None:
            return True

        age = datetime.now(timezone.utc) - fetched_at
        return age.total_seconds() > self.weather_ttl_seconds

    # ==================== Offline State ====================

    def set_offline(self, error: str, last_known_reading: Optional[WeatherReading] = None) -> None:
        """Mark weather as unavailable, preserving last known reading."""
        self._is_offline = True
        self._last_error = error
        if last_known_reading is not None:
            self._last_known_reading = last_known_reading

    def is_offline(self) -> bool:
        """Check if live weather is currently unavailable."""
        return self._is_offline

    def get_last_error(self) -> Optional[str]:
        return self._last_error

    def get_last_known_reading(self) -> Optional[WeatherReading]:
        """Get the last known good reading (for offline display)."""
        return self._last_known_reading

    def clear(self) -> None:
        """Clear all caches."""
        self._weather_cache = None
        self._is_offline = False
        self._last_error = None
