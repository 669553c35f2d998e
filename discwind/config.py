# ABOUTME: Application configuration including weather API and storage settings
# ABOUTME: Centralized config so defaults can be overridden from the environment

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Starting conditions before any live weather or preset is applied
    DEFAULT_WIND_SPEED = float(os.getenv("DEFAULT_WIND_SPEED", "5"))  # mph
    DEFAULT_WIND_DIRECTION = os.getenv("DEFAULT_WIND_DIRECTION", "Headwind")
    DEFAULT_TEMPERATURE = float(os.getenv("DEFAULT_TEMPERATURE", "70"))  # °F
    DEFAULT_ELEVATION = float(os.getenv("DEFAULT_ELEVATION", "500"))  # feet
    DEFAULT_HUMIDITY = float(os.getenv("DEFAULT_HUMIDITY", "60"))  # %

    # Throw direction used until the compass or the user picks one
    DEFAULT_THROW_DIRECTION = os.getenv("DEFAULT_THROW_DIRECTION", "North")

    # OpenWeatherMap current-weather endpoint
    OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")
    OPENWEATHER_BASE_URL = os.getenv(
        "OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5/weather"
    )
    WEATHER_TIMEOUT_SECONDS = int(os.getenv("WEATHER_TIMEOUT_SECONDS", "10"))

    # Weather cache TTL: how often to fetch fresh data
    WEATHER_CACHE_TTL_SECONDS = int(os.getenv("WEATHER_CACHE_TTL_SECONDS", "600"))  # 10 minutes

    # Where presets and the disc bag are persisted
    DATA_DIR = os.getenv("DATA_DIR", ".discwind")

    PORT = int(os.getenv("PORT", "8080"))

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
