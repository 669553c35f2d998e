# ABOUTME: Command-line conditions report for a latitude/longitude
# ABOUTME: Fetches live weather and prints the wind explanation and ranked disc bag

import sys

from discwind.config import Config
from discwind.discs.inventory import DiscInventory
from discwind.scoring.calculator import ConditionCalculator
from discwind.scoring.models import ScoringPolicy
from discwind.scoring.recommender import DiscRecommender
from discwind.scoring.wind_analyzer import explain_wind_effect
from discwind.storage.store import JsonStore
from discwind.weather.sources import OpenWeatherClient, to_flight_condition

# =============================================================================
# CONFIGURATION
# =============================================================================
# Usage: python scripts/conditions_report.py LAT LON [THROW_DIRECTION] [ELEVATION_FT]
# Needs OPENWEATHER_API_KEY in the environment or .env


def print_report(reading, conditions, throw_direction, ranked):
    """Print a nice formatted conditions report."""
    calculator = ConditionCalculator()
    impact = calculator.impact(conditions)

    print("\n" + "=" * 50)
    print(f"📍 {reading.location_name} - {reading.condition}")
    print("=" * 50)
    print(f"💨 Wind:     {reading.wind_speed_formatted} ({conditions.wind_direction})")
    print(f"🌡️  Temp:     {reading.temperature_formatted}")
    print(f"💧 Humidity: {reading.humidity_formatted}")
    print(f"⛰️  Density altitude: {calculator.density_altitude(conditions):.0f} ft")
    print(f"📊 {impact.label}")
    print("-" * 50)
    print(explain_wind_effect(conditions.wind_direction, conditions.wind_speed, throw_direction))
    print("-" * 50)
    for item in ranked:
        print(f"{item.score:>3}  {item.disc.name:<12} {item.disc.flight_numbers:<16} {item.disc.stability}")
    print("=" * 50 + "\n")


# =============================================================================
# MAIN
# =============================================================================
if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: conditions_report.py LAT LON [THROW_DIRECTION] [ELEVATION_FT]")
        sys.exit(2)

    lat, lon = float(sys.argv[1]), float(sys.argv[2])
    throw_direction = sys.argv[3] if len(sys.argv) > 3 else Config.DEFAULT_THROW_DIRECTION
    elevation = float(sys.argv[4]) if len(sys.argv) > 4 else 0.0

    client = OpenWeatherClient(
        api_key=Config.OPENWEATHER_API_KEY,
        base_url=Config.OPENWEATHER_BASE_URL,
        timeout=Config.WEATHER_TIMEOUT_SECONDS
    )
    print(f"Fetching weather for {lat}, {lon}...")
    reading = client.fetch(lat, lon)

    if reading is None:
        print("No data available!")
        sys.exit(1)

    conditions = to_flight_condition(reading, elevation=elevation)
    inventory = DiscInventory(JsonStore(Config.DATA_DIR))
    ranked = DiscRecommender().score_all(
        inventory.discs, conditions, throw_direction, ScoringPolicy.PRIMARY
    )
    print_report(reading, conditions, throw_direction, ranked)
