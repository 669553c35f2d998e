# ABOUTME: Tests for compass heading conversion and device location fixes
# ABOUTME: Validates the eight-way heading buckets and relative wind angles

import pytest

from discwind.weather.compass import heading_to_throw_direction, relative_wind_angle
from discwind.weather.location import LocationFix


@pytest.mark.parametrize("degrees,direction", [
    (0, "North"),
    (22, "North"),
    (23, "Northeast"),
    (45, "Northeast"),
    (90, "East"),
    (135, "Southeast"),
    (180, "South"),
    (225, "Southwest"),
    (270, "West"),
    (315, "Northwest"),
    (337, "Northwest"),
    (338, "North"),
    (359.6, "North"),
    (450, "East"),
])
def test_heading_to_throw_direction(degrees, direction):
    assert heading_to_throw_direction(degrees) == direction


@pytest.mark.parametrize("degrees,direction", [
    (22.5, "Northeast"),
    (112.5, "Southeast"),
    (202.5, "Southwest"),
    (292.5, "Northwest"),
])
def test_half_degree_sector_boundaries_round_up(degrees, direction):
    assert heading_to_throw_direction(degrees) == direction


def test_heading_rounds_to_whole_degrees():
    """22.4 rounds to 22 and stays North; 22.6 rounds to 23"""
    assert heading_to_throw_direction(22.4) == "North"
    assert heading_to_throw_direction(22.6) == "Northeast"


class TestRelativeWindAngle:
    """Tests for the wind angle drawn by the wind arrow"""

    def test_same_direction_is_zero(self):
        assert relative_wind_angle("North", "North") == 0

    def test_wind_clockwise_of_throw(self):
        assert relative_wind_angle("East", "North") == 90
        assert relative_wind_angle("South", "East") == 90

    def test_wraps_around(self):
        assert relative_wind_angle("North", "East") == 270
        assert relative_wind_angle("Northwest", "Northeast") == 270

    def test_unknown_labels_count_as_north(self):
        assert relative_wind_angle("Headwind", "East") == 270
        assert relative_wind_angle("South", "Somewhere") == 180


class TestLocationFix:
    """Tests for LocationFix"""

    def test_device_fix_is_available(self):
        fix = LocationFix(lat=47.6, lon=-122.3)

        assert fix.is_available
        assert fix.latitude == 47.6
        assert fix.longitude == -122.3
        assert fix.label == "Current Location"

    def test_manual_city_has_no_coordinates(self):
        fix = LocationFix.manual("Portland")

        assert not fix.is_available
        assert fix.is_manual
        assert fix.label == "Portland"
        assert fix.latitude == 0.0

    def test_unavailable(self):
        fix = LocationFix.unavailable()

        assert not fix.is_available
        assert fix.label == "Location Disabled"

    def test_missing_longitude_is_unavailable(self):
        assert not LocationFix(lat=10.0).is_available
