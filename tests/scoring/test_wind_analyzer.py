# ABOUTME: Tests for relative wind classification and wind advisories
# ABOUTME: Validates direction tables, speed tiers, and explanation templates

import pytest

from discwind.scoring.wind_analyzer import (
    RELATIVE_WIND_TABLES,
    advise,
    analyze_wind_effect,
    explain_wind_effect,
    resolve_relative_wind,
    stability_adjustment,
    wind_summary,
)
from discwind.weather.models import CompassDirection, RelativeWind

CARDINALS = ["North", "East", "South", "West"]
DIRECTIONAL = ["Headwind", "Tailwind", "Crosswind Left", "Crosswind Right"]


def rotate(direction: str, quarter_turns: int) -> str:
    return CARDINALS[(CARDINALS.index(direction) + quarter_turns) % 4]


class TestResolveRelativeWind:
    """Tests for relative wind resolution"""

    def test_throwing_north(self):
        """Wind from the opposite side of the throw is a headwind"""
        assert resolve_relative_wind("South", "North") == "Headwind"
        assert resolve_relative_wind("North", "North") == "Tailwind"
        assert resolve_relative_wind("East", "North") == "Crosswind Left"
        assert resolve_relative_wind("West", "North") == "Crosswind Right"

    def test_throwing_east(self):
        assert resolve_relative_wind("West", "East") == "Headwind"
        assert resolve_relative_wind("East", "East") == "Tailwind"
        assert resolve_relative_wind("South", "East") == "Crosswind Left"
        assert resolve_relative_wind("North", "East") == "Crosswind Right"

    def test_returns_relative_wind_member(self):
        assert resolve_relative_wind("South", "North") is RelativeWind.HEADWIND

    def test_accepts_enum_inputs(self):
        result = resolve_relative_wind(CompassDirection.WEST, CompassDirection.SOUTH)
        assert result == RelativeWind.CROSSWIND_LEFT

    def test_each_table_uses_four_distinct_directions(self):
        """Reverse lookup is unambiguous"""
        assert set(RELATIVE_WIND_TABLES) == {
            CompassDirection.NORTH, CompassDirection.SOUTH,
            CompassDirection.EAST, CompassDirection.WEST,
        }
        for throw, table in RELATIVE_WIND_TABLES.items():
            assert len(table) == 4, f"Table for {throw} is incomplete"
            assert len(set(table.values())) == 4, f"Duplicate wind direction for {throw}"

    @pytest.mark.parametrize("quarter_turns", [1, 2, 3])
    def test_rotating_wind_and_throw_together_keeps_category(self, quarter_turns):
        for throw in CARDINALS:
            for wind in CARDINALS:
                original = resolve_relative_wind(wind, throw)
                rotated = resolve_relative_wind(
                    rotate(wind, quarter_turns), rotate(throw, quarter_turns)
                )
                assert rotated == original, f"{wind}/{throw} rotated by {quarter_turns}"

    def test_intercardinal_throw_echoes_wind_direction(self):
        """No tables exist for intercardinal throws; the wind direction comes back unchanged"""
        assert resolve_relative_wind("South", "Northeast") == "South"
        assert resolve_relative_wind("Headwind", "Southwest") == "Headwind"

    def test_unmatched_wind_direction_is_echoed(self):
        assert resolve_relative_wind("Northeast", "North") == "Northeast"
        assert resolve_relative_wind("Calm", "North") == "Calm"


class TestAdvise:
    """Tests for speed-tiered advisories"""

    def test_moderate_headwind(self):
        result = advise("Headwind", 7)

        assert result.description == "Moderate Headwind"
        assert result.advice == "Discs will act more understable. Add +1 to fade rating."
        assert result.stability_adjustment == 2

    @pytest.mark.parametrize("speed,description,adjustment", [
        (0, "Light Headwind", 1),
        (4.9, "Light Headwind", 1),
        (5, "Moderate Headwind", 2),
        (10, "Strong Headwind", 3),
        (14.99, "Strong Headwind", 3),
        (15, "Extreme Headwind", 4),
        (40, "Extreme Headwind", 4),
    ])
    def test_headwind_tier_boundaries(self, speed, description, adjustment):
        result = advise("Headwind", speed)
        assert result.description == description
        assert result.stability_adjustment == adjustment

    def test_tier_adjustments_per_category(self):
        speeds = [2, 7, 12, 20]
        expected = {
            "Headwind": [1, 2, 3, 4],
            "Tailwind": [0, -1, -2, -3],
            "Crosswind Left": [0, 1, 2, 3],
            "Crosswind Right": [0, -1, -2, -3],
        }
        for category, adjustments in expected.items():
            assert [advise(category, s).stability_adjustment for s in speeds] == adjustments

    def test_adjustment_is_monotonic_in_wind_speed(self):
        speeds = [0, 4.99, 5, 9.99, 10, 14.99, 15, 30]
        for category in ("Headwind", "Crosswind Left"):
            values = [advise(category, s).stability_adjustment for s in speeds]
            assert values == sorted(values), category
        for category in ("Tailwind", "Crosswind Right"):
            values = [advise(category, s).stability_adjustment for s in speeds]
            assert values == sorted(values, reverse=True), category

    def test_crosswind_descriptions(self):
        assert advise("Crosswind Left", 12).description == "Strong Left Crosswind"
        assert advise("Crosswind Right", 3).description == "Light Right Crosswind"

    @pytest.mark.parametrize("speed", [0, 7, 25])
    def test_calm_ignores_speed(self, speed):
        result = advise("Calm", speed)

        assert result.description == "Calm Conditions"
        assert result.advice == "Minimal wind effect. Throw your normal discs."
        assert result.stability_adjustment == 0

    def test_echoed_direction_gets_calm_advice(self):
        assert advise("Northeast", 20).stability_adjustment == 0


class TestAnalyzeWindEffect:
    """Tests for the combined resolve + advise step"""

    def test_includes_relative_wind(self):
        analysis = analyze_wind_effect(12, "West", "North")

        assert analysis.relative_wind == "Crosswind Right"
        assert analysis.description == "Strong Right Crosswind"
        assert analysis.stability_adjustment == -2

    def test_intercardinal_throw_is_calm(self):
        analysis = analyze_wind_effect(20, "South", "Northwest")

        assert analysis.relative_wind == "South"
        assert analysis.description == "Calm Conditions"

    def test_relative_category_passed_as_wind_direction(self):
        """Conditions store wind as a relative category; it falls through the echo"""
        analysis = analyze_wind_effect(7, "Headwind", "North")

        assert analysis.relative_wind == "Headwind"
        assert analysis.stability_adjustment == 2

    def test_stability_adjustment_shortcut(self):
        assert stability_adjustment(7, "South", "North") == 2
        assert stability_adjustment(16, "North", "North") == -3

    def test_summary_line(self):
        assert wind_summary(2, "North", "North") == "Tailwind: Slight extra glide. Normal disc selection."

    def test_repeated_calls_are_identical(self):
        first = analyze_wind_effect(11, "East", "West")
        second = analyze_wind_effect(11, "East", "West")
        assert first == second


class TestExplainWindEffect:
    """Tests for the long explanation sentence"""

    def test_headwind_template(self):
        text = explain_wind_effect("South", 7, "North")

        assert text == (
            "Throwing North into South wind = HEADWIND. "
            "Reduces lift - discs act MORE UNDERSTABLE. "
            "Discs will act more understable. Add +1 to fade rating."
        )

    def test_tailwind_template(self):
        text = explain_wind_effect("East", 12, "East")
        assert text.startswith("Throwing East with East wind = TAILWIND. Increases lift")
        assert text.endswith("Discs will act more overstable. Good for flip-up shots.")

    def test_crosswind_templates(self):
        assert "LEFT CROSSWIND. Pushes RHBH shots RIGHT." in explain_wind_effect("East", 3, "North")
        assert "RIGHT CROSSWIND. Pushes RHBH shots LEFT." in explain_wind_effect("West", 3, "North")

    def test_template_depends_only_on_category(self):
        light = explain_wind_effect("South", 2, "North")
        extreme = explain_wind_effect("South", 30, "North")

        prefix = "Throwing North into South wind = HEADWIND. Reduces lift - discs act MORE UNDERSTABLE. "
        assert light.startswith(prefix)
        assert extreme.startswith(prefix)
        assert light != extreme

    def test_calm_template(self):
        assert explain_wind_effect("Calm", 3, "North") == (
            "Throwing North - calm conditions with minimal wind effects."
        )

    def test_enum_arguments_render_as_labels(self):
        text = explain_wind_effect(CompassDirection.SOUTH, 7, CompassDirection.NORTH)
        assert text.startswith("Throwing North into South wind")
