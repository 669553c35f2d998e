# ABOUTME: Relative wind classification and speed-tiered wind advisories
# ABOUTME: Turns absolute wind direction plus throw direction into advice and a stability shift

from dataclasses import dataclass

from discwind.weather.models import CompassDirection, RelativeWind

# For each cardinal throw direction: relative category -> direction the wind blows FROM.
# Handedness follows a right-hand backhand (RHBH) throw.
RELATIVE_WIND_TABLES = {
    CompassDirection.NORTH: {
        RelativeWind.HEADWIND: CompassDirection.SOUTH,
        RelativeWind.TAILWIND: CompassDirection.NORTH,
        RelativeWind.CROSSWIND_LEFT: CompassDirection.EAST,
        RelativeWind.CROSSWIND_RIGHT: CompassDirection.WEST,
    },
    CompassDirection.SOUTH: {
        RelativeWind.HEADWIND: CompassDirection.NORTH,
        RelativeWind.TAILWIND: CompassDirection.SOUTH,
        RelativeWind.CROSSWIND_LEFT: CompassDirection.WEST,
        RelativeWind.CROSSWIND_RIGHT: CompassDirection.EAST,
    },
    CompassDirection.EAST: {
        RelativeWind.HEADWIND: CompassDirection.WEST,
        RelativeWind.TAILWIND: CompassDirection.EAST,
        RelativeWind.CROSSWIND_LEFT: CompassDirection.SOUTH,
        RelativeWind.CROSSWIND_RIGHT: CompassDirection.NORTH,
    },
    CompassDirection.WEST: {
        RelativeWind.HEADWIND: CompassDirection.EAST,
        RelativeWind.TAILWIND: CompassDirection.WEST,
        RelativeWind.CROSSWIND_LEFT: CompassDirection.NORTH,
        RelativeWind.CROSSWIND_RIGHT: CompassDirection.SOUTH,
    },
}

# Upper bounds (exclusive) of the speed tiers in mph; the last tier is open-ended
SPEED_TIERS = (5.0, 10.0, 15.0)

# (description, advice, stability adjustment) per tier.
# Positive adjustment = play more overstable, negative = more understable.
ADVISORY_TABLES = {
    RelativeWind.HEADWIND: (
        ("Light Headwind", "Slight overstable tendency. Stick with your normal discs.", 1),
        ("Moderate Headwind", "Discs will act more understable. Add +1 to fade rating.", 2),
        ("Strong Headwind", "Significant understable effect. Use very overstable discs.", 3),
        ("Extreme Headwind", "Discs will flip dramatically. Max overstable only.", 4),
    ),
    RelativeWind.TAILWIND: (
        ("Light Tailwind", "Slight extra glide. Normal disc selection.", 0),
        ("Moderate Tailwind", "Extra distance potential. Can use more understable discs.", -1),
        ("Strong Tailwind", "Discs will act more overstable. Good for flip-up shots.", -2),
        ("Extreme Tailwind", "Discs will fight to fade early. Use understable options.", -3),
    ),
    RelativeWind.CROSSWIND_LEFT: (
        ("Light Left Crosswind", "Minimal drift for RHBH. Normal selection.", 0),
        ("Moderate Left Crosswind", "RHBH will drift right. Slight overstable preference.", 1),
        ("Strong Left Crosswind", "Significant right drift for RHBH. Use overstable discs.", 2),
        ("Extreme Left Crosswind", "Major right drift. Very overstable or forehand shots.", 3),
    ),
    RelativeWind.CROSSWIND_RIGHT: (
        ("Light Right Crosswind", "Minimal drift for RHBH. Normal selection.", 0),
        ("Moderate Right Crosswind", "RHBH will fight left. Slight understable preference.", -1),
        ("Strong Right Crosswind", "Discs want to turn over. Use stable to understable.", -2),
        ("Extreme Right Crosswind", "High turnover risk. Very understable or flex lines.", -3),
    ),
}

CALM_DESCRIPTION = "Calm Conditions"
CALM_ADVICE = "Minimal wind effect. Throw your normal discs."

EXPLANATION_TEMPLATES = {
    RelativeWind.HEADWIND: (
        "Throwing {throw} into {wind} wind = HEADWIND. "
        "Reduces lift - discs act MORE UNDERSTABLE. {advice}"
    ),
    RelativeWind.TAILWIND: (
        "Throwing {throw} with {wind} wind = TAILWIND. "
        "Increases lift - discs act MORE OVERSTABLE. {advice}"
    ),
    RelativeWind.CROSSWIND_LEFT: (
        "Throwing {throw} with {wind} wind = LEFT CROSSWIND. "
        "Pushes RHBH shots RIGHT. {advice}"
    ),
    RelativeWind.CROSSWIND_RIGHT: (
        "Throwing {throw} with {wind} wind = RIGHT CROSSWIND. "
        "Pushes RHBH shots LEFT. {advice}"
    ),
}
CALM_EXPLANATION = "Throwing {throw} - calm conditions with minimal wind effects."


@dataclass(frozen=True)
class WindAdvice:
    """Advisory for one relative wind category at one speed"""
    description: str
    advice: str
    stability_adjustment: int


@dataclass(frozen=True)
class WindAnalysis:
    """Advisory plus the relative wind it was derived from"""
    description: str
    advice: str
    stability_adjustment: int
    relative_wind: str

    def __str__(self) -> str:
        return f"{self.relative_wind}: {self.advice}"


def resolve_relative_wind(wind_direction: str, throw_direction: str) -> str:
    """
    Classify the wind relative to the throw.

    Args:
        wind_direction: Absolute direction the wind blows from (e.g. "South")
        throw_direction: Absolute direction of the throw (e.g. "North")

    Returns:
        A RelativeWind member, or wind_direction unchanged when the throw
        direction has no table (intercardinals) or nothing in it matches.
    """
    throw = CompassDirection.from_label(throw_direction)
    table = RELATIVE_WIND_TABLES.get(throw) if throw is not None else None
    if table is not None:
        for category, coming_from in table.items():
            if coming_from == wind_direction:
                return category

    # No intercardinal tables: echo the wind direction back
    return wind_direction


def _tier_index(wind_speed: float) -> int:
    for index, upper in enumerate(SPEED_TIERS):
        if wind_speed < upper:
            return index
    return len(SPEED_TIERS)


def advise(category: str, wind_speed: float) -> WindAdvice:
    """
    Look up the advisory for a relative wind category at a wind speed.

    Anything that is not one of the four directional categories (Calm, or a
    direction echoed back by resolve_relative_wind) gets the calm advisory.
    """
    relative = RelativeWind.from_label(category)
    tiers = ADVISORY_TABLES.get(relative) if relative is not None else None
    if tiers is None:
        return WindAdvice(CALM_DESCRIPTION, CALM_ADVICE, 0)

    description, advice, adjustment = tiers[_tier_index(wind_speed)]
    return WindAdvice(description, advice, adjustment)


def analyze_wind_effect(wind_speed: float, wind_direction: str, throw_direction: str) -> WindAnalysis:
    relative_wind = resolve_relative_wind(wind_direction, throw_direction)
    result = advise(relative_wind, wind_speed)
    return WindAnalysis(
        description=result.description,
        advice=result.advice,
        stability_adjustment=result.stability_adjustment,
        relative_wind=str(relative_wind),
    )


def stability_adjustment(wind_speed: float, wind_direction: str, throw_direction: str) -> int:
    """Signed ladder shift the wind asks for; positive means more overstable."""
    return analyze_wind_effect(wind_speed, wind_direction, throw_direction).stability_adjustment


def explain_wind_effect(wind_direction: str, wind_speed: float, throw_direction: str) -> str:
    """
    Longer explanation sentence for the wind effect on a throw.

    The template depends only on the relative category, never on the speed tier;
    the speed only selects the embedded advice.
    """
    analysis = analyze_wind_effect(wind_speed, wind_direction, throw_direction)
    relative = RelativeWind.from_label(analysis.relative_wind)
    template = EXPLANATION_TEMPLATES.get(relative) if relative is not None else None
    if template is None:
        return CALM_EXPLANATION.format(throw=throw_direction)
    return template.format(throw=throw_direction, wind=wind_direction, advice=analysis.advice)


def wind_summary(wind_speed: float, wind_direction: str, throw_direction: str) -> str:
    """Compact one-liner for the quick conditions card."""
    return str(analyze_wind_effect(wind_speed, wind_direction, throw_direction))
