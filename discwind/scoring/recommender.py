# ABOUTME: Disc recommendations based on current flight conditions
# ABOUTME: Scores each disc in the bag and ranks them best-first for the conditions

from typing import Iterable

from discwind.discs.models import Disc, Stability
from discwind.scoring.models import ScoredDisc, ScoringPolicy
from discwind.scoring.wind_analyzer import stability_adjustment
from discwind.weather.models import FlightCondition, RelativeWind

HIGH_WIND_MPH = 10.0
LIGHT_WIND_MPH = 5.0
COLD_TEMPERATURE_F = 50.0
MAX_MATCH_SCORE = 3

FALLBACK_TOP_PICK = "Stable Mid-range"


class DiscRecommender:
    """Ranks discs from the bag for the current conditions"""

    def score_primary(self, disc: Disc, conditions: FlightCondition) -> int:
        """
        Full recommendation score. Ignores the throw direction.

        Wind speed between 5 and 10 mph (inclusive) adds nothing; only the
        direction and temperature terms apply there.

        Args:
            disc: Disc to score
            conditions: Current flight conditions

        Returns:
            Integer score, higher is better
        """
        score = 0

        # Wind speed
        if conditions.wind_speed > HIGH_WIND_MPH:
            # High wind - prefer overstable
            if disc.is_variant_of(Stability.OVERSTABLE) or disc.fade >= 3:
                score += 3
            if disc.is_variant_of(Stability.UNDERSTABLE):
                score -= 2
        elif conditions.wind_speed < LIGHT_WIND_MPH:
            # Light wind - understable discs work well
            if disc.is_variant_of(Stability.UNDERSTABLE):
                score += 2

        # Wind direction
        if conditions.wind_direction == RelativeWind.HEADWIND:
            if disc.fade >= 2 or disc.turn >= 0:
                score += 2
        elif conditions.wind_direction == RelativeWind.TAILWIND:
            if disc.turn <= -2:
                score += 1

        score += self._cold_weather_bonus(disc, conditions)
        return score

    def score_quick(self, disc: Disc, conditions: FlightCondition, adjustment: int) -> int:
        """
        Compact stability-matching score used by the quick conditions card.

        The disc's own ladder position is shifted by the wind adjustment
        (clamped to the ladder), and the disc scores 3 for an exact match,
        losing 1 per rung of distance, floored at 0. Discs whose stability is
        not on the ladder get no match score.

        Args:
            disc: Disc to score
            conditions: Current flight conditions
            adjustment: Signed stability adjustment from the wind analysis

        Returns:
            Integer score, higher is better
        """
        score = 0

        current = Stability.from_label(disc.stability)
        if current is not None:
            target = current.shift(adjustment)
            distance = abs(current.ordinal - target.ordinal)
            score += max(0, MAX_MATCH_SCORE - distance)

        score += self._cold_weather_bonus(disc, conditions)
        return score

    def score(
        self,
        disc: Disc,
        conditions: FlightCondition,
        throw_direction: str,
        policy: ScoringPolicy = ScoringPolicy.PRIMARY
    ) -> int:
        """
        Score one disc under the chosen policy.

        Args:
            disc: Disc to score
            conditions: Current flight conditions
            throw_direction: Absolute direction of the throw (used by QUICK only)
            policy: Which scoring policy to apply

        Returns:
            Integer score, higher is better
        """
        if policy == ScoringPolicy.QUICK:
            adjustment = stability_adjustment(
                conditions.wind_speed, conditions.wind_direction, throw_direction
            )
            return self.score_quick(disc, conditions, adjustment)
        return self.score_primary(disc, conditions)

    def score_all(
        self,
        discs: Iterable[Disc],
        conditions: FlightCondition,
        throw_direction: str,
        policy: ScoringPolicy = ScoringPolicy.PRIMARY
    ) -> list[ScoredDisc]:
        """
        Score every disc and order best-first.

        The sort is stable: discs with equal scores keep their bag order.
        """
        if policy == ScoringPolicy.QUICK:
            # Same adjustment for every disc, compute it once
            adjustment = stability_adjustment(
                conditions.wind_speed, conditions.wind_direction, throw_direction
            )
            scored = [
                ScoredDisc(disc, self.score_quick(disc, conditions, adjustment))
                for disc in discs
            ]
        else:
            scored = [ScoredDisc(disc, self.score_primary(disc, conditions)) for disc in discs]

        return sorted(scored, key=lambda item: item.score, reverse=True)

    def rank(
        self,
        discs: Iterable[Disc],
        conditions: FlightCondition,
        throw_direction: str,
        policy: ScoringPolicy = ScoringPolicy.PRIMARY
    ) -> list[Disc]:
        """
        Rank discs best-first for the conditions.

        Args:
            discs: The bag, in the player's order
            conditions: Current flight conditions
            throw_direction: Absolute direction of the throw (used by QUICK only)
            policy: Which scoring policy to apply

        Returns:
            Discs ordered by descending score, ties in input order
        """
        return [item.disc for item in self.score_all(discs, conditions, throw_direction, policy)]

    def top_pick(self, discs: Iterable[Disc], conditions: FlightCondition, throw_direction: str) -> str:
        """Name of the best quick-policy disc, or a generic suggestion for an empty bag."""
        ranked = self.rank(discs, conditions, throw_direction, ScoringPolicy.QUICK)
        if not ranked:
            return FALLBACK_TOP_PICK
        return ranked[0].name

    def _cold_weather_bonus(self, disc: Disc, conditions: FlightCondition) -> int:
        # Cold plastic flies more overstable; understable discs counteract it
        if conditions.temperature < COLD_TEMPERATURE_F and disc.is_variant_of(Stability.UNDERSTABLE):
            return 1
        return 0
