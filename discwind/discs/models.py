# ABOUTME: Data models for discs and the stability ladder
# ABOUTME: Flight numbers plus an ordered stability classification used by scoring

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Stability(str, Enum):
    """Disc stability ladder, least to most overstable"""
    VERY_UNDERSTABLE = "Very Understable"
    UNDERSTABLE = "Understable"
    STABLE = "Stable"
    OVERSTABLE = "Overstable"
    VERY_OVERSTABLE = "Very Overstable"

    def __str__(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        return _LADDER_INDEX[self]

    def shift(self, steps: int) -> "Stability":
        """Move along the ladder by steps, clamped to either end."""
        index = max(0, min(len(STABILITY_LADDER) - 1, self.ordinal + steps))
        return STABILITY_LADDER[index]

    @classmethod
    def from_label(cls, label: str) -> Optional["Stability"]:
        """Exact ladder membership; None for anything off the ladder."""
        try:
            return cls(label)
        except ValueError:
            return None


STABILITY_LADDER = (
    Stability.VERY_UNDERSTABLE,
    Stability.UNDERSTABLE,
    Stability.STABLE,
    Stability.OVERSTABLE,
    Stability.VERY_OVERSTABLE,
)
_LADDER_INDEX = {stability: index for index, stability in enumerate(STABILITY_LADDER)}


@dataclass(frozen=True)
class Disc:
    """
    A disc in the player's bag.

    Flight numbers are conventionally speed 1-14, glide 1-7, turn -5..1 and
    fade 0-5, but nothing here enforces those ranges. The name acts as a
    natural key within a bag; uniqueness is not enforced either.
    """
    name: str
    brand: str
    speed: int
    glide: int
    turn: int
    fade: int
    stability: str  # a Stability label

    def __str__(self) -> str:
        return f"{self.name} ({self.brand}) {self.flight_numbers}"

    @property
    def flight_numbers(self) -> str:
        return f"{self.speed} | {self.glide} | {self.turn} | {self.fade}"

    def is_variant_of(self, stability: str) -> bool:
        """
        Inclusive category test against the stability label.

        "Overstable" matches both "Overstable" and "Very Overstable".
        """
        return str(stability) in str(self.stability)

    def duplicate(self) -> "Disc":
        return replace(self, name=f"{self.name} Copy")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "brand": self.brand,
            "speed": self.speed,
            "glide": self.glide,
            "turn": self.turn,
            "fade": self.fade,
            "stability": str(self.stability),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Disc":
        return cls(
            name=str(data["name"]),
            brand=str(data["brand"]),
            speed=int(data["speed"]),
            glide=int(data["glide"]),
            turn=int(data["turn"]),
            fade=int(data["fade"]),
            stability=str(data["stability"]),
        )
