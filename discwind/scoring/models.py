# ABOUTME: Data models for disc scores and condition ratings
# ABOUTME: Provides structured representation of ranked discs and impact levels

from dataclasses import dataclass
from enum import Enum

from discwind.discs.models import Disc


class ScoringPolicy(str, Enum):
    """Which disc-scoring rules to apply"""
    PRIMARY = "primary"  # full recommendation list, condition-only
    QUICK = "quick"      # summary card, throw-direction aware

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ScoredDisc:
    """A disc with its score for the current conditions"""
    disc: Disc
    score: int


@dataclass(frozen=True)
class ConditionImpact:
    """How hard the current conditions are on disc flight"""
    label: str  # "Ideal Conditions", "Moderate Impact", ...
    color: str  # "green", "yellow", "orange", "red"
    score: float

    def __str__(self) -> str:
        return self.label
