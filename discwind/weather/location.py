# ABOUTME: Location fix supplied by the device or entered manually
# ABOUTME: Unavailable locations are data, not errors

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LocationFix:
    """Where the player is, or why we don't know"""
    lat: Optional[float] = None
    lon: Optional[float] = None
    is_manual: bool = False
    label: str = "Current Location"

    @property
    def is_available(self) -> bool:
        return not self.is_manual and self.lat is not None and self.lon is not None

    @property
    def latitude(self) -> float:
        return self.lat if self.lat is not None else 0.0

    @property
    def longitude(self) -> float:
        return self.lon if self.lon is not None else 0.0

    @classmethod
    def manual(cls, name: str) -> "LocationFix":
        """A city typed in by the player; no coordinates."""
        return cls(is_manual=True, label=name)

    @classmethod
    def unavailable(cls, reason: str = "Location Disabled") -> "LocationFix":
        """Permission denied or the location lookup failed."""
        return cls(is_manual=True, label=reason)
