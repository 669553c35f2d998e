# ABOUTME: Saved course presets bundling typical conditions for a course
# ABOUTME: Loads from the JSON store and seeds three example courses when empty

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional

from discwind.storage.store import JsonStore
from discwind.weather.models import FlightCondition, RelativeWind

log = logging.getLogger(__name__)

COURSES_KEY = "savedCourses"


@dataclass(frozen=True)
class CoursePreset:
    """A named course with its usual conditions"""
    name: str
    elevation: float
    common_wind_pattern: str
    typical_conditions: FlightCondition
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "elevation": self.elevation,
            "commonWindPattern": self.common_wind_pattern,
            "typicalConditions": self.typical_conditions.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CoursePreset":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            elevation=float(data["elevation"]),
            common_wind_pattern=str(data["commonWindPattern"]),
            typical_conditions=FlightCondition.from_dict(data["typicalConditions"]),
        )


def seed_presets() -> list[CoursePreset]:
    return [
        CoursePreset(
            name="Mountain Course",
            elevation=2500,
            common_wind_pattern="Afternoon Uphill",
            typical_conditions=FlightCondition(
                wind_speed=12,
                wind_direction=RelativeWind.HEADWIND.value,
                temperature=65,
                elevation=2500,
                humidity=40,
            ),
        ),
        CoursePreset(
            name="Lakeside Park",
            elevation=800,
            common_wind_pattern="Crosswind from Water",
            typical_conditions=FlightCondition(
                wind_speed=8,
                wind_direction=RelativeWind.CROSSWIND_RIGHT.value,
                temperature=75,
                elevation=800,
                humidity=65,
            ),
        ),
        CoursePreset(
            name="Forest Hills",
            elevation=1200,
            common_wind_pattern="Protected & Calm",
            typical_conditions=FlightCondition(
                wind_speed=3,
                wind_direction=RelativeWind.CALM.value,
                temperature=70,
                elevation=1200,
                humidity=60,
            ),
        ),
    ]


def preset_from_conditions(name: str, conditions: FlightCondition) -> CoursePreset:
    """Snapshot the current conditions as a new course preset."""
    return CoursePreset(
        name=name,
        elevation=conditions.elevation,
        common_wind_pattern=conditions.wind_direction,
        typical_conditions=conditions,
    )


class CoursePresetManager:
    """Keeps the saved course list in sync with the store"""

    def __init__(self, store: Optional[JsonStore] = None):
        self.store = store
        self.saved_courses: list[CoursePreset] = self._load()
        if not self.saved_courses:
            self.saved_courses = seed_presets()
            self._save()

    def find(self, preset_id: str) -> Optional[CoursePreset]:
        for course in self.saved_courses:
            if course.id == preset_id:
                return course
        return None

    def find_by_name(self, name: str) -> Optional[CoursePreset]:
        for course in self.saved_courses:
            if course.name == name:
                return course
        return None

    def save_course(self, course: CoursePreset) -> None:
        """Replace the preset with the same id, or append a new one."""
        for index, existing in enumerate(self.saved_courses):
            if existing.id == course.id:
                self.saved_courses[index] = course
                break
        else:
            self.saved_courses.append(course)
        self._save()

    def delete_course(self, preset_id: str) -> None:
        self.saved_courses = [c for c in self.saved_courses if c.id != preset_id]
        self._save()

    def apply(self, course: CoursePreset) -> FlightCondition:
        """Conditions to switch to when the player picks this course."""
        return course.typical_conditions

    def _load(self) -> list[CoursePreset]:
        if self.store is None:
            return []

        data = self.store.load(COURSES_KEY)
        if data is None:
            return []
        if not isinstance(data, list):
            log.error(f"Stored course presets are not a list, using seed presets: {type(data).__name__}")
            return []

        try:
            return [CoursePreset.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            log.error(f"Stored course presets are unreadable, using seed presets: {e}")
            return []

    def _save(self) -> None:
        if self.store is None:
            return
        self.store.save(COURSES_KEY, [course.to_dict() for course in self.saved_courses])
