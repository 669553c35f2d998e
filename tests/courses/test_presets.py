# ABOUTME: Tests for saved course presets
# ABOUTME: Validates seeding, save/replace/delete by id, and persistence

import pytest

from discwind.courses.presets import (
    COURSES_KEY,
    CoursePreset,
    CoursePresetManager,
    preset_from_conditions,
    seed_presets,
)
from discwind.storage.store import JsonStore
from discwind.weather.models import FlightCondition


@pytest.fixture
def store(tmp_path):
    return JsonStore(str(tmp_path))


def test_seed_presets():
    presets = seed_presets()

    assert [p.name for p in presets] == ["Mountain Course", "Lakeside Park", "Forest Hills"]
    mountain = presets[0]
    assert mountain.elevation == 2500
    assert mountain.typical_conditions.wind_speed == 12
    assert mountain.typical_conditions.wind_direction == "Headwind"


def test_seed_presets_have_unique_ids():
    ids = [p.id for p in seed_presets()]
    assert len(set(ids)) == 3


def test_empty_store_is_seeded_and_saved(store):
    manager = CoursePresetManager(store)

    assert len(manager.saved_courses) == 3
    assert len(store.load(COURSES_KEY)) == 3


def test_stored_presets_are_loaded(store):
    first = CoursePresetManager(store)
    ids = [c.id for c in first.saved_courses]

    second = CoursePresetManager(store)

    assert [c.id for c in second.saved_courses] == ids


def test_unreadable_store_reseeds(store):
    store.save(COURSES_KEY, [{"name": "No id"}])

    manager = CoursePresetManager(store)

    assert [c.name for c in manager.saved_courses] == ["Mountain Course", "Lakeside Park", "Forest Hills"]


@pytest.mark.parametrize("document", [{}, {"savedCourses": []}, "Forest Hills"])
def test_stored_presets_of_wrong_shape_reseed(store, document):
    store.save(COURSES_KEY, document)

    manager = CoursePresetManager(store)

    assert len(manager.saved_courses) == 3
    assert len(store.load(COURSES_KEY)) == 3


def test_save_course_appends_and_persists(store):
    manager = CoursePresetManager(store)
    conditions = FlightCondition(6, "Tailwind", 80, 300, 70)

    course = preset_from_conditions("Home Park", conditions)
    manager.save_course(course)

    reloaded = CoursePresetManager(store)
    saved = reloaded.find(course.id)
    assert saved == course
    assert saved.common_wind_pattern == "Tailwind"
    assert saved.elevation == 300


def test_save_course_with_same_id_replaces():
    manager = CoursePresetManager()
    original = manager.find_by_name("Forest Hills")

    renamed = CoursePreset(
        id=original.id,
        name="Forest Hills North",
        elevation=original.elevation,
        common_wind_pattern=original.common_wind_pattern,
        typical_conditions=original.typical_conditions,
    )
    manager.save_course(renamed)

    assert len(manager.saved_courses) == 3
    assert manager.find(original.id).name == "Forest Hills North"


def test_delete_course(store):
    manager = CoursePresetManager(store)
    lakeside = manager.find_by_name("Lakeside Park")

    manager.delete_course(lakeside.id)

    assert manager.find(lakeside.id) is None
    assert [c.name for c in CoursePresetManager(store).saved_courses] == ["Mountain Course", "Forest Hills"]


def test_apply_returns_typical_conditions():
    manager = CoursePresetManager()
    mountain = manager.find_by_name("Mountain Course")

    assert manager.apply(mountain) == FlightCondition(12, "Headwind", 65, 2500, 40)
