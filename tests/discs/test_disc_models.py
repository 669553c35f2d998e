# ABOUTME: Tests for the Disc model and the stability ladder
# ABOUTME: Validates ladder shifting, variant matching, and copy naming

import pytest

from discwind.discs.models import STABILITY_LADDER, Disc, Stability


def make_disc(**overrides):
    values = dict(name="Buzzz", brand="Discraft", speed=5, glide=4, turn=-1, fade=1, stability="Stable")
    values.update(overrides)
    return Disc(**values)


class TestStability:
    """Tests for the five-rung stability ladder"""

    def test_ladder_order(self):
        assert [s.value for s in STABILITY_LADDER] == [
            "Very Understable", "Understable", "Stable", "Overstable", "Very Overstable",
        ]

    def test_ordinal(self):
        assert Stability.VERY_UNDERSTABLE.ordinal == 0
        assert Stability.VERY_OVERSTABLE.ordinal == 4

    @pytest.mark.parametrize("start,steps,expected", [
        (Stability.STABLE, 2, Stability.VERY_OVERSTABLE),
        (Stability.STABLE, -1, Stability.UNDERSTABLE),
        (Stability.OVERSTABLE, 4, Stability.VERY_OVERSTABLE),
        (Stability.UNDERSTABLE, -3, Stability.VERY_UNDERSTABLE),
        (Stability.UNDERSTABLE, 0, Stability.UNDERSTABLE),
    ])
    def test_shift_is_clamped(self, start, steps, expected):
        assert start.shift(steps) is expected

    def test_from_label_is_exact(self):
        assert Stability.from_label("Very Overstable") is Stability.VERY_OVERSTABLE
        assert Stability.from_label("overstable") is None
        assert Stability.from_label("Flippy") is None


class TestDisc:
    """Tests for Disc"""

    def test_flight_numbers(self):
        assert make_disc(speed=12, glide=5, turn=-1, fade=3).flight_numbers == "12 | 5 | -1 | 3"

    def test_string_includes_name_and_brand(self):
        assert str(make_disc()) == "Buzzz (Discraft) 5 | 4 | -1 | 1"

    def test_is_variant_of_is_inclusive(self):
        assert make_disc(stability="Very Overstable").is_variant_of("Overstable")
        assert make_disc(stability="Overstable").is_variant_of("Overstable")
        assert make_disc(stability="Very Understable").is_variant_of(Stability.UNDERSTABLE)
        assert not make_disc(stability="Stable").is_variant_of("Overstable")

    def test_duplicate_appends_copy_to_name(self):
        original = make_disc(name="Roc3")
        copy = original.duplicate()

        assert copy.name == "Roc3 Copy"
        assert copy.flight_numbers == original.flight_numbers
        assert original.name == "Roc3"

    def test_dict_round_trip(self):
        disc = make_disc(name="Firebird", speed=9, glide=3, turn=0, fade=4, stability="Very Overstable")

        data = disc.to_dict()

        assert data["stability"] == "Very Overstable"
        assert Disc.from_dict(data) == disc

    def test_from_dict_missing_field_raises(self):
        with pytest.raises(KeyError):
            Disc.from_dict({"name": "Nameless"})
