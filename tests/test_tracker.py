from __future__ import annotations

import pytest

from custom_components.sisyphus_lifts import tracker
from custom_components.sisyphus_lifts.altitude import compute_altitude_gain
from custom_components.sisyphus_lifts.models import ExerciseEntry, WeightUnit, WorkoutSet


def _day() -> list[ExerciseEntry]:
    return [
        ExerciseEntry(name="Squat", sets=(WorkoutSet(id="a", unit=WeightUnit.KG),)),
        ExerciseEntry(name="Bench", sets=()),
    ]


def test_default_exercises() -> None:
    exercises = tracker.default_exercises("kg")
    assert [ex.name for ex in exercises] == ["Squat", "Bench", "Deadlift"]
    for ex in exercises:
        assert len(ex.sets) == 1
        assert ex.sets[0].unit == WeightUnit.KG
        assert ex.sets[0].reps is None and ex.sets[0].weight is None
        assert not ex.is_expanded
    assert compute_altitude_gain(exercises) == 0


def test_add_set_copies_previous_unit() -> None:
    day = _day()
    updated = tracker.add_set(day, 0, default_unit="lbs")
    assert [s.unit for s in updated[0].sets] == [WeightUnit.KG, WeightUnit.KG]
    assert updated[0].sets[0].id != updated[0].sets[1].id
    # Input untouched.
    assert len(day[0].sets) == 1


def test_add_set_to_empty_exercise_uses_default_unit() -> None:
    updated = tracker.add_set(_day(), 1, default_unit="lbs")
    assert updated[1].sets[0].unit == WeightUnit.LBS


def test_update_set_coerces_input_values() -> None:
    updated = tracker.update_set(_day(), 0, "a", reps="10", weight="102.5")
    assert updated[0].sets[0].reps == 10
    assert updated[0].sets[0].weight == 102.5
    assert updated[0].sets[0].unit == WeightUnit.KG


def test_update_set_clears_with_empty_value() -> None:
    day = tracker.update_set(_day(), 0, "a", reps=5, weight=100)
    cleared = tracker.update_set(day, 0, "a", weight="")
    assert cleared[0].sets[0].weight is None
    assert cleared[0].sets[0].reps == 5


def test_toggle_unit() -> None:
    once = tracker.toggle_unit(_day(), 0, "a")
    assert once[0].sets[0].unit == WeightUnit.LBS
    twice = tracker.toggle_unit(once, 0, "a")
    assert twice[0].sets[0].unit == WeightUnit.KG


def test_toggle_expanded_leaves_altitude_alone() -> None:
    day = tracker.update_set(_day(), 0, "a", reps=5, weight=100)
    expanded = tracker.toggle_expanded(day, 0)
    assert expanded[0].is_expanded
    assert compute_altitude_gain(expanded) == compute_altitude_gain(day)


@pytest.mark.parametrize(
    "transform",
    [
        lambda day: tracker.add_set(day, 5),
        lambda day: tracker.update_set(day, 0, "missing", reps=1),
        lambda day: tracker.update_set(day, -1, "a", reps=1),
        lambda day: tracker.toggle_unit(day, 0, "missing"),
        lambda day: tracker.toggle_expanded(day, 2),
        lambda day: tracker.set_custom_joules(day, 9, 100),
        lambda day: tracker.add_exercise(day, "   "),
    ],
)
def test_unknown_targets_return_the_same_list(transform) -> None:
    day = _day()
    assert transform(day) is day


def test_add_exercise_with_custom_joules() -> None:
    updated = tracker.add_exercise(_day(), " Sled Push ", custom_joules=5000, unit="kg")
    assert updated[-1].name == "Sled Push"
    assert updated[-1].custom_joules == 5000
    assert updated[-1].sets[0].unit == WeightUnit.KG


def test_set_custom_joules_clears_on_zero() -> None:
    day = tracker.set_custom_joules(_day(), 1, 2500)
    assert day[1].custom_joules == 2500
    assert tracker.set_custom_joules(day, 1, 0)[1].custom_joules is None
    assert tracker.set_custom_joules(day, 1, None)[1].custom_joules is None


def test_shift_date_crosses_month_boundaries() -> None:
    assert tracker.shift_date("2026-02-28", 1) == "2026-03-01"
    assert tracker.shift_date("2026-01-01", -1) == "2025-12-31"


def test_parse_date_key_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        tracker.parse_date_key("yesterday")
