from __future__ import annotations

import math

import pytest

from custom_components.sisyphus_lifts.altitude import (
    BOULDER_MASS_KG,
    GRAVITY,
    compute_altitude_gain,
    compute_total_work,
    resolve_height,
    to_kilograms,
)
from custom_components.sisyphus_lifts.models import ExerciseEntry, WeightUnit, WorkoutSet


def _entry(name: str, *sets: tuple, custom_joules: float | None = None) -> ExerciseEntry:
    return ExerciseEntry(
        name=name,
        sets=tuple(WorkoutSet(id=f"s{i}", reps=r, weight=w, unit=WeightUnit(u)) for i, (r, w, u) in enumerate(sets)),
        custom_joules=custom_joules,
    )


@pytest.mark.parametrize("weight", [0, 1, 42.5, 225])
def test_kilograms_pass_through(weight: float) -> None:
    assert to_kilograms(weight, "kg") == weight


@pytest.mark.parametrize("weight", [0, 1, 42.5, 225])
def test_pounds_are_converted(weight: float) -> None:
    assert to_kilograms(weight, WeightUnit.LBS) == pytest.approx(weight * 0.453592)


@pytest.mark.parametrize("unit", ["lbs", "kg"])
def test_unset_weight_is_zero(unit: str) -> None:
    assert to_kilograms("", unit) == 0
    assert to_kilograms(None, unit) == 0


@pytest.mark.parametrize(
    ("name", "height"),
    [
        ("Heavy Bench Press", 0.4),
        ("Back Squat", 0.6),
        ("Barbell Squat (heavy)", 0.6),
        ("Romanian Deadlift", 0.5),
        ("DEADLIFT", 0.5),
        ("Lunges", 0.4),
        ("", 0.4),
    ],
)
def test_resolve_height(name: str, height: float) -> None:
    assert resolve_height(name) == height


def test_first_matching_keyword_wins() -> None:
    # "bench" is listed before "squat".
    assert resolve_height("Bench Squat Combo") == 0.4
    # "squat" is listed before "deadlift".
    assert resolve_height("Deadlift to Squat") == 0.6


def test_empty_workout_has_no_altitude() -> None:
    assert compute_altitude_gain([]) == 0


def test_squat_example() -> None:
    workout = [_entry("Squat", (10, 225, "lbs"))]
    assert compute_total_work(workout) == pytest.approx(225 * 0.453592 * GRAVITY * 0.6 * 10)
    assert compute_altitude_gain(workout) == 6.75


@pytest.mark.parametrize(("reps", "weight"), [(0, 100), (-3, 100), (None, 100), (10, 0), (10, -5), (10, None)])
def test_sets_missing_reps_or_weight_contribute_nothing(reps, weight) -> None:
    assert compute_total_work([_entry("Squat", (reps, weight, "kg"))]) == 0


def test_custom_joules_replace_the_sets() -> None:
    workout = [_entry("Farmer Carry", (10, 100, "kg"), (8, 120, "kg"), custom_joules=5000)]
    assert compute_total_work(workout) == 5000
    assert compute_altitude_gain(workout) == round(5000 / (BOULDER_MASS_KG * GRAVITY), 2)


def test_non_positive_custom_joules_fall_back_to_sets() -> None:
    with_zero = [_entry("Bench", (5, 100, "kg"), custom_joules=0)]
    without = [_entry("Bench", (5, 100, "kg"))]
    assert compute_total_work(with_zero) == compute_total_work(without) > 0


def test_mixed_units_and_exercises_add_up() -> None:
    workout = [
        _entry("Squat", (5, 100, "kg")),
        _entry("Bench", (5, 100, "kg"), (5, 220, "lbs")),
        _entry("Deadlift", (3, 140, "kg")),
    ]
    expected = (100 * 0.6 * 5 + 100 * 0.4 * 5 + 220 * 0.453592 * 0.4 * 5 + 140 * 0.5 * 3) / BOULDER_MASS_KG
    assert compute_altitude_gain(workout) == pytest.approx(expected, abs=0.005)


def test_altitude_rounds_to_two_decimals() -> None:
    def lunge(altitude: float) -> list[ExerciseEntry]:
        # mass * height * reps == altitude * boulder mass
        return [_entry("Lunges", (1, altitude * BOULDER_MASS_KG / 0.4, "kg"))]

    assert compute_altitude_gain(lunge(0.1251)) == 0.13
    assert compute_altitude_gain(lunge(0.1249)) == 0.12


def test_overflowing_set_does_not_raise() -> None:
    assert math.isinf(compute_altitude_gain([_entry("Squat", (10, 1e308, "kg"))]))


def test_overflowing_custom_joules_do_not_raise() -> None:
    workout = [_entry("Sled", custom_joules=1e308), _entry("Prowler", custom_joules=1e308)]
    assert math.isinf(compute_altitude_gain(workout))


def test_huge_finite_altitude_is_returned_rounded() -> None:
    altitude = compute_altitude_gain([_entry("Sled", custom_joules=1e300)])
    assert math.isfinite(altitude)
    assert altitude == pytest.approx(1e300 / (BOULDER_MASS_KG * GRAVITY))
