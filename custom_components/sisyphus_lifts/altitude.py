"""Work-to-altitude arithmetic.

A logged set lifts ``weight`` through a per-exercise height ``reps`` times.
The mechanical work is expressed as the altitude a 90.7 kg boulder would
gain for the same energy: ``work / (BOULDER_MASS_KG * GRAVITY)``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any

from .models import ExerciseEntry, WeightUnit

BOULDER_MASS_KG = 90.7
GRAVITY = 9.81  # m/s²
LBS_TO_KG = 0.453592
DEFAULT_HEIGHT_M = 0.4


def _contains(keyword: str) -> Callable[[str], bool]:
    return lambda name: keyword in name


# Evaluated in order; the first predicate that matches wins.
EXERCISE_HEIGHTS: tuple[tuple[Callable[[str], bool], float], ...] = (
    (_contains("bench"), 0.4),
    (_contains("squat"), 0.6),
    (_contains("deadlift"), 0.5),
)


def to_kilograms(weight: Any, unit: WeightUnit | str) -> float:
    """Return ``weight`` in kilograms; unset weights count as 0."""
    if weight is None or weight == "":
        return 0.0
    try:
        value = float(weight)
    except (TypeError, ValueError):
        return 0.0
    return value * LBS_TO_KG if unit == WeightUnit.LBS else value


def resolve_height(name: str) -> float:
    """Per-rep lift height in meters for an exercise name.

    Matching is a case-insensitive substring test, so "Barbell Squat (heavy)"
    resolves like "squat". Unknown exercises get ``DEFAULT_HEIGHT_M``.
    """
    normalized = str(name or "").lower()
    for matches, height in EXERCISE_HEIGHTS:
        if matches(normalized):
            return height
    return DEFAULT_HEIGHT_M


def _round_half_up(value: float, digits: int = 2) -> float:
    factor = 10**digits
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def compute_total_work(exercises: Iterable[ExerciseEntry]) -> float:
    """Total mechanical work in joules."""
    total = 0.0
    for exercise in exercises:
        if exercise.custom_joules is not None and exercise.custom_joules > 0:
            total += exercise.custom_joules
            continue

        height = resolve_height(exercise.name)
        for workout_set in exercise.sets:
            weight_kg = to_kilograms(workout_set.weight, workout_set.unit)
            reps = workout_set.reps or 0
            if weight_kg <= 0 or reps <= 0:
                continue
            total += weight_kg * GRAVITY * height * reps
    return total


def compute_altitude_gain(exercises: Iterable[ExerciseEntry]) -> float:
    """Altitude gain in meters, rounded to 2 decimals."""
    altitude = compute_total_work(exercises) / (BOULDER_MASS_KG * GRAVITY)
    return _round_half_up(altitude)
