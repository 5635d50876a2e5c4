"""Pure day-log transforms.

Every function returns a new list and leaves its input untouched. When the
requested exercise or set does not exist the input list itself is returned,
which lets callers skip a save with an identity check.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Any

from .const import DEFAULT_EXERCISES
from .models import ExerciseEntry, WeightUnit, WorkoutSet, coerce_unit, new_set_id

_UNSET: Any = object()


def parse_date_key(value: Any) -> date:
    """Parse a ``YYYY-MM-DD`` key; raises ValueError for anything else."""
    return date.fromisoformat(str(value or "").strip()[:10])


def shift_date(date_key: str, days: int) -> str:
    return (parse_date_key(date_key) + timedelta(days=int(days))).isoformat()


def new_set(unit: WeightUnit | str = WeightUnit.LBS) -> WorkoutSet:
    return WorkoutSet(id=new_set_id(), unit=coerce_unit(unit))


def default_exercises(unit: WeightUnit | str = WeightUnit.LBS) -> list[ExerciseEntry]:
    return [ExerciseEntry(name=name, sets=(new_set(unit),)) for name in DEFAULT_EXERCISES]


def _replace_exercise(exercises: list[ExerciseEntry], index: int, exercise: ExerciseEntry) -> list[ExerciseEntry]:
    return [exercise if i == index else ex for i, ex in enumerate(exercises)]


def _valid_index(exercises: list[ExerciseEntry], index: int) -> bool:
    return 0 <= int(index) < len(exercises)


def add_set(
    exercises: list[ExerciseEntry], index: int, default_unit: WeightUnit | str = WeightUnit.LBS
) -> list[ExerciseEntry]:
    """Append an empty set that reuses the unit of the previous set."""
    if not _valid_index(exercises, index):
        return exercises
    exercise = exercises[index]
    unit = exercise.sets[-1].unit if exercise.sets else default_unit
    return _replace_exercise(exercises, index, replace(exercise, sets=(*exercise.sets, new_set(unit))))


def _update_sets(exercise: ExerciseEntry, set_id: str, **changes: Any) -> ExerciseEntry | None:
    found = False
    sets: list[WorkoutSet] = []
    for workout_set in exercise.sets:
        if workout_set.id == set_id:
            found = True
            workout_set = replace(workout_set, **changes)
        sets.append(workout_set)
    return replace(exercise, sets=tuple(sets)) if found else None


def update_set(
    exercises: list[ExerciseEntry],
    index: int,
    set_id: str,
    *,
    reps: Any = _UNSET,
    weight: Any = _UNSET,
    unit: Any = _UNSET,
) -> list[ExerciseEntry]:
    """Replace fields of one set. Pass ``None`` to clear reps or weight."""
    if not _valid_index(exercises, index):
        return exercises
    # Round-trip through the stored representation to reuse its coercion.
    raw: dict[str, Any] = {}
    if reps is not _UNSET:
        raw["reps"] = reps
    if weight is not _UNSET:
        raw["weight"] = weight
    parsed = WorkoutSet.from_dict({"id": set_id, **raw})
    changes: dict[str, Any] = {key: getattr(parsed, key) for key in raw}
    if unit is not _UNSET:
        changes["unit"] = coerce_unit(unit)
    updated = _update_sets(exercises[index], set_id, **changes)
    if updated is None:
        return exercises
    return _replace_exercise(exercises, index, updated)


def toggle_unit(exercises: list[ExerciseEntry], index: int, set_id: str) -> list[ExerciseEntry]:
    if not _valid_index(exercises, index):
        return exercises
    current = next((s for s in exercises[index].sets if s.id == set_id), None)
    if current is None:
        return exercises
    flipped = WeightUnit.KG if current.unit == WeightUnit.LBS else WeightUnit.LBS
    return update_set(exercises, index, set_id, unit=flipped)


def toggle_expanded(exercises: list[ExerciseEntry], index: int) -> list[ExerciseEntry]:
    if not _valid_index(exercises, index):
        return exercises
    exercise = exercises[index]
    return _replace_exercise(exercises, index, replace(exercise, is_expanded=not exercise.is_expanded))


def add_exercise(
    exercises: list[ExerciseEntry],
    name: str,
    *,
    custom_joules: float | None = None,
    unit: WeightUnit | str = WeightUnit.LBS,
) -> list[ExerciseEntry]:
    """Append a custom exercise with one empty set."""
    cleaned = str(name or "").strip()
    if not cleaned:
        return exercises
    joules = custom_joules if custom_joules is not None and custom_joules > 0 else None
    return [*exercises, ExerciseEntry(name=cleaned, sets=(new_set(unit),), custom_joules=joules)]


def set_custom_joules(exercises: list[ExerciseEntry], index: int, joules: float | None) -> list[ExerciseEntry]:
    """Set the energy override; ``None`` or a non-positive value clears it."""
    if not _valid_index(exercises, index):
        return exercises
    value = float(joules) if joules is not None and joules > 0 else None
    return _replace_exercise(exercises, index, replace(exercises[index], custom_joules=value))
