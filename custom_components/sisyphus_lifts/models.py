"""Workout records and their stored representation.

Stored layout (one blob per config entry)::

    {"2026-10-19": [{"name": "Squat",
                     "sets": [{"id": "...", "reps": 10, "weight": 225, "unit": "lbs"}],
                     "customJoules": 5000,
                     "isExpanded": false}]}

Parsing is lenient: anything that cannot be read as a number becomes unset
(``None``) so the arithmetic degrades to a zero contribution.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any
from uuid import uuid4


class WeightUnit(StrEnum):
    LBS = "lbs"
    KG = "kg"


def new_set_id() -> str:
    return uuid4().hex


def _coerce_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _coerce_reps(value: Any) -> int | None:
    number = _coerce_number(value)
    if number is None:
        return None
    return int(number)


def coerce_unit(value: Any, default: WeightUnit = WeightUnit.LBS) -> WeightUnit:
    try:
        return WeightUnit(str(value or "").strip().lower())
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class WorkoutSet:
    id: str
    reps: int | None = None
    weight: float | None = None
    unit: WeightUnit = WeightUnit.LBS

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> WorkoutSet:
        return cls(
            id=str(raw.get("id") or "").strip() or new_set_id(),
            reps=_coerce_reps(raw.get("reps")),
            weight=_coerce_number(raw.get("weight")),
            unit=coerce_unit(raw.get("unit")),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "reps": "" if self.reps is None else self.reps,
            "weight": "" if self.weight is None else self.weight,
            "unit": str(self.unit),
        }


@dataclass(frozen=True, slots=True)
class ExerciseEntry:
    name: str
    sets: tuple[WorkoutSet, ...] = field(default_factory=tuple)
    custom_joules: float | None = None
    is_expanded: bool = False

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ExerciseEntry:
        sets = raw.get("sets")
        if not isinstance(sets, list):
            sets = []
        return cls(
            name=str(raw.get("name") or ""),
            sets=tuple(WorkoutSet.from_dict(s) for s in sets if isinstance(s, dict)),
            custom_joules=_coerce_number(raw.get("customJoules")),
            is_expanded=bool(raw.get("isExpanded")),
        )

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "sets": [s.as_dict() for s in self.sets],
            "isExpanded": self.is_expanded,
        }
        if self.custom_joules is not None:
            payload["customJoules"] = self.custom_joules
        return payload


def parse_day(raw: Any) -> list[ExerciseEntry]:
    if not isinstance(raw, list):
        return []
    return [ExerciseEntry.from_dict(ex) for ex in raw if isinstance(ex, dict)]


def dump_day(exercises: list[ExerciseEntry]) -> list[dict[str, Any]]:
    return [ex.as_dict() for ex in exercises]


def parse_history(raw: Any) -> dict[str, list[ExerciseEntry]]:
    """Parse a stored blob; anything that is not a mapping is an empty history."""
    if not isinstance(raw, dict):
        return {}
    return {str(day): parse_day(exercises) for day, exercises in raw.items() if isinstance(exercises, list)}
