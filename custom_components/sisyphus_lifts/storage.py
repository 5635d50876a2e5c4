"""Storage for Sisyphus Lifts (.storage).

The stored blob is the whole day history: a mapping from ``YYYY-MM-DD`` to
the list of exercise records logged that day. It is written as one snapshot
after every change and never pruned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store

from .const import DEFAULT_UNIT, DOMAIN
from .models import ExerciseEntry, WeightUnit, coerce_unit, dump_day, parse_day, parse_history
from .tracker import default_exercises, parse_date_key

_LOGGER = logging.getLogger(__name__)

_STORAGE_VERSION = 1

DayTransform = Callable[[list[ExerciseEntry]], list[ExerciseEntry]]


class SisyphusLiftsStore:
    """Per-config-entry storage wrapper."""

    def __init__(self, hass: HomeAssistant, entry_id: str, *, default_unit: WeightUnit | str = DEFAULT_UNIT) -> None:
        self._store: Store[dict[str, Any]] = Store(hass, _STORAGE_VERSION, f"{DOMAIN}_{entry_id}")
        self._data: dict[str, list[dict[str, Any]]] | None = None
        self.default_unit = coerce_unit(default_unit)

    async def async_load(self) -> dict[str, list[dict[str, Any]]]:
        if self._data is None:
            try:
                loaded = await self._store.async_load()
            except HomeAssistantError:
                _LOGGER.exception("Could not read stored history, starting with an empty one")
                loaded = None
            if loaded is not None and not isinstance(loaded, dict):
                _LOGGER.warning("Ignoring stored history of unexpected type %s", type(loaded).__name__)

            # Normalize once so later reads see the canonical layout.
            history = parse_history(loaded)
            self._data = {day: dump_day(exercises) for day, exercises in history.items()}

        return dict(self._data)

    async def async_save(self, history: dict[str, list[dict[str, Any]]]) -> dict[str, list[dict[str, Any]]]:
        self._data = dict(history or {})
        await self._store.async_save(self._data)
        return dict(self._data)

    async def async_get_history(self) -> dict[str, list[ExerciseEntry]]:
        return parse_history(await self.async_load())

    async def async_get_day(self, date_key: str) -> list[ExerciseEntry]:
        """Exercises logged on ``date_key``; unlogged days get the default set."""
        key = parse_date_key(date_key).isoformat()
        history = await self.async_load()
        if key not in history:
            return default_exercises(self.default_unit)
        return parse_day(history[key])

    async def async_ensure_day(self, date_key: str) -> list[ExerciseEntry]:
        """Persist the default exercises the first time a date is opened."""
        key = parse_date_key(date_key).isoformat()
        history = await self.async_load()
        if key in history:
            return parse_day(history[key])
        exercises = default_exercises(self.default_unit)
        history[key] = dump_day(exercises)
        await self.async_save(history)
        return exercises

    async def async_apply(self, date_key: str, transform: DayTransform) -> list[ExerciseEntry]:
        """Apply a pure transform to one day and save if anything changed.

        An unlogged day is opened (and persisted with defaults) first.
        """
        key = parse_date_key(date_key).isoformat()
        current = await self.async_ensure_day(key)
        updated = transform(current)
        if updated is current:
            return current
        history = await self.async_load()
        history[key] = dump_day(updated)
        await self.async_save(history)
        return updated
