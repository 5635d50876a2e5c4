"""Coordinator for Sisyphus Lifts."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator
from homeassistant.util import dt as dt_util

from . import tracker
from .altitude import compute_altitude_gain, compute_total_work
from .const import CONF_DEFAULT_UNIT, DEFAULT_UNIT, DOMAIN
from .models import ExerciseEntry, dump_day
from .peaks import US_STATE_HIGHPOINTS, compute_progress
from .storage import DayTransform, SisyphusLiftsStore

_LOGGER = logging.getLogger(__name__)


def _today_key() -> str:
    return dt_util.as_local(dt_util.utcnow()).date().isoformat()


def build_summary(
    history: dict[str, list[ExerciseEntry]], day: list[ExerciseEntry], selected_date: str
) -> dict[str, Any]:
    """Derive the day and lifetime figures from the full history.

    The lifetime altitude is computed over every entry at once so it is
    rounded a single time.
    """
    every_entry: list[ExerciseEntry] = [ex for exercises in history.values() for ex in exercises]
    total_altitude = compute_altitude_gain(every_entry)
    return {
        "selected_date": selected_date,
        "exercises": dump_day(day),
        "daily_altitude": compute_altitude_gain(day),
        "total_altitude": total_altitude,
        "total_joules": round(compute_total_work(every_entry), 1),
        "days_logged": sum(1 for exercises in history.values() if compute_total_work(exercises) > 0),
        "progress": compute_progress(total_altitude, US_STATE_HIGHPOINTS).as_dict(),
    }


class SisyphusLiftsCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Owns the selected date and derives altitude figures from stored history."""

    def __init__(self, hass: HomeAssistant, entry: ConfigEntry) -> None:
        self.entry = entry
        self.default_unit = str(
            entry.options.get(CONF_DEFAULT_UNIT, entry.data.get(CONF_DEFAULT_UNIT, DEFAULT_UNIT)) or DEFAULT_UNIT
        )
        self.store = SisyphusLiftsStore(hass, entry.entry_id, default_unit=self.default_unit)
        self.selected_date = _today_key()

        # No polling: history only changes through this coordinator.
        super().__init__(
            hass,
            logger=_LOGGER,
            name=f"{DOMAIN}_{entry.entry_id}",
            update_interval=None,
        )

    async def _async_update_data(self) -> dict[str, Any]:
        day = await self.store.async_ensure_day(self.selected_date)
        return build_summary(await self.store.async_get_history(), day, self.selected_date)

    async def async_snapshot(self, date_key: str | None = None) -> dict[str, Any]:
        """Summary read straight from the store, ahead of any pending refresh."""
        key = tracker.parse_date_key(date_key or self.selected_date).isoformat()
        day = await self.store.async_get_day(key)
        return build_summary(await self.store.async_get_history(), day, key)

    async def async_select_date(self, date_key: str) -> list[ExerciseEntry]:
        """Navigate to a date, creating its default log on first visit."""
        self.selected_date = tracker.parse_date_key(date_key).isoformat()
        exercises = await self.store.async_ensure_day(self.selected_date)
        await self.async_request_refresh()
        return exercises

    async def async_shift_date(self, days: int) -> list[ExerciseEntry]:
        return await self.async_select_date(tracker.shift_date(self.selected_date, days))

    async def async_select_today(self) -> list[ExerciseEntry]:
        return await self.async_select_date(_today_key())

    async def _async_apply(self, date_key: str | None, transform: DayTransform) -> list[ExerciseEntry]:
        exercises = await self.store.async_apply(date_key or self.selected_date, transform)
        await self.async_request_refresh()
        return exercises

    async def async_add_set(self, index: int, *, date_key: str | None = None) -> list[ExerciseEntry]:
        return await self._async_apply(
            date_key, lambda exercises: tracker.add_set(exercises, index, self.default_unit)
        )

    async def async_update_set(
        self, index: int, set_id: str, *, date_key: str | None = None, **changes: Any
    ) -> list[ExerciseEntry]:
        return await self._async_apply(
            date_key, lambda exercises: tracker.update_set(exercises, index, set_id, **changes)
        )

    async def async_toggle_unit(self, index: int, set_id: str, *, date_key: str | None = None) -> list[ExerciseEntry]:
        return await self._async_apply(date_key, lambda exercises: tracker.toggle_unit(exercises, index, set_id))

    async def async_toggle_expanded(self, index: int, *, date_key: str | None = None) -> list[ExerciseEntry]:
        return await self._async_apply(date_key, lambda exercises: tracker.toggle_expanded(exercises, index))

    async def async_add_exercise(
        self, name: str, *, custom_joules: float | None = None, date_key: str | None = None
    ) -> list[ExerciseEntry]:
        return await self._async_apply(
            date_key,
            lambda exercises: tracker.add_exercise(
                exercises, name, custom_joules=custom_joules, unit=self.default_unit
            ),
        )

    async def async_set_custom_joules(
        self, index: int, joules: float | None, *, date_key: str | None = None
    ) -> list[ExerciseEntry]:
        return await self._async_apply(date_key, lambda exercises: tracker.set_custom_joules(exercises, index, joules))
