"""Sensor platform for Sisyphus Lifts."""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, UnitOfLength
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import SisyphusLiftsCoordinator
from .entity import device_info_from_entry, entity_unique_id


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: SisyphusLiftsCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [
            DailyAltitudeSensor(entry, coordinator),
            TotalAltitudeSensor(entry, coordinator),
            PeakProgressSensor(entry, coordinator),
        ]
    )


class _SisyphusLiftsSensor(CoordinatorEntity[SisyphusLiftsCoordinator], SensorEntity):
    _attr_has_entity_name = True
    _key = ""

    def __init__(self, entry: ConfigEntry, coordinator: SisyphusLiftsCoordinator) -> None:
        super().__init__(coordinator)
        self._entry = entry
        self._attr_unique_id = entity_unique_id(entry, self._key)
        self._attr_device_info = device_info_from_entry(entry)

    @property
    def _data(self) -> dict[str, Any]:
        data = self.coordinator.data
        return data if isinstance(data, dict) else {}


class DailyAltitudeSensor(_SisyphusLiftsSensor):
    """Altitude gained on the selected day."""

    _attr_name = "Daily altitude"
    _attr_icon = "mdi:weight-lifter"
    _attr_translation_key = "daily_altitude"
    _attr_native_unit_of_measurement = UnitOfLength.METERS
    _key = "daily_altitude"

    @property
    def native_value(self) -> float:
        return float(self._data.get("daily_altitude") or 0)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        return {
            "date": str(self._data.get("selected_date") or ""),
            "exercises": self._data.get("exercises", []),
        }


class TotalAltitudeSensor(_SisyphusLiftsSensor):
    """Altitude gained across the whole history."""

    _attr_name = "Total altitude"
    _attr_icon = "mdi:image-filter-hdr"
    _attr_translation_key = "total_altitude"
    _attr_native_unit_of_measurement = UnitOfLength.METERS
    _attr_state_class = SensorStateClass.TOTAL
    _key = "total_altitude"

    @property
    def native_value(self) -> float:
        return float(self._data.get("total_altitude") or 0)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        return {
            "total_joules": self._data.get("total_joules", 0),
            "days_logged": int(self._data.get("days_logged") or 0),
        }


class PeakProgressSensor(_SisyphusLiftsSensor):
    """Progress from the last reached peak towards the next one."""

    _attr_name = "Peak progress"
    _attr_icon = "mdi:flag-checkered"
    _attr_translation_key = "peak_progress"
    _attr_native_unit_of_measurement = PERCENTAGE
    _key = "peak_progress"

    @property
    def native_value(self) -> float:
        progress = self._data.get("progress") or {}
        return round(float(progress.get("progress_percent") or 0), 1)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        progress = self._data.get("progress") or {}
        target = progress.get("target") or {}
        base = progress.get("base") or {}
        return {
            "target_peak": target.get("name"),
            "target_state": target.get("state"),
            "target_elevation": target.get("elevation"),
            "base_peak": base.get("name"),
            "base_elevation": base.get("elevation"),
            "remaining_m": progress.get("remaining_m"),
            "peaks_reached": progress.get("peaks_reached"),
        }
