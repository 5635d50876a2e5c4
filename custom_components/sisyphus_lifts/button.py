"""Button platform for Sisyphus Lifts."""

from __future__ import annotations

from homeassistant.components.button import ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

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
            ShiftDateButton(entry, coordinator, days=-1, key="previous_day", name="Previous day", icon="mdi:chevron-left"),
            ShiftDateButton(entry, coordinator, days=1, key="next_day", name="Next day", icon="mdi:chevron-right"),
            TodayButton(entry, coordinator),
        ]
    )


class ShiftDateButton(ButtonEntity):
    """Move the selected date by a fixed number of days."""

    _attr_has_entity_name = True

    def __init__(
        self,
        entry: ConfigEntry,
        coordinator: SisyphusLiftsCoordinator,
        *,
        days: int,
        key: str,
        name: str,
        icon: str,
    ) -> None:
        self._entry = entry
        self._coordinator = coordinator
        self._days = days
        self._attr_name = name
        self._attr_icon = icon
        self._attr_translation_key = key
        self._attr_unique_id = entity_unique_id(entry, key)
        self._attr_device_info = device_info_from_entry(entry)

    async def async_press(self) -> None:
        await self._coordinator.async_shift_date(self._days)


class TodayButton(ButtonEntity):
    """Jump back to today."""

    _attr_has_entity_name = True
    _attr_name = "Today"
    _attr_icon = "mdi:calendar-today"
    _attr_translation_key = "today"

    def __init__(self, entry: ConfigEntry, coordinator: SisyphusLiftsCoordinator) -> None:
        self._entry = entry
        self._coordinator = coordinator
        self._attr_unique_id = entity_unique_id(entry, "today")
        self._attr_device_info = device_info_from_entry(entry)

    async def async_press(self) -> None:
        await self._coordinator.async_select_today()
