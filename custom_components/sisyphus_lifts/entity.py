"""Entity helpers for Sisyphus Lifts."""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo

from .const import CONF_NAME, DEFAULT_NAME, DOMAIN
from .version import BACKEND_VERSION


def entry_name(entry: ConfigEntry) -> str:
    """Display name; options win over the data captured at setup."""
    name = entry.options.get(CONF_NAME, entry.data.get(CONF_NAME, DEFAULT_NAME))
    return str(name or DEFAULT_NAME).strip() or DEFAULT_NAME


def entity_unique_id(entry: ConfigEntry, key: str) -> str:
    return f"{entry.entry_id}_{key}"


def device_info_from_entry(entry: ConfigEntry) -> DeviceInfo:
    # One logical tracker per entry; there is no physical device behind it.
    return DeviceInfo(
        identifiers={(DOMAIN, entry.entry_id)},
        name=entry_name(entry),
        entry_type=DeviceEntryType.SERVICE,
        model="Altitude tracker",
        sw_version=BACKEND_VERSION,
    )
