"""Diagnostics support for Sisyphus Lifts.

This file is picked up by Home Assistant automatically when present.
"""

from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import DOMAIN
from .version import BACKEND_VERSION


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant,
    entry: ConfigEntry,
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator = hass.data.get(DOMAIN, {}).get(entry.entry_id)

    payload: dict[str, Any] = {
        "version": BACKEND_VERSION,
        "entry": {
            "entry_id": entry.entry_id,
            "title": entry.title,
            "version": entry.version,
            "data": dict(entry.data),
            "options": dict(entry.options),
        },
    }

    if coordinator is not None:
        history = await coordinator.store.async_load()
        payload["coordinator"] = {
            "last_update_success": bool(getattr(coordinator, "last_update_success", False)),
            "last_exception": repr(getattr(coordinator, "last_exception", None)),
            "selected_date": coordinator.selected_date,
            "data": getattr(coordinator, "data", None),
        }
        payload["history"] = {
            "days": len(history),
            "first_day": min(history, default=None),
            "last_day": max(history, default=None),
            "exercise_count": sum(len(day) for day in history.values()),
        }

    return payload
