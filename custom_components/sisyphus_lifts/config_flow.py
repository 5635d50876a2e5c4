"""Config flow for Sisyphus Lifts."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import callback

from .const import (
    CONF_DEFAULT_UNIT,
    CONF_NAME,
    DEFAULT_NAME,
    DEFAULT_UNIT,
    DOMAIN,
    UNIT_CHOICES,
)
from .entity import entry_name


def _clean(user_input: dict[str, Any]) -> dict[str, Any]:
    name = str(user_input.get(CONF_NAME, DEFAULT_NAME)).strip() or DEFAULT_NAME
    unit = str(user_input.get(CONF_DEFAULT_UNIT, DEFAULT_UNIT) or DEFAULT_UNIT).lower()
    if unit not in UNIT_CHOICES:
        unit = DEFAULT_UNIT
    return {CONF_NAME: name, CONF_DEFAULT_UNIT: unit}


def _schema(*, name: str, unit: str) -> vol.Schema:
    return vol.Schema(
        {
            vol.Required(CONF_NAME, default=name): str,
            vol.Required(CONF_DEFAULT_UNIT, default=unit): vol.In(UNIT_CHOICES),
        }
    )


class SisyphusLiftsConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Sisyphus Lifts."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        if user_input is not None:
            data = _clean(user_input)
            await self.async_set_unique_id(data[CONF_NAME].lower())
            self._abort_if_unique_id_configured()

            return self.async_create_entry(title=data[CONF_NAME], data=data)

        return self.async_show_form(step_id="user", data_schema=_schema(name=DEFAULT_NAME, unit=DEFAULT_UNIT))

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        return SisyphusLiftsOptionsFlow(config_entry)


class SisyphusLiftsOptionsFlow(config_entries.OptionsFlow):
    """Handle options for Sisyphus Lifts."""

    def __init__(self, config_entry) -> None:
        self._entry = config_entry

    async def async_step_init(self, user_input: dict[str, Any] | None = None):
        if user_input is not None:
            return self.async_create_entry(title="", data=_clean(user_input))

        current_name = entry_name(self._entry)
        current_unit = self._entry.options.get(CONF_DEFAULT_UNIT, self._entry.data.get(CONF_DEFAULT_UNIT, DEFAULT_UNIT))
        return self.async_show_form(
            step_id="init",
            data_schema=_schema(name=str(current_name), unit=str(current_unit)),
        )
