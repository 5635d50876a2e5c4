"""Websocket API for Sisyphus Lifts."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import voluptuous as vol

from homeassistant.components import websocket_api
from homeassistant.core import HomeAssistant

from .const import DOMAIN, MAX_CUSTOM_JOULES, MAX_REPS, MAX_SHIFT_DAYS, MAX_WEIGHT, UNIT_CHOICES
from .coordinator import SisyphusLiftsCoordinator
from .models import ExerciseEntry
from .tracker import parse_date_key
from .ws_state import public_state

_Mutation = Callable[[SisyphusLiftsCoordinator, dict[str, Any]], Awaitable[list[ExerciseEntry]]]

_REPS = vol.Any(None, "", vol.All(vol.Coerce(float), vol.Range(min=0, max=MAX_REPS)))
_WEIGHT = vol.Any(None, "", vol.All(vol.Coerce(float), vol.Range(min=0, max=MAX_WEIGHT)))
_CUSTOM_JOULES = vol.Any(None, vol.All(vol.Coerce(float), vol.Range(min=0, max=MAX_CUSTOM_JOULES)))
_SHIFT_DAYS = vol.All(vol.Coerce(int), vol.Range(min=-MAX_SHIFT_DAYS, max=MAX_SHIFT_DAYS))


def _coordinator(
    hass: HomeAssistant, connection: websocket_api.ActiveConnection, msg: dict[str, Any]
) -> SisyphusLiftsCoordinator | None:
    entry_id = msg["entry_id"]
    coordinator = hass.data.get(DOMAIN, {}).get(entry_id)
    if coordinator is None:
        connection.send_error(msg["id"], "entry_not_found", f"No entry found for entry_id={entry_id}")
    return coordinator


async def _async_mutate(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
    mutation: _Mutation,
    *,
    needs_exercise: bool = True,
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        date_key = parse_date_key(str(msg.get("date") or coordinator.selected_date)).isoformat()
        if needs_exercise:
            current = await coordinator.store.async_get_day(date_key)
            if not 0 <= int(msg["exercise_index"]) < len(current):
                connection.send_error(msg["id"], "exercise_not_found", f"No exercise at index {msg['exercise_index']}")
                return
        await mutation(coordinator, {**msg, "date": date_key})
    except (ValueError, OverflowError) as err:
        connection.send_error(msg["id"], "invalid_date", str(err))
        return
    # Navigation without an explicit date moves the selected date.
    if "date" not in msg:
        date_key = coordinator.selected_date
    state = public_state(await coordinator.async_snapshot(date_key))
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "state": state})


@websocket_api.websocket_command({vol.Required("type"): "sisyphus_lifts/list_entries"})
@websocket_api.async_response
async def ws_list_entries(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    entries = hass.config_entries.async_entries(DOMAIN)
    payload = [{"entry_id": entry.entry_id, "title": entry.title} for entry in entries]
    connection.send_result(msg["id"], {"entries": payload})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/get_state",
        vol.Required("entry_id"): str,
    }
)
@websocket_api.async_response
async def ws_get_state(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _coordinator(hass, connection, msg)
    if coordinator is None:
        return
    await coordinator.async_refresh()
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "state": public_state(coordinator.data)})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/select_date",
        vol.Required("entry_id"): str,
        vol.Required("date"): str,
    }
)
@websocket_api.async_response
async def ws_select_date(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    await _async_mutate(
        hass, connection, msg, lambda c, m: c.async_select_date(m["date"]), needs_exercise=False
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/shift_date",
        vol.Required("entry_id"): str,
        vol.Required("days"): _SHIFT_DAYS,
    }
)
@websocket_api.async_response
async def ws_shift_date(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    await _async_mutate(
        hass, connection, msg, lambda c, m: c.async_shift_date(int(m["days"])), needs_exercise=False
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/add_set",
        vol.Required("entry_id"): str,
        vol.Optional("date"): str,
        vol.Required("exercise_index"): vol.Coerce(int),
    }
)
@websocket_api.async_response
async def ws_add_set(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    await _async_mutate(
        hass, connection, msg, lambda c, m: c.async_add_set(int(m["exercise_index"]), date_key=m["date"])
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/update_set",
        vol.Required("entry_id"): str,
        vol.Optional("date"): str,
        vol.Required("exercise_index"): vol.Coerce(int),
        vol.Required("set_id"): str,
        vol.Optional("reps"): _REPS,
        vol.Optional("weight"): _WEIGHT,
        vol.Optional("unit"): vol.In(UNIT_CHOICES),
    }
)
@websocket_api.async_response
async def ws_update_set(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    # The card sends raw input values; empty strings clear the field.
    changes = {key: msg[key] for key in ("reps", "weight", "unit") if key in msg}
    await _async_mutate(
        hass,
        connection,
        msg,
        lambda c, m: c.async_update_set(int(m["exercise_index"]), str(m["set_id"]), date_key=m["date"], **changes),
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/toggle_unit",
        vol.Required("entry_id"): str,
        vol.Optional("date"): str,
        vol.Required("exercise_index"): vol.Coerce(int),
        vol.Required("set_id"): str,
    }
)
@websocket_api.async_response
async def ws_toggle_unit(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    await _async_mutate(
        hass,
        connection,
        msg,
        lambda c, m: c.async_toggle_unit(int(m["exercise_index"]), str(m["set_id"]), date_key=m["date"]),
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/toggle_exercise",
        vol.Required("entry_id"): str,
        vol.Optional("date"): str,
        vol.Required("exercise_index"): vol.Coerce(int),
    }
)
@websocket_api.async_response
async def ws_toggle_exercise(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    await _async_mutate(
        hass, connection, msg, lambda c, m: c.async_toggle_expanded(int(m["exercise_index"]), date_key=m["date"])
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/add_exercise",
        vol.Required("entry_id"): str,
        vol.Optional("date"): str,
        vol.Required("name"): str,
        vol.Optional("custom_joules"): _CUSTOM_JOULES,
    }
)
@websocket_api.async_response
async def ws_add_exercise(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    await _async_mutate(
        hass,
        connection,
        msg,
        lambda c, m: c.async_add_exercise(str(m["name"]), custom_joules=m.get("custom_joules"), date_key=m["date"]),
        needs_exercise=False,
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "sisyphus_lifts/set_custom_joules",
        vol.Required("entry_id"): str,
        vol.Optional("date"): str,
        vol.Required("exercise_index"): vol.Coerce(int),
        vol.Optional("custom_joules"): _CUSTOM_JOULES,
    }
)
@websocket_api.async_response
async def ws_set_custom_joules(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    await _async_mutate(
        hass,
        connection,
        msg,
        lambda c, m: c.async_set_custom_joules(int(m["exercise_index"]), m.get("custom_joules"), date_key=m["date"]),
    )


def async_register(hass: HomeAssistant) -> None:
    websocket_api.async_register_command(hass, ws_list_entries)
    websocket_api.async_register_command(hass, ws_get_state)
    websocket_api.async_register_command(hass, ws_select_date)
    websocket_api.async_register_command(hass, ws_shift_date)
    websocket_api.async_register_command(hass, ws_add_set)
    websocket_api.async_register_command(hass, ws_update_set)
    websocket_api.async_register_command(hass, ws_toggle_unit)
    websocket_api.async_register_command(hass, ws_toggle_exercise)
    websocket_api.async_register_command(hass, ws_add_exercise)
    websocket_api.async_register_command(hass, ws_set_custom_joules)
