"""Services for Sisyphus Lifts."""

from __future__ import annotations

import voluptuous as vol

from homeassistant.core import HomeAssistant, ServiceCall, ServiceResponse, SupportsResponse

from .const import DOMAIN, MAX_CUSTOM_JOULES, MAX_REPS, MAX_WEIGHT, UNIT_CHOICES
from .models import dump_day
from .tracker import parse_date_key

SERVICE_GET_DAY = "get_day"
SERVICE_GET_PROGRESS = "get_progress"
SERVICE_ADD_SET = "add_set"
SERVICE_UPDATE_SET = "update_set"
SERVICE_TOGGLE_UNIT = "toggle_unit"
SERVICE_ADD_EXERCISE = "add_exercise"
SERVICE_SET_CUSTOM_JOULES = "set_custom_joules"


def _date_key(value: str) -> str:
    try:
        return parse_date_key(value).isoformat()
    except ValueError as err:
        raise vol.Invalid(f"Invalid date (expected YYYY-MM-DD): {value}") from err


_ENTRY_SCHEMA = vol.Schema({vol.Required("entry_id"): str})
_DAY_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Optional("date"): _date_key})
_EXERCISE_SCHEMA = _DAY_SCHEMA.extend({vol.Required("exercise_index"): vol.All(vol.Coerce(int), vol.Range(min=0))})
_SET_SCHEMA = _EXERCISE_SCHEMA.extend({vol.Required("set_id"): str})
_UPDATE_SET_SCHEMA = _SET_SCHEMA.extend(
    {
        vol.Optional("reps"): vol.Any(None, vol.All(vol.Coerce(int), vol.Range(min=0, max=MAX_REPS))),
        vol.Optional("weight"): vol.Any(None, vol.All(vol.Coerce(float), vol.Range(min=0, max=MAX_WEIGHT))),
        vol.Optional("unit"): vol.In(UNIT_CHOICES),
    }
)
_ADD_EXERCISE_SCHEMA = _DAY_SCHEMA.extend(
    {
        vol.Required("name"): vol.All(str, vol.Length(min=1)),
        vol.Optional("custom_joules"): vol.All(vol.Coerce(float), vol.Range(min=0, max=MAX_CUSTOM_JOULES)),
    }
)
_CUSTOM_JOULES_SCHEMA = _EXERCISE_SCHEMA.extend(
    {vol.Required("custom_joules"): vol.Any(None, vol.All(vol.Coerce(float), vol.Range(min=0, max=MAX_CUSTOM_JOULES)))}
)


async def async_register(hass: HomeAssistant) -> None:
    async def _coordinator_for_entry(entry_id: str):
        return hass.data.get(DOMAIN, {}).get(entry_id)

    async def _exercise_exists(coordinator, call: ServiceCall) -> bool:
        exercises = await coordinator.store.async_get_day(call.data.get("date") or coordinator.selected_date)
        return int(call.data["exercise_index"]) < len(exercises)

    def _day_response(entry_id: str, date_key: str, exercises) -> ServiceResponse:
        return {"ok": True, "entry_id": entry_id, "date": date_key, "exercises": dump_day(exercises)}

    async def _async_get_day(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        date_key = call.data.get("date") or coordinator.selected_date
        exercises = await coordinator.store.async_get_day(date_key)
        return _day_response(entry_id, date_key, exercises)

    async def _async_get_progress(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        await coordinator.async_refresh()
        data = coordinator.data or {}
        return {
            "ok": True,
            "entry_id": entry_id,
            "total_altitude": data.get("total_altitude", 0),
            "progress": data.get("progress", {}),
        }

    async def _async_add_set(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        if not await _exercise_exists(coordinator, call):
            return {"ok": False, "error": "exercise_not_found"}
        date_key = call.data.get("date") or coordinator.selected_date
        exercises = await coordinator.async_add_set(int(call.data["exercise_index"]), date_key=date_key)
        return _day_response(entry_id, date_key, exercises)

    async def _async_update_set(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        if not await _exercise_exists(coordinator, call):
            return {"ok": False, "error": "exercise_not_found"}
        date_key = call.data.get("date") or coordinator.selected_date
        changes = {key: call.data[key] for key in ("reps", "weight", "unit") if key in call.data}
        exercises = await coordinator.async_update_set(
            int(call.data["exercise_index"]), str(call.data["set_id"]), date_key=date_key, **changes
        )
        return _day_response(entry_id, date_key, exercises)

    async def _async_toggle_unit(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        if not await _exercise_exists(coordinator, call):
            return {"ok": False, "error": "exercise_not_found"}
        date_key = call.data.get("date") or coordinator.selected_date
        exercises = await coordinator.async_toggle_unit(
            int(call.data["exercise_index"]), str(call.data["set_id"]), date_key=date_key
        )
        return _day_response(entry_id, date_key, exercises)

    async def _async_add_exercise(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        date_key = call.data.get("date") or coordinator.selected_date
        exercises = await coordinator.async_add_exercise(
            str(call.data["name"]), custom_joules=call.data.get("custom_joules"), date_key=date_key
        )
        return _day_response(entry_id, date_key, exercises)

    async def _async_set_custom_joules(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        if not await _exercise_exists(coordinator, call):
            return {"ok": False, "error": "exercise_not_found"}
        date_key = call.data.get("date") or coordinator.selected_date
        exercises = await coordinator.async_set_custom_joules(
            int(call.data["exercise_index"]), call.data.get("custom_joules"), date_key=date_key
        )
        return _day_response(entry_id, date_key, exercises)

    services = (
        (SERVICE_GET_DAY, _async_get_day, _DAY_SCHEMA),
        (SERVICE_GET_PROGRESS, _async_get_progress, _ENTRY_SCHEMA),
        (SERVICE_ADD_SET, _async_add_set, _EXERCISE_SCHEMA),
        (SERVICE_UPDATE_SET, _async_update_set, _UPDATE_SET_SCHEMA),
        (SERVICE_TOGGLE_UNIT, _async_toggle_unit, _SET_SCHEMA),
        (SERVICE_ADD_EXERCISE, _async_add_exercise, _ADD_EXERCISE_SCHEMA),
        (SERVICE_SET_CUSTOM_JOULES, _async_set_custom_joules, _CUSTOM_JOULES_SCHEMA),
    )
    for name, handler, schema in services:
        if not hass.services.has_service(DOMAIN, name):
            hass.services.async_register(
                DOMAIN,
                name,
                handler,
                schema=schema,
                supports_response=SupportsResponse.ONLY,
            )
