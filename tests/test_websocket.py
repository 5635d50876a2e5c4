from __future__ import annotations

import asyncio
from types import SimpleNamespace
from typing import Any

import pytest
import voluptuous as vol

from custom_components.sisyphus_lifts import websocket_api as ws
from custom_components.sisyphus_lifts.const import DOMAIN


class _Connection:
    def __init__(self) -> None:
        self.errors: list[tuple[int, str]] = []
        self.results: list[tuple[int, Any]] = []

    def send_error(self, msg_id: int, code: str, message: str) -> None:
        self.errors.append((msg_id, code))

    def send_result(self, msg_id: int, result: Any) -> None:
        self.results.append((msg_id, result))


def _mutate(coordinator, msg: dict[str, Any], mutation, *, needs_exercise: bool = True) -> _Connection:
    hass = SimpleNamespace(data={DOMAIN: {"entry1": coordinator}})
    connection = _Connection()
    asyncio.run(ws._async_mutate(hass, connection, {"id": 1, **msg}, mutation, needs_exercise=needs_exercise))  # noqa: SLF001
    return connection


def _select(c, m):
    return c.async_select_date(m["date"])


def _add_set(c, m):
    return c.async_add_set(int(m["exercise_index"]), date_key=m["date"])


def test_unknown_entry(coordinator) -> None:
    connection = _mutate(coordinator, {"entry_id": "nope", "exercise_index": 0}, _add_set)
    assert connection.errors == [(1, "entry_not_found")]


@pytest.mark.parametrize("index", [-1, 3, 99])
def test_unknown_exercise(coordinator, index: int) -> None:
    connection = _mutate(coordinator, {"entry_id": "entry1", "exercise_index": index}, _add_set)
    assert connection.errors == [(1, "exercise_not_found")]
    assert connection.results == []


@pytest.mark.parametrize("date", ["tomorrow", "2026-13-01", "19/10/2026"])
def test_invalid_date(coordinator, date: str) -> None:
    connection = _mutate(coordinator, {"entry_id": "entry1", "date": date}, _select, needs_exercise=False)
    assert connection.errors == [(1, "invalid_date")]
    assert coordinator.selected_date == "2026-10-19"


def test_reply_uses_the_normalized_date(coordinator) -> None:
    connection = _mutate(
        coordinator, {"entry_id": "entry1", "date": "2026-10-18T06:30", "exercise_index": 0}, _add_set
    )
    state = connection.results[0][1]["state"]
    assert state["selected_date"] == "2026-10-18"
    assert len(state["exercises"][0]["sets"]) == 2


def test_shift_date_reply_follows_the_selection(coordinator) -> None:
    connection = _mutate(
        coordinator, {"entry_id": "entry1", "days": 1}, lambda c, m: c.async_shift_date(m["days"]), needs_exercise=False
    )
    assert connection.results[0][1]["state"]["selected_date"] == "2026-10-20"


def test_shift_past_the_calendar_is_an_invalid_date(coordinator) -> None:
    coordinator.selected_date = "9999-12-31"
    connection = _mutate(
        coordinator, {"entry_id": "entry1", "days": 1}, lambda c, m: c.async_shift_date(m["days"]), needs_exercise=False
    )
    assert connection.errors == [(1, "invalid_date")]
    assert coordinator.selected_date == "9999-12-31"


def test_reply_totals_do_not_wait_for_the_refresh(coordinator) -> None:
    async def _no_refresh() -> None:
        return None

    coordinator.async_request_refresh = _no_refresh
    connection = _mutate(
        coordinator,
        {"entry_id": "entry1", "name": "Sled", "custom_joules": 5000},
        lambda c, m: c.async_add_exercise(m["name"], custom_joules=m["custom_joules"], date_key=m["date"]),
        needs_exercise=False,
    )
    state = connection.results[0][1]["state"]
    assert coordinator.data is None
    assert state["total_altitude"] == state["daily_altitude"] > 0
    assert state["days_logged"] == 1
    assert state["progress"]["progress_percent"] > 0


@pytest.mark.parametrize(
    ("validator", "value"),
    [
        (ws._REPS, 10**9),  # noqa: SLF001
        (ws._WEIGHT, 1e308),  # noqa: SLF001
        (ws._WEIGHT, "-5"),  # noqa: SLF001
        (ws._CUSTOM_JOULES, 1e308),  # noqa: SLF001
        (ws._CUSTOM_JOULES, float("nan")),  # noqa: SLF001
    ],
)
def test_out_of_range_input_is_rejected(validator: Any, value: Any) -> None:
    with pytest.raises(vol.Invalid):
        vol.Schema(validator)(value)


@pytest.mark.parametrize(("validator", "value"), [(ws._REPS, ""), (ws._WEIGHT, None), (ws._WEIGHT, "42.5")])  # noqa: SLF001
def test_blank_and_numeric_input_is_accepted(validator: Any, value: Any) -> None:
    vol.Schema(validator)(value)


def test_shift_days_are_bounded() -> None:
    days = vol.Schema(ws._SHIFT_DAYS)  # noqa: SLF001
    assert days("7") == 7
    with pytest.raises(vol.Invalid):
        days(10**12)
