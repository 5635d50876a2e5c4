from __future__ import annotations

from typing import Any

import pytest

from custom_components.sisyphus_lifts import storage
from custom_components.sisyphus_lifts.coordinator import SisyphusLiftsCoordinator


class MemoryStore:
    """In-memory stand-in for homeassistant.helpers.storage.Store."""

    def __init__(self, _hass, version: int, key: str) -> None:
        self.version = version
        self.key = key
        self.blob: Any = None
        self.saves: list[Any] = []

    async def async_load(self) -> Any:
        return self.blob

    async def async_save(self, data: Any) -> None:
        self.saves.append(data)


@pytest.fixture
def coordinator(monkeypatch: pytest.MonkeyPatch) -> SisyphusLiftsCoordinator:
    """Coordinator on 2026-10-19 backed by a MemoryStore, without a running hass."""
    monkeypatch.setattr(storage, "Store", MemoryStore)
    coordinator = SisyphusLiftsCoordinator.__new__(SisyphusLiftsCoordinator)
    coordinator.default_unit = "kg"
    coordinator.store = storage.SisyphusLiftsStore(None, "entry1", default_unit="kg")
    coordinator.selected_date = "2026-10-19"
    coordinator.data = None
    coordinator.refreshes = 0

    async def _refresh() -> None:
        coordinator.refreshes += 1
        coordinator.data = await coordinator._async_update_data()  # noqa: SLF001

    coordinator.async_request_refresh = _refresh
    coordinator.async_refresh = _refresh
    return coordinator
