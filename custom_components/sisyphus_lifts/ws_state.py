"""Websocket state helpers."""

from __future__ import annotations

from typing import Any


def public_state(data: dict[str, Any] | None) -> dict[str, Any]:
    """Return a stable public payload for the card."""
    data = data if isinstance(data, dict) else {}
    return {
        "selected_date": str(data.get("selected_date") or ""),
        "exercises": data.get("exercises", []),
        "daily_altitude": float(data.get("daily_altitude") or 0),
        "total_altitude": float(data.get("total_altitude") or 0),
        "days_logged": int(data.get("days_logged") or 0),
        "progress": data.get("progress", {}),
    }
