"""Constants for Sisyphus Lifts integration."""

from __future__ import annotations

from homeassistant.const import Platform

DOMAIN = "sisyphus_lifts"

PLATFORMS: list[Platform] = [
    Platform.BUTTON,
    Platform.SENSOR,
]

CONF_NAME = "name"
CONF_DEFAULT_UNIT = "default_unit"

DEFAULT_NAME = "Sisyphus Lifts"
DEFAULT_UNIT = "lbs"

UNIT_CHOICES = ["lbs", "kg"]

# Input bounds for services and websocket commands.
MAX_REPS = 10_000
MAX_WEIGHT = 10_000
MAX_CUSTOM_JOULES = 100_000_000
MAX_SHIFT_DAYS = 3650

# Seeded for every day that has not been logged yet.
DEFAULT_EXERCISES = ["Squat", "Bench", "Deadlift"]
