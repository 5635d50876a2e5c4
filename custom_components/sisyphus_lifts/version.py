"""Integration version, as declared in manifest.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path

_LOGGER = logging.getLogger(__name__)

MANIFEST_PATH = Path(__file__).with_name("manifest.json")


def read_manifest_version(path: Path = MANIFEST_PATH) -> str:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        _LOGGER.debug("Could not read %s", path, exc_info=True)
        return "0.0.0"
    version = str(data.get("version") or "").strip() if isinstance(data, dict) else ""
    return version or "0.0.0"


BACKEND_VERSION = read_manifest_version()
