"""Package-wide settings."""

from __future__ import annotations

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
RESOURCES_DIR = PACKAGE_DIR / "resources"
DEFAULT_REGISTRY_PATH = RESOURCES_DIR / "iana_subtag_registry.json"

REGISTRY_PATH_ENV = "BCP47TAG_REGISTRY_PATH"

TAG_SEPARATOR = "-"
ALT_SEPARATOR = "_"
RANGE_SEPARATOR = ".."


def registry_path() -> Path:
    """Return the snapshot path, honouring the environment override."""
    override = os.environ.get(REGISTRY_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_REGISTRY_PATH
