"""File I/O helpers for reading the registry snapshot."""

from __future__ import annotations

import json
from pathlib import Path

from .errors import RegistryLoadError


def load_json(path: Path) -> dict:
    """Load a JSON object from disk.

    Args:
        path: Path to the JSON file.

    Raises:
        RegistryLoadError: If the file is missing, unreadable or not a JSON object.
    """
    if not path.is_file():
        raise RegistryLoadError(f"Registry file not found: {path}")
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as e:
        raise RegistryLoadError(f"Error reading registry file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise RegistryLoadError(
            f"Registry file '{path}' is not valid JSON: {e}"
        ) from e
    if not isinstance(data, dict):
        raise RegistryLoadError(
            f"Registry file '{path}' must contain a JSON object, got {type(data).__name__}."
        )
    return data
