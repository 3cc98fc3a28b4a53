"""Registry snapshot loaders with Pydantic validation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import ValidationError

from .config import RANGE_SEPARATOR
from .errors import RegistryLoadError
from .io import load_json
from .models import RegistrySnapshot

logger = logging.getLogger(__name__)


def load_snapshot(path: Path) -> RegistrySnapshot:
    """Load and validate a registry snapshot file."""
    data = load_json(path)
    try:
        snapshot = RegistrySnapshot.model_validate(data)
    except ValidationError as e:
        raise RegistryLoadError(f"Malformed registry file '{path}': {e}") from e
    logger.debug("Read registry snapshot %s (file date %s)", path, snapshot.file_date)
    return snapshot


def expand_alpha_range(start: str, end: str) -> list[str]:
    """Expand an alphabetic range such as ``qaa..qtz`` or ``QM..QZ``, both ends included.

    Letters roll over like an odometer, so ``Qaaz`` is followed by ``Qaba``.
    Case is preserved per position.
    """
    if (
        len(start) != len(end)
        or not (start.isascii() and end.isascii())
        or not start.isalpha()
        or not end.isalpha()
    ):
        raise ValueError(f"Invalid subtag range '{start}{RANGE_SEPARATOR}{end}'.")
    if start.lower() > end.lower():
        raise ValueError(f"Subtag range '{start}{RANGE_SEPARATOR}{end}' is reversed.")

    expanded: list[str] = []
    current = list(start)
    while True:
        value = "".join(current)
        expanded.append(value)
        if value.lower() == end.lower():
            return expanded
        for index in range(len(current) - 1, -1, -1):
            char = current[index]
            if char == "z":
                current[index] = "a"
            elif char == "Z":
                current[index] = "A"
            else:
                current[index] = chr(ord(char) + 1)
                break


def expand_entries(entries: Iterable[str], modifier: Callable[[str], str]) -> frozenset[str]:
    """Expand ranges and apply ``modifier`` to every entry of a snapshot list."""
    expanded: set[str] = set()
    for entry in entries:
        entry = entry.strip()
        if not entry:
            continue
        if RANGE_SEPARATOR in entry:
            start, _, end = entry.partition(RANGE_SEPARATOR)
            try:
                values = expand_alpha_range(start, end)
            except ValueError as e:
                raise RegistryLoadError(str(e)) from e
            expanded.update(modifier(value) for value in values)
        else:
            expanded.add(modifier(entry))
    return frozenset(expanded)
