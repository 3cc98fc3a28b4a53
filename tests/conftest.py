from __future__ import annotations

import json
from pathlib import Path

import pytest

from bcp47tag.models import RegistrySnapshot
from bcp47tag.registry import SubtagRegistry, reset_registry

SMALL_SNAPSHOT = {
    "file_date": "2024-01-01",
    "languages": ["en", "DE", "zh", "qaa..qac"],
    "scripts": ["Latn", "hans", "Qaaa..Qaac"],
    "regions": ["us", "GB", "419", "QM..QO"],
    "variants": ["1901", "FONIPA"],
    "grandfathered": ["i-klingon", "EN-GB-OED"],
}


@pytest.fixture
def small_registry() -> SubtagRegistry:
    return SubtagRegistry.from_snapshot(RegistrySnapshot.model_validate(SMALL_SNAPSHOT))


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "registry.json"
    path.write_text(json.dumps(SMALL_SNAPSHOT), encoding="utf-8")
    return path


@pytest.fixture
def fresh_registry():
    """Drop the shared registry before and after the test."""
    reset_registry()
    yield
    reset_registry()
