"""Shared fixtures for all tests."""

from pathlib import Path

import pytest
import yaml

from hearthmoor.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Keep tests away from any real content directory or .env file.

    Settings are cached, so the cache is cleared before and after each test.
    """
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_yaml():
    """Return a helper that dumps data as YAML to a path, creating parents."""

    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_root(tmp_path, write_yaml):
    """Create a content tree with a single 'village' area and two rooms."""
    root = tmp_path / "areas"
    village = root / "village"

    write_yaml(village / "manifest.yml", {"village": {"title": "Village", "level_range": [1, 5]}})
    write_yaml(
        village / "rooms.yml",
        {
            1: {
                "title": "Square",
                "description": "A stone square.",
                "location": 1001,
                "exits": [
                    {
                        "direction": "north",
                        "location": 1002,
                        "leave_message": {"en": " leaves north.", "es": " sale al norte."},
                    }
                ],
            },
            2: {
                "title": {"en": "Well", "es": "Pozo"},
                "description": {"en": "An old well.", "es": "Un pozo viejo."},
                "location": 1002,
                "exits": [{"direction": "south", "location": 1001}],
            },
        },
    )
    return root
