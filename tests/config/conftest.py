"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary home directory with no overrides in effect."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("RPATH_CONFIG", raising=False)
    monkeypatch.delenv("RPATH_LOG_DIR", raising=False)
    return home


@pytest.fixture
def write_config(isolated_config: Path):
    """Return a helper that writes TOML text to the active config file."""

    def _write(content: str) -> Path:
        _ = isolated_config.write_text(content, encoding="utf-8")
        return isolated_config

    return _write
