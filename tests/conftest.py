"""Shared pytest fixtures for the rpath test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration lookups at an empty location for every test."""

    config_dir = tmp_path_factory.mktemp("config")
    config_file = config_dir / "config.toml"
    monkeypatch.setenv("RPATH_CONFIG", str(config_file))
    monkeypatch.setenv("RPATH_LOG_DIR", str(config_dir / "logs"))
    return config_file


@pytest.fixture(autouse=True)
def restore_rpath_logger() -> Iterator[None]:
    """Undo handler changes made by ``setup_logger`` during a test."""

    rpath_logger = logging.getLogger("rpath")
    original_handlers = list(rpath_logger.handlers)
    original_level = rpath_logger.level
    try:
        yield None
    finally:
        for handler in list(rpath_logger.handlers):
            if handler not in original_handlers:
                handler.close()
        rpath_logger.handlers[:] = original_handlers
        rpath_logger.setLevel(original_level)
