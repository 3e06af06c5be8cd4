"""
Shared pytest fixtures for err-or tests.

- Settings cache and ERR_OR_* environment isolation
- structlog configuration reset between tests
- A call-counting thunk for laziness checks
"""

import logging
import sys
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure err_or package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from err_or.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Run each test without ERR_OR_* variables or a stray .env file."""
    for key in ("ERR_OR_LOG_LEVEL", "ERR_OR_LOG_JSON", "ERR_OR_SERVICE_NAME"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo configure_logging: structlog defaults, package logger unleveled."""
    package_logger = logging.getLogger("err_or")
    structlog.reset_defaults()
    package_logger.setLevel(logging.NOTSET)
    yield
    structlog.reset_defaults()
    package_logger.setLevel(logging.NOTSET)


class CountingThunk:
    """Zero-argument callable that records how often it was called."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


@pytest.fixture
def counting_thunk() -> CountingThunk:
    return CountingThunk(42)
