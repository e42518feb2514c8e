# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Pytest fixtures for Dreamlog tests.
"""

from pathlib import Path

import pytest

from dreamlog.core.config import DreamlogConfig, reload_config
from dreamlog.logging import reset_logging


SAMPLE_JOURNAL = """Notes I jotted before starting the journal
2024-01-01
I felt happy and safe
2024-01-02
I was falling and scared
2024-01-03
I knew I was dreaming and it was peaceful
2024-01-04
Went to the office. Nothing happened.
"""


@pytest.fixture(autouse=True)
def reset_config(monkeypatch, tmp_path: Path):
    """Reset config and logging to defaults before each test.

    This prevents config changes from one test affecting others.
    """
    # Point config to a non-existent file so defaults are used
    config_path = tmp_path / "nonexistent_config.json"
    monkeypatch.setattr(DreamlogConfig, "get_config_path", lambda: config_path)
    reload_config()
    reset_logging()
    yield
    # Drop the cache without loading; a test may have left a broken config path
    monkeypatch.setattr("dreamlog.core.config._config", None)
    reset_logging()


@pytest.fixture
def sample_journal_text() -> str:
    """A small journal with ordinary, lucid, bad and neutral dreams."""
    return SAMPLE_JOURNAL


@pytest.fixture
def sample_journal(tmp_path: Path) -> Path:
    """Write the sample journal to a temporary file."""
    journal_path = tmp_path / "dreams.txt"
    journal_path.write_text(SAMPLE_JOURNAL, encoding="utf-8")
    return journal_path
