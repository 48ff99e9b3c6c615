"""Pytest configuration and shared fixtures."""

import pytest
import tempfile
from pathlib import Path


CONFIG_ENV_VARS = (
    "FILECONV_ENCODING",
    "FILECONV_VERBOSE",
    "FILECONV_CSV_HEADER",
    "FILECONV_CSV_QUOTING",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration env vars from leaking into tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_json():
    """Sample JSON data for testing."""
    return {
        "name": "test",
        "value": 42,
        "nested": {"key": "value"},
        "items": [1, 2, 3]
    }


@pytest.fixture
def sample_csv():
    """Small CSV table with a header row."""
    return "name,age\nAlice,30\nBob,25\n"
