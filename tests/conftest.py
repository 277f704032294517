"""
Pytest configuration and fixtures for clistudy tests.
"""
from datetime import date

import pytest

from clistudy.data import Session
from clistudy.utils import paths


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Redirect the platform data dir to a temp dir so real user data is never touched."""
    platform_dir = tmp_path / "platform"
    monkeypatch.setattr(paths, "get_platform_data_dir", lambda: platform_dir)
    return platform_dir / paths.APP_NAME


@pytest.fixture
def sessions_path(tmp_path):
    """A sessions file path whose directory exists but whose file does not."""
    return tmp_path / "sessions.json"


@pytest.fixture
def sample_sessions():
    d1 = date(2024, 3, 10)
    d2 = date(2024, 3, 11)
    return [
        Session(d1, 30, "math"),
        Session(d1, 15, "math"),
        Session(d1, 20, "cs"),
        Session(d2, 10, "math"),
    ]
