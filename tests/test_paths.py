"""
Unit tests for data directory resolution.
"""
import sys
from pathlib import Path

import pytest

from clistudy.data import StorageUnavailable
from clistudy.utils import paths
from clistudy.utils.paths import get_platform_data_dir


def test_sessions_path_creates_directory(data_dir):
    assert not data_dir.exists()

    path = paths.get_sessions_path()

    assert data_dir.is_dir()
    assert path == data_dir / "sessions.json"
    assert not path.exists()


def test_sessions_path_is_idempotent(data_dir):
    first = paths.get_sessions_path()
    second = paths.get_sessions_path()

    assert first == second
    assert data_dir.is_dir()


def test_sessions_path_explicit_dir(tmp_path):
    target = tmp_path / "nested" / "dir"

    path = paths.get_sessions_path(target)

    assert path == target / "sessions.json"
    assert target.is_dir()


def test_sessions_path_blocked_by_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(StorageUnavailable):
        paths.get_sessions_path(blocker / "clistudy")


def test_data_dir_is_namespaced_under_platform_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(paths, "get_platform_data_dir", lambda: tmp_path)

    assert paths.get_data_dir() == tmp_path / "clistudy"


def test_platform_dir_linux_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert get_platform_data_dir() == tmp_path


def test_platform_dir_linux_ignores_relative_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", "relative/dir")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert get_platform_data_dir() == tmp_path / ".local" / "share"


def test_platform_dir_macos(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert get_platform_data_dir() == tmp_path / "Library" / "Application Support"


def test_platform_dir_windows_appdata(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))

    assert get_platform_data_dir() == tmp_path


def test_platform_dir_without_home(monkeypatch):
    def no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(no_home))

    with pytest.raises(StorageUnavailable):
        get_platform_data_dir()


def test_data_dir_ignores_environment(monkeypatch, tmp_path):
    monkeypatch.setattr(paths, "get_platform_data_dir", lambda: tmp_path)
    monkeypatch.setenv("CLISTUDY_DATA_DIR", str(tmp_path / "elsewhere"))

    assert paths.get_data_dir() == tmp_path / "clistudy"
