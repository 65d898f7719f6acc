"""Tests for StartupManager and backend selection."""

import sys
from pathlib import Path

import pytest

from startup_manager.core.errors import StartupError, UnsupportedPlatformError
from startup_manager.core.manager import StartupManager
from startup_manager.core.models import PlatformKind
from startup_manager.core.settings import Settings
from startup_manager.platforms import (
    StartupFolderAdapter,
    UnsupportedAdapter,
    XdgAutostartAdapter,
    get_adapter,
)

# --- get_adapter ---


def test_get_adapter_linux(tmp_path):
    adapter = get_adapter("Linux", Settings(autostart_dir=str(tmp_path)))
    assert isinstance(adapter, XdgAutostartAdapter)
    assert adapter.storage_dir == tmp_path


def test_get_adapter_windows(tmp_path):
    adapter = get_adapter("Windows", Settings(startup_dir=str(tmp_path)))
    assert isinstance(adapter, StartupFolderAdapter)
    assert adapter.kind == PlatformKind.WINDOWS
    assert adapter.storage_dir == tmp_path


@pytest.mark.parametrize("system", ["Darwin", "FreeBSD", ""])
def test_get_adapter_unsupported(system, monkeypatch):
    monkeypatch.setattr("startup_manager.platforms.current_platform", lambda: "Plan9")
    assert isinstance(get_adapter(system), UnsupportedAdapter)


@pytest.mark.skipif(sys.platform != "linux", reason="XDG paths only on Linux")
def test_default_linux_dir_is_under_config_root(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    adapter = get_adapter("Linux", Settings())
    assert adapter.storage_dir == tmp_path / "autostart"


# --- unsupported platform ---


def test_unsupported_discover_is_empty():
    manager = StartupManager(adapter=UnsupportedAdapter())
    assert manager.discover() == []
    assert manager.supported is False


def test_unsupported_toggle_and_create_fail(tmp_path):
    manager = StartupManager(adapter=UnsupportedAdapter())
    with pytest.raises(UnsupportedPlatformError):
        manager.toggle(tmp_path / "x", True)
    with pytest.raises(UnsupportedPlatformError):
        manager.create("A", "/bin/a")


def test_unsupported_error_is_startup_error():
    assert issubclass(UnsupportedPlatformError, StartupError)
    assert str(UnsupportedPlatformError()) == "Not supported on this OS"


def test_unsupported_delete_still_works(tmp_path):
    target = tmp_path / "leftover.desktop"
    target.write_text("", encoding="utf-8")
    StartupManager(adapter=UnsupportedAdapter()).delete(target)
    assert not target.exists()


# --- lookups by id ---


def test_get_entry(xdg_manager, desktop_file):
    assert xdg_manager.get_entry("editor.desktop").path == desktop_file


def test_get_entry_unknown(xdg_manager):
    with pytest.raises(StartupError, match="nope.desktop"):
        xdg_manager.get_entry("nope.desktop")


def test_toggle_by_id(xdg_manager, desktop_file):
    xdg_manager.toggle_by_id("editor.desktop", False)
    assert xdg_manager.get_entry("editor.desktop").enabled is False


def test_toggle_accepts_string_path(xdg_manager, desktop_file):
    xdg_manager.toggle(str(desktop_file), False)
    assert xdg_manager.discover()[0].enabled is False


def test_delete_by_id(folder_manager, startup_dir):
    (startup_dir / "a.cmd").write_text("", encoding="utf-8")
    folder_manager.delete_by_id("a.cmd")
    assert folder_manager.discover() == []


def test_create_returns_path(xdg_manager, autostart_dir):
    path = xdg_manager.create("Foo Bar", "/bin/foo", "d")
    assert path == autostart_dir / "foo-bar.desktop"
    assert isinstance(path, Path)


def test_discover_is_not_cached(xdg_manager, autostart_dir):
    assert xdg_manager.discover() == []
    (autostart_dir / "late.desktop").write_text("[Desktop Entry]\nName=Late\n", encoding="utf-8")
    assert [e.name for e in xdg_manager.discover()] == ["Late"]


def test_externally_removed_file_vanishes(xdg_manager, desktop_file):
    desktop_file.unlink()
    assert xdg_manager.discover() == []


def test_get_entry_prefers_exact_id(folder_manager, startup_dir):
    (startup_dir / "a.bat").write_bytes(b"")
    (startup_dir / "a.bat.disabled").write_bytes(b"")
    assert folder_manager.get_entry("a.bat.disabled").enabled is False
    assert folder_manager.get_entry("a.bat").enabled is True
