"""Shared test fixtures for startup_manager tests."""

import pytest

from startup_manager.core.manager import StartupManager
from startup_manager.platforms import StartupFolderAdapter, XdgAutostartAdapter


@pytest.fixture
def autostart_dir(tmp_path):
    path = tmp_path / "config" / "autostart"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def startup_dir(tmp_path):
    path = tmp_path / "Startup"
    path.mkdir()
    return path


@pytest.fixture
def xdg_adapter(autostart_dir):
    return XdgAutostartAdapter(autostart_dir)


@pytest.fixture
def folder_adapter(startup_dir):
    return StartupFolderAdapter(startup_dir)


@pytest.fixture
def xdg_manager(xdg_adapter):
    return StartupManager(adapter=xdg_adapter)


@pytest.fixture
def folder_manager(folder_adapter):
    return StartupManager(adapter=folder_adapter)


@pytest.fixture
def desktop_file(autostart_dir):
    path = autostart_dir / "editor.desktop"
    path.write_text(
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=Text Editor\n"
        "Exec=env GDK_BACKEND=x11 /usr/bin/editor --minimized\n"
        "X-Custom-Key=keep me\n"
        "Hidden=false\n"
        "X-GNOME-Autostart-enabled=true\n",
        encoding="utf-8",
    )
    return path
