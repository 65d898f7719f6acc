"""Tests for settings persistence."""

import json
from pathlib import Path

from startup_manager.core.settings import WINDOWS_STARTUP_SUBDIR, Settings


def test_load_missing_file_gives_defaults(tmp_path):
    settings = Settings.load(tmp_path / "settings.json")
    assert settings == Settings()


def test_save_and_load(tmp_path):
    path = tmp_path / "conf" / "settings.json"
    Settings(log_level="DEBUG", autostart_dir="/tmp/auto", default_output="json").save(path)
    loaded = Settings.load(path)
    assert loaded.log_level == "DEBUG"
    assert loaded.autostart_dir == "/tmp/auto"
    assert loaded.default_output == "json"
    assert not list(path.parent.glob("*.tmp"))


def test_load_invalid_json_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert Settings.load(path) == Settings()


def test_load_non_object_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert Settings.load(path) == Settings()


def test_load_ignores_unknown_and_invalid_values(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"log_level": "chatty", "default_output": "xml", "startup_dir": 5, "extra": 1}),
        encoding="utf-8",
    )
    assert Settings.load(path) == Settings()


def test_log_level_is_case_insensitive(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": "warning"}), encoding="utf-8")
    assert Settings.load(path).log_level == "WARNING"


def test_directory_overrides(tmp_path):
    settings = Settings(autostart_dir=str(tmp_path / "a"), startup_dir=str(tmp_path / "b"))
    assert settings.autostart_path == tmp_path / "a"
    assert settings.startup_path == tmp_path / "b"


def test_default_startup_path_ends_with_startup_folder():
    path = Settings().startup_path
    assert path.parts[-len(WINDOWS_STARTUP_SUBDIR.parts) :] == WINDOWS_STARTUP_SUBDIR.parts
    assert isinstance(path, Path)


def test_load_directory_in_place_of_file_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.mkdir()
    assert Settings.load(path) == Settings()
