"""Tests for the JSON settings layer."""

import json

import pytest

from arithmetic_engine import config_manager


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("ARITHMETIC_ENGINE_CONFIG", str(path))
    return path


def test_missing_file_gives_defaults(settings_file):
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("decimal_places") == 10


def test_corrupt_file_gives_defaults(settings_file):
    settings_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_file_values_override_defaults(settings_file):
    settings_file.write_text(json.dumps({"decimal_places": 3}), encoding="utf-8")
    assert config_manager.load_setting_value("decimal_places") == 3
    assert config_manager.load_setting_value("debug") is False


def test_unknown_key_returns_zero(settings_file):
    assert config_manager.load_setting_value("no_such_setting") == 0


def test_save_and_reload(settings_file):
    all_settings = config_manager.load_setting_value("all")
    all_settings["show_error_details"] = True
    assert config_manager.save_setting(all_settings) == all_settings
    assert config_manager.load_setting_value("show_error_details") is True


def test_save_into_missing_directory_returns_empty(tmp_path, monkeypatch):
    monkeypatch.setenv("ARITHMETIC_ENGINE_CONFIG", str(tmp_path / "missing" / "config.json"))
    assert config_manager.save_setting({"debug": True}) == {}


@pytest.mark.parametrize("content", [b"[1]", b"null", b'"abc"', b"42", b"\xff\xfe{"])
def test_unusable_file_contents_give_defaults(settings_file, content):
    settings_file.write_bytes(content)
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_unreadable_path_gives_defaults(tmp_path, monkeypatch):
    # a directory where the file should be
    monkeypatch.setenv("ARITHMETIC_ENGINE_CONFIG", str(tmp_path))
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


@pytest.mark.parametrize("stored, expected", [
    ("4", 4),
    (3.0, 3),
    (-2, 0),
    ("many", 10),
    (None, 10),
    ([2], 10),
])
def test_decimal_places_is_coerced(settings_file, stored, expected):
    settings_file.write_text(json.dumps({"decimal_places": stored}), encoding="utf-8")
    assert config_manager.load_setting_value("decimal_places") == expected
