"""Tests for settings storage."""

from pathlib import Path

from pulseboard.config import Settings, get_config_dir, get_settings, save_settings
from pulseboard.domain.project import SortKey


def test_config_dir_follows_env(isolated_home):
    assert get_config_dir() == isolated_home / "home"
    assert get_config_dir().is_dir()


def test_defaults_when_no_file():
    settings = get_settings()
    assert settings.data_dir is None
    assert settings.default_sort is None


def test_save_and_load(isolated_home, monkeypatch):
    save_settings(Settings(data_dir="/srv/pulse", default_sort=SortKey.PROGRESS))
    loaded = get_settings()
    assert loaded.default_sort is SortKey.PROGRESS

    monkeypatch.delenv("PULSEBOARD_DATA_DIR")
    assert loaded.resolved_data_dir() == Path("/srv/pulse")


def test_data_dir_env_wins(isolated_home):
    settings = Settings(data_dir="/srv/pulse")
    assert settings.resolved_data_dir() == isolated_home / "data"


def test_default_data_dir(isolated_home, monkeypatch):
    monkeypatch.delenv("PULSEBOARD_DATA_DIR")
    assert Settings().resolved_data_dir() == isolated_home / "home" / "data"


def test_invalid_file_falls_back_to_defaults(caplog):
    (get_config_dir() / "config.json").write_text('{"default_sort": "priority"}')
    assert get_settings() == Settings()
    assert "Ignoring invalid config file" in caplog.text
