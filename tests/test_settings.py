"""提醒设置存储与钳制测试。"""
import json
import tempfile
from pathlib import Path

import pytest

from water_reminder.settings.models import ReminderSettings
from water_reminder.settings.store import SettingsStore


def test_defaults_when_file_missing() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        settings = SettingsStore(base_dir=Path(tmp)).load()
        assert settings.base_interval == 1800
        assert settings.first_snooze_interval == 600
        assert settings.min_interval == 15
        assert settings.sound_enabled is True
        assert settings.launch_at_login is False


def test_values_clamped_to_floors_on_read() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = SettingsStore(base_dir=Path(tmp))
        store.set("base_interval", 0)
        store.set("first_snooze_interval", -30)
        store.set("min_interval", 1)
        assert store.get("base_interval") == 60
        assert store.get("first_snooze_interval") == 10
        assert store.get("min_interval") == 5
        # 原值照写，只在读取时钳制
        with open(Path(tmp) / "settings.json", "r", encoding="utf-8") as f:
            raw = json.load(f)
        assert raw["base_interval"] == 0


def test_garbage_numbers_read_as_floor() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = SettingsStore(base_dir=Path(tmp))
        store.set("base_interval", "abc")
        store.set("min_interval", None)
        settings = store.load()
        assert settings.base_interval == 60
        assert settings.min_interval == 5
        assert ReminderSettings(first_snooze_interval=float("nan")).first_snooze_interval == 10


def test_invalid_flag_falls_back_to_default() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = SettingsStore(base_dir=Path(tmp))
        store.set("sound_enabled", "loud")
        store.set("base_interval", 900)
        settings = store.load()
        assert settings.sound_enabled is True
        assert settings.base_interval == 900


def test_corrupted_file_reads_defaults() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        (Path(tmp) / "settings.json").write_text("{not json", encoding="utf-8")
        settings = SettingsStore(base_dir=Path(tmp)).load()
        assert settings == ReminderSettings()


def test_save_and_load() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = SettingsStore(base_dir=Path(tmp))
        store.save(ReminderSettings(base_interval=2400, sound_enabled=False, launch_at_login=True))
        loaded = store.load()
        assert loaded.base_interval == 2400
        assert loaded.sound_enabled is False
        assert loaded.launch_at_login is True
        assert loaded.min_interval == 15


def test_unknown_key_rejected() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = SettingsStore(base_dir=Path(tmp))
        with pytest.raises(KeyError):
            store.get("volume")
        with pytest.raises(KeyError):
            store.set("volume", 3)
