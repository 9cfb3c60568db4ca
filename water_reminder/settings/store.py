"""提醒设置本地存储（JSON 键值）。"""
import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from water_reminder.config import SETTINGS_DIR
from water_reminder.settings.models import ReminderSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """设置存储：原值写入，读取时经 ReminderSettings 钳制，容忍损坏或过期的数据。"""
    _filename = "settings.json"

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or SETTINGS_DIR
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path(self) -> Path:
        return self.base_dir / self._filename

    def _load_raw(self) -> dict:
        if not self._path().exists():
            return {}
        try:
            with open(self._path(), "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Settings file %s unreadable, using defaults: %s", self._path(), e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file %s is not an object, using defaults", self._path())
            return {}
        return data

    def _save_raw(self, data: dict) -> None:
        with open(self._path(), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def load(self) -> ReminderSettings:
        """读取全部设置；缺失的键取默认值，数值钳制到下限。"""
        data = self._load_raw()
        try:
            return ReminderSettings.model_validate(data)
        except ValidationError as e:
            # 只有开关类字段会走到这里（数值字段已在校验器中兜底）
            logger.warning("Invalid settings ignored: %s", e)
            valid = {}
            for key, value in data.items():
                try:
                    ReminderSettings.model_validate({key: value})
                except ValidationError:
                    continue
                valid[key] = value
            return ReminderSettings.model_validate(valid)

    def save(self, settings: ReminderSettings) -> None:
        """保存全部设置。"""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        data = self._load_raw()
        data.update(settings.model_dump(mode="json"))
        self._save_raw(data)

    def get(self, key: str) -> Any:
        """读取单个设置（已钳制）。"""
        if key not in ReminderSettings.model_fields:
            raise KeyError(f"unknown setting: {key}")
        return getattr(self.load(), key)

    def set(self, key: str, value: Any) -> None:
        """写入单个设置原值，不在写入时钳制。"""
        if key not in ReminderSettings.model_fields:
            raise KeyError(f"unknown setting: {key}")
        data = self._load_raw()
        data[key] = value
        self._save_raw(data)
