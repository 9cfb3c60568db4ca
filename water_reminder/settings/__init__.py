"""提醒设置：模型与本地存储。"""
from water_reminder.settings.models import ReminderSettings
from water_reminder.settings.store import SettingsStore

__all__ = ["ReminderSettings", "SettingsStore"]
