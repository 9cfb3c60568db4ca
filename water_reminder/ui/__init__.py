"""提醒弹窗与偏好设置界面。"""
from water_reminder.ui.reminder_dialog import ReminderDialog
from water_reminder.ui.preferences import PreferencesDialog

__all__ = [
    "ReminderDialog",
    "PreferencesDialog",
]
