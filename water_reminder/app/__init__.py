"""托盘外壳：心跳、菜单、唤醒检测。"""
from water_reminder.app.tray import TrayController
from water_reminder.app.wake_monitor import WakeMonitor

__all__ = ["TrayController", "WakeMonitor"]
