"""唤醒检测：Qt 没有跨平台的睡眠/唤醒通知，用心跳间的墙钟跳变推断。"""
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from water_reminder.config import TICK_INTERVAL_MS
from water_reminder.scheduler.wake import is_wake_gap


class WakeMonitor(QObject):
    """由心跳喂入当前时间；发现跳变时发出一次 woke。"""
    woke = pyqtSignal()

    def __init__(self, now: float, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._last_beat = now

    def check(self, now: float) -> bool:
        woke = is_wake_gap(self._last_beat, now, expected=TICK_INTERVAL_MS / 1000.0)
        self._last_beat = now
        if woke:
            self.woke.emit()
        return woke
