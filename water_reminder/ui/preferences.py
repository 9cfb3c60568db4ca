"""偏好设置：提醒间隔、第一次贪睡、贪睡下限、响铃、开机启动。"""
import logging
import time
from typing import Optional

from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDoubleSpinBox,
    QFormLayout,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from water_reminder.config import (
    APP_NAME,
    BASE_INTERVAL_FLOOR,
    FIRST_SNOOZE_FLOOR,
    MIN_INTERVAL_FLOOR,
)
from water_reminder.scheduler.scheduler import ReminderScheduler
from water_reminder.settings.models import ReminderSettings
from water_reminder.settings.store import SettingsStore
from water_reminder.system.login_item import set_login_item

logger = logging.getLogger(__name__)


def _spin(minimum: float, maximum: float, value: float, decimals: int = 1) -> QDoubleSpinBox:
    box = QDoubleSpinBox()
    box.setDecimals(decimals)
    box.setRange(minimum, maximum)
    box.setValue(value)
    return box


class PreferencesDialog(QDialog):
    """读取当前设置，保存后重新开始倒计时。"""

    def __init__(
        self,
        settings_store: SettingsStore,
        scheduler: ReminderScheduler,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._store = settings_store
        self._scheduler = scheduler
        self._settings = settings_store.load()
        self.setup_ui()

    def setup_ui(self) -> None:
        self.setWindowTitle(f"{APP_NAME} Preferences")
        self.setFixedSize(380, 260)
        layout = QVBoxLayout(self)

        s = self._settings
        form = QFormLayout()
        self._base = _spin(BASE_INTERVAL_FLOOR / 60, 24 * 60, s.base_interval / 60.0)
        form.addRow("Reminder interval (minutes):", self._base)
        self._first = _spin(FIRST_SNOOZE_FLOOR / 60, 24 * 60, s.first_snooze_interval / 60.0, decimals=2)
        form.addRow("First snooze (minutes):", self._first)
        self._min = _spin(MIN_INTERVAL_FLOOR, 3600, s.min_interval, decimals=0)
        form.addRow("Minimum snooze floor (seconds):", self._min)
        layout.addLayout(form)

        self._sound = QCheckBox("Play sound on reminder")
        self._sound.setChecked(s.sound_enabled)
        layout.addWidget(self._sound)
        self._login = QCheckBox("Launch at login")
        self._login.setChecked(s.launch_at_login)
        layout.addWidget(self._login)

        btn_save = QPushButton("Save")
        btn_save.setDefault(True)
        btn_save.clicked.connect(self._on_save)
        layout.addWidget(btn_save)

    def _on_save(self) -> None:
        settings = ReminderSettings(
            base_interval=self._base.value() * 60,
            first_snooze_interval=self._first.value() * 60,
            min_interval=self._min.value(),
            sound_enabled=self._sound.isChecked(),
            launch_at_login=self._login.isChecked(),
        )
        try:
            self._store.save(settings)
        except OSError as e:
            logger.error("Saving settings failed: %s", e)
            QMessageBox.warning(self, "Save failed", f"Could not save preferences:\n{e}")
            return
        if settings.launch_at_login != self._settings.launch_at_login:
            # 失败只记日志，用户可在系统设置里自行管理
            set_login_item(settings.launch_at_login)
        self._scheduler.apply_settings(time.time())
        self.accept()
