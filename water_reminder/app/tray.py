"""托盘常驻：水滴图标 + 倒计时提示、菜单操作、1 秒心跳驱动调度器。"""
import logging
import time
from typing import Optional

from PyQt6.QtCore import QObject, QPointF, Qt, QTimer
from PyQt6.QtGui import QAction, QBrush, QColor, QIcon, QPainter, QPainterPath, QPen, QPixmap
from PyQt6.QtWidgets import QApplication, QMenu, QSystemTrayIcon

from water_reminder.app.wake_monitor import WakeMonitor
from water_reminder.config import APP_NAME, TICK_INTERVAL_MS
from water_reminder.scheduler.formatting import ACKNOWLEDGE_LABEL, format_countdown
from water_reminder.scheduler.models import PromptOutcome, TickResult
from water_reminder.scheduler.prompt import ReminderPrompt
from water_reminder.scheduler.scheduler import ReminderScheduler
from water_reminder.settings.store import SettingsStore
from water_reminder.ui.preferences import PreferencesDialog
from water_reminder.ui.reminder_dialog import ReminderDialog

logger = logging.getLogger(__name__)

ICON_SIZE = 64


def make_droplet_icon(size: int = ICON_SIZE) -> QIcon:
    """画一个水滴作为托盘图标。"""
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    path = QPainterPath()
    cx = size / 2
    path.moveTo(QPointF(cx, size * 0.06))
    path.cubicTo(QPointF(size * 0.18, size * 0.45), QPointF(size * 0.16, size * 0.94), QPointF(cx, size * 0.94))
    path.cubicTo(QPointF(size * 0.84, size * 0.94), QPointF(size * 0.82, size * 0.45), QPointF(cx, size * 0.06))
    painter.setPen(QPen(QColor(20, 90, 180), 2))
    painter.setBrush(QBrush(QColor(60, 150, 240)))
    painter.drawPath(path)
    painter.end()
    return QIcon(pixmap)


class TrayController(QObject):
    """持有调度器与托盘图标；每秒心跳先检查唤醒，再推进调度器，最后刷新显示和弹窗。"""

    def __init__(self, settings_store: SettingsStore, parent: Optional[QObject] = None):
        super().__init__(parent)
        now = time.time()
        self._store = settings_store
        self.scheduler = ReminderScheduler(settings_store, now)
        self._wake_monitor = WakeMonitor(now, self)
        self._wake_monitor.woke.connect(self._on_wake)
        self._dialog: Optional[ReminderDialog] = None
        self._prefs: Optional[PreferencesDialog] = None

        self._tray = QSystemTrayIcon(make_droplet_icon(), self)
        self._build_menu()

        self._heartbeat = QTimer(self)
        self._heartbeat.setTimerType(Qt.TimerType.CoarseTimer)
        self._heartbeat.timeout.connect(self._on_heartbeat)

    def _build_menu(self) -> None:
        menu = QMenu()
        self._info_action = QAction("Next reminder: --:--", menu)
        self._info_action.setEnabled(False)
        menu.addAction(self._info_action)
        menu.addSeparator()

        drank = QAction(ACKNOWLEDGE_LABEL, menu)
        drank.triggered.connect(lambda: self._respond(PromptOutcome.ACKNOWLEDGED))
        menu.addAction(drank)
        self._snooze_action = QAction("Snooze", menu)
        self._snooze_action.triggered.connect(lambda: self._respond(PromptOutcome.SNOOZED))
        menu.addAction(self._snooze_action)
        menu.addSeparator()

        prefs = QAction("Preferences...", menu)
        prefs.triggered.connect(self._open_preferences)
        menu.addAction(prefs)
        quit_action = QAction(f"Quit {APP_NAME}", menu)
        quit_action.triggered.connect(QApplication.quit)
        menu.addAction(quit_action)

        self._menu = menu
        self._tray.setContextMenu(menu)

    def start(self) -> None:
        self._tray.show()
        self._on_heartbeat()
        self._heartbeat.start(TICK_INTERVAL_MS)
        logger.info("Tray started; heartbeat every %d ms", TICK_INTERVAL_MS)

    # 心跳

    def _on_heartbeat(self) -> None:
        now = time.time()
        self._wake_monitor.check(now)
        result = self.scheduler.tick(now)
        self._update_display(result)
        if result.prompt is not None:
            self._present(result.prompt)

    def _update_display(self, result: TickResult) -> None:
        self._tray.setToolTip(f"Next reminder in {result.countdown}")
        self._info_action.setText(f"Next reminder in {result.countdown}")
        self._snooze_action.setText(f"Snooze ({result.next_snooze_label})")

    def _refresh(self) -> None:
        state = self.scheduler.state
        remaining = max(0.0, state.current_interval - (time.time() - state.last_drink_time))
        self._update_display(TickResult(
            remaining_seconds=remaining,
            countdown=format_countdown(remaining),
            next_snooze_label=self.scheduler.format_next_snooze(),
        ))

    # 唤醒

    def _on_wake(self) -> None:
        delay = self.scheduler.on_wake(time.time())
        if delay is not None:
            # 等屏幕和界面恢复响应再弹
            QTimer.singleShot(int(delay * 1000), self._on_welcome_due)

    def _on_welcome_due(self) -> None:
        prompt = self.scheduler.welcome_back(time.time())
        if prompt is not None:
            self._present(prompt)

    # 弹窗与菜单

    def _present(self, prompt: ReminderPrompt) -> None:
        dialog = ReminderDialog(prompt)
        prompt.add_done_callback(self._on_prompt_done)
        self._dialog = dialog
        dialog.present()

    def _on_prompt_done(self, prompt: ReminderPrompt) -> None:
        self._dialog = None
        self._refresh()

    def _respond(self, outcome: PromptOutcome) -> None:
        self.scheduler.respond(outcome, time.time())
        self._refresh()

    def _open_preferences(self) -> None:
        if self._prefs is not None and self._prefs.isVisible():
            self._prefs.raise_()
            self._prefs.activateWindow()
            return
        self._prefs = PreferencesDialog(self._store, self.scheduler)
        self._prefs.accepted.connect(self._refresh)
        self._prefs.show()
        self._prefs.raise_()
        self._prefs.activateWindow()
