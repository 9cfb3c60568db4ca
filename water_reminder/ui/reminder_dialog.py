"""喝水提醒弹窗：非模态，两个按钮，超时按贪睡自动关闭。"""
import time
from typing import Optional

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import QApplication, QMessageBox, QWidget

from water_reminder.scheduler.models import PromptOutcome
from water_reminder.scheduler.prompt import ReminderPrompt


class ReminderDialog(QMessageBox):
    """展示一次 ReminderPrompt；用户点击与超时计时器都经由 prompt.resolve 结算。"""

    def __init__(self, prompt: ReminderPrompt, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._prompt = prompt
        self._timeout = QTimer(self)
        self._timeout.setSingleShot(True)
        self._timeout.timeout.connect(self._on_timeout)
        self.setup_ui()
        prompt.add_done_callback(self._on_resolved)

    def setup_ui(self) -> None:
        self.setWindowTitle(self._prompt.title)
        self.setIcon(QMessageBox.Icon.Information)
        self.setText(self._prompt.title)
        self.setInformativeText(self._prompt.message)
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose, True)
        self.setModal(False)

        self._btn_ack = self.addButton(self._prompt.acknowledge_label, QMessageBox.ButtonRole.AcceptRole)
        self._btn_snooze = self.addButton(self._prompt.snooze_label, QMessageBox.ButtonRole.RejectRole)
        self.setDefaultButton(self._btn_ack)
        # Esc / 关闭窗口视为贪睡
        self.setEscapeButton(self._btn_snooze)
        self.buttonClicked.connect(self._on_button)

    def present(self) -> None:
        """显示并置前；按设置响铃，启动自动关闭计时。"""
        if self._prompt.play_sound:
            QApplication.beep()
        remaining = self._prompt.timeout_seconds - (time.time() - self._prompt.opened_at)
        self._timeout.start(max(0, int(remaining * 1000)))
        self.show()
        self.raise_()
        self.activateWindow()

    def _on_button(self, button) -> None:
        outcome = PromptOutcome.ACKNOWLEDGED if button is self._btn_ack else PromptOutcome.SNOOZED
        self._prompt.resolve(outcome, time.time())

    def _on_timeout(self) -> None:
        self._prompt.expire(time.time())

    def _on_resolved(self, prompt: ReminderPrompt) -> None:
        # 菜单操作或心跳超时也会走到这里，需要自己关窗
        self._timeout.stop()
        if self.isVisible():
            self.done(0)
