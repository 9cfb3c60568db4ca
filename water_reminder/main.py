"""喝水提醒入口：初始化日志与设置，挂上托盘图标后进入事件循环。"""
import logging
import sys

from PyQt6.QtWidgets import QApplication, QSystemTrayIcon

from water_reminder import __version__
from water_reminder.app.tray import TrayController
from water_reminder.config import APP_NAME, ensure_dirs
from water_reminder.logging_setup import setup_logging
from water_reminder.settings.store import SettingsStore

logger = logging.getLogger(__name__)


def main() -> None:
    ensure_dirs()
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(__version__)
    # 只有托盘，没有主窗口；关掉偏好窗口不退出
    app.setQuitOnLastWindowClosed(False)

    if not QSystemTrayIcon.isSystemTrayAvailable():
        logger.error("No system tray available; %s cannot run", APP_NAME)
        sys.exit(1)

    controller = TrayController(SettingsStore())
    controller.start()
    code = app.exec()
    logger.info("%s exiting", APP_NAME)
    sys.exit(code)


if __name__ == "__main__":
    main()
