"""开机启动登记：macOS LaunchAgent、Windows Run 注册表、Linux XDG autostart。

登记失败不影响提醒本身，只记日志并返回 False。
"""
import logging
import plistlib
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from water_reminder.config import APP_ID, APP_NAME

logger = logging.getLogger(__name__)

LAUNCH_AGENT_LABEL = "com.waterreminder.app"
RUN_REGISTRY_PATH = r"Software\Microsoft\Windows\CurrentVersion\Run"


def launch_command() -> List[str]:
    return [sys.executable, "-m", "water_reminder.main"]


def _launch_agent_path(home: Path) -> Path:
    return home / "Library" / "LaunchAgents" / f"{LAUNCH_AGENT_LABEL}.plist"


def _autostart_path(home: Path) -> Path:
    return home / ".config" / "autostart" / f"{APP_ID}.desktop"


def _set_macos(enabled: bool, home: Path) -> None:
    path = _launch_agent_path(home)
    if not enabled:
        path.unlink(missing_ok=True)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        plistlib.dump(
            {"Label": LAUNCH_AGENT_LABEL, "ProgramArguments": launch_command(), "RunAtLoad": True},
            f,
        )


def _set_linux(enabled: bool, home: Path) -> None:
    path = _autostart_path(home)
    if not enabled:
        path.unlink(missing_ok=True)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    exec_line = " ".join(f'"{part}"' if " " in part else part for part in launch_command())
    path.write_text(
        "[Desktop Entry]\n"
        "Type=Application\n"
        f"Name={APP_NAME}\n"
        f"Exec={exec_line}\n"
        "X-GNOME-Autostart-enabled=true\n",
        encoding="utf-8",
    )


def _set_windows(enabled: bool) -> None:
    import winreg

    command = subprocess.list2cmdline(launch_command())
    with winreg.CreateKey(winreg.HKEY_CURRENT_USER, RUN_REGISTRY_PATH) as key:
        if enabled:
            winreg.SetValueEx(key, APP_NAME, 0, winreg.REG_SZ, command)
        else:
            try:
                winreg.DeleteValue(key, APP_NAME)
            except FileNotFoundError:
                pass


def set_login_item(enabled: bool, platform: Optional[str] = None, home: Optional[Path] = None) -> bool:
    """登记或取消开机启动。成功返回 True；失败只记录警告，返回 False。"""
    platform = platform or sys.platform
    home = home or Path.home()
    try:
        if platform == "darwin":
            _set_macos(enabled, home)
        elif platform == "win32":
            _set_windows(enabled)
        else:
            _set_linux(enabled, home)
    except OSError as e:
        logger.warning("Could not update launch-at-login (%s): %s", platform, e)
        return False
    logger.info("Launch at login %s", "enabled" if enabled else "disabled")
    return True
