"""喝水提醒全局配置与路径。"""
import os
from pathlib import Path

APP_NAME = "Water Reminder"
APP_ID = "water-reminder"

# 数据目录：设置、日志；可用环境变量覆盖
DATA_DIR = Path(os.environ.get("WATER_REMINDER_HOME") or Path.home() / ".water_reminder")
SETTINGS_DIR = DATA_DIR / "settings"
LOG_DIR = DATA_DIR / "logs"

# 提醒默认（秒）
DEFAULT_BASE_INTERVAL = 1800.0  # 30 分钟
DEFAULT_FIRST_SNOOZE_INTERVAL = 600.0  # 10 分钟
DEFAULT_MIN_INTERVAL = 15.0
DEFAULT_SOUND_ENABLED = True
DEFAULT_LAUNCH_AT_LOGIN = False

# 读取时的下限（秒）
BASE_INTERVAL_FLOOR = 60.0
FIRST_SNOOZE_FLOOR = 10.0
MIN_INTERVAL_FLOOR = 5.0

# 心跳与时间规则
TICK_INTERVAL_MS = 1000
SLEEP_THRESHOLD_SECONDS = 300.0
WELCOME_DELAY_SECONDS = 2.0
PROMPT_TIMEOUT_SECONDS = 120.0
WAKE_GAP_SLACK_SECONDS = 5.0

# 日志轮转：单文件 1 MB，保留 3 个备份
LOG_MAX_BYTES = 1 * 1024 * 1024
LOG_BACKUP_COUNT = 3


def ensure_dirs() -> None:
    """确保数据目录存在。"""
    for d in (DATA_DIR, SETTINGS_DIR, LOG_DIR):
        d.mkdir(parents=True, exist_ok=True)
