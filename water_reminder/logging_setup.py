"""日志：轮转文件 + 控制台，进程启动时调用一次。"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from water_reminder.config import LOG_BACKUP_COUNT, LOG_DIR, LOG_MAX_BYTES

LOG_FILENAME = "water-reminder.log"


def setup_logging(log_dir: Optional[Path] = None, level: int = logging.DEBUG) -> Path:
    """给根 logger 挂上轮转文件与控制台 handler；重复调用不会重复添加。"""
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        root.addHandler(file_handler)
    # RotatingFileHandler 也是 StreamHandler 的子类，需排除
    if not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    ):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        console.setLevel(logging.INFO)
        root.addHandler(console)
    root.info("Logging to %s", log_file)
    return log_file
