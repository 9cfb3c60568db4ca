"""从睡眠恢复的推断：心跳之间的墙钟间隔远超预期即视为系统睡眠过。"""
from water_reminder.config import WAKE_GAP_SLACK_SECONDS


def is_wake_gap(
    previous: float,
    now: float,
    expected: float = 1.0,
    slack: float = WAKE_GAP_SLACK_SECONDS,
) -> bool:
    """两次心跳的墙钟间隔超过 expected + slack 时返回 True。"""
    return now - previous > expected + slack
