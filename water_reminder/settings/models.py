"""提醒设置数据模型：数值在读取时钳制到下限。"""
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from water_reminder.config import (
    BASE_INTERVAL_FLOOR,
    DEFAULT_BASE_INTERVAL,
    DEFAULT_FIRST_SNOOZE_INTERVAL,
    DEFAULT_LAUNCH_AT_LOGIN,
    DEFAULT_MIN_INTERVAL,
    DEFAULT_SOUND_ENABLED,
    FIRST_SNOOZE_FLOOR,
    MIN_INTERVAL_FLOOR,
)

FLOORS = {
    "base_interval": BASE_INTERVAL_FLOOR,
    "first_snooze_interval": FIRST_SNOOZE_FLOOR,
    "min_interval": MIN_INTERVAL_FLOOR,
}


def clamp_seconds(value: Any, floor: float) -> float:
    """转成秒数并钳制到下限；无法解析、非有限值一律按 0 处理（即取下限）。"""
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        seconds = 0.0
    if not math.isfinite(seconds):
        seconds = 0.0
    return seconds if seconds >= floor else floor


class ReminderSettings(BaseModel):
    """提醒配置（秒）。"""
    base_interval: float = Field(DEFAULT_BASE_INTERVAL, description="喝水后到下次提醒的间隔")
    first_snooze_interval: float = Field(DEFAULT_FIRST_SNOOZE_INTERVAL, description="喝水后第一次贪睡的延时")
    min_interval: float = Field(DEFAULT_MIN_INTERVAL, description="贪睡减半的下限")
    sound_enabled: bool = Field(DEFAULT_SOUND_ENABLED, description="提醒时是否响铃")
    launch_at_login: bool = Field(DEFAULT_LAUNCH_AT_LOGIN, description="是否开机启动")

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    @field_validator("base_interval", "first_snooze_interval", "min_interval", mode="before")
    @classmethod
    def _apply_floor(cls, value: Any, info) -> float:
        return clamp_seconds(value, FLOORS[info.field_name])
