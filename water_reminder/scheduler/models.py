"""调度状态与心跳结果数据模型。"""
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from water_reminder.scheduler.prompt import ReminderPrompt


class PromptOutcome(str, Enum):
    """提醒弹窗的结果。"""
    ACKNOWLEDGED = "acknowledged"  # 已喝水
    SNOOZED = "snoozed"            # 贪睡（超时默认）


class SchedulerState(BaseModel):
    """调度器的内存状态，进程退出即丢弃。时间均为 epoch 秒。"""
    last_drink_time: float = Field(..., description="上次喝水（或贪睡、启动）时间")
    last_check_time: float = Field(..., description="上次弹窗结束或唤醒检查时间，用于识别睡眠间隔")
    current_interval: float = Field(..., description="当前倒计时目标（秒）")
    is_first_snooze: bool = Field(True, description="下一次贪睡是否为喝水后的第一次")
    alert_open: bool = Field(False, description="是否有提醒弹窗未结束")

    @classmethod
    def start(cls, now: float, base_interval: float) -> "SchedulerState":
        return cls(last_drink_time=now, last_check_time=now, current_interval=base_interval)


@dataclass
class TickResult:
    """一次心跳的输出：托盘显示用的剩余时间，以及可能新开的提醒。"""
    remaining_seconds: float
    countdown: str
    next_snooze_label: str
    prompt: Optional["ReminderPrompt"] = None
