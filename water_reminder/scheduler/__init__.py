"""提醒调度：倒计时、贪睡衰减、弹窗结算与睡眠感知。"""
from water_reminder.scheduler.models import PromptOutcome, SchedulerState, TickResult
from water_reminder.scheduler.prompt import ReminderPrompt
from water_reminder.scheduler.scheduler import ReminderScheduler
from water_reminder.scheduler.formatting import format_countdown, format_duration, reminder_message
from water_reminder.scheduler.wake import is_wake_gap

__all__ = [
    "PromptOutcome",
    "SchedulerState",
    "TickResult",
    "ReminderPrompt",
    "ReminderScheduler",
    "format_countdown",
    "format_duration",
    "reminder_message",
    "is_wake_gap",
]
