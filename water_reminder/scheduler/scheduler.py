"""提醒调度状态机：心跳倒计时、喝水确认、贪睡减半与睡眠恢复。

所有转移都以当前时间 now（epoch 秒）作为显式参数，不依赖真实时钟或界面，
外壳（托盘、弹窗）只负责驱动心跳和展示 ReminderPrompt。
"""
import logging
from typing import Optional, Protocol

from water_reminder.config import SLEEP_THRESHOLD_SECONDS, WELCOME_DELAY_SECONDS
from water_reminder.scheduler.formatting import (
    WELCOME_MESSAGE,
    format_countdown,
    format_duration,
    reminder_message,
    snooze_label,
)
from water_reminder.scheduler.models import PromptOutcome, SchedulerState, TickResult
from water_reminder.scheduler.prompt import ReminderPrompt
from water_reminder.settings.models import ReminderSettings

logger = logging.getLogger(__name__)


class SettingsSource(Protocol):
    def load(self) -> ReminderSettings: ...


class ReminderScheduler:
    """决定何时提醒、记录距上次喝水的时间，并应用贪睡衰减规则。"""

    def __init__(self, settings: SettingsSource, now: float):
        self._settings = settings
        self.state = SchedulerState.start(now, self._read().base_interval)
        self._prompt: Optional[ReminderPrompt] = None

    def _read(self) -> ReminderSettings:
        # 每次检查时重新读取，偏好修改立即生效
        return self._settings.load()

    @property
    def pending_prompt(self) -> Optional[ReminderPrompt]:
        return self._prompt

    # 心跳

    def tick(self, now: float) -> TickResult:
        """每秒调用一次：更新剩余时间，到点且无弹窗时开启提醒。"""
        if self._prompt is not None and self._prompt.is_overdue(now):
            logger.info("Reminder prompt timed out, applying default outcome")
            self._prompt.expire(now)

        state = self.state
        elapsed = now - state.last_drink_time
        remaining = max(0.0, state.current_interval - elapsed)
        result = TickResult(
            remaining_seconds=remaining,
            countdown=format_countdown(remaining),
            next_snooze_label=self.format_next_snooze(),
        )
        if not state.alert_open and elapsed >= state.current_interval:
            result.prompt = self._open_prompt(reminder_message(elapsed), now)
        return result

    # 状态转移

    def acknowledge(self, now: float) -> None:
        """已喝水：重新开始倒计时，重置贪睡衰减链。"""
        state = self.state
        # 墙钟回拨时不让倒计时倒退
        state.last_drink_time = max(now, state.last_drink_time)
        state.current_interval = self._read().base_interval
        state.is_first_snooze = True
        logger.debug("Acknowledged; next reminder in %.0fs", state.current_interval)

    def snooze(self, now: float) -> None:
        """贪睡：第一次取 first_snooze_interval，之后每次减半，不低于 min_interval。"""
        state = self.state
        state.current_interval = self.next_snooze_seconds()
        state.is_first_snooze = False
        state.last_drink_time = max(now, state.last_drink_time)
        logger.debug("Snoozed; next reminder in %.0fs", state.current_interval)

    def respond(self, outcome: PromptOutcome, now: float) -> None:
        """菜单入口：有未结算的弹窗时经由弹窗结算，否则直接生效。"""
        if self._prompt is not None and self._prompt.resolve(outcome, now):
            return
        self._apply(outcome, now)

    def apply_settings(self, now: float) -> None:
        """偏好保存后以新设置重新开始倒计时；有未结算的弹窗时一并按已喝水结算并关闭。"""
        self.respond(PromptOutcome.ACKNOWLEDGED, now)

    def on_wake(self, now: float) -> Optional[float]:
        """
        系统从睡眠恢复时调用。
        间隔达到睡眠阈值时重置贪睡链，并返回欢迎提醒的延时（秒）；否则返回 None。
        """
        state = self.state
        gap = now - state.last_check_time
        delay = None
        if gap >= SLEEP_THRESHOLD_SECONDS:
            logger.info("Woke after %.0fs; restarting snooze chain", gap)
            state.is_first_snooze = True
            delay = WELCOME_DELAY_SECONDS
        state.last_check_time = now
        return delay

    def welcome_back(self, now: float) -> Optional[ReminderPrompt]:
        """睡眠恢复后的一次性欢迎提醒；已有弹窗时不再重复弹出。"""
        if self.state.alert_open:
            logger.info("Welcome-back reminder suppressed, a reminder is already open")
            return None
        return self._open_prompt(WELCOME_MESSAGE, now)

    # 展示辅助

    def next_snooze_seconds(self) -> float:
        """若此刻贪睡，下一次的时长（只读，与 snooze 同一分支）。"""
        settings = self._read()
        if self.state.is_first_snooze:
            return settings.first_snooze_interval
        return max(self.state.current_interval / 2, settings.min_interval)

    def format_next_snooze(self) -> str:
        return format_duration(self.next_snooze_seconds())

    # 内部

    def _apply(self, outcome: PromptOutcome, now: float) -> None:
        if outcome == PromptOutcome.ACKNOWLEDGED:
            self.acknowledge(now)
        else:
            self.snooze(now)

    def _open_prompt(self, message: str, now: float) -> ReminderPrompt:
        self.state.alert_open = True
        prompt = ReminderPrompt(
            message=message,
            snooze_label=snooze_label(self.next_snooze_seconds()),
            opened_at=now,
            on_resolve=self._close_prompt,
            play_sound=self._read().sound_enabled,
        )
        self._prompt = prompt
        logger.info("Reminder opened: %s", message)
        return prompt

    def _close_prompt(self, outcome: PromptOutcome, now: float) -> None:
        self._apply(outcome, now)
        self.state.alert_open = False
        self.state.last_check_time = now
        self._prompt = None
        logger.info("Reminder resolved: %s", outcome.value)
