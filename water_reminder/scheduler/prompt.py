"""提醒弹窗的请求/应答：用户点击与超时竞争，只有先到的一方生效。"""
from typing import Callable, List

from water_reminder.config import PROMPT_TIMEOUT_SECONDS
from water_reminder.scheduler.formatting import ACKNOWLEDGE_LABEL, REMINDER_TITLE
from water_reminder.scheduler.models import PromptOutcome


class ReminderPrompt:
    """
    一次待应答的提醒。
    resolve() 先置位已结算标记再回调调度器，之后的点击或超时都是空操作。
    """

    default_outcome = PromptOutcome.SNOOZED

    def __init__(
        self,
        message: str,
        snooze_label: str,
        opened_at: float,
        on_resolve: Callable[[PromptOutcome, float], None],
        play_sound: bool = False,
        timeout_seconds: float = PROMPT_TIMEOUT_SECONDS,
        title: str = REMINDER_TITLE,
        acknowledge_label: str = ACKNOWLEDGE_LABEL,
    ):
        self.title = title
        self.message = message
        self.acknowledge_label = acknowledge_label
        self.snooze_label = snooze_label
        self.opened_at = opened_at
        self.play_sound = play_sound
        self.timeout_seconds = timeout_seconds
        self.outcome = None
        self._on_resolve = on_resolve
        self._resolved = False
        self._done_callbacks: List[Callable[["ReminderPrompt"], None]] = []

    @property
    def resolved(self) -> bool:
        return self._resolved

    def is_overdue(self, now: float) -> bool:
        return not self._resolved and now - self.opened_at >= self.timeout_seconds

    def resolve(self, outcome: PromptOutcome, now: float) -> bool:
        """结算弹窗。首次调用返回 True 并生效，已结算则返回 False。"""
        if self._resolved:
            return False
        self._resolved = True
        self.outcome = outcome
        self._on_resolve(outcome, now)
        for fn in self._done_callbacks:
            fn(self)
        return True

    def expire(self, now: float) -> bool:
        """超时：按默认结果（贪睡）结算。"""
        return self.resolve(self.default_outcome, now)

    def add_done_callback(self, fn: Callable[["ReminderPrompt"], None]) -> None:
        """结算后回调（如关闭对话框）；已结算则立即回调。"""
        if self._resolved:
            fn(self)
            return
        self._done_callbacks.append(fn)
