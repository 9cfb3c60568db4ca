"""倒计时、时长与提醒文案。"""

REMINDER_TITLE = "💧 Drink Water!"
ACKNOWLEDGE_LABEL = "I Drank Water ✓"
WELCOME_MESSAGE = "Welcome back! Have some water after your break."
NAG_MESSAGE = "Drink water! You keep snoozing!"

# 不足一分钟时改用通用文案，避免出现「0 min」
MINUTE_MESSAGE_THRESHOLD = 60


def format_countdown(remaining: float) -> str:
    """剩余秒数 → M:SS。"""
    total = int(max(0.0, remaining))
    return "%d:%02d" % (total // 60, total % 60)


def format_duration(seconds: float) -> str:
    """贪睡时长标签：整分钟「10 min」，非整分钟「1.5 min」，不足一分钟「45 sec」。"""
    if seconds >= 60:
        if seconds % 60 == 0:
            return f"{int(seconds / 60)} min"
        return "%.1f min" % (seconds / 60.0)
    return f"{int(seconds)} sec"


def snooze_label(seconds: float) -> str:
    return f"Snooze ({format_duration(seconds)})"


def reminder_message(elapsed: float) -> str:
    if elapsed >= MINUTE_MESSAGE_THRESHOLD:
        mins = int(elapsed) // 60
        return f"It's been {mins} min since your last water. Drink up!"
    return NAG_MESSAGE
