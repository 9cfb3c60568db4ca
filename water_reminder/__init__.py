"""喝水提醒：托盘倒计时、自适应贪睡与睡眠感知。"""
__version__ = "0.1.0"
