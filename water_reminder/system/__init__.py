"""系统集成：开机启动。"""
from water_reminder.system.login_item import set_login_item

__all__ = ["set_login_item"]
