from __future__ import annotations

from .alarms import ALARM_KEYS, AlarmMessage, build_alarm, fill_placeholders

__all__ = ["ALARM_KEYS", "AlarmMessage", "build_alarm", "fill_placeholders"]
