from .grouper import WeekBucket, group_by_week, row_to_log
from .parser import Log, new_log, parse_day, parse_duration


__all__ = [
    "Log",
    "WeekBucket",
    "group_by_week",
    "new_log",
    "parse_day",
    "parse_duration",
    "row_to_log",
]
