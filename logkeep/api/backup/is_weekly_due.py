from datetime import datetime

from ..config.LogCategoryConfig import LogCategoryConfig
from ..config.WEEKDAYS import WEEKDAYS
from ._minute_matches import _minute_matches


def is_weekly_due(config: LogCategoryConfig, now: datetime) -> bool:
    """Due at backup_time on the configured backup_day_of_week."""
    return _minute_matches(config, now) and WEEKDAYS[now.weekday()] == config.backup_day_of_week
