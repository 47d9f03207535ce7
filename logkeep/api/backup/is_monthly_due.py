from datetime import datetime

from ..config.LogCategoryConfig import LogCategoryConfig
from ._minute_matches import _minute_matches


def is_monthly_due(config: LogCategoryConfig, now: datetime) -> bool:
    """Due at backup_time on the configured backup_day of the month."""
    return _minute_matches(config, now) and now.day == config.backup_day
