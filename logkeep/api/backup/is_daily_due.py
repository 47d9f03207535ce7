from datetime import datetime

from ..config.LogCategoryConfig import LogCategoryConfig
from ._minute_matches import _minute_matches


def is_daily_due(config: LogCategoryConfig, now: datetime) -> bool:
    """Due when the hour and minute equal backup_time."""
    return _minute_matches(config, now)
