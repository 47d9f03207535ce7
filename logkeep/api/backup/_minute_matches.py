from datetime import datetime

from ..config.LogCategoryConfig import LogCategoryConfig


def _minute_matches(config: LogCategoryConfig, now: datetime) -> bool:
    return now.hour == config.backup_time.hour and now.minute == config.backup_time.minute
