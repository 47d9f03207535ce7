from collections.abc import Callable
from datetime import datetime

from ..config.BackupSchedule import BackupSchedule
from ..config.LogCategoryConfig import LogCategoryConfig
from .is_daily_due import is_daily_due
from .is_manual_due import is_manual_due
from .is_monthly_due import is_monthly_due
from .is_weekly_due import is_weekly_due

_DUE_CHECKS: dict[BackupSchedule, Callable[[LogCategoryConfig, datetime], bool]] = {
    BackupSchedule.MANUAL: is_manual_due,
    BackupSchedule.DAILY: is_daily_due,
    BackupSchedule.WEEKLY: is_weekly_due,
    BackupSchedule.MONTHLY: is_monthly_due,
}


def is_backup_due(config: LogCategoryConfig, now: datetime) -> bool:
    """Whether ``config``'s schedule calls for a backup at ``now``.

    Pure function of its arguments. Matching is at minute granularity with no
    catch-up for minutes the process missed.
    """
    return _DUE_CHECKS[config.backup_schedule](config, now)
