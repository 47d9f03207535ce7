"""Stock category configurations written by ``config init``."""

from datetime import time
from pathlib import Path

from .BackupSchedule import BackupSchedule
from .LogCategory import LogCategory
from .LogCategoryConfig import LogCategoryConfig


def default_category_configs(base_dir: Path) -> list[LogCategoryConfig]:
    """Build the four stock categories rooted at ``base_dir``.

    Logs go to ``<base>/Logs/<Name>`` and backups to ``<base>/LogsBackup/<Name>``.
    """

    def make(
        category: LogCategory,
        retention_days: int,
        auto_purge: bool,
        schedule: BackupSchedule,
        backup_time: time,
        description: str,
        **extra,
    ) -> LogCategoryConfig:
        name = category.value
        return LogCategoryConfig(
            name=name,
            category=category,
            enabled=True,
            data_folder=base_dir / "Logs" / name,
            backup_folder=base_dir / "LogsBackup" / name,
            file_name_pattern=f"{name}_{{yyyyMMdd}}",
            retention_days=retention_days,
            retention_size_mb=5,
            auto_purge=auto_purge,
            backup_schedule=schedule,
            backup_time=backup_time,
            description=description,
            **extra,
        )

    return [
        make(LogCategory.AUDIT, 90, False, BackupSchedule.DAILY, time(2, 0), "Audit log configuration"),
        make(
            LogCategory.PRODUCTION,
            30,
            True,
            BackupSchedule.WEEKLY,
            time(3, 0),
            "Production log configuration",
            backup_day_of_week="Monday",
        ),
        make(LogCategory.ERROR, 60, True, BackupSchedule.MONTHLY, time(4, 0), "Error log configuration", backup_day=1),
        make(LogCategory.DIAGNOSTICS, 14, True, BackupSchedule.MANUAL, time(0, 0), "Diagnostics log configuration"),
    ]
