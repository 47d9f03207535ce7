"""Rotation, retention and backup triggering for category files."""

import threading
from datetime import datetime, timedelta
from pathlib import Path

from ...utils.logger import get_logger
from ..backup.BackupEngine import BackupEngine
from ..backup.is_backup_due import is_backup_due
from ..config.CategoryRegistry import CategoryRegistry
from ..config.LogCategory import LogCategory
from ..config.LogCategoryConfig import LogCategoryConfig
from .MaintenanceReport import MaintenanceReport
from .purge_expired_files import purge_expired_files
from .rotate_if_oversize import rotate_if_oversize

logger = get_logger("maintenance")

# Scheduled sweeps scan folders at most this often per category
PURGE_INTERVAL = timedelta(hours=1)


class MaintenanceEngine:
    """Applies a category's file policies after each write.

    Each step is isolated: a failure in one is recorded in the report and the
    next step still runs. Nothing is raised to the caller.

    The engine remembers the minute of the last scheduled backup per category
    so a backup fires at most once per matching minute, however many writes
    land in that minute.
    """

    def __init__(self, backup_engine: BackupEngine):
        self.backup_engine = backup_engine
        self._last_backup: dict[LogCategory, datetime] = {}
        self._last_purge: dict[LogCategory, datetime] = {}
        self._lock = threading.Lock()

    def apply_maintenance(
        self,
        config: LogCategoryConfig,
        current_path: Path,
        now: datetime | None = None,
    ) -> MaintenanceReport:
        report = MaintenanceReport()
        if config is None or not config.enabled:
            return report
        now = now or datetime.now()
        current_path = Path(current_path)

        try:
            report.rotated_to = rotate_if_oversize(config, current_path, now)
            if report.rotated_to is not None:
                logger.info(f"Rotated {current_path.name} to {report.rotated_to.name}")
        except Exception as exc:
            report.errors.append(f"Rotation failed for {current_path}: {exc}")

        try:
            purged, purge_errors = purge_expired_files(config, now, keep=current_path)
            report.purged.extend(purged)
            report.errors.extend(purge_errors)
        except Exception as exc:
            report.errors.append(f"Retention purge failed for {config.data_folder}: {exc}")

        self._backup_if_due(config, now, report)

        for message in report.errors:
            logger.warning(message)
        return report

    def run_scheduled(self, registry: CategoryRegistry, now: datetime | None = None) -> dict[LogCategory, MaintenanceReport]:
        """Sweep every enabled category: due backups and throttled purges.

        Covers categories that have not been written to recently, so their
        schedules still fire.
        """
        now = now or datetime.now()
        reports: dict[LogCategory, MaintenanceReport] = {}
        for config in registry.categories():
            if not config.enabled:
                continue
            report = MaintenanceReport()

            if self._purge_allowed(config.category, now):
                try:
                    purged, purge_errors = purge_expired_files(config, now)
                    report.purged.extend(purged)
                    report.errors.extend(purge_errors)
                except Exception as exc:
                    report.errors.append(f"Retention purge failed for {config.data_folder}: {exc}")

            self._backup_if_due(config, now, report)

            for message in report.errors:
                logger.warning(message)
            reports[config.category] = report
        return reports

    def _purge_allowed(self, category: LogCategory, now: datetime) -> bool:
        with self._lock:
            last = self._last_purge.get(category)
            if last is not None and now - last < PURGE_INTERVAL:
                return False
            self._last_purge[category] = now
            return True

    def _claim_backup_minute(self, category: LogCategory, now: datetime) -> bool:
        minute = now.replace(second=0, microsecond=0)
        with self._lock:
            if self._last_backup.get(category) == minute:
                return False
            self._last_backup[category] = minute
            return True

    def _backup_if_due(self, config: LogCategoryConfig, now: datetime, report: MaintenanceReport) -> None:
        try:
            if not is_backup_due(config, now):
                return
            if not self._claim_backup_minute(config.category, now):
                return
            report.backup = self.backup_engine.perform_backup(config)
            if not report.backup.success:
                report.errors.append(
                    f"Backup for {config.name} finished with {report.backup.failed_files} failed file(s)"
                )
        except Exception as exc:
            report.errors.append(f"Backup failed for {config.name}: {exc}")
