"""Scheduled sweep over every enabled category."""

from collections.abc import Iterator

from ..backup.BackupEngine import BackupEngine
from ..config.ConfigError import ConfigError
from ..config.LogKeepConfig import LogKeepConfig
from ..config.load_registry import load_registry
from ..StageResult import StageResult
from .MaintenanceEngine import MaintenanceEngine


def cmd_sweep() -> StageResult:
    """Purge expired files and run due backups for all enabled categories."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            LogKeepConfig.load()
        except ConfigError as e:
            result_obj.result = str(e)
            result_obj.output = {"errors": [str(e)], "warnings": [], "backed_up": [], "purged": {}}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.5, "Sweeping categories...")
        reports = MaintenanceEngine(BackupEngine()).run_scheduled(load_registry())

        errors: list[str] = []
        backed_up: list[str] = []
        purged: dict[str, list[str]] = {}
        for category, report in reports.items():
            errors.extend(report.errors)
            if report.backed_up:
                backed_up.append(category.value)
            purged[category.value] = [str(p) for p in report.purged]

        total_purged = sum(len(p) for p in purged.values())
        result_obj.result = f"Swept {len(reports)} categories: {len(backed_up)} backed up, {total_purged} purged"
        result_obj.output = {"errors": errors, "warnings": [], "backed_up": backed_up, "purged": purged}
        result_obj.success = not errors
        yield (1.0, "Complete")

    return StageResult(announce="Running scheduled maintenance...", progress_callback=do_work)
