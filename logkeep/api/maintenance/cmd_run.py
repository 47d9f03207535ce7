"""Run maintenance for one category."""

from collections.abc import Iterator

from ..backup.BackupEngine import BackupEngine
from ..config.ConfigError import ConfigError
from ..config.LogKeepConfig import LogKeepConfig
from ..config.load_registry import load_registry
from ..log.resolve_log_file import resolve_log_file
from ..StageResult import StageResult
from .MaintenanceEngine import MaintenanceEngine


def cmd_run(category: str) -> StageResult:
    """Rotate, purge and (if due) back up CATEGORY's current file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = {
            "errors": [],
            "warnings": [],
            "category": category,
            "log_path": "",
            "rotated_to": "",
            "purged": [],
            "backed_up": False,
        }

        yield (0.2, "Loading configuration...")
        try:
            LogKeepConfig.load()
        except ConfigError as e:
            output["errors"].append(str(e))
            result_obj.result = str(e)
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Complete")
            return

        registry = load_registry()
        config = registry.get_config(category)
        if config is None or not config.enabled:
            state = "not configured" if config is None else "disabled"
            output["warnings"].append(f"Category {category} is {state}")
            result_obj.result = f"Category {category} is {state}; nothing to maintain"
            result_obj.output = output
            result_obj.success = True
            yield (1.0, "Complete")
            return

        yield (0.4, "Resolving current file...")
        try:
            log_path = resolve_log_file(registry, config.category)
        except OSError as e:
            output["errors"].append(f"Cannot prepare log file: {e}")
            result_obj.result = f"Cannot prepare log file: {e}"
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Applying maintenance...")
        report = MaintenanceEngine(BackupEngine()).apply_maintenance(config, log_path)

        output.update(
            {
                "errors": list(report.errors),
                "category": config.category.value,
                "log_path": str(log_path),
                "rotated_to": str(report.rotated_to) if report.rotated_to else "",
                "purged": [str(p) for p in report.purged],
                "backed_up": report.backed_up,
            }
        )
        result_obj.result = (
            f"Maintenance for {config.name}: "
            f"{'rotated, ' if report.rotated_to else ''}{len(report.purged)} purged"
            f"{', backed up' if report.backed_up else ''}"
        )
        result_obj.output = output
        result_obj.success = not report.errors
        yield (1.0, "Complete")

    return StageResult(announce=f"Running maintenance for {category}...", progress_callback=do_work)
