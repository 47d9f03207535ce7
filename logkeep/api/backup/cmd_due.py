"""Check whether a category's backup is due."""

from collections.abc import Iterator
from datetime import datetime

from ..config.ConfigError import ConfigError
from ..config.LogKeepConfig import LogKeepConfig
from ..config.load_registry import load_registry
from ..StageResult import StageResult
from .is_backup_due import is_backup_due


def cmd_due(category: str, at: str = "") -> StageResult:
    """Report whether CATEGORY's backup schedule fires at AT (default: now).

    Args:
        category: Category name
        at: ISO 8601 local date-time, e.g. 2024-03-04T03:00
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = {"errors": [], "warnings": [], "category": category, "schedule": "", "at": at, "due": False}

        yield (0.2, "Parsing time...")
        try:
            when = datetime.fromisoformat(at) if at else datetime.now()
        except ValueError:
            output["errors"].append(f"Invalid ISO date-time: {at!r}")
            result_obj.result = f"Invalid ISO date-time: {at!r}"
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Complete")
            return
        output["at"] = when.isoformat(timespec="minutes")

        yield (0.4, "Loading configuration...")
        try:
            LogKeepConfig.load()
        except ConfigError as e:
            output["errors"].append(str(e))
            result_obj.result = str(e)
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Complete")
            return

        config = load_registry().get_config(category)
        if config is None:
            output["errors"].append(f"Category {category} is not configured")
            result_obj.result = f"Category {category} is not configured"
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.8, "Checking schedule...")
        due = is_backup_due(config, when)
        output.update({"category": config.category.value, "schedule": config.backup_schedule.value, "due": due})
        result_obj.result = f"Backup for {config.name} is {'due' if due else 'not due'} at {output['at']}"
        result_obj.output = output
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Checking backup schedule for {category}...", progress_callback=do_work)
