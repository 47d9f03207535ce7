from collections.abc import Callable, Iterator

from ..config.ConfigError import ConfigError
from ..config.LogCategoryConfig import LogCategoryConfig
from ..config.LogKeepConfig import LogKeepConfig
from ..config.load_registry import load_registry
from ..StageResult import StageResult
from .BackupResult import BackupResult


def _copy_command(
    category: str,
    action: str,
    copy: Callable[[LogCategoryConfig], BackupResult],
) -> Callable[[StageResult], Iterator[tuple[float, str]]]:
    """Shared progress callback for backup run and backup restore."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        output = {
            "errors": [],
            "warnings": [],
            "category": category,
            "total_files": 0,
            "copied_files": 0,
            "failed_files": 0,
            "skipped": True,
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

        config = load_registry().get_config(category)
        if config is None:
            output["errors"].append(f"Category {category} is not configured")
            result_obj.result = f"Category {category} is not configured"
            result_obj.output = output
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.5, f"Copying files ({action})...")
        result = copy(config)

        output.update(
            {
                "category": config.category.value,
                "total_files": result.total_files,
                "copied_files": result.copied_files,
                "failed_files": result.failed_files,
                "skipped": result.skipped,
            }
        )
        if result.skipped:
            output["warnings"].append(f"Nothing to {action.lower()}: source folder does not exist")
        if result.failed_files:
            output["errors"].append(f"{result.failed_files} file(s) failed to copy")

        result_obj.result = f"{action} {config.name}: {result.copied_files}/{result.total_files} files copied"
        result_obj.output = output
        result_obj.success = result.success
        yield (1.0, "Complete")

    return do_work
