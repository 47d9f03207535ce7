"""Write one entry to a category log."""

from collections.abc import Iterator

from ..backup.BackupEngine import BackupEngine
from ..config.CategoryRegistry import CategoryRegistry
from ..config.ConfigError import ConfigError
from ..config.LogCategory import LogCategory
from ..config.LogKeepConfig import LogKeepConfig
from ..config.StaticConfigProvider import StaticConfigProvider
from ..maintenance.MaintenanceEngine import MaintenanceEngine
from ..StageResult import StageResult
from .AsyncLogWriter import AsyncLogWriter
from .LogLevel import LogLevel
from .resolve_log_file import resolve_log_file

_LEVEL_ALIASES = {"WARNING": LogLevel.WARN}

# Writer reports that mean the entry never reached the file
_DROP_PREFIXES = ("Dropped", "Cannot prepare")


def cmd_write(category: str, message: str, level: str = "INFO") -> StageResult:
    """Append MESSAGE to CATEGORY's current file through the async writer.

    Args:
        category: Category name (Production, Audit, Error, Diagnostics)
        message: Text of the entry
        level: INFO, WARN or ERROR
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Validating arguments...")
        errors: list[str] = []
        try:
            parsed_category = LogCategory.parse(category)
        except ValueError as e:
            parsed_category = None
            errors.append(str(e))
        upper = level.strip().upper()
        parsed_level = _LEVEL_ALIASES.get(upper) or next((lv for lv in LogLevel if lv.value == upper), None)
        if parsed_level is None:
            errors.append(f"Unknown log level: {level!r} (expected one of {[lv.value for lv in LogLevel]})")

        if errors:
            result_obj.result = errors[0]
            result_obj.output = {
                "errors": errors,
                "warnings": [],
                "category": category,
                "level": level,
                "log_path": "",
                "written": False,
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.3, "Loading configuration...")
        try:
            config = LogKeepConfig.load()
        except ConfigError as e:
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "category": parsed_category.value,
                "level": parsed_level.value,
                "log_path": "",
                "written": False,
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        registry = CategoryRegistry(StaticConfigProvider(config.categories))
        registry.initialize()
        category_config = registry.get_config(parsed_category)
        if category_config is None or not category_config.enabled:
            state = "not configured" if category_config is None else "disabled"
            result_obj.result = f"Category {parsed_category.value} is {state}; nothing written"
            result_obj.output = {
                "errors": [],
                "warnings": [f"Category {parsed_category.value} is {state}"],
                "category": parsed_category.value,
                "level": parsed_level.value,
                "log_path": "",
                "written": False,
            }
            result_obj.success = True
            yield (1.0, "Complete")
            return

        yield (0.5, "Writing entry...")
        problems: list[str] = []
        writer = AsyncLogWriter.from_config(
            config.writer,
            registry,
            MaintenanceEngine(BackupEngine()),
            diagnostics_sink=problems.append,
        )
        with writer:
            if parsed_level == LogLevel.INFO:
                writer.log_info(message, parsed_category)
            elif parsed_level == LogLevel.WARN:
                writer.log_warning(message, parsed_category)
            else:
                writer.log_error(message, parsed_category)

        yield (0.9, "Resolving file...")
        log_path = resolve_log_file(registry, parsed_category)
        dropped_msgs = [p for p in problems if p.startswith(_DROP_PREFIXES)]
        dropped = bool(dropped_msgs)

        result_obj.result = (
            f"Entry dropped for {parsed_category.value}" if dropped else f"Wrote {parsed_level.value} entry to {log_path}"
        )
        result_obj.output = {
            "errors": dropped_msgs,
            "warnings": [p for p in problems if p not in dropped_msgs],
            "category": parsed_category.value,
            "level": parsed_level.value,
            "log_path": str(log_path) if log_path else "",
            "written": not dropped,
        }
        result_obj.success = not dropped
        yield (1.0, "Complete")

    return StageResult(announce=f"Writing {level} entry to {category}...", progress_callback=do_work)
