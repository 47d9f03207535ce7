"""Read and parse a log file."""

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from ..config.ConfigError import ConfigError
from ..config.LogKeepConfig import LogKeepConfig
from ..config.load_registry import load_registry
from ..StageResult import StageResult
from .build_file_name import build_file_name
from .format_timestamp import format_timestamp
from .LogEntry import LogEntry
from .read_log_file import read_log_file
from .read_logs import read_logs


def _entry_rows(entries: list[LogEntry]) -> list[dict[str, str]]:
    return [
        {
            "timestamp": format_timestamp(e.timestamp),
            "level": e.level.value,
            "message": e.message,
            "source": e.source,
        }
        for e in entries
    ]


def cmd_read(path: str = "", limit: int = 0, category: str = "", date: str = "") -> StageResult:
    """Parse a log into entries, newest first.

    Reads the file at PATH, or with CATEGORY set, that category's file for
    DATE (YYYYMMDD, today if empty).

    Args:
        path: Log file to read
        limit: Return at most this many entries (0 for all)
        category: Category whose dated log to read instead of PATH
        date: Day of the category log, as YYYYMMDD
    """

    def fail(result_obj: StageResult, message: str, log_path: str = "") -> None:
        result_obj.result = message
        result_obj.output = {
            "errors": [message],
            "warnings": [],
            "log_path": log_path,
            "count": 0,
            "entries": [],
        }
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        warnings: list[str] = []
        if category:
            yield (0.2, "Loading configuration...")
            try:
                day = datetime.strptime(date, "%Y%m%d") if date else datetime.now()
            except ValueError:
                fail(result_obj, f"Invalid date {date!r}, expected YYYYMMDD")
                yield (1.0, "Complete")
                return
            try:
                LogKeepConfig.load()
            except ConfigError as e:
                fail(result_obj, str(e))
                yield (1.0, "Complete")
                return

            registry = load_registry()
            config = registry.get_config(category)
            log_path = ""
            if config is None:
                warnings.append(f"No configuration for {category}")
            elif not config.enabled:
                warnings.append(f"Category {config.category.value} is disabled")
            else:
                folder = Path(config.data_folder).expanduser()
                log_path = str((folder / build_file_name(config.file_name_pattern, day)).resolve())
                if not Path(log_path).is_file():
                    warnings.append(f"No log file for {config.category.value} on {day:%Y%m%d}")

            yield (0.6, "Parsing entries...")
            entries = read_logs(registry, category, day)
        elif path:
            log_path = str(Path(path).expanduser())
            yield (0.2, "Checking file...")
            if not Path(log_path).is_file():
                fail(result_obj, f"Log file not found: {log_path}", log_path)
                yield (1.0, "Complete")
                return

            yield (0.6, "Parsing entries...")
            entries = read_log_file(log_path)
        else:
            fail(result_obj, "Give a log file path or a category")
            yield (1.0, "Complete")
            return

        if limit > 0:
            entries = entries[:limit]

        source_name = Path(log_path).name if log_path else category
        result_obj.result = f"Read {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} from {source_name}"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "log_path": log_path,
            "count": len(entries),
            "entries": _entry_rows(entries),
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce=f"Reading {category or path}...", progress_callback=do_work)
