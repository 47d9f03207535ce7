from datetime import datetime
from pathlib import Path

from ...utils.logger import get_logger
from ..config.CategoryRegistry import CategoryRegistry
from ..config.LogCategory import LogCategory
from .build_file_name import build_file_name
from .LogEntry import LogEntry
from .read_log_file import read_log_file

logger = get_logger("reader")


def read_logs(registry: CategoryRegistry, category: LogCategory | str, date: datetime | None = None) -> list[LogEntry]:
    """Read a category's log for ``date`` (today by default), newest first.

    Returns an empty list when the category is unconfigured or disabled, or
    when no file exists for that day.
    """
    config = registry.get_config(category)
    if config is None:
        logger.warning(f"Log configuration for {category} not found")
        return []
    if not config.enabled:
        logger.warning(f"Log configuration for {config.category.value} is disabled")
        return []

    path = Path(config.data_folder).expanduser() / build_file_name(config.file_name_pattern, date or datetime.now())
    if not path.is_file():
        logger.debug(f"No log file for {config.category.value} at {path}")
        return []
    return read_log_file(path)
