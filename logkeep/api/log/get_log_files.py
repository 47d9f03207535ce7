from datetime import datetime
from pathlib import Path

from ...utils.logger import get_logger
from ..config.CategoryRegistry import CategoryRegistry
from ..config.LogCategory import LogCategory
from .LOG_FORMAT import LOG_EXTENSION
from .LogFileInfo import LogFileInfo
from .LogFilesResult import LogFilesResult
from .LogFilesStatus import LogFilesStatus

logger = get_logger("reader")


def get_log_files(registry: CategoryRegistry, category: LogCategory | str) -> LogFilesResult:
    """List a category's log files, newest first.

    An empty listing always carries the reason in ``status``.
    """
    config = registry.get_config(category)
    if config is None:
        logger.warning(f"Log configuration for {category} not found")
        return LogFilesResult(LogFilesStatus.MISSING_CONFIG)
    if not config.enabled:
        logger.warning(f"Log configuration for {config.category.value} is disabled")
        return LogFilesResult(LogFilesStatus.DISABLED)

    folder = Path(config.data_folder).expanduser()
    if not folder.is_dir():
        logger.warning(f"Log folder does not exist: {folder}")
        return LogFilesResult(LogFilesStatus.MISSING_FOLDER)

    try:
        files: list[LogFileInfo] = []
        for path in folder.glob(f"*{LOG_EXTENSION}"):
            if not path.is_file():
                continue
            stat = path.stat()
            files.append(
                LogFileInfo(
                    file_name=path.name,
                    full_path=path.resolve(),
                    last_modified=datetime.fromtimestamp(stat.st_mtime),
                    display_size=f"{stat.st_size // 1024} KB",
                )
            )
    except OSError as exc:
        logger.error(f"Error reading log files from {folder}: {exc}")
        return LogFilesResult(LogFilesStatus.UNREADABLE)

    files.sort(key=lambda f: f.last_modified, reverse=True)
    return LogFilesResult(LogFilesStatus.OK, files)
