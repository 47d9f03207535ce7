"""Log API module."""

from .AsyncLogWriter import AsyncLogWriter
from .format_log_line import format_log_line
from .get_log_files import get_log_files
from .LOG_FORMAT import LOG_EXTENSION, LOG_HEADER
from .LogEntry import LogEntry
from .LogFileInfo import LogFileInfo
from .LogFilesResult import LogFilesResult
from .LogFilesStatus import LogFilesStatus
from .LogLevel import LogLevel
from .read_log_file import read_log_file
from .read_logs import read_logs
from .resolve_log_file import resolve_log_file

__all__ = [
    "LOG_EXTENSION",
    "LOG_HEADER",
    "AsyncLogWriter",
    "LogEntry",
    "LogFileInfo",
    "LogFilesResult",
    "LogFilesStatus",
    "LogLevel",
    "format_log_line",
    "get_log_files",
    "read_log_file",
    "read_logs",
    "resolve_log_file",
]
