"""A single log entry."""

from dataclasses import dataclass
from datetime import datetime

from ..config.LogCategory import LogCategory
from .LogLevel import LogLevel


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    level: LogLevel
    message: str
    source: str = ""
    category: LogCategory | None = None
