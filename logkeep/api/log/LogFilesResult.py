"""Result of listing a category's log files."""

from dataclasses import dataclass, field

from .LogFileInfo import LogFileInfo
from .LogFilesStatus import LogFilesStatus


@dataclass
class LogFilesResult:
    status: LogFilesStatus
    files: list[LogFileInfo] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == LogFilesStatus.OK
