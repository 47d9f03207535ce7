"""Listing information for one log file."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class LogFileInfo:
    file_name: str
    full_path: Path
    last_modified: datetime
    display_size: str

    def __str__(self) -> str:
        return self.file_name
