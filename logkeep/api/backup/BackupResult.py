"""Outcome of a backup or restore."""

from dataclasses import dataclass


@dataclass
class BackupResult:
    total_files: int = 0
    copied_files: int = 0
    failed_files: int = 0
    skipped: bool = False

    @property
    def success(self) -> bool:
        return self.failed_files == 0
