"""What one maintenance pass did."""

from dataclasses import dataclass, field
from pathlib import Path

from ..backup.BackupResult import BackupResult


@dataclass
class MaintenanceReport:
    rotated_to: Path | None = None
    purged: list[Path] = field(default_factory=list)
    backup: BackupResult | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def backed_up(self) -> bool:
        return self.backup is not None
