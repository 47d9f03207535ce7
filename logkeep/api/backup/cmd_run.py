"""Back up a category now."""

from ..StageResult import StageResult
from ._copy_command import _copy_command
from .BackupEngine import BackupEngine


def cmd_run(category: str) -> StageResult:
    """Copy CATEGORY's data folder (and asset tree) into its backup folders."""
    return StageResult(
        announce=f"Backing up {category}...",
        progress_callback=_copy_command(category, "Backup", BackupEngine().perform_backup),
    )
