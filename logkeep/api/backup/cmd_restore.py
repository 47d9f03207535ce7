"""Restore a category from its backup folders."""

from ..StageResult import StageResult
from ._copy_command import _copy_command
from .BackupEngine import BackupEngine


def cmd_restore(category: str) -> StageResult:
    """Copy CATEGORY's backup folders back over its data folder and asset tree.

    Files are overwritten; nothing is deleted from the destination.
    """
    return StageResult(
        announce=f"Restoring {category}...",
        progress_callback=_copy_command(category, "Restore", BackupEngine().perform_restore),
    )
