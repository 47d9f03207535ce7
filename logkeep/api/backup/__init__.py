"""Backup API module."""

from .BackupEngine import BackupEngine
from .BackupResult import BackupResult
from .copy_tree import copy_tree
from .is_backup_due import is_backup_due

__all__ = ["BackupEngine", "BackupResult", "copy_tree", "is_backup_due"]
