"""Backup and restore of a category's data folder and asset tree."""

from pathlib import Path

from ...utils.logger import get_logger
from ..config.LogCategoryConfig import LogCategoryConfig
from .BackupResult import BackupResult
from .copy_tree import copy_tree

logger = get_logger("backup")


class BackupEngine:
    """Mirrors category folders into their backup folders and back.

    A missing source folder is a successful no-op (``skipped=True``): an
    empty category is valid.
    """

    def perform_backup(self, config: LogCategoryConfig) -> BackupResult:
        pairs = [(config.data_folder, config.backup_folder)]
        if config.has_assets:
            pairs.append((config.asset_source_path, config.asset_backup_path))
        return self._copy_pairs(config, pairs, "Backup")

    def perform_restore(self, config: LogCategoryConfig) -> BackupResult:
        pairs = [(config.backup_folder, config.data_folder)]
        if config.has_assets:
            pairs.append((config.asset_backup_path, config.asset_source_path))
        return self._copy_pairs(config, pairs, "Restore")

    def _copy_pairs(
        self,
        config: LogCategoryConfig,
        pairs: list[tuple[Path | None, Path | None]],
        action: str,
    ) -> BackupResult:
        result = BackupResult()
        copied_any = False
        for source, destination in pairs:
            if source is None or destination is None:
                logger.info(f"{action} for {config.name}: no folder configured, nothing to copy")
                continue
            source = Path(source).expanduser()
            destination = Path(destination).expanduser()
            if not source.is_dir():
                logger.info(f"{action} for {config.name}: source {source} does not exist, nothing to copy")
                continue
            copy_tree(source, destination, result)
            copied_any = True

        result.skipped = not copied_any
        logger.info(
            f"{action} for {config.name}: {result.copied_files}/{result.total_files} files copied, "
            f"{result.failed_files} failed"
        )
        return result
