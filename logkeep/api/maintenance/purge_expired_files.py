from datetime import datetime, timedelta
from pathlib import Path

from ...utils.logger import get_logger
from ..config.LogCategoryConfig import LogCategoryConfig

logger = get_logger("maintenance")


def purge_expired_files(
    config: LogCategoryConfig,
    now: datetime | None = None,
    keep: Path | None = None,
) -> tuple[list[Path], list[str]]:
    """Delete files in data_folder whose last write is older than retention_days.

    Runs only when auto_purge is set and retention_days > 0. ``keep`` (the
    active file) is never deleted. A file that cannot be deleted is reported
    and the purge continues.

    Returns:
        Tuple of (deleted paths, error messages)
    """
    deleted: list[Path] = []
    errors: list[str] = []
    if not config.auto_purge or config.retention_days <= 0:
        return deleted, errors

    folder = Path(config.data_folder).expanduser()
    if not folder.is_dir():
        return deleted, errors

    now = now or datetime.now()
    cutoff = (now - timedelta(days=config.retention_days)).timestamp()
    keep_resolved = keep.resolve() if keep is not None else None

    for path in folder.iterdir():
        if not path.is_file():
            continue
        if keep_resolved is not None and path.resolve() == keep_resolved:
            continue
        try:
            if path.stat().st_mtime < cutoff:
                path.unlink()
                deleted.append(path)
        except OSError as exc:
            errors.append(f"Cannot delete {path}: {exc}")

    if deleted:
        logger.info(f"Purged {len(deleted)} expired file(s) from {folder}")
    return deleted, errors
