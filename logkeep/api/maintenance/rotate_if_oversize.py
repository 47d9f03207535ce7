from datetime import datetime
from pathlib import Path

from ..config.LogCategoryConfig import LogCategoryConfig
from ..log.write_header import write_header

_BYTES_PER_MB = 1024 * 1024


def rotate_if_oversize(config: LogCategoryConfig, current_path: Path, now: datetime | None = None) -> Path | None:
    """Move an oversize file aside and recreate it with just the header.

    The moved file keeps the base name plus a timestamp suffix, in the same
    folder. Returns the new path of the moved content, or None when no
    rotation was needed.
    """
    if config.retention_size_mb <= 0 or not current_path.exists():
        return None
    if current_path.stat().st_size <= config.retention_size_mb * _BYTES_PER_MB:
        return None

    now = now or datetime.now()
    suffix = now.strftime("%Y%m%d_%H%M%S_%f")
    target = current_path.with_name(f"{current_path.stem}_{suffix}{current_path.suffix}")
    counter = 1
    while target.exists():
        target = current_path.with_name(f"{current_path.stem}_{suffix}_{counter}{current_path.suffix}")
        counter += 1

    current_path.rename(target)
    write_header(current_path)
    return target
