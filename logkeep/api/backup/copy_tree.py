import shutil
from pathlib import Path

from ...utils.logger import get_logger
from .BackupResult import BackupResult

logger = get_logger("backup")


def copy_tree(
    source: Path,
    destination: Path,
    result: BackupResult | None = None,
    skip: Path | None = None,
) -> BackupResult:
    """Recursively copy ``source`` into ``destination``, overwriting same-named files.

    Failures on individual files or folders are counted in the result and
    logged; the copy carries on with the rest of the tree. ``skip`` defaults
    to the top-level destination, so a backup folder anywhere inside its own
    source is never copied into itself.
    """
    result = result if result is not None else BackupResult()
    source = source.resolve()
    destination = destination.resolve()
    skip = skip.resolve() if skip is not None else destination

    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning(f"Cannot create {destination}: {exc}")

    try:
        children = sorted(source.iterdir())
    except OSError as exc:
        logger.warning(f"Cannot list {source}: {exc}")
        return result

    for child in children:
        target = destination / child.name
        if child == skip:
            continue
        if child.is_dir():
            copy_tree(child, target, result, skip)
            continue

        result.total_files += 1
        try:
            shutil.copy2(child, target)
            result.copied_files += 1
        except OSError as exc:
            result.failed_files += 1
            logger.warning(f"Failed to copy {child} -> {target}: {exc}")

    return result
