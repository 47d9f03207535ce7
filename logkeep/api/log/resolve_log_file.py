from datetime import datetime
from pathlib import Path

from ..config.CategoryRegistry import CategoryRegistry
from ..config.LogCategory import LogCategory
from .build_file_name import build_file_name
from .write_header import write_header


def resolve_log_file(registry: CategoryRegistry, category: LogCategory | str, now: datetime | None = None) -> Path | None:
    """Return today's log file for ``category``, creating folder and header as needed.

    Returns None (with no filesystem side effects) when the category is
    unconfigured or disabled. Safe to call once per write.
    """
    config = registry.get_config(category)
    if config is None or not config.enabled:
        return None

    now = now or datetime.now()
    folder = Path(config.data_folder).expanduser()
    folder.mkdir(parents=True, exist_ok=True)

    path = (folder / build_file_name(config.file_name_pattern, now)).resolve()
    if not path.exists():
        write_header(path)
    return path
