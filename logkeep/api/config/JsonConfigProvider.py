"""Category entries read from the logkeep JSON configuration file."""

from pathlib import Path
from typing import Any

from ...utils.logger import get_logger
from .ConfigError import ConfigError
from .LogKeepConfig import LogKeepConfig

logger = get_logger("config")


class JsonConfigProvider:
    """Reads the ``categories`` list from config.json on every call."""

    def __init__(self, path: Path | None = None):
        self.path = path or LogKeepConfig.get_config_path()

    def get_all(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            logger.warning(f"No configuration file at {self.path}; no log categories loaded")
            return []
        try:
            return list(LogKeepConfig.load(self.path).categories)
        except ConfigError as e:
            logger.error(f"Cannot load log categories: {e}")
            return []
