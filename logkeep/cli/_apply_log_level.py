import logging

from logkeep.api.config.ConfigError import ConfigError
from logkeep.api.config.LogKeepConfig import LogKeepConfig
from logkeep.utils.logger import configure_logging


def _apply_log_level() -> None:
    """Set the internal log level from config.json, if one is readable."""
    configure_logging()
    try:
        level = LogKeepConfig.load().logging.level
    except ConfigError:
        return
    logging.getLogger("logkeep").setLevel(level)
