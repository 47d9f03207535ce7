import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_logkeep_home import get_logkeep_home

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(logkeep_home: Path | None = None, level: str = "INFO") -> None:
    """Configure internal logkeep diagnostics logging.

    This is the package's own operational log (retries, skipped config entries,
    maintenance failures). It is separate from the per-category CSV files.

    Args:
        logkeep_home: Path to logkeep home directory. If None, derived from environment.
        level: Logging level name
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if logkeep_home is None:
        logkeep_home = get_logkeep_home()

    # Ensure directory exists
    logkeep_home.mkdir(parents=True, exist_ok=True)
    log_file = logkeep_home / "logkeep.log"

    root_logger = logging.getLogger("logkeep")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"logkeep.{name}")
