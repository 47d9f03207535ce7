from datetime import datetime

from ..config.LogCategoryConfig import LogCategoryConfig


def is_manual_due(config: LogCategoryConfig, now: datetime) -> bool:  # noqa: ARG001
    """Manual backups are never due on a schedule."""
    return False
