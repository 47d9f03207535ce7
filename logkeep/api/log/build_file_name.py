from datetime import datetime

from .LOG_FORMAT import DATE_TOKEN_PATTERN, LOG_EXTENSION


def build_file_name(pattern: str, now: datetime) -> str:
    """Substitute the date token in ``pattern`` and append the log extension."""
    return DATE_TOKEN_PATTERN.sub(now.strftime("%Y%m%d"), pattern) + LOG_EXTENSION
