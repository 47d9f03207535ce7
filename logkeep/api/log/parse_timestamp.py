from datetime import datetime

from .LOG_FORMAT import TIMESTAMP_PATTERN


def parse_timestamp(value: str) -> datetime | None:
    """Parse yyyy-MM-dd HH:mm:ss:fff, returning None when the text does not match."""
    match = TIMESTAMP_PATTERN.match(value.strip())
    if not match:
        return None
    year, month, day, hour, minute, second, millis = (int(g) for g in match.groups())
    try:
        return datetime(year, month, day, hour, minute, second, millis * 1000)
    except ValueError:
        return None
