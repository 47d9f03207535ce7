from datetime import datetime


def format_timestamp(value: datetime) -> str:
    """Format as yyyy-MM-dd HH:mm:ss:fff."""
    return f"{value:%Y-%m-%d %H:%M:%S}:{value.microsecond // 1000:03d}"
