from .format_timestamp import format_timestamp
from .LogEntry import LogEntry


def format_log_line(entry: LogEntry) -> str:
    """Render an entry as one CSV line (without the trailing newline).

    The message is always quoted with embedded quotes doubled. Line breaks
    inside the message become spaces so one entry is always one line.
    """
    message = entry.message.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
    escaped = message.replace('"', '""')
    return f'{format_timestamp(entry.timestamp)},{entry.level.value},"{escaped}",{entry.source}'
