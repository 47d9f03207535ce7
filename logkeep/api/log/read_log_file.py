from pathlib import Path

from ...utils.logger import get_logger
from .LOG_FORMAT import LOG_HEADER
from .LogEntry import LogEntry
from .LogLevel import LogLevel
from .parse_timestamp import parse_timestamp
from .split_csv_line import split_csv_line

logger = get_logger("reader")


def read_log_file(path: Path | str) -> list[LogEntry]:
    """Parse a log file into entries sorted newest first.

    Header, blank lines, short rows and rows whose timestamp does not parse
    are skipped; the rest of the file is still returned.
    """
    path = Path(path)
    if not path.is_file():
        logger.warning(f"Log file not found: {path}")
        return []

    try:
        lines = path.read_text(encoding="utf-8", errors="replace").split("\n")
    except OSError as exc:
        logger.error(f"Error reading log file {path}: {exc}")
        return []

    entries: list[LogEntry] = []
    skipped = 0
    for number, line in enumerate(lines):
        if not line.strip():
            continue
        if number == 0 and line.strip() == LOG_HEADER:
            continue

        parts = split_csv_line(line)
        if len(parts) < 4:
            skipped += 1
            continue

        timestamp = parse_timestamp(parts[0])
        if timestamp is None:
            skipped += 1
            continue

        try:
            level = LogLevel(parts[1].strip().upper())
        except ValueError:
            skipped += 1
            continue

        entries.append(LogEntry(timestamp=timestamp, level=level, message=parts[2], source=parts[3]))

    if skipped:
        logger.debug(f"Skipped {skipped} malformed row(s) in {path}")

    entries.sort(key=lambda e: e.timestamp, reverse=True)
    return entries
