from pathlib import Path

from .LOG_FORMAT import LOG_HEADER


def write_header(path: Path) -> None:
    """Create ``path`` holding only the header line (overwrites)."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(LOG_HEADER + "\n")
