from pathlib import Path


def append_line(path: Path, line: str) -> None:
    """Append one line to ``path``. Raises OSError on sharing violations."""
    with path.open("a", encoding="utf-8", newline="") as fh:
        fh.write(line + "\n")
