"""List a category's log files."""

from collections.abc import Iterator

from ..config.ConfigError import ConfigError
from ..config.LogKeepConfig import LogKeepConfig
from ..config.load_registry import load_registry
from ..StageResult import StageResult
from .get_log_files import get_log_files
from .LogFilesStatus import LogFilesStatus


def cmd_files(category: str) -> StageResult:
    """List CATEGORY's log files, newest first."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            LogKeepConfig.load()
        except ConfigError as e:
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "category": category,
                "status": LogFilesStatus.MISSING_CONFIG.value,
                "files": [],
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Scanning log folder...")
        listing = get_log_files(load_registry(), category)
        files = [
            {
                "file_name": f.file_name,
                "full_path": str(f.full_path),
                "last_modified": f.last_modified.isoformat(timespec="seconds"),
                "display_size": f.display_size,
            }
            for f in listing.files
        ]

        warnings: list[str] = []
        errors: list[str] = []
        if listing.status == LogFilesStatus.UNREADABLE:
            errors.append(f"Log folder for {category} could not be read")
        elif not listing.ok:
            warnings.append(f"No listing for {category}: {listing.status.value}")

        result_obj.result = f"Found {len(files)} log file(s) for {category}" if listing.ok else f"No files: {listing.status.value}"
        result_obj.output = {
            "errors": errors,
            "warnings": warnings,
            "category": category,
            "status": listing.status.value,
            "files": files,
        }
        result_obj.success = not errors
        yield (1.0, "Complete")

    return StageResult(announce=f"Listing log files for {category}...", progress_callback=do_work)
