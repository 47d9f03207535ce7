"""Write a default configuration file."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .default_category_configs import default_category_configs
from .LogKeepConfig import LogKeepConfig


def cmd_init(base_dir: str = "", force: bool = False) -> StageResult:
    """Write config.json with the four stock categories.

    Args:
        base_dir: Root for Logs/ and LogsBackup/ (default: logkeep home)
        force: Overwrite an existing configuration file
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = LogKeepConfig.get_config_path()
        root = Path(base_dir).expanduser().resolve() if base_dir else LogKeepConfig.get_home_dir()
        yield (0.2, "Checking existing configuration...")

        if config_path.exists() and not force:
            result_obj.result = f"Configuration already exists at {config_path} (use --force to overwrite)"
            result_obj.output = {
                "errors": [],
                "warnings": ["Configuration already exists"],
                "config_path": str(config_path),
                "created": False,
                "categories": [],
            }
            result_obj.success = True
            yield (1.0, "Complete")
            return

        yield (0.5, "Building default categories...")
        categories = default_category_configs(root)
        config = LogKeepConfig(categories=[c.model_dump(mode="json") for c in categories])

        yield (0.8, "Writing configuration...")
        try:
            config.save()
        except RuntimeError as e:
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "config_path": str(config_path),
                "created": False,
                "categories": [],
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.result = f"Wrote default configuration to {config_path}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "config_path": str(config_path),
            "created": True,
            "categories": [c.name for c in categories],
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
