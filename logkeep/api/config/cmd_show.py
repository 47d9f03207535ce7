"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .CategoryRegistry import CategoryRegistry
from .ConfigError import ConfigError
from .LogKeepConfig import LogKeepConfig
from .StaticConfigProvider import StaticConfigProvider


def cmd_show() -> StageResult:
    """Show the configuration file and which categories load from it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = LogKeepConfig.get_config_path()
        try:
            config = LogKeepConfig.load()
        except ConfigError as e:
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "config_path": str(config_path),
                "content": {},
                "categories": [],
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Validating categories...")
        registry = CategoryRegistry(StaticConfigProvider(config.categories))
        registry.initialize()
        loaded = [c.category.value for c in registry.categories()]
        warnings: list[str] = []
        if len(loaded) < len(config.categories):
            skipped = len(config.categories) - len(loaded)
            warnings.append(f"Skipped {skipped} invalid or duplicate category entries; see logkeep.log")

        result_obj.result = f"Loaded {len(loaded)} categor{'y' if len(loaded) == 1 else 'ies'}"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "config_path": str(config_path),
            "content": config.to_dict(),
            "categories": loaded,
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Showing configuration...", progress_callback=do_work)
