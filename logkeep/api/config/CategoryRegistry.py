"""Category configuration registry."""

from typing import Any

from pydantic import ValidationError

from ...utils.logger import get_logger
from .ConfigProvider import ConfigProvider
from .LogCategory import LogCategory
from .LogCategoryConfig import LogCategoryConfig

logger = get_logger("registry")


class CategoryRegistry:
    """Holds the single active LogCategoryConfig per category.

    Read-only after ``initialize()``. Re-running ``initialize()`` rebuilds the
    mapping and swaps it in with one assignment, so concurrent readers see
    either the old or the new set, never a mix.
    """

    def __init__(self, provider: ConfigProvider):
        self._provider = provider
        self._configs: dict[LogCategory, LogCategoryConfig] = {}

    def initialize(self) -> None:
        """Load every category from the provider, skipping malformed entries."""
        configs: dict[LogCategory, LogCategoryConfig] = {}
        try:
            raw_entries = self._provider.get_all()
        except Exception as exc:
            logger.error(f"Configuration provider failed: {exc}")
            raw_entries = []

        for index, raw in enumerate(raw_entries):
            config = self._parse_entry(index, raw)
            if config is None:
                continue
            existing = configs.get(config.category)
            if existing is None or (not existing.enabled and config.enabled):
                configs[config.category] = config
            else:
                logger.warning(
                    f"Duplicate configuration for {config.category.value} ignored (entry {index}, name={config.name!r})"
                )

        self._configs = configs
        logger.info(f"Loaded {len(configs)} log categories: {[c.value for c in configs]}")

    @staticmethod
    def _parse_entry(index: int, raw: Any) -> LogCategoryConfig | None:
        if not isinstance(raw, dict):
            logger.warning(f"Skipping category entry {index}: expected an object, got {type(raw).__name__}")
            return None
        try:
            return LogCategoryConfig(**raw)
        except (ValidationError, ValueError, TypeError) as exc:
            logger.warning(f"Skipping malformed category entry {index}: {exc}")
            return None

    def get_config(self, category: LogCategory | str) -> LogCategoryConfig | None:
        """Return the active configuration for a category, or None."""
        try:
            key = LogCategory.parse(category)
        except ValueError:
            return None
        return self._configs.get(key)

    def categories(self) -> list[LogCategoryConfig]:
        return list(self._configs.values())
