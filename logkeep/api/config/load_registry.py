from pathlib import Path

from .CategoryRegistry import CategoryRegistry
from .JsonConfigProvider import JsonConfigProvider


def load_registry(path: Path | None = None) -> CategoryRegistry:
    """Build and initialize a registry backed by the JSON configuration file."""
    registry = CategoryRegistry(JsonConfigProvider(path))
    registry.initialize()
    return registry
