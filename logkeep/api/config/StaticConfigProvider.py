"""In-memory category entries."""

from typing import Any

from pydantic import BaseModel


class StaticConfigProvider:
    """Serves a fixed list of entries (dicts or LogCategoryConfig models)."""

    def __init__(self, entries: list[Any]):
        self._entries = list(entries)

    def get_all(self) -> list[Any]:
        return [e.model_dump() if isinstance(e, BaseModel) else e for e in self._entries]
