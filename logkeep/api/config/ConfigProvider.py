"""Source of raw category configuration entries."""

from typing import Any, Protocol


class ConfigProvider(Protocol):
    """Anything that can hand the registry its raw category entries."""

    def get_all(self) -> list[dict[str, Any]]: ...
