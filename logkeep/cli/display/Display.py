"""Abstract display interface."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where the four command stages are rendered."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Announce what a command is about to do."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs) -> None: ...

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Emit structured command output (``format`` kwarg: json or yaml)."""
