"""Top-level logkeep configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_logkeep_home import get_logkeep_home
from .ConfigError import ConfigError
from .InternalLogConfig import InternalLogConfig
from .WriterConfig import WriterConfig


class LogKeepConfig(BaseModel):
    """Top-level configuration stored at $LOGKEEP_HOME/config.json.

    ``categories`` holds raw entries on purpose: each one is validated on its
    own by the CategoryRegistry so a single malformed category does not stop
    the others from loading.
    """

    model_config = ConfigDict(extra="forbid")

    writer: WriterConfig = Field(default_factory=WriterConfig)
    logging: InternalLogConfig = Field(default_factory=InternalLogConfig)
    categories: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get logkeep home directory based on LOGKEEP_HOME or default to ~/.logkeep."""
        return get_logkeep_home()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the logkeep home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "LogKeepConfig":
        """Load and validate config from file.

        Raises:
            ConfigError: If config file not found, invalid JSON, or validation error
        """
        path = path or cls.get_config_path()

        if not path.exists():
            raise ConfigError(f"Configuration file not found at {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")

    def save(self, path: Path | None = None) -> None:
        """Save the configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = path or self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
