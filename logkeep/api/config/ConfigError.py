"""Configuration error."""

from ..LogKeepError import LogKeepError


class ConfigError(LogKeepError, ValueError):
    """Raised when the logkeep configuration file is missing or invalid."""
