"""Config API module."""

from .BackupSchedule import BackupSchedule
from .CategoryRegistry import CategoryRegistry
from .ConfigError import ConfigError
from .ConfigProvider import ConfigProvider
from .default_category_configs import default_category_configs
from .JsonConfigProvider import JsonConfigProvider
from .load_registry import load_registry
from .LogCategory import LogCategory
from .LogCategoryConfig import LogCategoryConfig
from .LogKeepConfig import LogKeepConfig
from .StaticConfigProvider import StaticConfigProvider
from .WriterConfig import WriterConfig

__all__ = [
    "BackupSchedule",
    "CategoryRegistry",
    "ConfigError",
    "ConfigProvider",
    "JsonConfigProvider",
    "LogCategory",
    "LogCategoryConfig",
    "LogKeepConfig",
    "StaticConfigProvider",
    "WriterConfig",
    "default_category_configs",
    "load_registry",
]
