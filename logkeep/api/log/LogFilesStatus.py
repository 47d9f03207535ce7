"""Why a file listing is (or is not) empty."""

from enum import Enum


class LogFilesStatus(str, Enum):
    OK = "ok"
    MISSING_CONFIG = "missing_config"
    DISABLED = "disabled"
    MISSING_FOLDER = "missing_folder"
    UNREADABLE = "unreadable"
