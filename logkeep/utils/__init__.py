"""logkeep utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .file_retry import file_retry
from .get_logkeep_home import get_logkeep_home
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "file_retry",
    "get_logger",
    "get_logkeep_home",
]
