"""logkeep - per-category CSV log lifecycle management."""

__version__ = "0.1.0"
