"""Base error for logkeep."""


class LogKeepError(Exception):
    """Base exception for all logkeep errors raised to programmatic callers."""
