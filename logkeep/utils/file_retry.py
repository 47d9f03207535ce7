"""Retry logic for file operations that race with external readers."""

import logging
import time
from functools import wraps
from typing import Callable, TypeVar

logger = logging.getLogger("logkeep.retry")

T = TypeVar("T")


def file_retry(
    max_attempts: int = 5,
    delay_secs: float = 0.05,
    backoff_multiplier: float = 2.0,
    exceptions: tuple = (OSError,),
):
    """
    Decorator to retry file operations on transient sharing violations.

    Args:
        max_attempts: Maximum number of attempts (including the first)
        delay_secs: Initial delay between retries in seconds
        backoff_multiplier: Multiplier for exponential backoff
        exceptions: Tuple of exception types to retry on

    Example:
        @file_retry(max_attempts=3, delay_secs=0.05)
        def append(path, line):
            with path.open("a", encoding="utf-8") as fh:
                fh.write(line)
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            attempt = 0
            current_delay = delay_secs

            while True:
                try:
                    return func(*args, **kwargs)
                except exceptions as exc:
                    attempt += 1
                    if attempt >= max_attempts:
                        logger.warning(
                            f"File operation failed after {max_attempts} attempts: {func.__name__}: {exc}",
                            extra={"operation": func.__name__, "attempts": attempt},
                        )
                        raise

                    logger.debug(
                        f"File operation failed (attempt {attempt}/{max_attempts}): {func.__name__}. "
                        f"Retrying in {current_delay}s...",
                        extra={"operation": func.__name__, "attempt": attempt, "delay": current_delay},
                    )

                    time.sleep(current_delay)
                    current_delay *= backoff_multiplier

        return wrapper

    return decorator
