"""Producer-facing asynchronous log writer."""

import inspect
import queue
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

from ...utils.file_retry import file_retry
from ...utils.logger import get_logger
from ..config.CategoryRegistry import CategoryRegistry
from ..config.LogCategory import LogCategory
from ..config.WriterConfig import WriterConfig
from ..maintenance.MaintenanceReport import MaintenanceReport
from .append_line import append_line
from .caller_context import caller_context
from .format_log_line import format_log_line
from .LogEntry import LogEntry
from .LogLevel import LogLevel
from .resolve_log_file import resolve_log_file

if TYPE_CHECKING:
    from ..maintenance.MaintenanceEngine import MaintenanceEngine

logger = get_logger("writer")

_STOP = object()


class AsyncLogWriter:
    """Queues log calls and writes them from one background thread.

    ``log_info``, ``log_warning`` and ``log_error`` return immediately and
    never raise. The worker is the only thread in the process appending to
    category files; it drains the queue in order, resolves the file, appends
    with a bounded retry and then runs maintenance on the same thread, so a
    rotation is always in place before the next write.

    Usage:
        with AsyncLogWriter(registry, MaintenanceEngine(BackupEngine())) as writer:
            writer.log_info("Cycle complete", LogCategory.PRODUCTION)
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        maintenance: "MaintenanceEngine",
        *,
        max_attempts: int = 5,
        retry_delay_secs: float = 0.05,
        backoff_multiplier: float = 2.0,
        diagnostics_sink: Callable[[str], None] | None = None,
    ):
        self.registry = registry
        self.maintenance = maintenance
        self.max_attempts = max_attempts
        self.diagnostics_sink = diagnostics_sink

        self._append = file_retry(
            max_attempts=max_attempts,
            delay_secs=retry_delay_secs,
            backoff_multiplier=backoff_multiplier,
            exceptions=(OSError,),
        )(append_line)

        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._worker = threading.Thread(target=self._run, name="logkeep-writer", daemon=True)
        self._worker.start()

    @classmethod
    def from_config(
        cls,
        writer_config: WriterConfig,
        registry: CategoryRegistry,
        maintenance: "MaintenanceEngine",
        diagnostics_sink: Callable[[str], None] | None = None,
    ) -> "AsyncLogWriter":
        return cls(
            registry,
            maintenance,
            max_attempts=writer_config.max_attempts,
            retry_delay_secs=writer_config.retry_delay_secs,
            backoff_multiplier=writer_config.backoff_multiplier,
            diagnostics_sink=diagnostics_sink,
        )

    # -- producer API -------------------------------------------------------

    def log_info(self, message: str, category: LogCategory | str) -> None:
        self._enqueue(LogLevel.INFO, message, category)

    def log_warning(self, message: str, category: LogCategory | str) -> None:
        self._enqueue(LogLevel.WARN, message, category)

    def log_error(self, message: str, category: LogCategory | str, caller: str | None = None) -> None:
        """Queue an ERROR entry.

        On the Diagnostics category the message is prefixed with the caller's
        ``[Type.member() Line:N]``; pass ``caller`` to supply it explicitly.
        """
        try:
            if LogCategory.parse(category) == LogCategory.DIAGNOSTICS:
                if caller is None:
                    frame = inspect.currentframe()
                    try:
                        caller = caller_context(frame.f_back if frame is not None else None)
                    finally:
                        del frame
                message = f"{caller} : {message}"
        except ValueError:
            # Unknown category: _enqueue drops it
            pass
        self._enqueue(LogLevel.ERROR, message, category)

    @property
    def closed(self) -> bool:
        return self._closed

    def flush(self) -> None:
        """Block until every entry queued so far has been processed."""
        if threading.current_thread() is self._worker:
            return
        self._queue.join()

    def close(self) -> None:
        """Stop accepting entries, process everything already queued, join the worker."""
        with self._lock:
            if not self._closed:
                self._closed = True
                self._queue.put(_STOP)
        if threading.current_thread() is not self._worker:
            self._worker.join()

    def __enter__(self) -> "AsyncLogWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # -- worker -------------------------------------------------------------

    def _enqueue(self, level: LogLevel, message: str, category: LogCategory | str) -> bool:
        try:
            entry = LogEntry(
                timestamp=datetime.now(),
                level=level,
                message=str(message),
                category=LogCategory.parse(category),
            )
        except Exception as exc:
            logger.warning(f"Dropping {level.value} log call: {exc}")
            return False

        with self._lock:
            if self._closed:
                return False
            self._queue.put(entry)
        return True

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self._process(item)
            except Exception as exc:
                logger.error(f"Unexpected failure processing log entry: {exc}", exc_info=True)
            finally:
                self._queue.task_done()

    def _process(self, entry: LogEntry) -> None:
        config = self.registry.get_config(entry.category)
        if config is None or not config.enabled:
            return

        try:
            path = resolve_log_file(self.registry, entry.category)
        except OSError as exc:
            self._report(entry, f"Cannot prepare log file for {config.name}: {exc}")
            return
        if path is None:
            return

        line = format_log_line(replace(entry, source=config.name))
        try:
            self._append(path, line)
        except OSError as exc:
            self._report(entry, f"Dropped {entry.level.value} entry for {config.name} after {self.max_attempts} attempts: {exc}")
            return

        report = self.maintenance.apply_maintenance(config, path)
        if isinstance(report, MaintenanceReport):
            for message in report.errors:
                self._report(entry, message)

    def _report(self, entry: LogEntry, message: str) -> None:
        logger.warning(message)
        if self.diagnostics_sink is not None:
            try:
                self.diagnostics_sink(message)
            except Exception as exc:
                logger.debug(f"Diagnostics sink failed: {exc}")
        # Failures while writing diagnostics are not written back to diagnostics
        if entry.category != LogCategory.DIAGNOSTICS:
            self._enqueue(LogLevel.WARN, message, LogCategory.DIAGNOSTICS)
