"""Unit tests for logkeep.api.log.AsyncLogWriter."""

import importlib
import re
import threading
from unittest.mock import Mock, patch

import pytest

from logkeep.api.backup.BackupEngine import BackupEngine
from logkeep.api.config.LogCategory import LogCategory
from logkeep.api.config.WriterConfig import WriterConfig
from logkeep.api.log.AsyncLogWriter import AsyncLogWriter
from logkeep.api.log.LOG_FORMAT import LOG_HEADER
from logkeep.api.log.LogLevel import LogLevel
from logkeep.api.log.read_log_file import read_log_file
from logkeep.api.maintenance.MaintenanceEngine import MaintenanceEngine
from logkeep.api.maintenance.MaintenanceReport import MaintenanceReport
from tests.unit.conftest import category_config_dict, make_registry

pytestmark = [pytest.mark.log, pytest.mark.timeout(30)]

writer_module = importlib.import_module("logkeep.api.log.AsyncLogWriter")

CALLER_PREFIX = re.compile(r"^\[.*\..*\(\) Line:\d+\] : ")


def _files(tmp_path, category):
    folder = tmp_path / "Logs" / category
    return sorted(folder.glob("*.csv")) if folder.exists() else []


@pytest.fixture
def registry(tmp_path):
    return make_registry(
        category_config_dict(tmp_path, "Production"),
        category_config_dict(tmp_path, "Diagnostics"),
        category_config_dict(tmp_path, "Audit", enabled=False),
    )


def _writer(registry, maintenance=None, **kwargs):
    kwargs.setdefault("retry_delay_secs", 0.0)
    return AsyncLogWriter(registry, maintenance or MaintenanceEngine(BackupEngine()), **kwargs)


def test_entries_written_in_order_with_header(tmp_path, registry):
    with _writer(registry) as writer:
        for i in range(50):
            writer.log_info(f"message {i}", LogCategory.PRODUCTION)

    (path,) = _files(tmp_path, "Production")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == LOG_HEADER
    assert len(lines) == 51
    assert [line.split(",")[2].strip('"') for line in lines[1:]] == [f"message {i}" for i in range(50)]

    entries = read_log_file(path)
    assert len(entries) == 50
    assert all(e.source == "Production" and e.level is LogLevel.INFO for e in entries)


def test_levels_written(tmp_path, registry):
    with _writer(registry) as writer:
        writer.log_info("i", "Production")
        writer.log_warning("w", "Production")
        writer.log_error("e", "Production")

    (path,) = _files(tmp_path, "Production")
    levels = {e.message: e.level for e in read_log_file(path)}
    assert levels == {"i": LogLevel.INFO, "w": LogLevel.WARN, "e": LogLevel.ERROR}


def test_disabled_and_unconfigured_categories_do_nothing(tmp_path, registry):
    maintenance = Mock()
    with _writer(registry, maintenance) as writer:
        writer.log_info("x", LogCategory.AUDIT)
        writer.log_info("x", LogCategory.ERROR)
        writer.log_info("x", "NotACategory")

    assert _files(tmp_path, "Audit") == []
    assert _files(tmp_path, "Error") == []
    maintenance.apply_maintenance.assert_not_called()


def test_maintenance_runs_after_each_write(tmp_path, registry):
    maintenance = Mock()
    with _writer(registry, maintenance) as writer:
        writer.log_info("a", "Production")
        writer.log_info("b", "Production")

    assert maintenance.apply_maintenance.call_count == 2
    config, path = maintenance.apply_maintenance.call_args.args
    assert config.category is LogCategory.PRODUCTION
    assert path == _files(tmp_path, "Production")[0]


def test_diagnostics_error_gets_caller_prefix(tmp_path, registry):
    with _writer(registry) as writer:
        writer.log_error("boom", LogCategory.DIAGNOSTICS)

    (entry,) = read_log_file(_files(tmp_path, "Diagnostics")[0])
    assert CALLER_PREFIX.match(entry.message)
    assert entry.message.endswith(" : boom")
    assert "test_diagnostics_error_gets_caller_prefix()" in entry.message


def test_diagnostics_prefix_names_class(tmp_path, registry):
    class Scanner:
        def fail(self, writer):
            writer.log_error("scan failed", "Diagnostics")

    with _writer(registry) as writer:
        Scanner().fail(writer)

    (entry,) = read_log_file(_files(tmp_path, "Diagnostics")[0])
    assert entry.message.startswith("[Scanner.fail() Line:")


def test_explicit_caller(tmp_path, registry):
    with _writer(registry) as writer:
        writer.log_error("boom", "Diagnostics", caller="[Job.run() Line:7]")

    (entry,) = read_log_file(_files(tmp_path, "Diagnostics")[0])
    assert entry.message == "[Job.run() Line:7] : boom"


def test_non_diagnostics_error_not_prefixed(tmp_path, registry):
    with _writer(registry) as writer:
        writer.log_error("plain", "Production")

    (entry,) = read_log_file(_files(tmp_path, "Production")[0])
    assert entry.message == "plain"


def test_close_drains_queue_and_rejects_later_calls(tmp_path, registry):
    release = threading.Event()
    calls = []

    def slow_maintenance(config, path):
        release.wait(5)
        calls.append(path)

    maintenance = Mock()
    maintenance.apply_maintenance.side_effect = slow_maintenance
    writer = _writer(registry, maintenance)
    for i in range(5):
        writer.log_info(f"m{i}", "Production")

    closer = threading.Thread(target=writer.close)
    closer.start()
    release.set()
    closer.join(10)

    assert writer.closed
    writer.log_info("late", "Production")
    writer.close()

    messages = [e.message for e in read_log_file(_files(tmp_path, "Production")[0])]
    assert sorted(messages) == [f"m{i}" for i in range(5)]
    assert len(calls) == 5


def test_flush_waits_for_pending(tmp_path, registry):
    writer = _writer(registry)
    try:
        writer.log_info("pending", "Production")
        writer.flush()
        assert len(read_log_file(_files(tmp_path, "Production")[0])) == 1
    finally:
        writer.close()


def test_append_failure_dropped_after_retries(tmp_path, registry):
    sink = []
    attempts = []

    def always_locked(path, line):
        attempts.append(path)
        raise PermissionError("file in use")

    with patch.object(writer_module, "append_line", new=always_locked):
        writer = _writer(registry, Mock(), max_attempts=3, diagnostics_sink=sink.append)
    with writer:
        writer.log_info("lost", "Production")
        writer.flush()

    # Production entry plus the Diagnostics warning about it, 3 attempts each
    assert len(attempts) == 6
    assert any("Dropped INFO entry for Production after 3 attempts" in m for m in sink)
    assert writer.closed


def test_transient_failure_recovers(tmp_path, registry):
    from logkeep.api.log.append_line import append_line

    failures = {"left": 2}

    def flaky(path, line):
        if failures["left"]:
            failures["left"] -= 1
            raise PermissionError("file in use")
        append_line(path, line)

    with patch.object(writer_module, "append_line", new=flaky):
        writer = _writer(registry, max_attempts=5)
    with writer:
        writer.log_info("kept", "Production")

    (entry,) = read_log_file(_files(tmp_path, "Production")[0])
    assert entry.message == "kept"


def test_maintenance_errors_reported_to_diagnostics(tmp_path, registry):
    maintenance = Mock()
    maintenance.apply_maintenance.return_value = MaintenanceReport(errors=["Rotation failed for x: disk"])
    sink = []
    writer = _writer(registry, maintenance, diagnostics_sink=sink.append)
    writer.log_info("hello", "Production")
    writer.flush()
    writer.close()

    assert sink and "Rotation failed" in sink[0]
    diagnostics = read_log_file(_files(tmp_path, "Diagnostics")[0])
    assert any(e.level is LogLevel.WARN and "Rotation failed" in e.message for e in diagnostics)


def test_from_config(tmp_path, registry):
    writer = AsyncLogWriter.from_config(
        WriterConfig(max_attempts=2, retry_delay_secs=0.0), registry, MaintenanceEngine(BackupEngine())
    )
    with writer:
        assert writer.max_attempts == 2
        writer.log_info("x", "Production")
    assert len(_files(tmp_path, "Production")) == 1


@pytest.mark.parametrize("sep", ["\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_message_with_unicode_line_boundary_reads_back(tmp_path, registry, sep):
    message = f"before{sep}after"
    with _writer(registry) as writer:
        writer.log_info(message, LogCategory.PRODUCTION)

    (path,) = _files(tmp_path, "Production")
    assert [e.message for e in read_log_file(path)] == [message]
