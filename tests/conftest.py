"""Shared pytest configuration and fixtures for all tests."""

import json
import tempfile
from pathlib import Path

import pytest


def pytest_configure(config):
    """Register markers and send logkeep's own log somewhere disposable.

    Runs before any test module imports logkeep, so no test run writes to the
    real ~/.logkeep.
    """
    from logkeep.utils.logger import configure_logging

    for marker in ("unit", "integration", "smoke", "config", "log", "maintenance", "backup"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")
    configure_logging(Path(tempfile.mkdtemp(prefix="logkeep-tests-")), level="DEBUG")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def category_config_dict(base: Path, category: str = "Production", /, **overrides) -> dict:
    """Enabled category entry rooted at ``base``, as it appears in config.json."""
    entry = {
        "name": category,
        "category": category,
        "enabled": True,
        "data_folder": str(base / "Logs" / category),
        "backup_folder": str(base / "LogsBackup" / category),
        "file_name_pattern": f"{category}_{{yyyyMMdd}}",
        "retention_days": 30,
        "retention_size_mb": 5,
        "auto_purge": True,
        "backup_schedule": "Manual",
        "backup_time": "03:00",
    }
    entry.update(overrides)
    return entry


def minimal_config_dict(base: Path) -> dict:
    """Configuration with all four categories enabled and nothing scheduled."""
    return {
        "writer": {"max_attempts": 3, "retry_delay_secs": 0.0, "backoff_multiplier": 1.0},
        "logging": {"level": "DEBUG"},
        "categories": [
            category_config_dict(base, name) for name in ("Production", "Audit", "Error", "Diagnostics")
        ],
    }


def make_registry(*entries: dict):
    """Initialized CategoryRegistry over in-memory entries."""
    from logkeep.api.config.CategoryRegistry import CategoryRegistry
    from logkeep.api.config.StaticConfigProvider import StaticConfigProvider

    registry = CategoryRegistry(StaticConfigProvider(list(entries)))
    registry.initialize()
    return registry


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def logkeep_home(tmp_path: Path, monkeypatch) -> Path:
    """Set LOGKEEP_HOME to an empty directory (no config file)."""
    home = tmp_path / ".logkeep"
    home.mkdir()
    home = home.resolve()
    monkeypatch.setenv("LOGKEEP_HOME", str(home))
    return home


@pytest.fixture
def configured_home(logkeep_home: Path, tmp_path: Path) -> Path:
    """LOGKEEP_HOME holding a config.json with all four categories enabled."""
    (logkeep_home / "config.json").write_text(json.dumps(minimal_config_dict(tmp_path), indent=2), encoding="utf-8")
    return logkeep_home


def write_config(home: Path, config: dict) -> Path:
    path = home / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
