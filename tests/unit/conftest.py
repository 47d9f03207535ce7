"""Unit test fixtures.

Configuration helpers live in tests/conftest.py.
"""

import pytest

from logkeep.api.config.LogCategoryConfig import LogCategoryConfig
from tests.conftest import category_config_dict, make_registry, minimal_config_dict, run_cmd, write_config

__all__ = [
    "category_config_dict",
    "make_registry",
    "minimal_config_dict",
    "run_cmd",
    "write_config",
]


@pytest.fixture
def production_config(tmp_path) -> LogCategoryConfig:
    """Enabled Production configuration under tmp_path."""
    return LogCategoryConfig(**category_config_dict(tmp_path, "Production"))
