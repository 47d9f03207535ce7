"""Unit tests for logkeep.api.backup.is_backup_due."""

from datetime import datetime

import pytest

from logkeep.api.backup.is_backup_due import is_backup_due
from logkeep.api.config.LogCategoryConfig import LogCategoryConfig
from tests.unit.conftest import category_config_dict

pytestmark = pytest.mark.backup


def _config(tmp_path, **overrides):
    return LogCategoryConfig(**category_config_dict(tmp_path, **overrides))


def test_manual_never_due(tmp_path):
    config = _config(tmp_path, backup_schedule="Manual", backup_time="03:00")
    assert not any(is_backup_due(config, datetime(2024, 3, d, 3, 0)) for d in range(1, 29))


@pytest.mark.parametrize(
    ("now", "expected"),
    [
        (datetime(2024, 3, 4, 2, 30), True),
        (datetime(2024, 3, 4, 2, 30, 59, 999999), True),
        (datetime(2024, 3, 4, 2, 31), False),
        (datetime(2024, 3, 4, 2, 29, 59), False),
        (datetime(2024, 3, 4, 14, 30), False),
        (datetime(2024, 7, 19, 2, 30), True),
    ],
)
def test_daily(tmp_path, now, expected):
    config = _config(tmp_path, backup_schedule="Daily", backup_time="02:30")
    assert is_backup_due(config, now) is expected


@pytest.mark.parametrize(
    ("now", "expected"),
    [
        (datetime(2024, 3, 8, 3, 0), True),  # Friday
        (datetime(2024, 3, 4, 3, 0), False),  # Monday
        (datetime(2024, 3, 8, 3, 1), False),
        (datetime(2024, 3, 15, 3, 0), True),
    ],
)
def test_weekly_uses_configured_day(tmp_path, now, expected):
    config = _config(tmp_path, backup_schedule="Weekly", backup_time="03:00", backup_day_of_week="Friday")
    assert is_backup_due(config, now) is expected


@pytest.mark.parametrize(
    ("now", "expected"),
    [
        (datetime(2024, 3, 15, 4, 0), True),
        (datetime(2024, 4, 15, 4, 0), True),
        (datetime(2024, 3, 1, 4, 0), False),
        (datetime(2024, 3, 15, 4, 5), False),
    ],
)
def test_monthly_uses_configured_day(tmp_path, now, expected):
    config = _config(tmp_path, backup_schedule="Monthly", backup_time="04:00", backup_day=15)
    assert is_backup_due(config, now) is expected


def test_pure(tmp_path):
    config = _config(tmp_path, backup_schedule="Daily", backup_time="02:30")
    now = datetime(2024, 3, 4, 2, 30)
    assert [is_backup_due(config, now) for _ in range(3)] == [True, True, True]
