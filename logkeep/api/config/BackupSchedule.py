"""Backup schedule enum."""

from enum import Enum


class BackupSchedule(str, Enum):
    MANUAL = "Manual"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
