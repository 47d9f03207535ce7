"""Per-category log configuration."""

from datetime import time
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .BackupSchedule import BackupSchedule
from .LogCategory import LogCategory
from .WEEKDAYS import WEEKDAYS


class LogCategoryConfig(BaseModel):
    """Policy for one log category: where it writes, how it rotates, when it is backed up."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Log name, written into the Source column")
    category: LogCategory = Field(..., description="Category this configuration applies to")
    enabled: bool = Field(False, description="Disabled categories never write or rotate")

    data_folder: Path = Field(..., description="Folder holding the active and rotated files")
    file_name_pattern: str = Field(..., min_length=1, description="Base file name containing the yyyyMMdd token")

    retention_days: int = Field(0, ge=0, description="Delete files older than this many days, 0 disables")
    retention_size_mb: int = Field(0, ge=0, description="Rotate the current file above this size, 0 disables")
    auto_purge: bool = Field(False, description="Gate for time-based retention")

    backup_schedule: BackupSchedule = Field(BackupSchedule.MANUAL, description="When backups run automatically")
    backup_time: time = Field(time(0, 0), description="Time of day (hour and minute) for scheduled backups")
    backup_day_of_week: str = Field("Monday", description="Weekday for weekly backups")
    backup_day: int = Field(1, ge=1, le=28, description="Day of month for monthly backups")
    backup_folder: Path | None = Field(None, description="Backup destination for data_folder")

    asset_source_path: Path | None = Field(None, description="Secondary asset tree backed up with this category")
    asset_backup_path: Path | None = Field(None, description="Backup destination for the asset tree")

    description: str = ""
    remark: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        # name is written unquoted into the CSV Source column
        if any(ch in value for ch in (",", '"', "\n", "\r")):
            raise ValueError(f"name must not contain commas, quotes or newlines: {value!r}")
        return value

    @field_validator("backup_day_of_week", mode="before")
    @classmethod
    def validate_day_of_week(cls, value: Any) -> Any:
        if value is None or value == "":
            return "Monday"
        if not isinstance(value, str):
            raise ValueError(f"backup_day_of_week must be a weekday name, got {type(value).__name__}")
        for day in WEEKDAYS:
            if day.lower() == value.strip().lower():
                return day
        raise ValueError(f"backup_day_of_week must be one of {list(WEEKDAYS)}, got {value!r}")

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LogCategory.parse(value)
        return value

    @model_validator(mode="after")
    def validate_asset_pair(self) -> "LogCategoryConfig":
        if (self.asset_source_path is None) != (self.asset_backup_path is None):
            raise ValueError("asset_source_path and asset_backup_path must be configured together")
        return self

    @property
    def has_assets(self) -> bool:
        return self.asset_source_path is not None and self.asset_backup_path is not None
