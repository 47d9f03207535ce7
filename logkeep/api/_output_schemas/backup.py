"""Output schemas for backup commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class BackupRunOutput(BaseOutputSchema):
    """Output schema for backup run command."""
    category: str = Field(..., description="Category backed up")
    total_files: int = Field(..., description="Files found in source trees")
    copied_files: int = Field(..., description="Files copied")
    failed_files: int = Field(..., description="Files that failed to copy")
    skipped: bool = Field(..., description="True when the source folder did not exist")


class BackupRestoreOutput(BaseOutputSchema):
    """Output schema for backup restore command."""
    category: str = Field(..., description="Category restored")
    total_files: int = Field(..., description="Files found in backup trees")
    copied_files: int = Field(..., description="Files copied back")
    failed_files: int = Field(..., description="Files that failed to copy")
    skipped: bool = Field(..., description="True when the backup folder did not exist")


class BackupDueOutput(BaseOutputSchema):
    """Output schema for backup due command."""
    category: str = Field(..., description="Category checked")
    schedule: str = Field(..., description="Configured backup schedule")
    at: str = Field(..., description="Instant that was checked (ISO format)")
    due: bool = Field(..., description="Whether a backup is due at that instant")


register_output_schema("backup", "run", BackupRunOutput)
register_output_schema("backup", "restore", BackupRestoreOutput)
register_output_schema("backup", "due", BackupDueOutput)
