"""Output schemas for log commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LogFileRow(BaseModel):
    file_name: str
    full_path: str
    last_modified: str
    display_size: str


class LogEntryRow(BaseModel):
    timestamp: str
    level: str
    message: str
    source: str


class LogWriteOutput(BaseOutputSchema):
    """Output schema for log write command."""
    category: str = Field(..., description="Category written to")
    level: str = Field(..., description="Level of the written entry")
    log_path: str = Field(..., description="Resolved file path, empty string if category inactive")
    written: bool = Field(..., description="Whether the entry reached the file")


class LogFilesOutput(BaseOutputSchema):
    """Output schema for log files command."""
    category: str = Field(..., description="Category listed")
    status: str = Field(..., description="Listing status (ok, missing_config, disabled, missing_folder, unreadable)")
    files: list[LogFileRow] = Field(..., description="Files, newest first")


class LogReadOutput(BaseOutputSchema):
    """Output schema for log read command."""
    log_path: str = Field(..., description="File that was read, empty string if category inactive")
    count: int = Field(..., description="Number of parsed entries")
    entries: list[LogEntryRow] = Field(..., description="Entries, newest first")


register_output_schema("log", "write", LogWriteOutput)
register_output_schema("log", "files", LogFilesOutput)
register_output_schema("log", "read", LogReadOutput)
