"""Output schemas for maintenance commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MaintenanceRunOutput(BaseOutputSchema):
    """Output schema for maintenance run command."""
    category: str = Field(..., description="Category maintained")
    log_path: str = Field(..., description="Current file path, empty string if category inactive")
    rotated_to: str = Field(..., description="Path the oversize file was moved to, empty string if no rotation")
    purged: list[str] = Field(..., description="Files deleted by time retention")
    backed_up: bool = Field(..., description="Whether a scheduled backup ran")


class MaintenanceSweepOutput(BaseOutputSchema):
    """Output schema for maintenance sweep command."""
    backed_up: list[str] = Field(..., description="Categories whose scheduled backup ran")
    purged: dict[str, list[str]] = Field(..., description="Deleted files per category")


register_output_schema("maintenance", "run", MaintenanceRunOutput)
register_output_schema("maintenance", "sweep", MaintenanceSweepOutput)
