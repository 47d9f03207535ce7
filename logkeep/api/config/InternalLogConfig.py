"""Internal diagnostics logging configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class InternalLogConfig(BaseModel):
    """Level for logkeep's own operational log."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
