"""Async writer configuration."""

from pydantic import BaseModel, ConfigDict, Field


class WriterConfig(BaseModel):
    """Retry policy for appending to log files."""

    model_config = ConfigDict(extra="forbid")

    max_attempts: int = Field(5, gt=0, description="Append attempts before an entry is dropped")
    retry_delay_secs: float = Field(0.05, ge=0, description="Delay before the first retry")
    backoff_multiplier: float = Field(2.0, ge=1, description="Multiplier applied to the delay after each retry")
