"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""
    config_path: str = Field(..., description="Path to the configuration file")
    content: dict[str, Any] = Field(..., description="Configuration content, empty dict on error")
    categories: list[str] = Field(..., description="Categories that loaded successfully")


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""
    config_path: str = Field(..., description="Path to the configuration file")
    created: bool = Field(..., description="Whether a new configuration file was written")
    categories: list[str] = Field(..., description="Category names in the written configuration")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "init", ConfigInitOutput)
