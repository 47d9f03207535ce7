"""Output schemas for all command domains.

Importing this package registers every schema.
"""

from . import backup, config, log, maintenance  # noqa: F401
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
