"""API module for logkeep.

Functions defined here serve as the single source of truth for the CLI.
Each domain package exposes plain functions/classes for in-process callers
and ``cmd_*`` functions returning a StageResult for the 4-stage CLI pattern.
"""

__all__ = []
