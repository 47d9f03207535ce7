"""Maintenance API module."""

from .MaintenanceEngine import MaintenanceEngine
from .MaintenanceReport import MaintenanceReport
from .purge_expired_files import purge_expired_files
from .rotate_if_oversize import rotate_if_oversize

__all__ = ["MaintenanceEngine", "MaintenanceReport", "purge_expired_files", "rotate_if_oversize"]
