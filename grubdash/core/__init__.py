"""
Core module initialization.
Exports configuration, logging utilities and domain errors.
"""

from grubdash.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from grubdash.core.exceptions import GrubDashError, InvalidRequest, NotFound

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "GrubDashError",
    "InvalidRequest",
    "NotFound",
]
