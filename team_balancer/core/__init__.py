"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import ServiceException, ValidationError
from .enums import Tier, Division, Role, SplitMode

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "ServiceException",
    "ValidationError",
    # Enums
    "Tier",
    "Division",
    "Role",
    "SplitMode",
]
