"""
UCP Helper Core Module

Shared infrastructure: settings, logging and display formatters.
"""

from .config import UcpSettings, get_settings, reset_settings
from .formatters import (
    format_datetime,
    format_level,
    format_multiplier,
    get_utc_now,
    get_utc_timestamp,
)
from .logging import get_logger

__all__ = [
    # Config
    "UcpSettings",
    "get_settings",
    "reset_settings",
    # Logging
    "get_logger",
    # Formatters
    "format_datetime",
    "format_level",
    "format_multiplier",
    "get_utc_now",
    "get_utc_timestamp",
]
