"""
UCP Helper Formatters

Utility functions for formatting scaling values and timestamps for display.
"""

from datetime import datetime, timezone

# =============================================================================
# Scaling Value Formatting
# =============================================================================


def format_multiplier(value: float, precision: int = 2) -> str:
    """
    Format a weight multiplier with an "x" suffix.

    Args:
        value: Multiplier value
        precision: Decimal places (default: 2)

    Returns:
        Formatted string like "1.60x"

    Examples:
        >>> format_multiplier(1.6)
        '1.60x'
        >>> format_multiplier(0.15)
        '0.15x'
    """
    return f"{value:.{precision}f}x"


def format_level(value: float) -> str:
    """
    Format a level for display, dropping the fraction of whole numbers.

    Examples:
        >>> format_level(40)
        '40'
        >>> format_level(21.25)
        '21.25'
    """
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


# =============================================================================
# DateTime Formatting
# =============================================================================


def format_datetime(dt: datetime) -> str:
    """
    Format datetime for display.

    Args:
        dt: datetime object

    Returns:
        ISO format string
    """
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def get_utc_now() -> datetime:
    """
    Get current UTC datetime.

    Returns:
        Current datetime with UTC timezone
    """
    return datetime.now(timezone.utc)


def get_utc_timestamp() -> str:
    """
    Get current UTC timestamp string.

    Returns:
        ISO format timestamp like "2026-01-15T12:30:00Z"
    """
    return format_datetime(get_utc_now())
