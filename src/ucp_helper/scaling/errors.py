"""
Scaling Errors.

Domain exceptions raised by the scaling core and its loaders.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any


class ScalingError(Exception):
    """Base class for scaling errors."""

    error_type = "scaling_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to JSON-serializable dict."""
        return {"error": self.error_type, "message": self.message}


class TierOutOfRangeError(ScalingError):
    """
    Raised when a tier index is outside [1, len(tier_caps)].

    Carries the offending tier and the full caps list for diagnostics.
    """

    error_type = "tier_out_of_range"

    def __init__(self, tier: int, caps: Sequence[float]) -> None:
        self.tier = tier
        self.caps = list(caps)
        super().__init__(f"Tier {tier} out of range for caps {self.caps}")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["tier"] = self.tier
        result["caps"] = self.caps
        return result


class ConfigLoadError(ScalingError):
    """Raised when a scaling config file cannot be read or parsed."""

    error_type = "config_load_error"

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.path is not None:
            result["path"] = str(self.path)
        return result
