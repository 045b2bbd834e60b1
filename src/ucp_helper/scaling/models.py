"""
Scaling Data Models.

Configuration and result records for the tier scaling model.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any

# Coefficient fields (everything except tier_caps), in display order
COEFFICIENT_FIELDS = (
    "min_level_scaling",
    "avg_level_scaling",
    "max_level_scaling",
    "tier_cap_scaling",
    "weight_current_tier_buff",
    "weight_decay_per_tier",
    "weight_min_factor",
)

# snake_case field -> camelCase document key
DOCUMENT_KEYS = {
    "tier_caps": "tierCaps",
    "weight_current_tier_buff": "weightCurrentTierBuff",
    "weight_decay_per_tier": "weightDecayPerTier",
    "weight_min_factor": "weightMinFactor",
    "min_level_scaling": "minLevelScaling",
    "avg_level_scaling": "avgLevelScaling",
    "max_level_scaling": "maxLevelScaling",
    "tier_cap_scaling": "tierCapScaling",
}

_FIELD_BY_KEY = {key: name for name, key in DOCUMENT_KEYS.items()}


def normalize_field_name(key: str) -> str:
    """
    Resolve a camelCase document key or snake_case field name to the field name.

    Raises:
        KeyError: If the key names no ScalingConfig field
    """
    if key in DOCUMENT_KEYS:
        return key
    if key in _FIELD_BY_KEY:
        return _FIELD_BY_KEY[key]
    raise KeyError(f"Unknown scaling config field: {key}")


@dataclass(frozen=True)
class ScalingConfig:
    """
    Tunable parameters of the tier scaling model.

    Index 0 of ``tier_caps`` is the base level cap of tier 1. The scaling
    functions evaluate whatever they are given: non-monotonic or
    non-positive caps are not rejected. Use validate() to report them.
    """

    tier_caps: tuple[float, ...] = (15, 27, 40, 54, 69, 85, 100)

    # Spawn weight
    weight_current_tier_buff: float = 2.0
    weight_decay_per_tier: float = 0.2
    weight_min_factor: float = 0.15

    # Level range ratios
    min_level_scaling: float = 0.45
    avg_level_scaling: float = 0.75
    max_level_scaling: float = 1.1

    # Buff applied to the cap gap for tiers below the trainer
    tier_cap_scaling: float = 0.25

    def __post_init__(self) -> None:
        object.__setattr__(self, "tier_caps", tuple(self.tier_caps))

    @property
    def tier_count(self) -> int:
        """Number of configured tiers."""
        return len(self.tier_caps)

    def replace(self, **changes: Any) -> ScalingConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ScalingConfig:
        """
        Create from dictionary.

        Accepts camelCase document keys (``tierCaps``) and snake_case field
        names. Keys that are absent keep their default value; unknown keys
        are ignored.
        """
        if not data:
            return cls()

        values: dict[str, Any] = {}
        for key, value in data.items():
            try:
                values[normalize_field_name(key)] = value
            except KeyError:
                continue

        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with camelCase document keys."""
        return {
            "tierCaps": list(self.tier_caps),
            "weightCurrentTierBuff": self.weight_current_tier_buff,
            "weightDecayPerTier": self.weight_decay_per_tier,
            "weightMinFactor": self.weight_min_factor,
            "minLevelScaling": self.min_level_scaling,
            "avgLevelScaling": self.avg_level_scaling,
            "maxLevelScaling": self.max_level_scaling,
            "tierCapScaling": self.tier_cap_scaling,
        }

    def validate(self) -> list[str]:
        """
        Report suspicious configuration values.

        The scaling functions never call this; a config with warnings still
        evaluates.

        Returns:
            List of warning messages (empty if nothing stands out)
        """
        warnings = []

        if not self.tier_caps:
            warnings.append("tier_caps is empty; every tier lookup will fail")

        for index, cap in enumerate(self.tier_caps, start=1):
            if not isinstance(cap, (int, float)) or not math.isfinite(cap):
                warnings.append(f"Tier {index} cap must be a finite number, got {cap!r}")
            elif cap <= 0:
                warnings.append(f"Tier {index} cap must be positive, got {cap}")

        for index in range(1, len(self.tier_caps)):
            previous, current = self.tier_caps[index - 1], self.tier_caps[index]
            if isinstance(previous, (int, float)) and isinstance(current, (int, float)):
                if current < previous:
                    warnings.append(
                        f"tier_caps decrease at tier {index + 1} ({previous} -> {current}); "
                        "lower tiers will be buffed downwards"
                    )

        coefficients_ok = True
        for name in COEFFICIENT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                warnings.append(f"{name} must be a finite number, got {value!r}")
                coefficients_ok = False

        # Ordering checks only make sense on numbers
        if not coefficients_ok:
            return warnings

        if self.min_level_scaling > self.avg_level_scaling:
            warnings.append(
                f"min_level_scaling ({self.min_level_scaling}) > avg_level_scaling "
                f"({self.avg_level_scaling}); mode will be raised to min"
            )
        if self.avg_level_scaling > self.max_level_scaling:
            warnings.append(
                f"avg_level_scaling ({self.avg_level_scaling}) > max_level_scaling "
                f"({self.max_level_scaling}); max will be raised to mode"
            )
        if self.weight_min_factor > self.weight_current_tier_buff:
            warnings.append(
                f"weight_min_factor ({self.weight_min_factor}) > weight_current_tier_buff "
                f"({self.weight_current_tier_buff}); lower tiers outweigh the trainer tier"
            )

        return warnings


DEFAULT_CONFIG = ScalingConfig()


@dataclass(frozen=True)
class LevelRange:
    """Spawn level range derived from an effective cap."""

    min: int
    mode: int
    max: int
    expected_avg: float


@dataclass(frozen=True)
class TierStats:
    """Per-tier statistics for one trainer tier."""

    tier: int
    base_cap: float
    effective_cap: float
    level_min: int
    level_mode: int
    level_max: int
    level_expected_avg: float
    weight_multiplier: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with camelCase keys."""
        return {
            "tier": self.tier,
            "baseCap": self.base_cap,
            "effectiveCap": self.effective_cap,
            "levelMin": self.level_min,
            "levelMode": self.level_mode,
            "levelMax": self.level_max,
            "levelExpectedAvg": self.level_expected_avg,
            "weightMultiplier": self.weight_multiplier,
        }
