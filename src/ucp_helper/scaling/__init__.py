"""
Tier Scaling Model.

Computes per-tier spawn level ranges and weight multipliers relative to a
trainer's progression tier.

Usage:
    from ucp_helper.scaling import DEFAULT_CONFIG, compute_all_tier_stats

    for stats in compute_all_tier_stats(3, DEFAULT_CONFIG):
        print(stats.tier, stats.level_min, stats.level_max, stats.weight_multiplier)
"""

from .engine import (
    MAX_LEVEL,
    compute_all_tier_stats,
    compute_effective_cap,
    compute_weight_multiplier,
    get_tier_cap,
    level_range_from_cap,
    triangular_density,
)
from .errors import ConfigLoadError, ScalingError, TierOutOfRangeError
from .models import DEFAULT_CONFIG, LevelRange, ScalingConfig, TierStats

__all__ = [
    # Models
    "DEFAULT_CONFIG",
    "LevelRange",
    "ScalingConfig",
    "TierStats",
    # Errors
    "ConfigLoadError",
    "ScalingError",
    "TierOutOfRangeError",
    # Engine
    "MAX_LEVEL",
    "compute_all_tier_stats",
    "compute_effective_cap",
    "compute_weight_multiplier",
    "get_tier_cap",
    "level_range_from_cap",
    "triangular_density",
]
