"""
Tier Scaling Engine.

Pure functions mapping (tier configuration, trainer tier) to per-tier
spawn statistics. The configuration is always passed explicitly; nothing
here holds state between calls.

Formula summary (trainer tier T, candidate tier t):
    effective_cap = cap(t) + (cap(T) - cap(t)) * tier_cap_scaling   if t < T
                  = cap(t)                                            otherwise
    weight        = max(weight_min_factor,
                        weight_current_tier_buff - (T - t) * weight_decay_per_tier)
                    (weight_current_tier_buff exactly when t == T; no upper clamp)
"""

from __future__ import annotations

import math

from ..core.logging import debug_enabled, get_logger
from .errors import TierOutOfRangeError
from .models import LevelRange, ScalingConfig, TierStats

logger = get_logger(__name__)

# Highest level a spawn can roll
MAX_LEVEL = 100


def round_half_away_from_zero(value: float) -> int | float:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() rounds halves to even, which would turn 2.5 into 2.
    Infinities and NaN are returned unchanged.

    Examples:
        >>> round_half_away_from_zero(9.5625)
        10
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
    """
    if not math.isfinite(value):
        return value
    magnitude = math.floor(abs(value) + 0.5)
    return int(math.copysign(magnitude, value))


def get_tier_cap(tier: int, config: ScalingConfig) -> float:
    """
    Get the base level cap of a tier.

    Args:
        tier: 1-based tier index
        config: Scaling configuration

    Returns:
        The configured cap for the tier

    Raises:
        TierOutOfRangeError: If tier is outside [1, tier_count]
    """
    if tier < 1 or tier > len(config.tier_caps):
        raise TierOutOfRangeError(tier, config.tier_caps)
    return config.tier_caps[tier - 1]


def compute_effective_cap(mon_tier: int, trainer_tier: int, config: ScalingConfig) -> float:
    """
    Get a tier's cap after the below-trainer buff.

    Tiers below the trainer are pulled towards the trainer's cap by
    ``tier_cap_scaling`` of the cap gap. The gap may be negative when caps
    are not increasing; it is applied as-is.

    Raises:
        TierOutOfRangeError: If either tier is out of range
    """
    mon_cap = get_tier_cap(mon_tier, config)
    trainer_cap = get_tier_cap(trainer_tier, config)

    if mon_tier < trainer_tier:
        diff = trainer_cap - mon_cap
        buff = diff * config.tier_cap_scaling
        return mon_cap + buff

    return mon_cap


def compute_weight_multiplier(mon_tier: int, trainer_tier: int, config: ScalingConfig) -> float:
    """
    Get the spawn weight multiplier of a tier relative to the trainer tier.

    Decays linearly per tier below the trainer and is floored at
    ``weight_min_factor``. Tiers above the trainer have a negative distance,
    so their multiplier grows past ``weight_current_tier_buff``; there is
    no upper clamp.
    """
    if mon_tier == trainer_tier:
        return config.weight_current_tier_buff

    diff = trainer_tier - mon_tier
    multiplier = config.weight_current_tier_buff - diff * config.weight_decay_per_tier
    if multiplier < config.weight_min_factor:
        multiplier = config.weight_min_factor
    return multiplier


def level_range_from_cap(effective_cap: float, config: ScalingConfig) -> LevelRange:
    """
    Derive the spawn level range for an effective cap.

    Steps, in order:
    1. Scale the cap by the min/avg/max ratios and round.
    2. Raise min to at least 1.
    3. Raise mode to min, then max to mode.
    4. Average min, mode and max.
    5. Cap max at MAX_LEVEL.

    The average is taken before the final cap, so ``expected_avg`` can
    reflect a max above MAX_LEVEL.
    """
    level_min = round_half_away_from_zero(effective_cap * config.min_level_scaling)
    level_mode = round_half_away_from_zero(effective_cap * config.avg_level_scaling)
    level_max = round_half_away_from_zero(effective_cap * config.max_level_scaling)

    level_min = max(1, level_min)
    if level_mode < level_min:
        level_mode = level_min
    if level_max < level_mode:
        level_max = level_mode

    # Summed as floats; huge levels overflow to inf
    expected_avg = (float(level_min) + float(level_mode) + float(level_max)) / 3

    if level_max > MAX_LEVEL:
        level_max = MAX_LEVEL

    return LevelRange(min=level_min, mode=level_mode, max=level_max, expected_avg=expected_avg)


def triangular_density(x: float, min: float, mode: float, max: float) -> float:
    """
    Peak-normalized triangular shape over [min, max].

    Returns 1 at the mode and falls linearly to 0 at the edges. This shapes
    chart curves; it is not a normalized probability density.
    """
    if x < min or x > max:
        return 0.0
    if min == max:
        return 1.0
    if x == mode:
        return 1.0
    if x < mode:
        return (x - min) / ((mode - min) or 1)
    return (max - x) / ((max - mode) or 1)


def compute_all_tier_stats(trainer_tier: int, config: ScalingConfig) -> list[TierStats]:
    """
    Compute statistics for every configured tier against a trainer tier.

    Args:
        trainer_tier: The trainer's progression tier
        config: Scaling configuration

    Returns:
        One TierStats per tier, ordered by tier starting at 1

    Raises:
        TierOutOfRangeError: If trainer_tier is out of range (no partial
            results are returned)
    """
    stats: list[TierStats] = []

    for tier in range(1, len(config.tier_caps) + 1):
        base_cap = get_tier_cap(tier, config)
        effective_cap = compute_effective_cap(tier, trainer_tier, config)
        level_range = level_range_from_cap(effective_cap, config)
        weight_multiplier = compute_weight_multiplier(tier, trainer_tier, config)

        stats.append(
            TierStats(
                tier=tier,
                base_cap=base_cap,
                effective_cap=effective_cap,
                level_min=level_range.min,
                level_mode=level_range.mode,
                level_max=level_range.max,
                level_expected_avg=level_range.expected_avg,
                weight_multiplier=weight_multiplier,
            )
        )

    if debug_enabled():
        logger.debug(f"Computed stats for {len(stats)} tiers at trainer tier {trainer_tier}")
    return stats
