"""
Scaling Config Editing.

Pure helpers for changing a ScalingConfig the way the config form does:
resizing the tier list, editing caps and coefficients, clamping the
trainer tier and stepping numeric inputs. Every helper returns a new value.
"""

from __future__ import annotations

import math

from .engine import round_half_away_from_zero
from .errors import TierOutOfRangeError
from .models import COEFFICIENT_FIELDS, ScalingConfig, normalize_field_name

# Gap between caps appended when the tier count grows
CAP_GROWTH_STEP = 10

# Last cap assumed when there is none to extend from
FALLBACK_LAST_CAP = 10


def _whole_at_least_one(value: float) -> int:
    """Floor a numeric input to a whole number >= 1 (non-finite or 0 -> 1)."""
    if not math.isfinite(value) or value == 0:
        return 1
    return max(1, math.floor(value))


def clamp_value(value: float, minimum: float | None = None, maximum: float | None = None) -> float:
    """Clamp a value to optional bounds."""
    result = value
    if minimum is not None:
        result = max(minimum, result)
    if maximum is not None:
        result = min(maximum, result)
    return result


def step_value(
    value: float,
    direction: int,
    step: float = 1,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """
    Apply one stepper-button press to a numeric input.

    Args:
        value: Current value (non-finite starts from minimum, or 0)
        direction: -1 or 1
        step: Step size
        minimum: Optional lower bound
        maximum: Optional upper bound

    Returns:
        The stepped value rounded to 2 decimals and clamped
    """
    if math.isfinite(value):
        base = value
    else:
        base = minimum if minimum is not None else 0
    raw = base + direction * step
    rounded = round_half_away_from_zero(raw * 100) / 100
    return clamp_value(rounded, minimum, maximum)


def clamp_trainer_tier(tier: float, tier_count: int) -> int:
    """
    Clamp a trainer tier input to [1, tier_count].

    Fractions are floored; non-finite or zero input becomes 1.
    """
    return min(tier_count, _whole_at_least_one(tier))


def resize_tiers(config: ScalingConfig, count: float) -> ScalingConfig:
    """
    Change the number of tiers.

    Shrinking truncates the caps. Growing appends caps CAP_GROWTH_STEP
    apart, continuing from the current last cap.
    """
    n = _whole_at_least_one(count)
    current = list(config.tier_caps)
    caps = current[:n]

    if n > len(current):
        last = current[-1] if current and current[-1] else FALLBACK_LAST_CAP
        for offset in range(1, n - len(current) + 1):
            caps.append(last + CAP_GROWTH_STEP * offset)

    return config.replace(tier_caps=tuple(caps))


def set_tier_cap(config: ScalingConfig, index: int, value: float) -> ScalingConfig:
    """
    Set the cap at a 0-based index.

    The stored cap is floored to a whole number of at least 1.

    Raises:
        TierOutOfRangeError: If index is outside the caps list
    """
    if index < 0 or index >= len(config.tier_caps):
        raise TierOutOfRangeError(index + 1, config.tier_caps)

    caps = list(config.tier_caps)
    caps[index] = _whole_at_least_one(value)
    return config.replace(tier_caps=tuple(caps))


def set_scaling_value(config: ScalingConfig, key: str, value: float) -> ScalingConfig:
    """
    Set one scaling coefficient.

    Args:
        config: Current config
        key: Coefficient name, snake_case or camelCase
        value: New value; non-finite input keeps the current value

    Raises:
        KeyError: If key is not a coefficient
    """
    name = normalize_field_name(key)
    if name not in COEFFICIENT_FIELDS:
        raise KeyError(f"Not a scaling coefficient: {key}")

    if not math.isfinite(value):
        return config
    return config.replace(**{name: value})
