"""
Pytest fixtures for scaling tests.
"""

from __future__ import annotations

import pytest

from ucp_helper.scaling import DEFAULT_CONFIG, ScalingConfig, TierStats, compute_all_tier_stats


@pytest.fixture
def default_config() -> ScalingConfig:
    """The shipped defaults: caps 15..100 over 7 tiers."""
    return DEFAULT_CONFIG


@pytest.fixture
def steep_decay_config() -> ScalingConfig:
    """Decay fast enough to reach the weight floor within a few tiers."""
    return DEFAULT_CONFIG.replace(weight_decay_per_tier=0.5)


@pytest.fixture
def non_monotonic_config() -> ScalingConfig:
    """Caps that go down between tier 1 and tier 2."""
    return ScalingConfig(tier_caps=(50, 20, 30))


@pytest.fixture
def trainer_tier_3_stats(default_config) -> list[TierStats]:
    """Default config stats for a trainer at tier 3."""
    return compute_all_tier_stats(3, default_config)
