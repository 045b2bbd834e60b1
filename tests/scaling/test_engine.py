"""
Tests for the tier scaling engine.
"""

from __future__ import annotations

import logging
import math

import pytest

from ucp_helper.core.config import reset_settings
from ucp_helper.scaling import (
    MAX_LEVEL,
    ScalingConfig,
    TierOutOfRangeError,
    compute_all_tier_stats,
    compute_effective_cap,
    compute_weight_multiplier,
    get_tier_cap,
    level_range_from_cap,
    triangular_density,
)
from ucp_helper.scaling.engine import round_half_away_from_zero

# =============================================================================
# Rounding
# =============================================================================


class TestRoundHalfAwayFromZero:
    """Tests for arithmetic rounding."""

    def test_halves_round_up(self):
        assert round_half_away_from_zero(2.5) == 3
        assert round_half_away_from_zero(40.5) == 41

    def test_negative_halves_round_away(self):
        assert round_half_away_from_zero(-2.5) == -3
        assert round_half_away_from_zero(-7.5) == -8

    def test_non_halves(self):
        assert round_half_away_from_zero(9.5625) == 10
        assert round_half_away_from_zero(23.375) == 23
        assert round_half_away_from_zero(0.0) == 0

    def test_non_finite_unchanged(self):
        assert round_half_away_from_zero(math.inf) == math.inf
        assert round_half_away_from_zero(-math.inf) == -math.inf
        assert math.isnan(round_half_away_from_zero(math.nan))


# =============================================================================
# Tier Cap Lookup
# =============================================================================


class TestGetTierCap:
    """Tests for tier cap lookup."""

    def test_every_tier_maps_to_its_cap(self, default_config):
        for tier in range(1, default_config.tier_count + 1):
            assert get_tier_cap(tier, default_config) == default_config.tier_caps[tier - 1]

    @pytest.mark.parametrize("tier", [0, -1, 8, 100])
    def test_out_of_range(self, default_config, tier):
        with pytest.raises(TierOutOfRangeError) as exc_info:
            get_tier_cap(tier, default_config)

        assert exc_info.value.tier == tier
        assert exc_info.value.caps == [15, 27, 40, 54, 69, 85, 100]
        assert f"Tier {tier} out of range" in str(exc_info.value)

    def test_empty_caps(self):
        with pytest.raises(TierOutOfRangeError):
            get_tier_cap(1, ScalingConfig(tier_caps=()))


# =============================================================================
# Effective Cap
# =============================================================================


class TestComputeEffectiveCap:
    """Tests for the below-trainer cap buff."""

    def test_no_self_buff(self, default_config):
        for tier in range(1, default_config.tier_count + 1):
            assert compute_effective_cap(tier, tier, default_config) == get_tier_cap(
                tier, default_config
            )

    def test_tiers_at_or_above_trainer_unchanged(self, default_config):
        for tier in range(3, 8):
            assert compute_effective_cap(tier, 3, default_config) == get_tier_cap(
                tier, default_config
            )

    def test_buff_uses_cap_gap(self, default_config):
        # 15 + (40 - 15) * 0.25
        assert compute_effective_cap(1, 3, default_config) == pytest.approx(21.25)
        # 27 + (40 - 27) * 0.25
        assert compute_effective_cap(2, 3, default_config) == pytest.approx(30.25)

    def test_zero_scaling_disables_buff(self, default_config):
        config = default_config.replace(tier_cap_scaling=0)
        assert compute_effective_cap(1, 7, config) == 15

    def test_non_monotonic_caps_buff_downwards(self, non_monotonic_config):
        # 50 + (20 - 50) * 0.25
        assert compute_effective_cap(1, 2, non_monotonic_config) == pytest.approx(42.5)

    def test_invalid_trainer_tier_propagates(self, default_config):
        with pytest.raises(TierOutOfRangeError) as exc_info:
            compute_effective_cap(1, 9, default_config)
        assert exc_info.value.tier == 9

    def test_invalid_mon_tier_propagates(self, default_config):
        with pytest.raises(TierOutOfRangeError) as exc_info:
            compute_effective_cap(0, 3, default_config)
        assert exc_info.value.tier == 0


# =============================================================================
# Weight Multiplier
# =============================================================================


class TestComputeWeightMultiplier:
    """Tests for spawn weight multipliers."""

    def test_trainer_tier_gets_buff(self, default_config):
        for tier in range(1, 8):
            assert compute_weight_multiplier(tier, tier, default_config) == 2

    def test_linear_decay_below_trainer(self, default_config):
        assert compute_weight_multiplier(2, 3, default_config) == pytest.approx(1.8)
        assert compute_weight_multiplier(1, 3, default_config) == pytest.approx(1.6)

    def test_tiers_above_trainer_exceed_buff(self, default_config):
        assert compute_weight_multiplier(4, 3, default_config) == pytest.approx(2.2)
        assert compute_weight_multiplier(5, 3, default_config) == pytest.approx(2.4)
        assert compute_weight_multiplier(7, 3, default_config) == pytest.approx(2.8)

    def test_floor_at_min_factor(self, steep_decay_config):
        # 2 - 3 * 0.5
        assert compute_weight_multiplier(4, 7, steep_decay_config) == pytest.approx(0.5)
        # 2 - 4 * 0.5 = 0 -> floored
        assert compute_weight_multiplier(3, 7, steep_decay_config) == 0.15
        assert compute_weight_multiplier(1, 7, steep_decay_config) == 0.15

    def test_non_increasing_below_trainer_then_flat(self, steep_decay_config):
        weights = [compute_weight_multiplier(t, 7, steep_decay_config) for t in range(7, 0, -1)]

        for higher, lower in zip(weights, weights[1:]):
            assert lower <= higher
        assert weights[-3:] == [0.15, 0.15, 0.15]

    def test_does_not_validate_tiers(self, default_config):
        # No cap lookups happen here
        assert compute_weight_multiplier(20, 20, default_config) == 2


# =============================================================================
# Level Range
# =============================================================================


class TestLevelRangeFromCap:
    """Tests for level range derivation."""

    def test_buffed_tier_one(self, default_config):
        level_range = level_range_from_cap(21.25, default_config)

        assert level_range.min == 10
        assert level_range.mode == 16
        assert level_range.max == 23
        assert level_range.expected_avg == pytest.approx(49 / 3)

    def test_half_rounds_up(self, default_config):
        # 54 * 0.75 = 40.5
        assert level_range_from_cap(54, default_config).mode == 41

    def test_average_taken_before_level_cap(self, default_config):
        # 100 * 1.1 = 110 -> capped to 100 after averaging
        level_range = level_range_from_cap(100, default_config)

        assert level_range.min == 45
        assert level_range.mode == 75
        assert level_range.max == MAX_LEVEL
        assert level_range.expected_avg == pytest.approx((45 + 75 + 110) / 3)

    def test_min_raised_to_one(self, default_config):
        level_range = level_range_from_cap(0, default_config)

        assert (level_range.min, level_range.mode, level_range.max) == (1, 1, 1)
        assert level_range.expected_avg == 1

    def test_negative_cap(self, default_config):
        level_range = level_range_from_cap(-10, default_config)

        assert (level_range.min, level_range.mode, level_range.max) == (1, 1, 1)

    def test_mode_raised_to_min(self, default_config):
        config = default_config.replace(min_level_scaling=0.8, avg_level_scaling=0.5)
        level_range = level_range_from_cap(40, config)

        assert level_range.min == 32
        assert level_range.mode == 32
        assert level_range.max == 44

    def test_max_raised_to_mode(self, default_config):
        config = default_config.replace(avg_level_scaling=1.2, max_level_scaling=0.9)
        level_range = level_range_from_cap(40, config)

        assert level_range.mode == 48
        assert level_range.max == 48
        assert level_range.expected_avg == pytest.approx((18 + 48 + 48) / 3)

    def test_mode_above_level_cap_is_kept(self, default_config):
        config = default_config.replace(avg_level_scaling=1.5, max_level_scaling=1.5)
        level_range = level_range_from_cap(80, config)

        assert level_range.mode == 120
        assert level_range.max == MAX_LEVEL

    def test_overflowing_cap_clamped(self, default_config):
        level_range = level_range_from_cap(1.7e308, default_config)

        assert level_range.max == MAX_LEVEL
        assert level_range.mode > MAX_LEVEL
        assert level_range.expected_avg == math.inf

    @pytest.mark.parametrize("cap", [0, 1, 2.5, 15, 21.25, 40, 69, 85, 90.9, 100, 150, 400])
    def test_ordering_and_bounds(self, default_config, cap):
        level_range = level_range_from_cap(cap, default_config)

        assert level_range.min >= 1
        assert level_range.max <= MAX_LEVEL
        assert level_range.min <= level_range.mode
        assert level_range.mode <= level_range.max or level_range.max == MAX_LEVEL


# =============================================================================
# Triangular Density
# =============================================================================


class TestTriangularDensity:
    """Tests for the peak-normalized triangular shape."""

    def test_peak_is_one(self):
        assert triangular_density(16, 10, 16, 23) == 1

    def test_zero_outside_range(self):
        assert triangular_density(9, 10, 16, 23) == 0
        assert triangular_density(24, 10, 16, 23) == 0

    def test_edges_are_zero(self):
        assert triangular_density(10, 10, 16, 23) == 0
        assert triangular_density(23, 10, 16, 23) == 0

    def test_rising_edge(self):
        assert triangular_density(13, 10, 16, 23) == pytest.approx(0.5)

    def test_falling_edge(self):
        assert triangular_density(20, 10, 16, 23) == pytest.approx(3 / 7)

    def test_degenerate_point(self):
        assert triangular_density(5, 5, 5, 5) == 1
        assert triangular_density(4, 5, 5, 5) == 0

    def test_mode_at_min(self):
        assert triangular_density(10, 10, 10, 14) == 1
        assert triangular_density(12, 10, 10, 14) == pytest.approx(0.5)

    def test_mode_at_max(self):
        assert triangular_density(12, 10, 14, 14) == pytest.approx(0.5)
        assert triangular_density(14, 10, 14, 14) == 1

    def test_fractional_x(self):
        assert triangular_density(10.5, 10, 11, 12) == pytest.approx(0.5)


# =============================================================================
# Tier Stats Aggregator
# =============================================================================


class TestComputeAllTierStats:
    """Tests for the per-tier aggregator."""

    def test_one_entry_per_tier_in_order(self, trainer_tier_3_stats):
        assert [s.tier for s in trainer_tier_3_stats] == [1, 2, 3, 4, 5, 6, 7]

    @pytest.mark.parametrize("trainer_tier", range(1, 8))
    def test_length_matches_tier_count(self, default_config, trainer_tier):
        assert len(compute_all_tier_stats(trainer_tier, default_config)) == 7

    def test_tier_below_trainer(self, trainer_tier_3_stats):
        tier_1 = trainer_tier_3_stats[0]

        assert tier_1.base_cap == 15
        assert tier_1.effective_cap == pytest.approx(21.25)
        assert tier_1.level_min == 10
        assert tier_1.level_mode == 16
        assert tier_1.level_max == 23
        assert tier_1.level_expected_avg == pytest.approx(16.333, abs=0.001)
        assert tier_1.weight_multiplier == pytest.approx(1.6)

    def test_trainer_tier(self, trainer_tier_3_stats):
        tier_3 = trainer_tier_3_stats[2]

        assert tier_3.base_cap == 40
        assert tier_3.effective_cap == 40
        assert (tier_3.level_min, tier_3.level_mode, tier_3.level_max) == (18, 30, 44)
        assert tier_3.weight_multiplier == 2

    def test_tier_above_trainer(self, trainer_tier_3_stats):
        tier_5 = trainer_tier_3_stats[4]

        assert tier_5.effective_cap == 69
        assert (tier_5.level_min, tier_5.level_mode, tier_5.level_max) == (31, 52, 76)
        assert tier_5.weight_multiplier == pytest.approx(2.4)

    def test_top_tier_capped(self, trainer_tier_3_stats):
        tier_7 = trainer_tier_3_stats[6]

        assert tier_7.level_max == 100
        assert tier_7.level_expected_avg == pytest.approx(230 / 3)

    def test_referentially_transparent(self, default_config):
        assert compute_all_tier_stats(4, default_config) == compute_all_tier_stats(
            4, default_config
        )

    @pytest.mark.parametrize("trainer_tier", [0, 8])
    def test_invalid_trainer_tier_fails_whole_computation(self, default_config, trainer_tier):
        with pytest.raises(TierOutOfRangeError) as exc_info:
            compute_all_tier_stats(trainer_tier, default_config)

        assert exc_info.value.tier == trainer_tier

    def test_empty_caps_yield_no_stats(self):
        assert compute_all_tier_stats(1, ScalingConfig(tier_caps=())) == []

    def test_single_tier(self):
        stats = compute_all_tier_stats(1, ScalingConfig(tier_caps=(50,)))

        assert len(stats) == 1
        assert stats[0].effective_cap == 50
        assert stats[0].weight_multiplier == 2

    def test_non_monotonic_caps_evaluate(self, non_monotonic_config):
        stats = compute_all_tier_stats(2, non_monotonic_config)

        assert stats[0].effective_cap == pytest.approx(42.5)
        assert stats[1].effective_cap == 20
        assert stats[2].effective_cap == 30

    def test_debug_line_when_debug_enabled(self, default_config, monkeypatch, caplog):
        monkeypatch.setenv("UCP_LOG_LEVEL", "DEBUG")
        reset_settings()

        with caplog.at_level(logging.DEBUG, logger="ucp_helper.scaling.engine"):
            compute_all_tier_stats(3, default_config)

        assert "Computed stats for 7 tiers at trainer tier 3" in caplog.text

    def test_no_debug_line_by_default(self, default_config, caplog):
        with caplog.at_level(logging.DEBUG, logger="ucp_helper.scaling.engine"):
            compute_all_tier_stats(3, default_config)

        assert "Computed stats" not in caplog.text
