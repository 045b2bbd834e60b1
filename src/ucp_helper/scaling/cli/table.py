"""
Summary Table for tier statistics.

Renders one row per tier: cap, level range, weight multiplier and the
resulting spawn weight. Tiers above the trainer tier are flagged as locked.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ...core.formatters import format_level, format_multiplier
from ..models import TierStats

DEFAULT_BASE_WEIGHT = 300.0

COLUMNS = (
    ("Tier", 4),
    ("Locked", 6),
    ("Level Cap", 9),
    ("Min Level", 9),
    ("Avg Level", 9),
    ("Max Level", 9),
    ("Weight Mult", 11),
    ("Spawn Weight", 12),
)


@dataclass
class SummaryRow:
    """Display values for one tier."""

    tier: int
    locked: bool
    level_cap: float
    min_level: int
    avg_level: float
    max_level: int
    weight_multiplier: float
    spawn_weight: float

    @property
    def cells(self) -> list[str]:
        """Formatted cell text in column order."""
        return [
            str(self.tier),
            "X" if self.locked else "",
            format_level(self.level_cap),
            str(self.min_level),
            f"{self.avg_level:.0f}",
            str(self.max_level),
            format_multiplier(self.weight_multiplier),
            f"{self.spawn_weight:.1f}",
        ]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tier": self.tier,
            "locked": self.locked,
            "level_cap": self.level_cap,
            "min_level": self.min_level,
            "avg_level": round(self.avg_level, 2),
            "max_level": self.max_level,
            "weight_multiplier": round(self.weight_multiplier, 4),
            "spawn_weight": round(self.spawn_weight, 2),
        }


def build_summary_rows(
    stats: Sequence[TierStats],
    trainer_tier: int,
    base_weight: float = DEFAULT_BASE_WEIGHT,
) -> list[SummaryRow]:
    """
    Build table rows from tier statistics.

    Args:
        stats: Output of compute_all_tier_stats()
        trainer_tier: Trainer tier the stats were computed for
        base_weight: Spawn weight before the tier multiplier

    Returns:
        One SummaryRow per tier, in the order given
    """
    return [
        SummaryRow(
            tier=s.tier,
            locked=s.tier > trainer_tier,
            level_cap=s.base_cap,
            min_level=s.level_min,
            avg_level=s.level_expected_avg,
            max_level=s.level_max,
            weight_multiplier=s.weight_multiplier,
            spawn_weight=base_weight * s.weight_multiplier,
        )
        for s in stats
    ]


def format_summary_table(
    stats: Sequence[TierStats],
    trainer_tier: int,
    base_weight: float = DEFAULT_BASE_WEIGHT,
) -> str:
    """
    Format tier statistics as a right-aligned terminal table.

    Args:
        stats: Output of compute_all_tier_stats()
        trainer_tier: Trainer tier the stats were computed for
        base_weight: Spawn weight before the tier multiplier

    Returns:
        Formatted table string
    """
    lines = []

    lines.append(f"  Trainer tier: {trainer_tier}    Base weight: {base_weight:g}")
    lines.append("")

    header = "  ".join(title.rjust(width) for title, width in COLUMNS)
    lines.append(f"  {header}")
    lines.append("  " + "─" * len(header))

    for row in build_summary_rows(stats, trainer_tier, base_weight):
        cells = "  ".join(
            cell.rjust(width) for cell, (_, width) in zip(row.cells, COLUMNS)
        )
        lines.append(f"  {cells}")

    lines.append("")
    lines.append("  X = locked (tier above the trainer tier)")

    return "\n".join(lines)
