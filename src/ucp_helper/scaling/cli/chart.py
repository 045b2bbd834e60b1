"""
Level Distribution Chart.

Turns tier statistics into per-level density curves (one series per tier)
and draws them as shaded strips for the terminal.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..engine import MAX_LEVEL, triangular_density
from ..models import TierStats

LEVELS = tuple(range(1, MAX_LEVEL + 1))

# Plotted in place of an exact zero so filled curves keep a baseline
DENSITY_FLOOR = 0.00001

# Strip shading by density, lowest first
SHADES = (" ", "░", "▒", "▓", "█")


@dataclass
class ChartSeries:
    """Density curve of one tier."""

    label: str
    tier: int
    locked: bool
    data: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "label": self.label,
            "tier": self.tier,
            "locked": self.locked,
            "data": self.data,
        }


def visible_tiers(
    stats: Sequence[TierStats],
    trainer_tier: int,
    show_locked: bool = True,
) -> list[TierStats]:
    """Select the tiers to draw; locked tiers are dropped unless show_locked."""
    if show_locked:
        return list(stats)
    return [s for s in stats if s.tier <= trainer_tier]


def density_series(tier_stats: TierStats, levels: Sequence[int] = LEVELS) -> list[float]:
    """
    Sample a tier's triangular density at each level.

    Exact zeros are replaced by DENSITY_FLOOR.
    """
    data = []
    for level in levels:
        d = triangular_density(
            level, tier_stats.level_min, tier_stats.level_mode, tier_stats.level_max
        )
        data.append(DENSITY_FLOOR if d == 0 else d)
    return data


def build_chart_data(
    stats: Sequence[TierStats],
    trainer_tier: int,
    show_locked: bool = True,
) -> list[ChartSeries]:
    """
    Build one density series per visible tier.

    Args:
        stats: Output of compute_all_tier_stats()
        trainer_tier: Trainer tier the stats were computed for
        show_locked: Include tiers above the trainer tier

    Returns:
        List of ChartSeries in tier order
    """
    return [
        ChartSeries(
            label=f"Tier {s.tier}",
            tier=s.tier,
            locked=s.tier > trainer_tier,
            data=density_series(s),
        )
        for s in visible_tiers(stats, trainer_tier, show_locked)
    ]


def _shade(density: float) -> str:
    """Map a density in [0, 1] to a shading character."""
    if density <= DENSITY_FLOOR:
        return SHADES[0]
    if density >= 1.0:
        return SHADES[-1]
    index = 1 + int(density * (len(SHADES) - 2))
    return SHADES[min(index, len(SHADES) - 2)]


def render_strip(series: ChartSeries, width: int = 50) -> str:
    """
    Draw one series as a strip of width characters over the level axis.

    Each character covers an equal slice of levels and shows the highest
    density within it.
    """
    if width < 1:
        raise ValueError("width must be >= 1")

    count = len(series.data)
    chars = []
    for column in range(width):
        start = column * count // width
        end = max(start + 1, (column + 1) * count // width)
        bucket = series.data[start:end]
        chars.append(_shade(max(bucket) if bucket else 0.0))
    return "".join(chars)


def format_level_chart(
    stats: Sequence[TierStats],
    trainer_tier: int,
    show_locked: bool = True,
    width: int = 50,
) -> str:
    """
    Format the level distribution of every visible tier for the terminal.

    Args:
        stats: Output of compute_all_tier_stats()
        trainer_tier: Trainer tier the stats were computed for
        show_locked: Include tiers above the trainer tier
        width: Strip width in characters

    Returns:
        Formatted chart string
    """
    by_tier = {s.tier: s for s in stats}
    lines = []

    lines.append(f"  Level distribution by tier (trainer tier {trainer_tier})")
    lines.append("")

    for series in build_chart_data(stats, trainer_tier, show_locked):
        s = by_tier[series.tier]
        marker = "·" if series.locked else " "
        level_range = f"{s.level_min}-{s.level_mode}-{s.level_max}"
        lines.append(
            f" {marker}{series.label:8} │{render_strip(series, width)}│ {level_range}"
        )

    axis = f"1{str(MAX_LEVEL).rjust(width - 1)}"
    lines.append(f"  {'':8} └{'─' * width}┘")
    lines.append(f"  {'':8}  {axis}")

    if show_locked and any(s.tier > trainer_tier for s in stats):
        lines.append("")
        lines.append("  · = locked (tier above the trainer tier)")

    return "\n".join(lines)
