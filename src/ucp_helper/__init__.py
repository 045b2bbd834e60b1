"""
UCP Helper - Ultimate Cobblemon Progression Config Helper

Explore how tier caps and scaling coefficients shape spawn level ranges
and spawn weights relative to a trainer's progression tier.

Usage as library:
    from ucp_helper import DEFAULT_CONFIG, compute_all_tier_stats

    stats = compute_all_tier_stats(3, DEFAULT_CONFIG)

Usage as CLI:
    python -m ucp_helper stats --trainer-tier 3
    python -m ucp_helper chart --trainer-tier 3 --hide-locked
    python -m ucp_helper export --output ucp-spawn.json

Package structure:
    ucp_helper/
    ├── core/           # Settings, logging, formatters
    ├── scaling/        # Tier scaling model
    │   ├── engine.py   # Scaling formulas
    │   ├── editing.py  # Config edit helpers
    │   ├── loader.py   # YAML/JSON config files
    │   ├── export.py   # ucp-spawn.json export
    │   └── cli/        # Table and chart rendering
    └── commands/       # CLI command implementations
"""

__version__ = "1.0.0"

from .scaling import (
    DEFAULT_CONFIG,
    ScalingConfig,
    TierOutOfRangeError,
    TierStats,
    compute_all_tier_stats,
    triangular_density,
)

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "ScalingConfig",
    "TierOutOfRangeError",
    "TierStats",
    "compute_all_tier_stats",
    "triangular_density",
]
