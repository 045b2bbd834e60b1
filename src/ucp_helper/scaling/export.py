"""
Spawn Config Export.

Builds the ``ucp-spawn.json`` document the mod reads. The document carries
the scaling coefficients plus the feature toggles; tier caps are configured
elsewhere in the mod and are not exported.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.config import get_settings
from ..core.logging import get_logger
from .models import ScalingConfig

logger = get_logger(__name__)


def build_spawn_config(config: ScalingConfig) -> dict[str, Any]:
    """
    Build the spawn config document for a scaling config.

    Key order matches the file the mod ships with.
    """
    return {
        "doSpeciesBlocking": True,
        "blockUnknownSpecies": True,
        "doLevelScaling": True,
        "tierCapScaling": config.tier_cap_scaling,
        "minLevelScaling": config.min_level_scaling,
        "avgLevelScaling": config.avg_level_scaling,
        "maxLevelScaling": config.max_level_scaling,
        "doWeightScaling": True,
        "weightDecayPerTier": config.weight_decay_per_tier,
        "weightMinFactor": config.weight_min_factor,
        "weightCurrentTierBuff": config.weight_current_tier_buff,
    }


def render_spawn_config(config: ScalingConfig) -> str:
    """Render the spawn config document as 2-space indented JSON."""
    return json.dumps(build_spawn_config(config), indent=2)


def write_spawn_config(config: ScalingConfig, path: Path | str | None = None) -> Path:
    """
    Write the spawn config document.

    Args:
        config: Scaling config to export
        path: Output file (default: UCP_EXPORT_PATH, i.e. ucp-spawn.json)

    Returns:
        The written path
    """
    target = Path(path) if path is not None else get_settings().export_path
    target.write_text(render_spawn_config(config), encoding="utf-8")
    logger.info(f"Wrote spawn config to {target}")
    return target
