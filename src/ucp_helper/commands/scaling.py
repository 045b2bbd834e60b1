"""
UCP Helper Scaling Commands

Commands for exploring tier statistics and managing scaling configs.
"""

import argparse
from pathlib import Path
from typing import Any, Optional

from ..core import get_logger, get_settings, get_utc_timestamp
from ..scaling import DEFAULT_CONFIG, ScalingConfig, compute_all_tier_stats
from ..scaling.cli import (
    build_chart_data,
    build_summary_rows,
    format_level_chart,
    format_summary_table,
)
from ..scaling.editing import clamp_trainer_tier, resize_tiers
from ..scaling.export import build_spawn_config, write_spawn_config
from ..scaling.loader import dump_scaling_config, load_scaling_config

logger = get_logger(__name__)


# =============================================================================
# Helpers
# =============================================================================


def _config_path(args: argparse.Namespace) -> Optional[Path]:
    """Config file from --config, falling back to UCP_CONFIG_FILE."""
    path = getattr(args, "config", None)
    if path:
        return Path(path)
    return get_settings().config_file


def resolve_config(args: argparse.Namespace) -> ScalingConfig:
    """Load the scaling config named by the arguments, or the defaults."""
    path = _config_path(args)
    if path is None:
        return DEFAULT_CONFIG

    config = load_scaling_config(path)
    logger.info(f"Using scaling config {path}")
    return config


def resolve_trainer_tier(args: argparse.Namespace, config: ScalingConfig) -> int:
    """Trainer tier from --trainer-tier or UCP_TRAINER_TIER, clamped to the tier count."""
    tier = getattr(args, "trainer_tier", None)
    if tier is None:
        tier = get_settings().trainer_tier

    clamped = clamp_trainer_tier(tier, config.tier_count)
    if clamped != tier:
        logger.warning(f"Trainer tier {tier} clamped to {clamped}")
    return clamped


def _source(args: argparse.Namespace) -> str:
    path = _config_path(args)
    return str(path) if path is not None else "defaults"


# =============================================================================
# Command: stats
# =============================================================================


def cmd_stats(args: argparse.Namespace) -> dict[str, Any]:
    """
    Compute per-tier statistics.

    Returns level range, expected average and weight multiplier per tier.
    """
    config = resolve_config(args)
    trainer_tier = resolve_trainer_tier(args, config)

    stats = compute_all_tier_stats(trainer_tier, config)

    return {
        "command": "stats",
        "source": _source(args),
        "trainer_tier": trainer_tier,
        "tier_count": config.tier_count,
        "stats": [s.to_dict() for s in stats],
        "query_timestamp": get_utc_timestamp(),
    }


# =============================================================================
# Command: table
# =============================================================================


def cmd_table(args: argparse.Namespace) -> dict[str, Any]:
    """Print the summary table of all tiers."""
    config = resolve_config(args)
    trainer_tier = resolve_trainer_tier(args, config)
    base_weight = getattr(args, "base_weight", None)
    if base_weight is None:
        base_weight = get_settings().base_weight

    stats = compute_all_tier_stats(trainer_tier, config)

    print(format_summary_table(stats, trainer_tier, base_weight))

    return {
        "command": "table",
        "trainer_tier": trainer_tier,
        "base_weight": base_weight,
        "rows": [row.to_dict() for row in build_summary_rows(stats, trainer_tier, base_weight)],
        "query_timestamp": get_utc_timestamp(),
    }


# =============================================================================
# Command: chart
# =============================================================================


def cmd_chart(args: argparse.Namespace) -> dict[str, Any]:
    """Print the level distribution chart."""
    config = resolve_config(args)
    trainer_tier = resolve_trainer_tier(args, config)
    show_locked = not getattr(args, "hide_locked", False)

    stats = compute_all_tier_stats(trainer_tier, config)

    print(format_level_chart(stats, trainer_tier, show_locked=show_locked))

    series = build_chart_data(stats, trainer_tier, show_locked=show_locked)
    return {
        "command": "chart",
        "trainer_tier": trainer_tier,
        "show_locked": show_locked,
        "series": [{"label": s.label, "tier": s.tier, "locked": s.locked} for s in series],
        "query_timestamp": get_utc_timestamp(),
    }


# =============================================================================
# Config Commands
# =============================================================================


def cmd_defaults(args: argparse.Namespace) -> dict[str, Any]:
    """Show the default scaling config."""
    return {
        "command": "defaults",
        "config": DEFAULT_CONFIG.to_dict(),
        "query_timestamp": get_utc_timestamp(),
    }


def cmd_validate(args: argparse.Namespace) -> dict[str, Any]:
    """Report suspicious values in a scaling config."""
    config = resolve_config(args)
    warnings = config.validate()

    for warning in warnings:
        print(f"  ⚠ {warning}")
    if not warnings:
        print("  ✓ No issues found")

    return {
        "command": "validate",
        "source": _source(args),
        "valid": not warnings,
        "warnings": warnings,
        "query_timestamp": get_utc_timestamp(),
    }


def cmd_export(args: argparse.Namespace) -> dict[str, Any]:
    """Write the ucp-spawn.json document."""
    config = resolve_config(args)
    path = write_spawn_config(config, getattr(args, "output", None))

    print(f"Exported spawn config to {path}")

    return {
        "command": "export",
        "path": str(path),
        "spawn_config": build_spawn_config(config),
        "query_timestamp": get_utc_timestamp(),
    }


def cmd_resize(args: argparse.Namespace) -> dict[str, Any]:
    """Change the number of tiers, extending caps when growing."""
    config = resolve_config(args)
    resized = resize_tiers(config, args.tiers)
    trainer_tier = resolve_trainer_tier(args, resized)

    result: dict[str, Any] = {
        "command": "resize",
        "tier_count": resized.tier_count,
        "trainer_tier": trainer_tier,
        "config": resized.to_dict(),
        "query_timestamp": get_utc_timestamp(),
    }

    output = getattr(args, "output", None)
    if output:
        result["path"] = str(dump_scaling_config(resized, output))

    return result


# =============================================================================
# Parser Registration
# =============================================================================


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        "-c",
        help="YAML or JSON scaling config (default: UCP_CONFIG_FILE or built-in defaults)",
    )


def _add_trainer_tier_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--trainer-tier",
        "-t",
        type=int,
        help="Trainer tier (default: UCP_TRAINER_TIER or 1)",
    )


def register_parsers(subparsers) -> None:
    """Register scaling command parsers."""

    # stats
    stats_parser = subparsers.add_parser(
        "stats",
        help="Per-tier level range and weight multiplier",
    )
    _add_trainer_tier_argument(stats_parser)
    _add_config_argument(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    # table
    table_parser = subparsers.add_parser(
        "table",
        help="Summary table of all tiers",
    )
    _add_trainer_tier_argument(table_parser)
    _add_config_argument(table_parser)
    table_parser.add_argument(
        "--base-weight",
        type=float,
        help="Base spawn weight (default: UCP_BASE_WEIGHT or 300)",
    )
    table_parser.set_defaults(func=cmd_table)

    # chart
    chart_parser = subparsers.add_parser(
        "chart",
        help="Level distribution chart",
    )
    _add_trainer_tier_argument(chart_parser)
    _add_config_argument(chart_parser)
    chart_parser.add_argument(
        "--hide-locked",
        action="store_true",
        help="Hide tiers above the trainer tier",
    )
    chart_parser.set_defaults(func=cmd_chart)

    # defaults
    defaults_parser = subparsers.add_parser(
        "defaults",
        help="Show the default scaling config",
    )
    defaults_parser.set_defaults(func=cmd_defaults)

    # validate
    validate_parser = subparsers.add_parser(
        "validate",
        help="Report suspicious config values",
    )
    _add_config_argument(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    # export
    export_parser = subparsers.add_parser(
        "export",
        help="Write ucp-spawn.json",
    )
    _add_config_argument(export_parser)
    export_parser.add_argument(
        "--output",
        "-o",
        help="Output file (default: UCP_EXPORT_PATH or ucp-spawn.json)",
    )
    export_parser.set_defaults(func=cmd_export)

    # resize
    resize_parser = subparsers.add_parser(
        "resize",
        help="Change the number of tiers",
    )
    resize_parser.add_argument(
        "--tiers",
        "-n",
        type=int,
        required=True,
        help="New number of tiers",
    )
    _add_trainer_tier_argument(resize_parser)
    _add_config_argument(resize_parser)
    resize_parser.add_argument(
        "--output",
        "-o",
        help="Write the resized config to this YAML or JSON file",
    )
    resize_parser.set_defaults(func=cmd_resize)
