#!/usr/bin/env python3
"""
UCP Helper CLI Entry Point

Run with: python -m ucp_helper <command> [args]
"""

import argparse
import json
import sys

from .core import get_utc_timestamp
from .scaling.errors import ScalingError


def output_json(data: dict, indent: int = 2) -> None:
    """Print JSON output to stdout."""
    print(json.dumps(data, indent=indent))


def output_error(message: str, exit_code: int = 1, **kwargs) -> None:
    """Print error JSON and exit."""
    error_data = {
        "error": kwargs.pop("error_type", "error"),
        "message": message,
        "query_timestamp": get_utc_timestamp(),
    }
    error_data.update(kwargs)
    output_json(error_data)
    sys.exit(exit_code)


# =============================================================================
# Built-in Commands
# =============================================================================


def cmd_help(args: argparse.Namespace) -> dict:
    """Show help message."""
    help_text = """
═══════════════════════════════════════════════════════════════════
UCP Config Helper
───────────────────────────────────────────────────────────────────

Tier Commands:
  stats [opts]               Per-tier level range and weight multiplier
  table [opts]               Summary table of all tiers
                             --base-weight W (default 300)
  chart [opts]               Level distribution chart
                             --hide-locked (skip tiers above trainer)

  Shared options:            --trainer-tier N, --config <file>

Config Commands:
  defaults                   Show the default scaling config
  validate [--config <file>] Report suspicious config values
  export [opts]              Write ucp-spawn.json for the mod
                             --config <file>, --output <file>
  resize --tiers N [opts]    Change the number of tiers
                             --config <file>, --output <file>

System Commands:
  help                       Show this help message

Examples:
  ucp-helper stats --trainer-tier 3
  ucp-helper table --trainer-tier 5 --base-weight 250
  ucp-helper chart --trainer-tier 2 --hide-locked
  ucp-helper export --config my-tiers.yaml --output ucp-spawn.json
  ucp-helper resize --tiers 9 --output my-tiers.yaml

Environment:
  UCP_TRAINER_TIER, UCP_BASE_WEIGHT, UCP_CONFIG_FILE, UCP_EXPORT_PATH,
  UCP_LOG_LEVEL, UCP_LOG_JSON

Usage:
  python3 -m ucp_helper <command> [args]

═══════════════════════════════════════════════════════════════════
"""
    print(help_text)
    return {}


# =============================================================================
# Main Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ucp-helper",
        description="UCP Config Helper - tier scaling explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    help_parser = subparsers.add_parser("help", help="Show help message")
    help_parser.set_defaults(func=cmd_help)

    from .commands import scaling

    scaling.register_parsers(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to help if no command
    if not args.command:
        cmd_help(args)
        return 0

    if not hasattr(args, "func"):
        output_error(
            f"Unknown command: {args.command}",
            error_type="unknown_command",
            hint="Run 'ucp-helper help' for usage",
        )

    try:
        result = args.func(args)

        # Output result if it's a dict (JSON response)
        if isinstance(result, dict) and result:
            output_json(result)

            if "error" in result:
                return 1

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except ScalingError as e:
        error_data = e.to_dict()
        error_data["command"] = args.command
        error_data["query_timestamp"] = get_utc_timestamp()
        output_json(error_data)
        return 1
    except Exception as e:
        output_error(str(e), error_type="command_error", command=args.command)
        return 1


if __name__ == "__main__":
    sys.exit(main())
