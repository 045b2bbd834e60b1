"""
Scaling Config Loader.

Reads and writes ScalingConfig documents as YAML (.yaml/.yml) or JSON.
Keys missing from a document keep their default values.

Example document:

    tierCaps: [15, 27, 40, 54, 69, 85, 100]
    weightCurrentTierBuff: 2
    tierCapScaling: 0.3
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ..core.logging import get_logger
from .errors import ConfigLoadError
from .models import ScalingConfig, normalize_field_name

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def _parse_document(path: Path, text: str) -> Any:
    """Parse file text according to its suffix."""
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Invalid YAML in {path}: {e}", path=path) from e

    try:
        return json.loads(text) if text.strip() else None
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON in {path}: {e}", path=path) from e


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_values(path: Path, data: dict[str, Any]) -> None:
    """Reject caps and coefficients the scaling formulas cannot evaluate."""
    for key, value in data.items():
        try:
            name = normalize_field_name(key)
        except KeyError:
            continue

        if name == "tier_caps":
            if not isinstance(value, list):
                raise ConfigLoadError(
                    f"tierCaps must be a list, got {type(value).__name__}", path=path
                )
            for index, cap in enumerate(value, start=1):
                if not _is_number(cap):
                    raise ConfigLoadError(
                        f"Tier {index} cap must be a number, got {cap!r}", path=path
                    )
        elif not _is_number(value):
            raise ConfigLoadError(f"{key} must be a number, got {value!r}", path=path)


def load_scaling_config(path: Path | str) -> ScalingConfig:
    """
    Load a scaling config file.

    Args:
        path: YAML or JSON file

    Returns:
        ScalingConfig with the document's values merged over the defaults

    Raises:
        ConfigLoadError: If the file is missing or unparsable, is not a mapping,
            or holds a non-numeric cap or coefficient
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigLoadError(f"Scaling config not found: {path}", path=path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read {path}: {e}", path=path) from e

    data = _parse_document(path, text)
    if data is None:
        logger.debug(f"Empty scaling config {path}, using defaults")
        return ScalingConfig()
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Scaling config must be a mapping, got {type(data).__name__}", path=path
        )

    _check_values(path, data)

    try:
        config = ScalingConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"Invalid scaling config {path}: {e}", path=path) from e
    logger.debug(f"Loaded scaling config from {path} ({config.tier_count} tiers)")

    for warning in config.validate():
        logger.warning(f"{path.name}: {warning}")

    return config


def dump_scaling_config(config: ScalingConfig, path: Path | str) -> Path:
    """
    Write a scaling config file.

    YAML for .yaml/.yml suffixes, JSON otherwise.

    Returns:
        The written path
    """
    path = Path(path)
    data = config.to_dict()

    if path.suffix.lower() in YAML_SUFFIXES:
        text = yaml.safe_dump(data, sort_keys=False, default_flow_style=None)
    else:
        text = json.dumps(data, indent=2) + "\n"

    path.write_text(text, encoding="utf-8")
    logger.debug(f"Wrote scaling config to {path}")
    return path
