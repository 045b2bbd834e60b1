"""
Shared fixtures for command module tests.
"""

import argparse

import pytest


@pytest.fixture
def make_args():
    """Build a Namespace the way the scaling parsers would."""

    def _make(**kwargs) -> argparse.Namespace:
        defaults = {
            "config": None,
            "trainer_tier": None,
            "base_weight": None,
            "hide_locked": False,
            "output": None,
        }
        defaults.update(kwargs)
        return argparse.Namespace(**defaults)

    return _make


@pytest.fixture
def tiers_file(config_dir):
    """A three-tier YAML scaling config."""
    path = config_dir / "tiers.yaml"
    path.write_text("tierCaps: [20, 40, 60]\ntierCapScaling: 0.5\n")
    return path
