"""
UCP Helper Test Suite - Shared Fixtures and Configuration
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop UCP_* variables from the developer's shell for every test."""
    for key in list(os.environ):
        if key.upper().startswith("UCP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_all_singletons(clean_environment):
    """
    Reset module-level singletons before and after each test.

    - Settings cache (MUST be first - logging reads from settings)
    - Logging state (restores propagation so caplog captures records)
    """

    def do_reset():
        from ucp_helper.core.config import reset_settings
        from ucp_helper.core.logging import reset_logging

        reset_settings()
        reset_logging()

    do_reset()
    yield
    do_reset()


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Temporary directory for scaling config files."""
    path = tmp_path / "configs"
    path.mkdir()
    return path
