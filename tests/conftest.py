"""Pytest configuration and shared fixtures for classification tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from device_breakpoints.domain import (
    BreakpointConfiguration,
    StrictTabletStrategy,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI tests")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_breakpoints() -> BreakpointConfiguration:
    """Default breakpoints (300 / 600 / 1024) with the standard strategy."""
    return BreakpointConfiguration.defaults()


@pytest.fixture
def strict_breakpoints() -> BreakpointConfiguration:
    """Default breakpoints with the strict tablet strategy (threshold 1366)."""
    return BreakpointConfiguration(strategy=StrictTabletStrategy())


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH
