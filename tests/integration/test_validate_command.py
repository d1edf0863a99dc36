"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Load errors (missing file, bad JSON, schema errors) exit with 1
- Ordering errors exit with 1 and advisory warnings exit with 2
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from device_breakpoints.cli.main import app

pytestmark = pytest.mark.integration

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_minimal_config(self, runner: CliRunner) -> None:
        """An empty object is a complete configuration."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "minimal.json")])

        assert result.exit_code == 0
        assert (
            "Effective breakpoints: watch <300, mobile <600, tablet <1024 "
            "(small <720, medium <900), strategy standard"
        ) in result.output
        assert "Breakpoints valid." in result.output

    def test_full_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_full.json")])

        assert result.exit_code == 0
        assert "Validating" in result.output
        assert "strategy strict_tablet (landscape >= 1280)" in result.output

    def test_material_config(self, runner: CliRunner) -> None:
        """The material preset caps tablets at the medium tier without advisories."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "material.json")])

        assert result.exit_code == 0
        assert "Advisories:" not in result.output
        assert "tablet <840 (small <680, medium <840)" in result.output

    @pytest.mark.parametrize(
        "preset,tier_preset", [("default", "defaults"), ("material", "compact")]
    )
    def test_builtin_presets_are_clean(
        self, runner: CliRunner, tmp_path: Path, preset: str, tier_preset: str
    ) -> None:
        config_path = tmp_path / f"{preset}.json"
        config_path.write_text(
            json.dumps({"preset": preset, "tablet_tiers": {"preset": tier_preset}}),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0
        assert "Breakpoints valid." in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "Could not load breakpoints from" in result.output
        assert "File not found" in result.output
        assert "Breakpoints not usable." in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1 and a position."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON at line 4" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "phablet_max = 700" in result.output

    def test_threshold_with_standard_strategy(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "standard_with_threshold.json")]
        )

        assert result.exit_code == 1
        assert "strict_tablet" in result.output

    def test_unordered_thresholds(self, runner: CliRunner) -> None:
        """Ordering errors name the threshold and its value."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "unordered_thresholds.json")]
        )

        assert result.exit_code == 1
        assert "Threshold errors:" in result.output
        assert "watch_max = 650: watch_max must be less than mobile_max" in result.output
        assert "Breakpoints not usable: 1 error(s), 0 advisory warning(s)" in result.output
        assert "Effective breakpoints" not in result.output

    def test_unreachable_tiers_warn(self, runner: CliRunner) -> None:
        """Valid but unreachable tiers exit with 2."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "unreachable_tiers.json")]
        )

        assert result.exit_code == 2
        assert "Advisories:" in result.output
        assert "Small tablets can never occur" in result.output
        assert "Try: Raise small_max above mobile_max" in result.output
        assert "Breakpoints valid with 2 advisory warning(s)" in result.output
