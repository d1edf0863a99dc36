"""Unit tests for converting configuration models to domain objects."""

import pytest

from device_breakpoints.application.config import (
    BreakpointsConfigFile,
    config_to_breakpoints,
    config_to_strategy,
    load_config_from_dict,
    resolve_thresholds,
)
from device_breakpoints.domain import (
    BreakpointConfiguration,
    ConfigurationError,
    StandardStrategy,
    StrictTabletStrategy,
    TabletSizeThresholds,
)


class TestResolveThresholds:
    """Tests for preset and override resolution."""

    def test_default_preset(self) -> None:
        resolved = resolve_thresholds(BreakpointsConfigFile())
        assert (
            resolved.watch_max,
            resolved.mobile_max,
            resolved.tablet_max,
            resolved.small_max,
            resolved.medium_max,
        ) == (300, 600, 1024, 720, 900)

    def test_material_preset_brings_its_tiers(self) -> None:
        resolved = resolve_thresholds(load_config_from_dict({"preset": "material"}))
        assert resolved.tablet_max == 840
        assert (resolved.small_max, resolved.medium_max) == (680, 840)

    def test_tier_preset_replaces_base_tiers(self) -> None:
        config = load_config_from_dict(
            {"preset": "material", "tablet_tiers": {"preset": "wide"}}
        )
        resolved = resolve_thresholds(config)
        assert (resolved.small_max, resolved.medium_max) == (768, 960)

    def test_explicit_values_win_over_presets(self) -> None:
        config = load_config_from_dict(
            {
                "preset": "material",
                "tablet_max": 1000,
                "tablet_tiers": {"preset": "wide", "medium_max": 950},
            }
        )
        resolved = resolve_thresholds(config)
        assert resolved.tablet_max == 1000
        assert (resolved.small_max, resolved.medium_max) == (768, 950)
        assert resolved.watch_max == 300

    def test_unordered_values_are_not_rejected_here(self) -> None:
        resolved = resolve_thresholds(load_config_from_dict({"watch_max": 900}))
        assert resolved.watch_max == 900


class TestConfigToStrategy:
    """Tests for strategy construction."""

    def test_standard_by_default(self) -> None:
        assert config_to_strategy(BreakpointsConfigFile()) == StandardStrategy()

    def test_strict_tablet_default_threshold(self) -> None:
        config = load_config_from_dict({"strategy": {"type": "strict_tablet"}})
        assert config_to_strategy(config) == StrictTabletStrategy()

    def test_strict_tablet_custom_threshold(self) -> None:
        config = load_config_from_dict(
            {"strategy": {"type": "strict_tablet", "landscape_longest_side_threshold": 1200}}
        )
        assert config_to_strategy(config) == StrictTabletStrategy(1200)


class TestConfigToBreakpoints:
    """Tests for full conversion."""

    def test_empty_config_is_default(self) -> None:
        assert config_to_breakpoints(BreakpointsConfigFile()) == BreakpointConfiguration()

    def test_material_config_is_material_preset(self) -> None:
        config = load_config_from_dict({"preset": "material"})
        assert config_to_breakpoints(config) == BreakpointConfiguration.material()

    def test_overrides_applied(self) -> None:
        config = load_config_from_dict(
            {"mobile_max": 400, "tablet_tiers": {"small_max": 500}}
        )
        breakpoints = config_to_breakpoints(config)
        assert breakpoints.mobile_max == 400
        assert breakpoints.tablet_tiers == TabletSizeThresholds(500, 900)

    def test_invariant_violation_raises(self) -> None:
        config = load_config_from_dict({"mobile_max": 1024})
        with pytest.raises(ConfigurationError, match="mobile_max must be less than tablet_max"):
            config_to_breakpoints(config)

    def test_tier_violation_raises(self) -> None:
        config = load_config_from_dict({"tablet_tiers": {"small_max": 950}})
        with pytest.raises(ConfigurationError, match="small_max must be less than medium_max"):
            config_to_breakpoints(config)
