"""Unit tests for tablet size tiers.

These tests verify:
- TabletSizeThresholds presets and validation
- Half-open tier boundaries of classify_tablet_size
- TabletSize ordering, predicates and dispatch helpers
"""

import math

import pytest

from device_breakpoints.domain.exceptions import ConfigurationError
from device_breakpoints.domain.value_objects import (
    TABLET_TIER_PRESETS,
    TabletSize,
    TabletSizeThresholds,
    classify_tablet_size,
)

EPSILON = 1e-9


class TestTabletSizeThresholds:
    """Tests for TabletSizeThresholds value object."""

    def test_defaults_preset(self) -> None:
        tiers = TabletSizeThresholds.defaults()
        assert tiers.small_max == 720
        assert tiers.medium_max == 900

    def test_compact_preset(self) -> None:
        tiers = TabletSizeThresholds.compact()
        assert (tiers.small_max, tiers.medium_max) == (680, 840)

    def test_wide_preset(self) -> None:
        tiers = TabletSizeThresholds.wide()
        assert (tiers.small_max, tiers.medium_max) == (768, 960)

    def test_no_arguments_equals_defaults(self) -> None:
        assert TabletSizeThresholds() == TabletSizeThresholds.defaults()

    def test_presets_registry_builds_each_preset(self) -> None:
        assert TABLET_TIER_PRESETS["defaults"]() == TabletSizeThresholds.defaults()
        assert TABLET_TIER_PRESETS["compact"]() == TabletSizeThresholds.compact()
        assert TABLET_TIER_PRESETS["wide"]() == TabletSizeThresholds.wide()

    def test_equal_thresholds_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="small_max must be less than medium_max"):
            TabletSizeThresholds(small_max=800, medium_max=800)

    def test_descending_thresholds_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            TabletSizeThresholds(small_max=900, medium_max=720)

    def test_nan_threshold_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            TabletSizeThresholds(small_max=math.nan, medium_max=900)

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            TabletSizeThresholds(small_max=1, medium_max=0)

    def test_immutable(self) -> None:
        tiers = TabletSizeThresholds.defaults()
        with pytest.raises(AttributeError):
            tiers.small_max = 100  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(TabletSizeThresholds.defaults()) == (
            "TabletSizeThresholds(small: <720.0, medium: <900.0)"
        )

    def test_to_dict(self) -> None:
        assert TabletSizeThresholds.wide().to_dict() == {
            "small_max": 768.0,
            "medium_max": 960.0,
        }


class TestClassifyTabletSize:
    """Tests for tablet tier classification."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (720 - EPSILON, TabletSize.SMALL),
            (720, TabletSize.MEDIUM),
            (900 - EPSILON, TabletSize.MEDIUM),
            (900, TabletSize.LARGE),
            (600, TabletSize.SMALL),
            (834, TabletSize.MEDIUM),
            (1023, TabletSize.LARGE),
        ],
    )
    def test_default_boundaries(self, value: float, expected: TabletSize) -> None:
        assert classify_tablet_size(value, TabletSizeThresholds.defaults()) is expected

    def test_zero_and_negative_are_small(self) -> None:
        tiers = TabletSizeThresholds.defaults()
        assert classify_tablet_size(0, tiers) is TabletSize.SMALL
        assert classify_tablet_size(-50, tiers) is TabletSize.SMALL

    def test_nan_is_small(self) -> None:
        assert classify_tablet_size(math.nan, TabletSizeThresholds()) is TabletSize.SMALL

    def test_infinity_is_large(self) -> None:
        assert classify_tablet_size(math.inf, TabletSizeThresholds()) is TabletSize.LARGE

    def test_methods_delegate(self) -> None:
        tiers = TabletSizeThresholds.compact()
        assert tiers.classify(700) is TabletSize.MEDIUM
        assert tiers.classify_from_width(840) is TabletSize.LARGE
        assert tiers.classify_from_width(679) is TabletSize.SMALL


class TestTabletSize:
    """Tests for the TabletSize enum."""

    def test_values(self) -> None:
        assert [size.value for size in TabletSize] == ["small", "medium", "large"]
        assert str(TabletSize.LARGE) == "large"

    def test_equals_raw_value(self) -> None:
        assert TabletSize.SMALL == "small"
        assert TabletSize("medium") is TabletSize.MEDIUM
        assert TabletSize.SMALL != TabletSize.MEDIUM

    def test_ordering_by_rank(self) -> None:
        assert TabletSize.SMALL < TabletSize.MEDIUM < TabletSize.LARGE
        assert TabletSize.LARGE > TabletSize.SMALL
        assert TabletSize.MEDIUM <= TabletSize.MEDIUM
        assert sorted([TabletSize.LARGE, TabletSize.SMALL, TabletSize.MEDIUM]) == [
            TabletSize.SMALL,
            TabletSize.MEDIUM,
            TabletSize.LARGE,
        ]

    def test_ordering_against_other_types_unsupported(self) -> None:
        with pytest.raises(TypeError):
            TabletSize.SMALL < 3  # noqa: B015

    def test_predicates(self) -> None:
        assert TabletSize.SMALL.is_small
        assert not TabletSize.SMALL.is_medium
        assert TabletSize.MEDIUM.is_medium
        assert TabletSize.LARGE.is_large
        assert not TabletSize.LARGE.is_small

    def test_when_calls_matching_handler(self) -> None:
        result = TabletSize.MEDIUM.when(
            small=lambda: "s", medium=lambda: "m", large=lambda: "l"
        )
        assert result == "m"

    def test_maybe_when_falls_back(self) -> None:
        assert TabletSize.LARGE.maybe_when(or_else=lambda: "other", small=lambda: "s") == "other"
        assert TabletSize.SMALL.maybe_when(or_else=lambda: "other", small=lambda: "s") == "s"

    def test_when_or_none(self) -> None:
        assert TabletSize.SMALL.when_or_none(large=lambda: "l") is None
        assert TabletSize.LARGE.when_or_none(large=lambda: "l") == "l"

    def test_map_passes_tier(self) -> None:
        result = TabletSize.LARGE.map(
            small=lambda t: t.value,
            medium=lambda t: t.value,
            large=lambda t: t.value.upper(),
        )
        assert result == "LARGE"

    def test_maybe_map_and_map_or_none(self) -> None:
        assert TabletSize.MEDIUM.maybe_map(or_else=lambda t: t.rank) == 1
        assert TabletSize.MEDIUM.map_or_none(small=lambda t: t) is None
        assert TabletSize.SMALL.map_or_none(small=lambda t: t) is TabletSize.SMALL
