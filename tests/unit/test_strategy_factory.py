"""Unit tests for ClassificationStrategyFactory."""

import pytest

from device_breakpoints.application.strategies import ClassificationStrategyFactory
from device_breakpoints.domain import (
    ConfigurationError,
    StandardStrategy,
    StrictTabletStrategy,
)


class TestClassificationStrategyFactory:
    """Tests for strategy selection by name."""

    def test_available(self) -> None:
        assert ClassificationStrategyFactory.available() == ["standard", "strict_tablet"]

    def test_default_is_standard(self) -> None:
        assert ClassificationStrategyFactory.create_strategy() == StandardStrategy()

    def test_creates_strict_tablet_with_default_threshold(self) -> None:
        strategy = ClassificationStrategyFactory.create_strategy("strict_tablet")
        assert strategy == StrictTabletStrategy()

    def test_creates_strict_tablet_with_threshold(self) -> None:
        strategy = ClassificationStrategyFactory.create_strategy(
            "strict_tablet", landscape_longest_side_threshold=1280
        )
        assert isinstance(strategy, StrictTabletStrategy)
        assert strategy.landscape_longest_side_threshold == 1280

    def test_unknown_name_lists_available(self) -> None:
        with pytest.raises(ValueError, match="Available strategies: standard, strict_tablet"):
            ClassificationStrategyFactory.create_strategy("fuzzy")

    def test_threshold_rejected_for_standard(self) -> None:
        with pytest.raises(ValueError, match="only applies"):
            ClassificationStrategyFactory.create_strategy(
                "standard", landscape_longest_side_threshold=1366
            )

    def test_invalid_threshold_propagates(self) -> None:
        with pytest.raises(ConfigurationError):
            ClassificationStrategyFactory.create_strategy(
                "strict_tablet", landscape_longest_side_threshold=-1
            )
