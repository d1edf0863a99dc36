"""Factory for creating classification strategies.

The ClassificationStrategyFactory keeps the name-to-strategy mapping in one
place so configuration files and the CLI can select a strategy by name
without knowing the concrete classes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, ClassVar

from device_breakpoints.domain.strategies import (
    StandardStrategy,
    StrictTabletStrategy,
)

if TYPE_CHECKING:
    from device_breakpoints.contracts.strategies import ClassificationStrategy

logger = logging.getLogger(__name__)


def _create_standard(threshold: float | None) -> "ClassificationStrategy":
    if threshold is not None:
        raise ValueError(
            "landscape_longest_side_threshold only applies to the "
            "'strict_tablet' strategy"
        )
    return StandardStrategy()


def _create_strict_tablet(threshold: float | None) -> "ClassificationStrategy":
    if threshold is None:
        return StrictTabletStrategy()
    return StrictTabletStrategy(landscape_longest_side_threshold=threshold)


class ClassificationStrategyFactory:
    """Factory for creating classification strategy instances by name.

    Example:
        ```python
        strategy = ClassificationStrategyFactory.create_strategy(
            "strict_tablet", landscape_longest_side_threshold=1280
        )
        breakpoints = BreakpointConfiguration(strategy=strategy)
        ```
    """

    _builders: ClassVar[dict[str, Callable[[float | None], "ClassificationStrategy"]]] = {
        StandardStrategy.name: _create_standard,
        StrictTabletStrategy.name: _create_strict_tablet,
    }

    @classmethod
    def available(cls) -> list[str]:
        """Get the sorted names of all known strategies."""
        return sorted(cls._builders.keys())

    @classmethod
    def create_strategy(
        cls,
        name: str = StandardStrategy.name,
        landscape_longest_side_threshold: float | None = None,
    ) -> "ClassificationStrategy":
        """Create the strategy registered under ``name``.

        Args:
            name: Strategy name, "standard" or "strict_tablet".
            landscape_longest_side_threshold: Optional threshold for the
                strict tablet strategy; its default is used when omitted.

        Returns:
            A new strategy instance.

        Raises:
            ValueError: If the name is unknown, or a threshold is given for
                a strategy that does not use one.
            ConfigurationError: If the threshold is not positive.
        """
        builder = cls._builders.get(name)
        if builder is None:
            available = ", ".join(cls.available())
            raise ValueError(
                f"Unknown classification strategy '{name}'. "
                f"Available strategies: {available}"
            )
        strategy = builder(landscape_longest_side_threshold)
        logger.debug(f"Created classification strategy {strategy}")
        return strategy


__all__ = [
    "ClassificationStrategyFactory",
]
