"""Orientation-aware strategy that separates desktop windows from tablets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from device_breakpoints.domain.exceptions import ConfigurationError
from device_breakpoints.domain.value_objects import (
    DeviceType,
    is_landscape,
    longest_side,
    shortest_side,
)

from .base import classify_dimension

if TYPE_CHECKING:
    from device_breakpoints.contracts.strategies import SizeLike
    from device_breakpoints.domain.breakpoints import BreakpointConfiguration

# Longest side of a 12.9" iPad Pro in landscape.
DEFAULT_LANDSCAPE_LONGEST_SIDE_THRESHOLD: float = 1366.0


@dataclass(frozen=True)
class StrictTabletStrategy:
    """Treat wide landscape windows in the tablet range as large screens.

    A desktop browser window resized to 1400x800 has a tablet-sized
    shortest side, but it is still a desktop. When the viewport is in
    landscape and its longest side reaches
    ``landscape_longest_side_threshold`` it is classified as a large
    screen instead of a tablet. Portrait viewports never trigger the
    override. Watch and mobile classification is unchanged.

    Attributes:
        landscape_longest_side_threshold: Longest side, in landscape, at
            which a tablet-range viewport becomes a large screen.
    """

    name: ClassVar[str] = "strict_tablet"

    landscape_longest_side_threshold: float = DEFAULT_LANDSCAPE_LONGEST_SIDE_THRESHOLD

    def __post_init__(self) -> None:
        threshold = self.landscape_longest_side_threshold
        if math.isnan(threshold) or threshold <= 0:
            raise ConfigurationError(
                f"landscape_longest_side_threshold must be positive, got {threshold}"
            )

    def classify(
        self, size: "SizeLike", breakpoints: "BreakpointConfiguration"
    ) -> DeviceType:
        shortest = shortest_side(size)

        if shortest >= breakpoints.tablet_max:
            return DeviceType.large_screen()

        if shortest >= breakpoints.mobile_max:
            if (
                is_landscape(size)
                and longest_side(size) >= self.landscape_longest_side_threshold
            ):
                return DeviceType.large_screen()
            return DeviceType.tablet(breakpoints.tablet_tiers.classify(shortest))

        return classify_dimension(shortest, breakpoints)

    def classify_from_width(
        self, width: float, breakpoints: "BreakpointConfiguration"
    ) -> DeviceType:
        # Orientation is unknown with a single dimension.
        return classify_dimension(width, breakpoints)

    def __str__(self) -> str:
        return (
            "StrictTabletStrategy("
            f"landscape_longest_side_threshold: {self.landscape_longest_side_threshold})"
        )
