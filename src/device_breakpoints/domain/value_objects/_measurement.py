"""Viewport measurement value object."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from device_breakpoints.contracts.strategies import SizeLike


def side_value(value: float) -> float:
    """Normalize a single dimension for comparison against thresholds.

    NaN is read as 0.0 so degenerate sizes classify as the smallest
    category, and min/max stay independent of argument order.
    """
    if math.isnan(value):
        return 0.0
    return value


def shortest_side(size: "SizeLike") -> float:
    """Return the smaller of the two dimensions of ``size``."""
    return min(side_value(size.width), side_value(size.height))


def longest_side(size: "SizeLike") -> float:
    """Return the larger of the two dimensions of ``size``."""
    return max(side_value(size.width), side_value(size.height))


def is_landscape(size: "SizeLike") -> bool:
    """Square sizes count as landscape."""
    return side_value(size.width) >= side_value(size.height)


@dataclass(frozen=True)
class Measurement:
    """A viewport size in device-independent units.

    Measurements are not validated. Classification is a
    total function, so zero, negative and NaN sizes are all accepted.

    Attributes:
        width: Horizontal extent of the viewport.
        height: Vertical extent of the viewport.
    """

    width: float
    height: float

    @property
    def shortest_side(self) -> float:
        return shortest_side(self)

    @property
    def longest_side(self) -> float:
        return longest_side(self)

    @property
    def is_landscape(self) -> bool:
        return is_landscape(self)

    @property
    def is_portrait(self) -> bool:
        return not self.is_landscape

    @property
    def aspect_ratio(self) -> float:
        """Longest side divided by shortest side (``inf`` for a zero side)."""
        shortest = self.shortest_side
        if shortest == 0:
            return math.inf
        return self.longest_side / shortest

    def rotated(self) -> "Measurement":
        """Return the same viewport turned by 90 degrees."""
        return Measurement(width=self.height, height=self.width)

    @classmethod
    def from_size(cls, size: "SizeLike") -> "Measurement":
        """Copy any object exposing ``width`` and ``height``."""
        if isinstance(size, cls):
            return size
        return cls(width=float(size.width), height=float(size.height))
