"""Orientation-independent classification strategy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from device_breakpoints.domain.value_objects import DeviceType, shortest_side

from .base import classify_dimension

if TYPE_CHECKING:
    from device_breakpoints.contracts.strategies import SizeLike
    from device_breakpoints.domain.breakpoints import BreakpointConfiguration


@dataclass(frozen=True)
class StandardStrategy:
    """Classify by the shortest side of the viewport.

    Using the shortest side makes the result invariant under rotation:
    a phone stays a phone in landscape and a tablet stays a tablet.

    | Device type | Shortest side (defaults) |
    |-------------|--------------------------|
    | Watch       | < 300                    |
    | Mobile      | 300 - 599                |
    | Tablet      | 600 - 1023               |
    | LargeScreen | >= 1024                  |
    """

    name: ClassVar[str] = "standard"

    def classify(
        self, size: "SizeLike", breakpoints: "BreakpointConfiguration"
    ) -> DeviceType:
        return classify_dimension(shortest_side(size), breakpoints)

    def classify_from_width(
        self, width: float, breakpoints: "BreakpointConfiguration"
    ) -> DeviceType:
        return classify_dimension(width, breakpoints)

    def __str__(self) -> str:
        return "StandardStrategy()"
