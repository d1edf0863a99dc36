"""Shared threshold chain used by the classification strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING

# Re-export the protocol for convenience
from device_breakpoints.contracts.strategies import ClassificationStrategy, SizeLike
from device_breakpoints.domain.value_objects import DeviceType, side_value

if TYPE_CHECKING:
    from device_breakpoints.domain.breakpoints import BreakpointConfiguration


def classify_dimension(
    value: float, breakpoints: "BreakpointConfiguration"
) -> DeviceType:
    """Walk the watch/mobile/tablet thresholds for a single dimension.

    Every threshold is an exclusive upper bound, so a value equal to a
    breakpoint lands in the next larger category. The tablet tier is
    computed from the same value.
    """
    value = side_value(value)
    if value < breakpoints.watch_max:
        return DeviceType.watch()
    if value < breakpoints.mobile_max:
        return DeviceType.mobile()
    if value < breakpoints.tablet_max:
        return DeviceType.tablet(breakpoints.tablet_tiers.classify(value))
    return DeviceType.large_screen()


__all__ = [
    "ClassificationStrategy",
    "SizeLike",
    "classify_dimension",
]
