"""Domain layer - the classification engine."""

from .breakpoints import BREAKPOINT_PRESETS, BreakpointConfiguration
from .exceptions import ConfigurationError
from .strategies import StandardStrategy, StrictTabletStrategy
from .value_objects import (
    DeviceKind,
    DeviceType,
    LargeScreen,
    Measurement,
    Mobile,
    Tablet,
    TabletSize,
    TabletSizeThresholds,
    Watch,
    classify_tablet_size,
)

__all__ = [
    "BREAKPOINT_PRESETS",
    "BreakpointConfiguration",
    "ConfigurationError",
    "DeviceKind",
    "DeviceType",
    "LargeScreen",
    "Measurement",
    "Mobile",
    "StandardStrategy",
    "StrictTabletStrategy",
    "Tablet",
    "TabletSize",
    "TabletSizeThresholds",
    "Watch",
    "classify_tablet_size",
]
