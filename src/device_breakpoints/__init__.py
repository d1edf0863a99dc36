"""Screen size classification into watch, mobile, tablet and large-screen devices.

Example:
    >>> from device_breakpoints import BreakpointConfiguration, Measurement
    >>> BreakpointConfiguration().classify(Measurement(393, 852)).name
    'mobile'
"""

from device_breakpoints.application import (
    ClassificationStrategyFactory,
    DeviceVisibility,
    ResponsiveValue,
    resolve_layout,
)
from device_breakpoints.contracts import ClassificationStrategy, SizeLike
from device_breakpoints.domain import (
    BreakpointConfiguration,
    ConfigurationError,
    DeviceKind,
    DeviceType,
    LargeScreen,
    Measurement,
    Mobile,
    StandardStrategy,
    StrictTabletStrategy,
    Tablet,
    TabletSize,
    TabletSizeThresholds,
    Watch,
    classify_tablet_size,
)

__all__ = [
    "BreakpointConfiguration",
    "ClassificationStrategy",
    "ClassificationStrategyFactory",
    "ConfigurationError",
    "DeviceKind",
    "DeviceType",
    "DeviceVisibility",
    "LargeScreen",
    "Measurement",
    "Mobile",
    "ResponsiveValue",
    "SizeLike",
    "StandardStrategy",
    "StrictTabletStrategy",
    "Tablet",
    "TabletSize",
    "TabletSizeThresholds",
    "Watch",
    "classify_tablet_size",
    "resolve_layout",
]
