"""Value objects for the device classification domain.

This module provides the immutable data types used throughout the
classification engine. All classes are re-exported from sub-modules for
convenience.
"""

from __future__ import annotations

# Viewport geometry
from ._measurement import (
    Measurement,
    is_landscape,
    longest_side,
    shortest_side,
    side_value,
)

# Tablet tiers
from ._tablet import (
    TABLET_TIER_PRESETS,
    TabletSize,
    TabletSizeThresholds,
    classify_tablet_size,
)

# Classification results
from ._device_type import (
    VARIANTS,
    DeviceKind,
    DeviceType,
    LargeScreen,
    Mobile,
    Tablet,
    Watch,
)

__all__ = [
    # Viewport geometry
    "Measurement",
    "is_landscape",
    "longest_side",
    "shortest_side",
    "side_value",
    # Tablet tiers
    "TABLET_TIER_PRESETS",
    "TabletSize",
    "TabletSizeThresholds",
    "classify_tablet_size",
    # Classification results
    "VARIANTS",
    "DeviceKind",
    "DeviceType",
    "LargeScreen",
    "Mobile",
    "Tablet",
    "Watch",
]
