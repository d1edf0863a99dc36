"""Breakpoint configuration for device classification.

Breakpoints determine where the boundaries lie between device categories.
With the default strategy the shortest side of the viewport is compared
against the thresholds, which gives the same answer in either orientation.

| Device type | Shortest side range | Example devices           |
|-------------|---------------------|---------------------------|
| Watch       | < 300               | Apple Watch, Galaxy Watch |
| Mobile      | 300 - 599           | iPhone, Pixel, Galaxy     |
| Tablet      | 600 - 1023          | iPad, Galaxy Tab          |
| LargeScreen | >= 1024             | Desktop, laptop, TV       |
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from device_breakpoints.domain.exceptions import ConfigurationError
from device_breakpoints.domain.strategies import StandardStrategy
from device_breakpoints.domain.value_objects import (
    DeviceType,
    Measurement,
    TabletSizeThresholds,
)

if TYPE_CHECKING:
    from device_breakpoints.contracts.strategies import (
        ClassificationStrategy,
        SizeLike,
    )

# Ordered so the first failing check names the most basic problem.
_THRESHOLD_FIELDS: tuple[str, ...] = ("watch_max", "mobile_max", "tablet_max")


@dataclass(frozen=True)
class BreakpointConfiguration:
    """Validated thresholds plus the strategy that applies them.

    All thresholds are exclusive upper bounds and must satisfy
    ``0 < watch_max < mobile_max < tablet_max``. Validation happens once,
    at construction, and raises ``ConfigurationError``; an existing
    instance is always consistent.

    Attributes:
        watch_max: Upper bound of the watch category.
        mobile_max: Upper bound of the mobile category.
        tablet_max: Upper bound of the tablet category.
        tablet_tiers: Thresholds for the small/medium/large tablet tiers.
        strategy: Algorithm that maps a viewport to a device type.
    """

    watch_max: float = 300.0
    mobile_max: float = 600.0
    tablet_max: float = 1024.0
    tablet_tiers: TabletSizeThresholds = field(
        default_factory=TabletSizeThresholds.defaults
    )
    strategy: "ClassificationStrategy" = field(default_factory=StandardStrategy)

    def __post_init__(self) -> None:
        for name in _THRESHOLD_FIELDS:
            value = getattr(self, name)
            if math.isnan(value) or value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if self.watch_max >= self.mobile_max:
            raise ConfigurationError(
                "watch_max must be less than mobile_max "
                f"(got watch_max={self.watch_max}, mobile_max={self.mobile_max})"
            )
        if self.mobile_max >= self.tablet_max:
            raise ConfigurationError(
                "mobile_max must be less than tablet_max "
                f"(got mobile_max={self.mobile_max}, tablet_max={self.tablet_max})"
            )

    @classmethod
    def defaults(cls) -> "BreakpointConfiguration":
        """Default breakpoints: 300 / 600 / 1024 with the standard strategy."""
        return cls()

    @classmethod
    def material(cls) -> "BreakpointConfiguration":
        """Breakpoints aligned with the Material 3 window size classes.

        Tablets end at 840 and use the compact tablet tiers.
        """
        return cls(
            watch_max=300.0,
            mobile_max=600.0,
            tablet_max=840.0,
            tablet_tiers=TabletSizeThresholds.compact(),
        )

    def classify(self, measurement: "SizeLike") -> DeviceType:
        """Classify a viewport with the configured strategy."""
        return self.strategy.classify(measurement, self)

    def classify_size(self, width: float, height: float) -> DeviceType:
        return self.classify(Measurement(width=width, height=height))

    def classify_from_width(self, width: float) -> DeviceType:
        """Classify using a single dimension as if it were the shortest side."""
        return self.strategy.classify_from_width(width, self)

    def with_overrides(self, **changes: Any) -> "BreakpointConfiguration":
        """Return a copy with the named fields replaced.

        The copy is validated like any new instance.

        Raises:
            ConfigurationError: If the resulting thresholds are invalid.
            TypeError: If a name is not a configuration field.
        """
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        strategy: dict[str, Any] = {"type": self.strategy.name}
        threshold = getattr(self.strategy, "landscape_longest_side_threshold", None)
        if threshold is not None:
            strategy["landscape_longest_side_threshold"] = threshold
        return {
            "watch_max": self.watch_max,
            "mobile_max": self.mobile_max,
            "tablet_max": self.tablet_max,
            "tablet_tiers": self.tablet_tiers.to_dict(),
            "strategy": strategy,
        }


BREAKPOINT_PRESETS = {
    "default": BreakpointConfiguration.defaults,
    "material": BreakpointConfiguration.material,
}
