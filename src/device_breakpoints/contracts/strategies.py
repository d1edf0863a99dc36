"""Strategy protocols for device classification.

This module defines the protocol classes that establish the contract for
classification strategies. The Strategy pattern lets a breakpoint
configuration select how thresholds are applied at construction time,
without modifying ``BreakpointConfiguration`` when a new strategy is added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from device_breakpoints.domain.breakpoints import BreakpointConfiguration
    from device_breakpoints.domain.value_objects import DeviceType


@runtime_checkable
class SizeLike(Protocol):
    """Anything with a width and a height, such as a ``Measurement``."""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


@runtime_checkable
class ClassificationStrategy(Protocol):
    """Protocol for device classification strategies.

    Implementations decide how the thresholds of a breakpoint
    configuration map a viewport to a device type:
    - StandardStrategy: Orientation-independent, uses the shortest side
    - StrictTabletStrategy: Treats wide landscape windows as large screens

    Strategies are immutable values. Two strategies compare equal when
    they are the same kind with the same parameters, because the
    configuration's own equality includes its strategy.

    Example:
        ```python
        @dataclass(frozen=True)
        class AlwaysMobileStrategy:
            name: ClassVar[str] = "always_mobile"

            def classify(self, size, breakpoints):
                return DeviceType.mobile()

            def classify_from_width(self, width, breakpoints):
                return DeviceType.mobile()
        ```
    """

    @property
    def name(self) -> str:
        """Return the registry name of this strategy."""
        ...

    def classify(
        self, size: SizeLike, breakpoints: "BreakpointConfiguration"
    ) -> "DeviceType":
        """Classify a viewport.

        Args:
            size: Viewport with ``width`` and ``height``.
            breakpoints: Validated thresholds to classify against.

        Returns:
            The device type for the viewport.
        """
        ...

    def classify_from_width(
        self, width: float, breakpoints: "BreakpointConfiguration"
    ) -> "DeviceType":
        """Classify when only one dimension is known.

        The width is treated as if it were the shortest side.
        """
        ...


__all__ = [
    "ClassificationStrategy",
    "SizeLike",
]
