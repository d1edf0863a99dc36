"""Per-device value selection for UI adapters.

These helpers hold the selection logic a UI layer needs after a viewport
has been classified: picking one value per device type, falling back
when a layout is missing, and deciding whether content is visible.
They never render anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from device_breakpoints.domain.value_objects import DeviceType

T = TypeVar("T")


@dataclass(frozen=True)
class ResponsiveValue(Generic[T]):
    """One value for each device type.

    Example:
        >>> padding = ResponsiveValue(watch=4, mobile=8, tablet=16, large_screen=24)
        >>> padding.resolve(DeviceType.tablet())
        16
    """

    watch: T
    mobile: T
    tablet: T
    large_screen: T

    def resolve(self, device_type: DeviceType) -> T:
        return device_type.when(
            watch=lambda: self.watch,
            mobile=lambda: self.mobile,
            tablet=lambda _size: self.tablet,
            large_screen=lambda: self.large_screen,
        )


def resolve_layout(
    device_type: DeviceType,
    *,
    fallback: T,
    watch: T | None = None,
    mobile: T | None = None,
    tablet: T | None = None,
    large_screen: T | None = None,
) -> T:
    """Pick the value for ``device_type``, or ``fallback`` when it is None.

    Args:
        device_type: Classified device type.
        fallback: Used for every device type without its own value.
        watch: Value for watches.
        mobile: Value for phones.
        tablet: Value for tablets of any tier.
        large_screen: Value for large screens.

    Returns:
        The device-specific value if one was given, otherwise ``fallback``.
    """
    resolved = device_type.when(
        watch=lambda: watch,
        mobile=lambda: mobile,
        tablet=lambda _size: tablet,
        large_screen=lambda: large_screen,
    )
    return fallback if resolved is None else resolved


@dataclass(frozen=True)
class DeviceVisibility:
    """Which device types some content is shown on.

    Attributes:
        show_on_watch: Visible on watches.
        show_on_mobile: Visible on phones.
        show_on_tablet: Visible on tablets.
        show_on_large_screen: Visible on large screens.
    """

    show_on_watch: bool = True
    show_on_mobile: bool = True
    show_on_tablet: bool = True
    show_on_large_screen: bool = True

    @classmethod
    def watch(cls) -> "DeviceVisibility":
        """Visible on watches only."""
        return cls(show_on_mobile=False, show_on_tablet=False, show_on_large_screen=False)

    @classmethod
    def mobile(cls) -> "DeviceVisibility":
        """Visible on phones only."""
        return cls(show_on_watch=False, show_on_tablet=False, show_on_large_screen=False)

    @classmethod
    def tablet(cls) -> "DeviceVisibility":
        """Visible on tablets only."""
        return cls(show_on_watch=False, show_on_mobile=False, show_on_large_screen=False)

    @classmethod
    def large_screen(cls) -> "DeviceVisibility":
        """Visible on large screens only."""
        return cls(show_on_watch=False, show_on_mobile=False, show_on_tablet=False)

    @classmethod
    def only_compact(cls) -> "DeviceVisibility":
        """Visible on watches and phones only."""
        return cls(show_on_tablet=False, show_on_large_screen=False)

    @classmethod
    def only_expanded(cls) -> "DeviceVisibility":
        """Visible on tablets and large screens only."""
        return cls(show_on_watch=False, show_on_mobile=False)

    def is_visible(self, device_type: DeviceType) -> bool:
        return device_type.when(
            watch=lambda: self.show_on_watch,
            mobile=lambda: self.show_on_mobile,
            tablet=lambda _size: self.show_on_tablet,
            large_screen=lambda: self.show_on_large_screen,
        )
