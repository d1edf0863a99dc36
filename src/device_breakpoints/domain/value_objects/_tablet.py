"""Tablet size tiers and the thresholds that separate them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TypeVar

from device_breakpoints.domain.exceptions import ConfigurationError

from ._measurement import side_value

T = TypeVar("T")


class TabletSize(str, Enum):
    """Size tier of a tablet-class device.

    Tiers compare by rank (``SMALL < MEDIUM < LARGE``), not by their
    string values. Being a ``str`` enum, a tier equals its raw value
    (``TabletSize.SMALL == "small"``), so values read from JSON can be
    compared directly; ``Tablet`` converts such raw values on construction.

    Attributes:
        SMALL: Compact tablets such as the iPad mini.
        MEDIUM: Standard tablets such as the 11" iPad Pro in portrait.
        LARGE: Large tablets such as the 12.9" iPad Pro.
    """

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def rank(self) -> int:
        return _TABLET_RANKS[self]

    @property
    def is_small(self) -> bool:
        return self is TabletSize.SMALL

    @property
    def is_medium(self) -> bool:
        return self is TabletSize.MEDIUM

    @property
    def is_large(self) -> bool:
        return self is TabletSize.LARGE

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TabletSize):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TabletSize):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TabletSize):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TabletSize):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value

    def when(
        self,
        *,
        small: Callable[[], T],
        medium: Callable[[], T],
        large: Callable[[], T],
    ) -> T:
        """Call the handler matching this tier."""
        return {
            TabletSize.SMALL: small,
            TabletSize.MEDIUM: medium,
            TabletSize.LARGE: large,
        }[self]()

    def maybe_when(
        self,
        *,
        or_else: Callable[[], T],
        small: Callable[[], T] | None = None,
        medium: Callable[[], T] | None = None,
        large: Callable[[], T] | None = None,
    ) -> T:
        """Call the matching handler, or ``or_else`` when it is missing."""
        handler = self._pick(small, medium, large)
        return handler() if handler is not None else or_else()

    def when_or_none(
        self,
        *,
        small: Callable[[], T] | None = None,
        medium: Callable[[], T] | None = None,
        large: Callable[[], T] | None = None,
    ) -> T | None:
        handler = self._pick(small, medium, large)
        return handler() if handler is not None else None

    def map(
        self,
        *,
        small: Callable[["TabletSize"], T],
        medium: Callable[["TabletSize"], T],
        large: Callable[["TabletSize"], T],
    ) -> T:
        """Like :meth:`when`, but handlers receive the tier itself."""
        handler = self._pick(small, medium, large)
        return handler(self)

    def maybe_map(
        self,
        *,
        or_else: Callable[["TabletSize"], T],
        small: Callable[["TabletSize"], T] | None = None,
        medium: Callable[["TabletSize"], T] | None = None,
        large: Callable[["TabletSize"], T] | None = None,
    ) -> T:
        handler = self._pick(small, medium, large)
        return handler(self) if handler is not None else or_else(self)

    def map_or_none(
        self,
        *,
        small: Callable[["TabletSize"], T] | None = None,
        medium: Callable[["TabletSize"], T] | None = None,
        large: Callable[["TabletSize"], T] | None = None,
    ) -> T | None:
        handler = self._pick(small, medium, large)
        return handler(self) if handler is not None else None

    def _pick(self, small, medium, large):
        if self is TabletSize.SMALL:
            return small
        if self is TabletSize.MEDIUM:
            return medium
        return large


_TABLET_RANKS: dict[TabletSize, int] = {
    TabletSize.SMALL: 0,
    TabletSize.MEDIUM: 1,
    TabletSize.LARGE: 2,
}


@dataclass(frozen=True)
class TabletSizeThresholds:
    """Exclusive upper bounds of the small and medium tablet tiers.

    A shortest side below ``small_max`` is small, below ``medium_max``
    is medium, and anything else is large.

    Attributes:
        small_max: Exclusive upper bound of the small tier.
        medium_max: Exclusive upper bound of the medium tier.
    """

    small_max: float = 720.0
    medium_max: float = 900.0

    def __post_init__(self) -> None:
        if math.isnan(self.small_max) or math.isnan(self.medium_max):
            raise ConfigurationError("Tablet thresholds must be numbers, got NaN")
        if self.small_max >= self.medium_max:
            raise ConfigurationError(
                "small_max must be less than medium_max "
                f"(got small_max={self.small_max}, medium_max={self.medium_max})"
            )

    @classmethod
    def defaults(cls) -> "TabletSizeThresholds":
        """Default tiers: small below 720, medium below 900."""
        return cls(small_max=720.0, medium_max=900.0)

    @classmethod
    def compact(cls) -> "TabletSizeThresholds":
        """Tighter tiers matching the Material 3 expanded window class."""
        return cls(small_max=680.0, medium_max=840.0)

    @classmethod
    def wide(cls) -> "TabletSizeThresholds":
        """Wider tiers for apps that favor larger tablets."""
        return cls(small_max=768.0, medium_max=960.0)

    def classify(self, shortest_side: float) -> TabletSize:
        return classify_tablet_size(shortest_side, self)

    def classify_from_width(self, width: float) -> TabletSize:
        return classify_tablet_size(width, self)

    def to_dict(self) -> dict[str, float]:
        return {"small_max": self.small_max, "medium_max": self.medium_max}

    def __str__(self) -> str:
        return f"TabletSizeThresholds(small: <{self.small_max}, medium: <{self.medium_max})"


TABLET_TIER_PRESETS: dict[str, Callable[[], TabletSizeThresholds]] = {
    "defaults": TabletSizeThresholds.defaults,
    "compact": TabletSizeThresholds.compact,
    "wide": TabletSizeThresholds.wide,
}


def classify_tablet_size(
    shortest_side: float, thresholds: TabletSizeThresholds
) -> TabletSize:
    """Map a measurement to a tablet tier.

    Intervals are half-open, so a value equal to a threshold belongs to
    the next larger tier. Zero and negative values are small.
    """
    value = side_value(shortest_side)
    if value < thresholds.small_max:
        return TabletSize.SMALL
    if value < thresholds.medium_max:
        return TabletSize.MEDIUM
    return TabletSize.LARGE
