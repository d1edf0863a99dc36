"""Device type classification results.

A ``DeviceType`` is one of exactly four variants: :class:`Watch`,
:class:`Mobile`, :class:`Tablet` and :class:`LargeScreen`. Only
``Tablet`` carries a payload, the optional :class:`TabletSize` tier.

Callers branch on a result either with the boolean predicates, with
``match`` statements over the variant classes, or with the dispatch
helpers (``when``, ``maybe_when``, ``map`` ...) which require one
handler per variant:

    >>> device = DeviceType.tablet(TabletSize.MEDIUM)
    >>> device.when(
    ...     watch=lambda: 1,
    ...     mobile=lambda: 1,
    ...     tablet=lambda size: 2 if size is TabletSize.SMALL else 3,
    ...     large_screen=lambda: 4,
    ... )
    3
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar, TypeVar

from ._tablet import TabletSize

if TYPE_CHECKING:
    from device_breakpoints.contracts.strategies import SizeLike
    from device_breakpoints.domain.breakpoints import BreakpointConfiguration

T = TypeVar("T")


class DeviceKind(str, Enum):
    """Discriminator of the device type variants.

    The values are the canonical names exposed by ``DeviceType.name``.
    As a ``str`` enum a kind also equals its raw value
    (``DeviceKind.WATCH == "watch"``); device types themselves compare by
    variant only.
    """

    WATCH = "watch"
    MOBILE = "mobile"
    TABLET = "tablet"
    LARGE_SCREEN = "largeScreen"

    @property
    def rank(self) -> int:
        """Position in the size ordering Watch < Mobile < Tablet < LargeScreen."""
        return list(DeviceKind).index(self)


@dataclass(frozen=True)
class DeviceType:
    """Base of the four device type variants.

    Use the variant classes or the ``DeviceType.watch()`` style
    constructors; the base class itself is never instantiated.
    """

    kind: ClassVar[DeviceKind]

    def __new__(cls, *args: Any, **kwargs: Any) -> "DeviceType":
        if cls is DeviceType:
            raise TypeError(
                "DeviceType is abstract; use Watch, Mobile, Tablet or LargeScreen"
            )
        return super().__new__(cls)

    # -- constructors --------------------------------------------------------

    @staticmethod
    def watch() -> "Watch":
        return Watch()

    @staticmethod
    def mobile() -> "Mobile":
        return Mobile()

    @staticmethod
    def tablet(size: TabletSize | None = None) -> "Tablet":
        return Tablet(size=size)

    @staticmethod
    def large_screen() -> "LargeScreen":
        return LargeScreen()

    @staticmethod
    def of(kind: DeviceKind | str, size: TabletSize | None = None) -> "DeviceType":
        """Build the variant for ``kind``.

        Raises:
            ValueError: If ``kind`` is not a known device kind, or a size
                is given for a variant other than tablet.
        """
        kind = DeviceKind(kind)
        if kind is DeviceKind.TABLET:
            return Tablet(size=size)
        if size is not None:
            raise ValueError(f"Only tablets carry a size tier, got kind={kind.value!r}")
        return VARIANTS[kind]()

    @staticmethod
    def from_size(
        size: "SizeLike", breakpoints: "BreakpointConfiguration | None" = None
    ) -> "DeviceType":
        """Classify ``size`` with ``breakpoints`` (defaults when omitted)."""
        from device_breakpoints.domain.breakpoints import BreakpointConfiguration

        return (breakpoints or BreakpointConfiguration()).classify(size)

    @staticmethod
    def from_width(
        width: float, breakpoints: "BreakpointConfiguration | None" = None
    ) -> "DeviceType":
        """Classify a single known width (defaults when omitted)."""
        from device_breakpoints.domain.breakpoints import BreakpointConfiguration

        return (breakpoints or BreakpointConfiguration()).classify_from_width(width)

    # -- predicates ----------------------------------------------------------

    @property
    def name(self) -> str:
        """Canonical lowercase name: watch, mobile, tablet or largeScreen."""
        return self.kind.value

    @property
    def is_watch(self) -> bool:
        return self.kind is DeviceKind.WATCH

    @property
    def is_mobile(self) -> bool:
        return self.kind is DeviceKind.MOBILE

    @property
    def is_tablet(self) -> bool:
        return self.kind is DeviceKind.TABLET

    @property
    def is_large_screen(self) -> bool:
        return self.kind is DeviceKind.LARGE_SCREEN

    @property
    def is_compact(self) -> bool:
        return self.is_watch or self.is_mobile

    @property
    def is_expanded(self) -> bool:
        return self.is_tablet or self.is_large_screen

    @property
    def is_handheld(self) -> bool:
        return self.is_compact

    @property
    def has_limited_space(self) -> bool:
        return self.is_compact

    @property
    def supports_hover(self) -> bool:
        return self.is_large_screen

    @property
    def prefers_touch_input(self) -> bool:
        return not self.is_large_screen

    # -- dispatch ------------------------------------------------------------

    def when(
        self,
        *,
        watch: Callable[[], T],
        mobile: Callable[[], T],
        tablet: Callable[[TabletSize | None], T],
        large_screen: Callable[[], T],
    ) -> T:
        """Call the handler for this variant.

        The tablet handler receives the tablet tier, which may be None.
        """
        handler = self._pick(watch, mobile, tablet, large_screen)
        return handler(*self._payload())

    def maybe_when(
        self,
        *,
        or_else: Callable[[], T],
        watch: Callable[[], T] | None = None,
        mobile: Callable[[], T] | None = None,
        tablet: Callable[[TabletSize | None], T] | None = None,
        large_screen: Callable[[], T] | None = None,
    ) -> T:
        handler = self._pick(watch, mobile, tablet, large_screen)
        if handler is None:
            return or_else()
        return handler(*self._payload())

    def when_or_none(
        self,
        *,
        watch: Callable[[], T] | None = None,
        mobile: Callable[[], T] | None = None,
        tablet: Callable[[TabletSize | None], T] | None = None,
        large_screen: Callable[[], T] | None = None,
    ) -> T | None:
        handler = self._pick(watch, mobile, tablet, large_screen)
        if handler is None:
            return None
        return handler(*self._payload())

    def map(
        self,
        *,
        watch: Callable[["Watch"], T],
        mobile: Callable[["Mobile"], T],
        tablet: Callable[["Tablet"], T],
        large_screen: Callable[["LargeScreen"], T],
    ) -> T:
        """Call the handler for this variant with the variant itself."""
        handler = self._pick(watch, mobile, tablet, large_screen)
        return handler(self)

    def maybe_map(
        self,
        *,
        or_else: Callable[["DeviceType"], T],
        watch: Callable[["Watch"], T] | None = None,
        mobile: Callable[["Mobile"], T] | None = None,
        tablet: Callable[["Tablet"], T] | None = None,
        large_screen: Callable[["LargeScreen"], T] | None = None,
    ) -> T:
        handler = self._pick(watch, mobile, tablet, large_screen)
        if handler is None:
            return or_else(self)
        return handler(self)

    def map_or_none(
        self,
        *,
        watch: Callable[["Watch"], T] | None = None,
        mobile: Callable[["Mobile"], T] | None = None,
        tablet: Callable[["Tablet"], T] | None = None,
        large_screen: Callable[["LargeScreen"], T] | None = None,
    ) -> T | None:
        handler = self._pick(watch, mobile, tablet, large_screen)
        if handler is None:
            return None
        return handler(self)

    def _pick(self, watch, mobile, tablet, large_screen):
        handlers = {
            DeviceKind.WATCH: watch,
            DeviceKind.MOBILE: mobile,
            DeviceKind.TABLET: tablet,
            DeviceKind.LARGE_SCREEN: large_screen,
        }
        return handlers[self.kind]

    def _payload(self) -> tuple[Any, ...]:
        return ()

    # -- representation ------------------------------------------------------

    def to_dict(self) -> dict[str, str | None]:
        return {"type": self.name, "tablet_size": None}

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Watch(DeviceType):
    """Smartwatches and other very small displays (shortest side < 300)."""

    kind: ClassVar[DeviceKind] = DeviceKind.WATCH


@dataclass(frozen=True)
class Mobile(DeviceType):
    """Phones (shortest side 300 to 599 by default)."""

    kind: ClassVar[DeviceKind] = DeviceKind.MOBILE


@dataclass(frozen=True)
class Tablet(DeviceType):
    """Tablets (shortest side 600 to 1023 by default).

    A tier given as its string value is converted to ``TabletSize``.

    Attributes:
        size: Tablet tier, or None when no tiering was applied.
    """

    kind: ClassVar[DeviceKind] = DeviceKind.TABLET

    size: TabletSize | None = None

    def __post_init__(self) -> None:
        if self.size is not None and not isinstance(self.size, TabletSize):
            try:
                tier = TabletSize(self.size)
            except ValueError:
                raise ValueError(
                    f"Unknown tablet size {self.size!r}; expected small, medium or large"
                ) from None
            object.__setattr__(self, "size", tier)

    @property
    def is_small_tablet(self) -> bool:
        return self.size is TabletSize.SMALL

    @property
    def is_medium_tablet(self) -> bool:
        return self.size is TabletSize.MEDIUM

    @property
    def is_large_tablet(self) -> bool:
        return self.size is TabletSize.LARGE

    def _payload(self) -> tuple[Any, ...]:
        return (self.size,)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "type": self.name,
            "tablet_size": self.size.value if self.size is not None else None,
        }


@dataclass(frozen=True)
class LargeScreen(DeviceType):
    """Desktops, laptops and TVs (shortest side >= 1024 by default)."""

    kind: ClassVar[DeviceKind] = DeviceKind.LARGE_SCREEN


VARIANTS: dict[DeviceKind, type[DeviceType]] = {
    DeviceKind.WATCH: Watch,
    DeviceKind.MOBILE: Mobile,
    DeviceKind.TABLET: Tablet,
    DeviceKind.LARGE_SCREEN: LargeScreen,
}
