"""Application layer - configuration files, strategy selection and resolvers."""

from .resolvers import DeviceVisibility, ResponsiveValue, resolve_layout
from .strategies import ClassificationStrategyFactory

__all__ = [
    "ClassificationStrategyFactory",
    "DeviceVisibility",
    "ResponsiveValue",
    "resolve_layout",
]
